from typing import Annotated

from fastapi import Depends, Request

from app.services.report_generator import ReportGenerator


def get_report_generator(request: Request) -> ReportGenerator:
    return request.app.state.report_generator


ReportGeneratorDep = Annotated[ReportGenerator, Depends(get_report_generator)]
