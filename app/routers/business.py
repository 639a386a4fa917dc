import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import ReportGeneratorDep
from app.exceptions.custom import InvalidBusinessInputError
from app.schemas.report import (
    BusinessDataRequest,
    BusinessReport,
    ErrorResponse,
    HeadlineResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

INTERNAL_ERROR_MESSAGE = "Internal server error"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Business name or location missing"},
    500: {"model": ErrorResponse, "description": "Unexpected failure"},
}


def _internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


@router.post("/business-data", response_model=BusinessReport, responses=_ERROR_RESPONSES)
async def business_data(
    generator: ReportGeneratorDep,
    request: BusinessDataRequest | None = None,
) -> BusinessReport:
    request = request or BusinessDataRequest()
    try:
        return await generator.generate_report(request.name, request.location)
    except InvalidBusinessInputError:
        raise
    except Exception:
        logger.exception("Error processing business data request")
        return _internal_error()


@router.get("/regenerate-headline", response_model=HeadlineResponse, responses=_ERROR_RESPONSES)
async def regenerate_headline(
    generator: ReportGeneratorDep,
    name: str | None = None,
    location: str | None = None,
) -> HeadlineResponse:
    try:
        headline = await generator.regenerate_headline(name, location)
    except InvalidBusinessInputError:
        raise
    except Exception:
        logger.exception("Error regenerating headline")
        return _internal_error()
    return HeadlineResponse(headline=headline)
