import logging
import random
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings
from app.exceptions.custom import InvalidBusinessInputError
from app.exceptions.handlers import (
    invalid_input_error_handler,
    request_validation_error_handler,
)
from app.routers.business import router as business_router
from app.routers.dashboard import router as dashboard_router
from app.services.report_generator import ReportGenerator


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app.state.report_generator = ReportGenerator(
        rng=random.Random(settings.random_seed),
        report_delay=settings.report_delay_seconds,
        headline_delay=settings.headline_delay_seconds,
    )

    yield


app = FastAPI(title="GrowthProAI", lifespan=lifespan)

app.add_exception_handler(InvalidBusinessInputError, invalid_input_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(business_router)
app.include_router(dashboard_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
