import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import InvalidBusinessInputError

logger = logging.getLogger(__name__)


async def invalid_input_error_handler(
    request: Request, exc: InvalidBusinessInputError
) -> JSONResponse:
    logger.warning("Rejected %s %s: missing %s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})
