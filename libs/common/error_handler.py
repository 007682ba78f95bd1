"""Global exception handlers for consistent JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from libs.common.errors import InvalidInput, ServiceError
from libs.common.logging import get_logger

logger = get_logger(__name__)

MALFORMED_JSON_MESSAGE = "El cuerpo de la solicitud no es JSON válido"

# Error types FastAPI uses for undecodable JSON bodies
_JSON_DECODE_ERROR_TYPES = {"json_invalid", "value_error.jsondecode"}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.warning(
        "%s on %s %s: %s",
        exc.code,
        request.method,
        request.url.path,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """Render undecodable JSON bodies as InvalidInput; defer everything else."""
    if any(error.get("type") in _JSON_DECODE_ERROR_TYPES for error in exc.errors()):
        return await service_error_handler(request, InvalidInput(MALFORMED_JSON_MESSAGE))
    return await request_validation_exception_handler(request, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "code": "INTERNAL_ERROR"},
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register the domain, request-validation and fallback handlers on ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
