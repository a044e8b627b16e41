"""Translates gateway exceptions into JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storage_gateway.domain import ErrorRecord
from storage_gateway.exceptions import GatewayError
from storage_gateway.response_models import ErrorResponse

logger = logging.getLogger(__name__)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning(
        exc.message,
        extra={
            "path": request.url.path,
            "kind": exc.error.kind.value,
            "status_code": exc.status_code,
        },
    )
    body = ErrorResponse(message=exc.message, errors=exc.errors)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        ErrorRecord(
            message=err.get("msg", "Invalid request"),
            context={"loc": [str(part) for part in err.get("loc", ())]},
        )
        for err in exc.errors()
    ]
    logger.warning(
        "Malformed request", extra={"path": request.url.path, "count": len(errors)}
    )
    body = ErrorResponse(message="Invalid request", errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error", extra={"path": request.url.path})
    body = ErrorResponse(message="Unexpected error occurred", error=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
