"""Translate storefront errors into HTTP responses.

Response bodies look like ``{"error": kind, "messages": {field: [message]}}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.errors import Conflict, error_messages
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _error_kind(exc):
    # Field-level failures raised by Protean itself count as invalid arguments
    if type(exc) is ValidationError:
        return "InvalidArgument"
    return type(exc).__name__


def _body(kind, messages):
    return {"error": kind, "messages": messages}


async def not_found_handler(request: Request, exc: ObjectNotFoundError):
    return JSONResponse(status_code=404, content=_body("NotFound", error_messages(exc)))


async def conflict_handler(request: Request, exc: Conflict):
    return JSONResponse(status_code=409, content=_body("Conflict", error_messages(exc)))


async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content=_body(_error_kind(exc), error_messages(exc)))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        messages.setdefault(field, []).append(error["msg"])
    return JSONResponse(status_code=400, content=_body("InvalidArgument", messages))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unexpected error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=_body("Internal", {"_server": ["Internal server error"]}))


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then the storefront's status mapping over them."""
    register_exception_handlers(app)

    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(Conflict, conflict_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
