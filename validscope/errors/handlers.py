"""FastAPI Exception Handlers

Optional integration: converts ValidationFailed and DefinitionError raised
inside route handlers to structured HTTP responses. Requires the
`fastapi` extra.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from validscope.logging import get_logger

from .exceptions import DefinitionError, ValidationFailed
from .types import AppError

log = get_logger("validscope.errors.handlers")


def error_to_response(error: AppError) -> JSONResponse:
    """Convert AppError to FastAPI JSONResponse."""
    status_code = error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        error_code=error.code.name,
        error_code_num=error.code.value,
        message=error.message,
        category=error.code.category,
    )

    return JSONResponse(status_code=status_code, content=error.to_dict())


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    """Render every fault of the failed result."""
    log.warning(
        "validation_failed_response",
        path=request.url.path,
        fault_count=len(exc.faults),
        fault_paths=[f.path for f in exc.faults],
    )
    return JSONResponse(status_code=exc.code.http_status, content=exc.to_dict())


async def definition_error_handler(request: Request, exc: DefinitionError) -> JSONResponse:
    """Schema bugs surface as internal errors."""
    return error_to_response(exc.error)


def register_error_handlers(app: FastAPI) -> None:
    """Register validscope error handlers on a FastAPI app.

    Usage:
        from validscope.errors.handlers import register_error_handlers

        app = FastAPI(...)
        register_error_handlers(app)
    """
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(DefinitionError, definition_error_handler)
