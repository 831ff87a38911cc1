# src/emp_crud/utils/error_handler.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("fastapi")


def _safe_args(exc: Exception) -> str:
    a = getattr(exc, "args", None)
    return str(a) if a else "No additional details"


def _json_error(
    status_code: int,
    message: str,
    exc: Exception,
    extra: Dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Unified JSON error response.
    5xx responses never echo internal details back to the client.
    """
    user_message = message
    if status_code == 404 and not message:
        user_message = "The requested resource was not found."
    elif status_code >= 500:
        user_message = "Internal Server Error. Please try again later."

    payload: Dict[str, Any] = {
        "message": user_message,
        "error_type": exc.__class__.__name__,
        "status_code": status_code,
    }
    if extra:
        payload.update(extra)

    return JSONResponse(status_code=status_code, content=payload)


def _log_http(request: Request, status_code: int, detail: str, exc: Exception) -> None:
    """
    Log levels:
    - 404 -> INFO (normal noise)
    - other 4xx -> ERROR (client error worth checking)
    - 5xx -> EXCEPTION (stack trace)
    """
    url = str(request.url)
    method = request.method

    if status_code == 404:
        logger.info("404 Not Found: %s %s | detail=%s", method, url, detail)
        return

    if 400 <= status_code < 500:
        logger.error(
            "%s: %s %s | detail=%s | args=%s",
            status_code,
            method,
            url,
            detail,
            _safe_args(exc),
        )
        return

    logger.exception("%s: %s %s | detail=%s", status_code, method, url, detail, exc_info=exc)


async def custom_exception_handler(request: Request, exc: Exception):
    # 1) HTTPException (FastAPI's is a subclass of Starlette's)
    if isinstance(exc, StarletteHTTPException):
        status = int(exc.status_code)
        detail = str(exc.detail)
        _log_http(request, status, detail, exc)
        return _json_error(status_code=status, message=detail, exc=exc)

    # 2) Request validation (bad gender/job code, blank username, ...)
    if isinstance(exc, RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        _log_http(request, 422, "Validation error", exc)
        return _json_error(422, "Validation error", exc, extra={"errors": errors})

    # 3) Storage errors that escaped the route
    if isinstance(exc, IntegrityError):
        _log_http(request, 400, "Constraint violation", exc)
        return _json_error(400, "Constraint violation", exc)

    if isinstance(exc, SQLAlchemyError):
        _log_http(request, 500, "Database error", exc)
        return _json_error(500, "Database error", exc)

    # 4) Anything else
    _log_http(request, 500, str(exc), exc)
    return _json_error(500, "Internal Server Error", exc)
