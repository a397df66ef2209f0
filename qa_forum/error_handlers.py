"""Centralized error formatting.

Every failure, whatever raised it, ends up in ``error_response``:
    - ApiError -> its own status and message
    - RequestValidationError -> 400 with field-level errors
    - Starlette HTTPException (unknown route, wrong method) -> its status
    - SQLAlchemyError and anything else -> 500

The response is always the envelope
``{status, statusCode, message, requestId, [errors], [stack]}``. In production
the message of a 500 is replaced and the stack is never attached.
"""

import logging
import traceback
import uuid
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from qa_forum.config import settings
from qa_forum.errors import ApiError, ErrorKind

logger = logging.getLogger(__name__)

GENERIC_INTERNAL_MESSAGE = "Internal server error"
REQUEST_ID_HEADER = "X-Request-ID"


def register_error_handlers(app: FastAPI) -> None:
    """Register the request-id middleware and every exception handler."""
    app.middleware("http")(request_context_middleware)
    app.add_exception_handler(ApiError, error_response)
    app.add_exception_handler(RequestValidationError, error_response)
    app.add_exception_handler(StarletteHTTPException, error_response)
    app.add_exception_handler(SQLAlchemyError, error_response)


async def request_context_middleware(request: Request, call_next):
    request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    try:
        response = await call_next(request)
    except Exception as exc:
        # Nothing upstream handled it: still answer with the envelope
        response = error_response(request, exc)
    response.headers.setdefault(REQUEST_ID_HEADER, request.state.request_id)
    return response


def error_response(request: Request, exc: Exception) -> JSONResponse:
    status_code, message, errors, headers = _classify(exc)

    if status_code >= 500 and settings.is_production:
        client_message = GENERIC_INTERNAL_MESSAGE
    else:
        client_message = message

    request_id = getattr(request.state, "request_id", None) or "unknown"
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    body: Dict[str, Any] = {
        "status": "error",
        "statusCode": status_code,
        "message": client_message,
        "requestId": request_id,
    }
    if errors:
        body["errors"] = errors
    if not settings.is_production:
        body["stack"] = stack

    _log_error(request, status_code, message, request_id, exc)

    response = JSONResponse(status_code=status_code, content=body, headers=headers)
    response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _classify(
    exc: Exception,
) -> Tuple[int, str, Optional[List[Dict[str, Any]]], Optional[Dict[str, str]]]:
    if isinstance(exc, ApiError):
        return exc.status_code, exc.message, exc.errors, exc.headers

    if isinstance(exc, RequestValidationError):
        return ErrorKind.BAD_REQUEST.value, "Invalid request data", _field_errors(exc), None

    if isinstance(exc, StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else _reason(exc.status_code)
        return exc.status_code, detail, None, getattr(exc, "headers", None)

    # Unclassified failures, database errors included
    return ErrorKind.INTERNAL.value, str(exc) or type(exc).__name__, None, None


def _field_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _log_error(request: Request, status_code: int, message: str, request_id: str, exc: Exception) -> None:
    user = getattr(request.state, "user", None)
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "Error occurred: %s %s -> %s %s",
        request.method, request.url.path, status_code, message,
        extra={
            "event": "request.error",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "user_id": getattr(user, "id", None),
        },
        exc_info=(type(exc), exc, exc.__traceback__),
    )
