"""Error taxonomy for the forum API.

Every failure a handler, validator or the authentication gate can signal is an
``ApiError`` carrying its HTTP status. Nothing writes an error response
directly; the handlers in ``qa_forum.error_handlers`` turn these into the JSON
envelope.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(int, Enum):
    BAD_REQUEST = 400
    UNAUTHENTICATED = 401
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL = 500


class ApiError(Exception):
    """Base exception for all forum API errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors
        self.headers = headers

    @property
    def status_code(self) -> int:
        return self.kind.value


class BadRequestError(ApiError):
    kind = ErrorKind.BAD_REQUEST


class UnauthenticatedError(ApiError):
    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "Access token required", **kwargs):
        kwargs.setdefault("headers", {"WWW-Authenticate": "Bearer"})
        super().__init__(message, **kwargs)


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND


class ConflictError(ApiError):
    kind = ErrorKind.CONFLICT


class InternalError(ApiError):
    kind = ErrorKind.INTERNAL
