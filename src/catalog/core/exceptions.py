"""Application error types shared by every module.

Services raise these when a business rule short-circuits a request.
Each error carries the status code the transport layer should answer
with; anything that is *not* an ``AppError`` is an opaque collaborator
failure and is rendered as a 500 without exposing its details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple


class AppError(Exception):
    """Base application error with an explicit status code."""

    code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None) -> None:
        if code is not None:
            self.code = code
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __reduce__(self):
        return type(self), (self.message, self.code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class Forbidden(AppError):
    """The acting user may not perform the requested operation."""

    code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    """The requested resource does not exist."""

    code = 404
    default_message = "Not found"


class ContextCancelled(AppError):
    """The caller abandoned the request before it completed."""

    code = 499
    default_message = "Request cancelled"


class DeadlineExceeded(AppError):
    """The request ran past the caller-supplied deadline."""

    code = 504
    default_message = "Deadline exceeded"


def error_response(exc: BaseException) -> Tuple[int, Dict[str, Any]]:
    """Translate an exception into ``(status, body)`` for the transport layer."""
    if isinstance(exc, AppError):
        return exc.code, exc.to_dict()
    return 500, AppError().to_dict()
