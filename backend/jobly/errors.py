"""Domain errors raised by the repositories.

Every failure a caller is expected to handle is a ``JoblyError`` carrying an
``ErrorKind``. Callers branch on ``err.kind``; the HTTP layer maps each kind
to a status code in one place (see ``jobly.main``).
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"


class JoblyError(Exception):
    """A recoverable domain failure tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"JoblyError({self.kind.value!r}, {self.message!r})"

    @classmethod
    def not_found(cls, message: str) -> "JoblyError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> "JoblyError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def conflict(cls, message: str) -> "JoblyError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "JoblyError":
        return cls(ErrorKind.UNAUTHORIZED, message)
