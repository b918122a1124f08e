"""Platform exception hierarchy.

Every exception the web layer knows how to translate into an HTTP status
lives here. Domain code raises these (mostly ``DomainException``); the
mapping to status codes lives in ``shared.http``.
"""

from __future__ import annotations

from typing import Any


class ModelError:
    """Structured error payload: an internal code, a type tag and a message."""

    def __init__(self, message: str, *, code: int = 0, type: str | None = None) -> None:
        self.code = code
        self.type = type
        self.message = message

    def to_dict(self, default_code: int | None = None) -> dict[str, Any]:
        """Serialise for a response body. A zero code falls back to ``default_code``."""
        code = self.code
        if code == 0 and default_code is not None:
            code = default_code

        payload: dict[str, Any] = {"code": code, "message": self.message}
        if self.type is not None:
            payload["type"] = self.type
        return payload

    def __repr__(self) -> str:
        return f"ModelError(code={self.code!r}, type={self.type!r}, message={self.message!r})"


class PlatformError(Exception):
    """Root of the platform error hierarchy.

    Args:
        message: Human-readable description. May be omitted when ``error`` is given.
        error: Optional structured payload returned verbatim to API clients.
    """

    def __init__(self, message: str | None = None, *, error: ModelError | None = None) -> None:
        if message is None and error is not None:
            message = f"{error.code}-{error.type}-{error.message}"
        super().__init__(message or "")
        self.message = message or ""
        self.error = error


class BadRequestError(PlatformError):
    pass


class UnauthorizedError(PlatformError):
    pass


class ForbiddenError(PlatformError):
    pass


class NotFoundError(PlatformError):
    pass


class ConflictError(PlatformError):
    pass


class DomainException(ConflictError):
    """A domain object was asked to do something its rules forbid.

    Raised for invalid state transitions and for builders configured with
    invalid data. Several rule violations can be reported at once; they are
    kept in ``messages`` and joined with newlines in the exception text.
    """

    def __init__(self, message: str | list[str]) -> None:
        messages = [message] if isinstance(message, str) else list(message)
        super().__init__("\n".join(messages))
        self.messages = messages


class RemovedError(PlatformError):
    """The requested resource existed but has been removed."""


class ReadOnlyError(PlatformError):
    """The requested resource is locked against modification."""


class NotModifiedError(PlatformError):
    pass


class InternalServerError(PlatformError):
    pass


class ServiceUnavailableError(PlatformError):
    pass
