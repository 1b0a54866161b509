# ---------------------------------
# ERROR VALUES
# ---------------------------------
# Expected failures travel inside an ``Err`` outcome as one of the frozen
# dataclasses below. They are values, not exceptions.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ErrorInfo:
    """Base error carried by a failed outcome."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingVariable(ErrorInfo):
    """One or more required template variables were not supplied."""

    names: tuple[str, ...] = ()


@dataclass(frozen=True)
class MalformedResponse(ErrorInfo):
    """A response body did not have the expected shape.

    Attributes:
        field: Dotted path of the offending field, or ``None`` when the body
            itself was not an object.
    """

    field: str | None = None


@dataclass(frozen=True)
class NetworkError(ErrorInfo):
    url: str | None = None
    status_code: int | None = None


@dataclass(frozen=True)
class BadRequest(NetworkError):
    pass


@dataclass(frozen=True)
class Unauthorized(NetworkError):
    pass


@dataclass(frozen=True)
class Forbidden(NetworkError):
    pass


@dataclass(frozen=True)
class NotFound(NetworkError):
    pass


@dataclass(frozen=True)
class BadInput(NetworkError):
    """422 from the prompt service, with per-field messages."""

    details: dict[str, list[str]] = field(default_factory=dict)

    def first_error(self, name: str) -> str | None:
        messages = self.details.get(name)
        return messages[0] if messages else None


UNAUTHORIZED_HINT = """

This error can be caused by:
  - An invalid API key
  - A missing API key

Hint: pass your API key when creating the client:
    PromptClient(api_key="YOUR_API_KEY")
or set the PROMPTSDK_API_KEY environment variable."""


# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class OutcomeError(Exception):
    """Raised when unwrapping a failed outcome."""

    def __init__(self, error: Any):
        self.error = error
        super().__init__(getattr(error, "message", str(error)))


class ConfigurationError(RuntimeError):
    """Raised when the client cannot be built from the current settings."""
    pass
