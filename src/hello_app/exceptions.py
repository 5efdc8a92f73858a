"""Request failure variants and the exceptions that carry them.

Handlers raise RequestError with one of the ErrorVariant values below.
Exception handlers in main.py turn the variant into a response through
hello_app.errors.classify.
"""

from dataclasses import dataclass
from typing import assert_never


@dataclass(frozen=True)
class InternalError:
    """Server-side failure, not attributable to caller input."""


@dataclass(frozen=True)
class BadClientData:
    """Malformed or invalid request."""


@dataclass(frozen=True)
class Timeout:
    """Upstream did not respond in time."""


@dataclass(frozen=True)
class ValidationError:
    """Caller input failed validation on a named field."""

    field: str


type ErrorVariant = InternalError | BadClientData | Timeout | ValidationError


def describe(variant: ErrorVariant) -> str:
    """Human-readable message for a variant; also the response body."""
    match variant:
        case InternalError():
            return "internal error"
        case BadClientData():
            return "bad request"
        case Timeout():
            return "timeout"
        case ValidationError(field=field):
            return f"Validation error on field: {field}"
        case _:
            assert_never(variant)


class DomainError(Exception):
    """Base class for all application exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RequestError(DomainError):
    """Raised by a handler to answer the request with a classified error."""

    def __init__(self, variant: ErrorVariant) -> None:
        self.variant = variant
        super().__init__(describe(variant))


class HandlerFailure(DomainError):
    """Unclassified handler failure, answered with a generic 500."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("my error")
