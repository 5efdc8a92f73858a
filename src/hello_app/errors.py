"""Error classifier: maps a request failure variant to its HTTP response."""

from typing import assert_never

from fastapi import status

from hello_app.exceptions import (
    BadClientData,
    ErrorVariant,
    InternalError,
    Timeout,
    ValidationError,
    describe,
)
from hello_app.responses import TEXT_HTML, TextReply


def status_for(variant: ErrorVariant) -> int:
    match variant:
        case InternalError():
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        case BadClientData() | ValidationError():
            return status.HTTP_400_BAD_REQUEST
        case Timeout():
            return status.HTTP_504_GATEWAY_TIMEOUT
        case _:
            assert_never(variant)


def classify(variant: ErrorVariant) -> TextReply:
    """Build the response for a failure variant.

    Pure and total over ErrorVariant: equal variants always yield equal
    replies, and every variant is answered as text/html.
    """
    return TextReply(
        text=describe(variant),
        status_code=status_for(variant),
        content_type=TEXT_HTML,
    )
