"""Reply types returned by handlers and their rendering to HTTP responses.

A handler builds one of the Reply variants and passes it to render(), which
is the only place that knows how each variant is serialized.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from pydantic import BaseModel
from starlette.responses import JSONResponse, Response, StreamingResponse

TEXT_PLAIN = "text/plain; charset=utf-8"
TEXT_HTML = "text/html; charset=utf-8"
APPLICATION_JSON = "application/json"


@dataclass(frozen=True)
class TextReply:
    """Plain text body with an explicit status and content type."""

    text: str
    status_code: int = 200
    content_type: str = TEXT_PLAIN


@dataclass(frozen=True)
class JsonReply:
    """A pydantic model serialized as a JSON object."""

    payload: BaseModel
    status_code: int = 200


@dataclass(frozen=True)
class StreamReply:
    """Body sent chunk by chunk as the iterable is consumed."""

    chunks: Iterable[bytes]
    content_type: str = APPLICATION_JSON


type Reply = TextReply | JsonReply | StreamReply


def render(reply: Reply) -> Response:
    """Serialize a reply into a Starlette response."""
    match reply:
        case TextReply(text=text, status_code=status_code, content_type=content_type):
            # Header set directly so Starlette doesn't append its own charset
            return Response(
                content=text.encode("utf-8"),
                status_code=status_code,
                headers={"content-type": content_type},
            )
        case JsonReply(payload=payload, status_code=status_code):
            return JSONResponse(content=payload.model_dump(mode="json"), status_code=status_code)
        case StreamReply(chunks=chunks, content_type=content_type):
            return StreamingResponse(chunks, media_type=content_type)
        case _:
            assert_never(reply)
