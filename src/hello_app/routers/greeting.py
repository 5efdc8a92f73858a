"""Greeting endpoints showing the different reply types."""

from fastapi import APIRouter
from starlette.responses import Response

from hello_app.responses import JsonReply, StreamReply, TextReply, render
from hello_app.schemas.greeting import NamedObject

router = APIRouter(tags=["greeting"])


@router.get("/")
async def index() -> Response:
    return render(TextReply("Hey there!"))


@router.get("/custom")
async def custom() -> Response:
    """Return a custom object serialized as JSON."""
    return render(JsonReply(NamedObject(name="user")))


@router.get("/stream")
async def stream() -> Response:
    """Stream a single chunk as the response body."""
    return render(StreamReply(iter([b"stream"])))
