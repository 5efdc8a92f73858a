from pydantic import BaseModel


class NamedObject(BaseModel):
    """Custom object returned as JSON by GET /custom."""

    name: str
