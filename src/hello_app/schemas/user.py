"""User endpoint request schemas.

FastAPI binds UserQuery from the query string and UserForm from an
application/x-www-form-urlencoded body; bad input is rejected with 422.
"""

from pydantic import BaseModel, Field

# Largest value of an unsigned 32-bit integer, the range accepted for ids and ages
U32_MAX = 2**32 - 1


class UserQuery(BaseModel):
    """Query parameters of GET /user/{id}/{name}."""

    age: int = Field(ge=0, le=U32_MAX)


class UserForm(BaseModel):
    """Form body of POST /user."""

    name: str
