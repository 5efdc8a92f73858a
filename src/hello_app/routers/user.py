"""User endpoints, grouped under the /user prefix."""

from typing import Annotated

from fastapi import APIRouter, Form, Path, Query
from starlette.responses import Response

from hello_app.responses import TextReply, render
from hello_app.schemas.user import U32_MAX, UserForm, UserQuery

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/{id}/{name}")
async def get_user(
    id: Annotated[int, Path(ge=0, le=U32_MAX)],
    name: str,
    query: Annotated[UserQuery, Query()],
) -> Response:
    """Greet a user identified by path parameters, with age from the query string."""
    return render(TextReply(f"Hello {name}! id:[{id}], age:[{query.age}]"))


@router.post("")
async def create_user(form: Annotated[UserForm, Form()]) -> Response:
    """Greet the user named in the submitted form."""
    return render(TextReply(f"Hello {form.name}!"))
