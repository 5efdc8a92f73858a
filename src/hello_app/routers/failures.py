"""Endpoints that fail on purpose, answered by the exception handlers in main.py."""

from fastapi import APIRouter

from hello_app.exceptions import BadClientData, HandlerFailure, RequestError, ValidationError
from hello_app.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["errors"])


def validate_user_input() -> None:
    """Input check that always rejects, standing in for real validation."""
    raise HandlerFailure("input error")


@router.get("/fail")
async def fail() -> str:
    err = HandlerFailure("test fail")
    logger.debug(err.message, name=err.name)
    raise err


@router.get("/bad-data")
async def bad_data() -> str:
    raise RequestError(BadClientData())


@router.get("/user-error")
async def user_error() -> str:
    """Run input validation and report a failure against the `name` field."""
    try:
        validate_user_input()
    except HandlerFailure as exc:
        raise RequestError(ValidationError(field="name")) from exc
    return "success!"
