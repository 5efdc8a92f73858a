"""Request counter endpoint."""

from fastapi import APIRouter
from starlette.responses import Response

from hello_app.dependencies import State
from hello_app.logging import get_logger
from hello_app.responses import TextReply, render

logger = get_logger(__name__)

router = APIRouter(prefix="/app1", tags=["counter"])


# Plain def: FastAPI runs it on the thread pool, the counter's lock serializes updates
@router.get("")
def count_request(state: State) -> Response:
    """Bump the shared counter and report the new value."""
    count = state.counter.increment()
    logger.debug("counter_incremented", value=count)
    return render(TextReply(f"Hello to {state.app_name} and Request number is {count}"))
