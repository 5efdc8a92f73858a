from fastapi import FastAPI, Request
from starlette.responses import Response

from hello_app.config import Settings, settings
from hello_app.errors import classify
from hello_app.exceptions import HandlerFailure, RequestError
from hello_app.logging import get_logger
from hello_app.middleware import RequestContextMiddleware
from hello_app.responses import TextReply, render
from hello_app.routers import counter, failures, greeting, user
from hello_app.state import AppState

logger = get_logger(__name__)


async def request_error_handler(request: Request, exc: RequestError) -> Response:
    """Answer a classified failure with the classifier's status and text body."""
    reply = classify(exc.variant)
    log = logger.error if reply.status_code >= 500 else logger.warning
    log("request_error", error=exc.message, path=request.url.path)
    return render(reply)


async def handler_failure_handler(request: Request, exc: HandlerFailure) -> Response:
    """Return 500 with the failure's display text, like a framework default error page."""
    logger.error("handler_failure", error=exc.message, name=exc.name, path=request.url.path)
    return render(TextReply(exc.message, status_code=500))


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application with its own AppState.

    Each call returns an independent app with a fresh request counter.
    """
    app = FastAPI(title=config.app_name)
    app.state.hello = AppState(app_name=config.app_name)

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestError, request_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HandlerFailure, handler_failure_handler)  # type: ignore[arg-type]

    app.include_router(greeting.router)
    app.include_router(failures.router)
    app.include_router(user.router)
    app.include_router(counter.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness probe for load balancers and container orchestrators."""
        return {"status": "ok"}

    return app


app = create_app()
