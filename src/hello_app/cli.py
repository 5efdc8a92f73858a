"""Command-line entry point: serve the application with uvicorn."""

import argparse

import uvicorn

from hello_app.config import settings
from hello_app.logging import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the hello-fastapi server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logger.info("server_starting", host=args.host, port=args.port)
    # log_config=None keeps the structlog setup from hello_app.logging
    uvicorn.run(
        "hello_app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
