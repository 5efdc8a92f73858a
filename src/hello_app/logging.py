"""structlog setup shared by the app, its middleware and uvicorn.

Everything goes through one stdlib handler on stdout, so uvicorn's records and
our own events come out in the same format. The request_id bound by
RequestContextMiddleware is merged into every event.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

from hello_app.config import Settings, settings


def _utc_timestamp(_logger: object, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _utc_timestamp,
        structlog.processors.format_exc_info,
    ]


def configure_logging(config: Settings) -> None:
    """Route structlog and stdlib logging to stdout.

    LOG_FORMAT=console swaps the JSON renderer for structlog's colored dev output.
    """
    shared = _shared_processors()
    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if config.log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": shared,
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {"handlers": ["stdout"], "level": config.log_level},
                # RequestContextMiddleware writes its own access event
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )


configure_logging(settings)


def get_logger(name: str) -> BoundLogger:
    return structlog.get_logger(name)  # type: ignore[no-any-return]
