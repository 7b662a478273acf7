"""
structlog configuration for the Live Board API.

Both feed providers authenticate with a secret: API-Sports in a header, The
Odds API in the query string. Log events are scrubbed of those secrets before
rendering, so a logged URL or error message never leaks a key.
"""
from __future__ import annotations

import logging
import re
import sys
from typing import Any, MutableMapping, Optional

import structlog
from shared.config import Settings, get_settings

_SECRET_FIELDS = frozenset({"api_key", "apikey", "apisports_key", "odds_api_key", "x-apisports-key"})
_SECRET_QUERY_RE = re.compile(r"(apiKey=)[^&\s'\"]+", re.IGNORECASE)
_MASK = "***"

# Third-party loggers that would otherwise print full request URLs at INFO
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "asyncio")


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask secret-named fields and apiKey query values in string fields."""
    for key, value in event_dict.items():
        if key.lower() in _SECRET_FIELDS:
            event_dict[key] = _MASK
        elif isinstance(value, str) and "apikey=" in value.lower():
            event_dict[key] = _SECRET_QUERY_RE.sub(rf"\g<1>{_MASK}", value)
    return event_dict


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.debug or settings.environment.value == "dev":
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    return structlog.processors.JSONRenderer()


def setup_logging(service_name: str, settings: Optional[Settings] = None) -> None:
    """
    Route structlog and stdlib logging through one stdout handler.

    LB_DEBUG forces DEBUG level and console output regardless of
    LB_LOG_LEVEL and LB_ENVIRONMENT.
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_secrets,
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        environment=settings.environment.value,
        league=settings.apisports_league,
        odds_sport=settings.odds_sport,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger."""
    return structlog.get_logger(name)
