import logging
from typing import Optional

import structlog

from accesskeys.config import settings


def configure_logging(log_level: Optional[str] = None, json: Optional[bool] = None):
    """Configure structlog with contextvars for request tracing.

    Renders JSON unless ``json`` (or ``settings.log_json``) is False, in which
    case the human-readable console renderer is used.
    """
    level = (log_level or settings.log_level).upper()
    render_json = settings.log_json if json is None else json

    logging.basicConfig(format="%(message)s", level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if render_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,  # must stay first
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
