"""structlog setup for diagnostics.

stdout carries the rendered graph, so every diagnostic goes to stderr.
"""

import logging
import sys

import structlog

TYPE_TEXT_FIELDS = ('type', 'name')
MAX_TYPE_TEXT = 200


def truncate_type_text(logger, log_method, event_dict):
    """
    A structlog processor that shortens long rendered type texts (object literal
    types can span hundreds of lines).
    """
    for field in TYPE_TEXT_FIELDS:
        value = event_dict.get(field)
        if isinstance(value, str) and len(value) > MAX_TYPE_TEXT:
            event_dict[field] = value[:MAX_TYPE_TEXT] + '...'
    return event_dict


def configure_logging(log_level=logging.INFO, stream=None, log_format="json", force_reconfigure=False):
    """Configure structlog on top of stdlib logging, JSON or console rendered."""
    if stream is None:
        stream = sys.stderr

    if not force_reconfigure and hasattr(structlog, '_configured'):
        return

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(format="%(message)s", stream=stream, level=log_level, force=True)
    logging.root.setLevel(log_level)

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            truncate_type_text,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    structlog._configured = True
