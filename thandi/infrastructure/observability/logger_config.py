import logging
import uuid
from typing import Optional

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

from thandi.core.settings import settings


def bind_request_context(request_id: Optional[str] = None, **extra) -> str:
    """
    Binds a request id (and any extra keys) to every log event of the current task.
    """
    rid = request_id or uuid.uuid4().hex
    clear_contextvars()
    bind_contextvars(request_id=rid, **extra)
    return rid


def rename_event_to_message(_, __, event_dict):
    """
    Canonical message field rename.
    """
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_structlog():
    """
    Configures structlog to emit canonical JSON through standard logging.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    resolved_level = str(settings.LOG_LEVEL or "INFO").upper()
    log_level = getattr(logging, resolved_level, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[handler],
    )

    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        rename_event_to_message,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
