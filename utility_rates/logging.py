"""structlog setup shared by the rates and quotes services.

Both services log to stdout; every event carries ``service`` and ``env`` so
the two streams can be told apart once they land in the same sink. Anything
bound with ``structlog.contextvars`` (the request id, for instance) is merged
into each event.
"""

import logging
import sys

import structlog


def _service_context(app_name: str, app_env: str):
    def add(logger, method_name, event_dict):
        event_dict.setdefault("service", app_name)
        event_dict.setdefault("env", app_env)
        return event_dict

    return add


def init_logging(settings) -> structlog.BoundLogger:
    """Configure logging from a service's settings.

    Uses ``log_level`` and ``log_format`` ("json" or "console") plus
    ``app_name``/``app_env`` for the per-event service context.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _service_context(settings.app_name, settings.app_env),
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # module-level loggers must pick up reconfiguration (new app, captured logs in tests)
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger()
