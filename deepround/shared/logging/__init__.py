import logging
import sys
from typing import Optional

import structlog
from structlog.types import Processor

LIBRARY_LOGGER = "deepround"

# Events are handed to stdlib logging; the host's handlers decide what is shown.
_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.render_to_log_kwargs,
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(  # type: ignore [no-any-return]
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """
    Opt-in log output for the ``deepround`` logger only.
    The root logger and any global structlog configuration are left alone.

    :param log_level: Logging level [DEBUG, INFO, WARNING, ERROR, CRITICAL],
        defaults to DEEPROUND_LOG_LEVEL
    :param json_logs: Logging output format will be JSON if set to True,
        defaults to DEEPROUND_JSON_LOGS
    """
    if log_level is None or json_logs is None:
        from deepround.shared.config import get_settings

        settings = get_settings()
        log_level = log_level or settings.LOG_LEVEL
        json_logs = settings.JSON_LOGS if json_logs is None else json_logs

    renderer: Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, logging.StreamHandler):
            logger.removeHandler(existing)

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False


logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())
