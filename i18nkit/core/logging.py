"""Structured logging for i18nkit."""

import inspect
import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

from .config import settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _renderer():
    if settings.is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging() -> BoundLogger:
    """Route structlog through the standard library logger.

    JSON output in production, console output otherwise, at settings.LOG_LEVEL.
    Everything is silenced while running under pytest.
    """
    silenced = _is_test_environment()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if silenced:
        level = logging.CRITICAL + 1
    else:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level, force=silenced)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get the shared logger bound to the calling module.

    Example:
        # In i18nkit/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "registry", "module_path": "i18nkit.i18n.registry"}
    """
    frame = inspect.currentframe()
    module = inspect.getmodule(frame.f_back) if frame is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rsplit(".", 1)[-1], module_path=name)
