"""Structlog configuration and logger helpers.

Importing treelocale never configures logging: the helpers below return
lazy structlog proxies that pick up whatever configuration the host
application installs. Applications without their own setup can call
``configure_logging()`` once at startup.

Usage:
    from treelocale.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - treelocale.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.stdlib import BoundLogger

from treelocale.configuration import Settings, settings as default_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structured logging for a host application.

    Replaces the global structlog configuration, so only call it from an
    application entry point. Console rendering in development, JSON in
    production, and silenced output while running under pytest.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided.
        settings: Optional Settings instance, the module singleton otherwise.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Minimal processors; nothing is emitted at this root level
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


# Lazy proxy; resolved against the structlog configuration on first use
logger: Any = structlog.get_logger()


def get_logger(name: Optional[str] = None) -> Any:
    """Get a lazy logger bound to a name.

    Args:
        name: Optional logger name (typically __name__ in calling module).
            The calling module's name is used when omitted.
    """
    if not name:
        current_frame = inspect.currentframe()
        frame = current_frame.f_back if current_frame else None
        module = inspect.getmodule(frame) if frame else None
        name = module.__name__ if module else "unknown"
    return structlog.get_logger(logger_name=name)


def get_module_logger() -> Any:
    """Get a lazy logger for the calling module with full path context.

    Binds ``component`` (last dotted part) and ``module_path``.

    Example:
        # In treelocale/i18n/resolver.py
        logger = get_module_logger()
        # context: {"component": "resolver", "module_path": "treelocale.i18n.resolver"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
