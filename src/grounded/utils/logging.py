"""
Rich logging utility for colored terminal output
"""
import logging
from typing import Optional
from rich.logging import RichHandler
from rich.console import Console
from rich.traceback import install as install_traceback
from grounded.core.config import settings

# Locals stay hidden: request handlers hold credentials and session data
install_traceback(show_locals=False)

# Create a shared console and handler instance
_console = Console()
_handler: Optional[RichHandler] = None


def _get_handler() -> RichHandler:
    global _handler
    if _handler is None:
        _handler = RichHandler(
            console=_console,
            show_time=True,
            show_path=True,
            show_level=True,
            rich_tracebacks=True,
            markup=True,  # Enable rich markup in log messages
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
        _handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    return _handler


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.log_level).upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with Rich formatting and colors.
    All loggers share the same RichHandler for consistent output.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override (defaults to settings.log_level)

    Returns:
        Configured logger instance with RichHandler
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    handler = _get_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    return logger


def get_shared_logger() -> logging.Logger:
    """
    Get a shared application logger for general application-wide logging.
    Use this for logging actions that don't belong to a specific module.
    """
    return get_logger("grounded")


# Create a shared application logger instance
app_logger = get_shared_logger()
