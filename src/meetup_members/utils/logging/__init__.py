# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: structlog loggers at call sites, loguru sinks for output

from .config import LoggingMode, LoguruHandler, configure_logging, detect_logging_mode, get_logging_status
from .utils import command_context, get_logger, log_request

__all__ = [
    # Configuration
    "LoggingMode",
    "LoguruHandler",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "command_context",
    "get_logger",
    "log_request",
]
