# ABOUTME: Wires structlog call sites, stdlib loggers and loguru sinks into one pipeline
# ABOUTME: Interactive runs log to files under logs/, production runs log JSON to stderr

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

LOG_DIR = Path("logs")
LOG_FILES = {
    "main": "meetup-members.log",
    "json": "meetup-members.json",
    "errors": "errors.log",
}

# Libraries whose chatter is capped at WARNING
QUIET_LOGGERS = ["httpx", "httpcore", "asyncio", "charset_normalizer"]

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}"


class LoggingMode:
    """Where log records end up."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


class LoguruHandler(logging.Handler):
    """Hand stdlib records, rendered structlog events included, to the loguru sinks."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.patch(lambda loguru_record: loguru_record.update(name=record.name)).opt(
            exception=record.exc_info
        ).log(level, record.getMessage())


def detect_logging_mode() -> str:
    """Pick the mode from MEETUP_MEMBERS_LOG_MODE, else from whether stdout is a terminal."""
    mode = os.getenv("MEETUP_MEMBERS_LOG_MODE", "").lower()
    if mode in (LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION):
        return mode

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Route every log event of the process to loguru at ``log_level``.

    structlog events are filtered by the stdlib level, rendered as
    ``event=... key=value`` text and passed through the stdlib root logger,
    where a ``LoguruHandler`` forwards them to the sinks. Nothing is written
    to stdout, which belongs to command output.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Lowest level that reaches the sinks (DEBUG, INFO, WARNING, ERROR)
        log_file: Text log path for interactive mode, ``logs/meetup-members.log`` if None
    """
    mode = mode or detect_logging_mode()
    log_level = log_level.upper()

    _route_stdlib(getattr(logging, log_level, logging.INFO))
    _route_structlog()

    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        try:
            LOG_DIR.mkdir(exist_ok=True)
        except OSError:
            # No writable log directory
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stderr, level=log_level, serialize=True)
    else:
        _add_file_sinks(log_level, log_file)


def _route_stdlib(level: int) -> None:
    root = logging.getLogger()
    root.handlers = [handler for handler in root.handlers if not isinstance(handler, LoguruHandler)]
    root.addHandler(LoguruHandler())
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def _route_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Reconfiguring must reach loggers created at import time
        cache_logger_on_first_use=False,
    )


def _add_file_sinks(log_level: str, log_file: str | None) -> None:
    logger.add(
        log_file or str(LOG_DIR / LOG_FILES["main"]),
        level=log_level,
        format=TEXT_FORMAT,
        rotation="10 MB",
        retention="7 days",
    )
    logger.add(
        LOG_DIR / LOG_FILES["json"],
        level=log_level,
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )
    logger.add(LOG_DIR / LOG_FILES["errors"], level="ERROR", format=TEXT_FORMAT, backtrace=True, diagnose=True)


def get_logging_status() -> dict[str, Any]:
    """Describe where logs go for the current environment."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "level": logging.getLevelName(logging.getLogger().getEffectiveLevel()),
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {key: str(LOG_DIR / name) if interactive else None for key, name in LOG_FILES.items()},
        "third_party_suppressed": [*QUIET_LOGGERS, "py.warnings"],
    }
