"""Logging configuration for the blackjack service."""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "blackjack"


class StructuredFormatter(logging.Formatter):
    """Render records as ``key=value`` pairs joined by pipes."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        parts = [f"{k}={v}" for k, v in log_data.items() if v is not None]
        return " | ".join(parts)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that attaches context fields to every message."""

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra["extra_fields"] = {**self.extra, **extra.get("extra_fields", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context: Any) -> "ContextLogger":
        """Return a new adapter with additional context fields."""
        return ContextLogger(self.logger, {**self.extra, **context})


def setup_logging(
    level: int | str = logging.INFO,
    format_style: str = "structured",
) -> None:
    """
    Set up logging for the application.

    Args:
        level: Logging level, as an int or a name like "DEBUG"
        format_style: "structured" for key=value, "simple" for standard format
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if format_style == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """
    Get a logger with optional context fields.

    Example:
        logger = get_logger(__name__, player="0xabc")
        logger.info("Round started")  # includes player=0xabc
    """
    return ContextLogger(logging.getLogger(f"{ROOT_LOGGER}.{name}"), context)
