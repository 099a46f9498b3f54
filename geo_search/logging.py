"""Structured logging configuration for geo-search."""

import logging
import sys
from typing import Any, TextIO

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ("faker", "shapely")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for geo-search.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Where records go. Defaults to stdout; scripts that print results on
        stdout pass ``sys.stderr``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("geo_search").setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def search_extra(query: str, country: str, **counts: int) -> dict[str, Any]:
    """Build the ``extra`` mapping for a search summary record.

    ``JsonFormatter`` lifts these fields to the top level of the JSON line,
    so a log pipeline can chart result counts per query or country.

    Usage::

        logger.debug("Search done", extra=search_extra("resen", "any", candidates=10))
    """
    return {"extra": {"query": query, "country": country, **counts}}


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Place names are written unescaped, so Cyrillic and Greek queries stay
    readable in the output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
