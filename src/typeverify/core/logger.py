import logging
import sys
from typing import Optional

from typeverify.models.settings import LibrarySettings

PACKAGE_LOGGER = "typeverify"


class _PackageHandlerMarker(logging.Filter):
    """Tags the handler installed by configure_logging so it is only added once."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _find_package_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for h in logger.handlers:
        if any(isinstance(f, _PackageHandlerMarker) for f in h.filters):
            return h
    return None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler to the typeverify logger.

    The root logger is left alone; applications keep control of their own
    logging setup. When ``level`` is omitted it comes from
    ``LibrarySettings.from_env()`` (TYPEVERIFY_LOG_LEVEL, default WARNING).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    settings = LibrarySettings.from_env() if level is None else LibrarySettings(log_level=level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level))

    if _find_package_handler(logger) is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter())
        handler.addFilter(_PackageHandlerMarker())
        logger.addHandler(handler)
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a logger namespaced under ``typeverify``; no handlers are installed."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
