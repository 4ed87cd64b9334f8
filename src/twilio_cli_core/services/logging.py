"""User-facing status channel built on :mod:`logging`.

Every command logs through the ``twilio_cli_core`` logger. Its
``ConsoleHandler`` writes formatted records to a ``rich`` console bound to
stderr, so stdout stays reserved for command output.
"""
from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

LOGGER_NAME = "twilio_cli_core"

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "none": logging.CRITICAL + 10,
}

err_console = Console(stderr=True)

_LEVEL_STYLES = {
    logging.WARNING: ("Warning", "yellow"),
    logging.ERROR: ("Error", "red"),
    logging.CRITICAL: ("Error", "red"),
}


class ConsoleHandler(logging.Handler):
    """Render log records on a ``rich`` console.

    Warnings and errors get a coloured label; everything else is printed
    as-is. Lines are never wrapped so that long remediation commands stay
    copy-pasteable.
    """

    def __init__(self, console: Console | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console or err_console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            label = _LEVEL_STYLES.get(record.levelno)
            if label is None:
                text = Text(message)
            else:
                name, color = label
                text = Text.assemble((f"» {name}: ", color), message)
            self.console.print(text, highlight=False, soft_wrap=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def get_logger() -> logging.Logger:
    """Return the package logger, attaching the console handler once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, ConsoleHandler) for h in logger.handlers):
        handler = ConsoleHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(level: str = "info") -> logging.Logger:
    """Set the package log level from a ``-l/--log-level`` value.

    Raises
    ------
    ValueError
        If *level* is not one of :data:`LOG_LEVELS`.
    """
    try:
        numeric = LOG_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
        ) from None
    logger = get_logger()
    logger.setLevel(numeric)
    return logger
