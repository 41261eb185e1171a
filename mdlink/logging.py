"""Logging utilities for mdlink commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "mdlink"


class ConsoleFormatter(logging.Formatter):
    """Format stderr records as ``[mdlink] LEVEL message``.

    With ``show_component`` the emitting module is named too, so verbose runs
    read ``[mdlink:detectors] DEBUG Detector url found ...``.
    """

    def __init__(self, *, show_component: bool = False) -> None:
        super().__init__("%(levelname)s %(message)s")
        self.show_component = show_component

    def format(self, record: logging.LogRecord) -> str:
        tag = _LOGGER_NAME
        if self.show_component:
            component = component_of(record.name)
            if component:
                tag = f"{_LOGGER_NAME}:{component}"
        return f"[{tag}] {super().format(record)}"


def component_of(logger_name: str) -> str:
    """Return the part of ``logger_name`` below the mdlink root logger."""
    if logger_name == _LOGGER_NAME:
        return ""
    prefix = f"{_LOGGER_NAME}."
    if logger_name.startswith(prefix):
        return logger_name[len(prefix):]
    return logger_name


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the mdlink hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send mdlink log records to stderr, and to ``log_file`` when given.

    stdout carries the converted text, which is usually piped straight into an
    editor, so the console only shows warnings unless ``verbose`` is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated main() calls in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(ConsoleFormatter(show_component=verbose))
    logger.addHandler(console)

    if log_file is not None:
        # The file records DEBUG regardless of --verbose.
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["ConsoleFormatter", "component_of", "configure_logging", "get_logger"]
