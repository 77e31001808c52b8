"""Logging helpers for batch runs."""

from __future__ import annotations

import logging
from pathlib import Path


PACKAGE_LOGGER = "diameter_s6a"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: int | str | None = logging.INFO,
    log_paths: list[str] | None = None,
) -> logging.Logger:
    """Set the package log level and attach console/file handlers once.

    The console handler is skipped when the host process already configured
    the root logger; records still propagate to it.
    """
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(parse_level(level))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    has_console = any(type(handler) is logging.StreamHandler for handler in package.handlers)
    if not logging.getLogger().handlers and not has_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        package.addHandler(console)

    attached = {
        Path(handler.baseFilename).resolve()
        for handler in package.handlers
        if isinstance(handler, logging.FileHandler)
    }
    for entry in log_paths or ():
        path = Path(entry).resolve()
        if path in attached:
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package.addHandler(file_handler)
        attached.add(path)
    return package


def parse_level(value: str | int | None, default: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    text = str(value or "").strip().upper()
    if not text:
        return default
    level = logging.getLevelName(text)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value}")
    return level
