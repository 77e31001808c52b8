from __future__ import annotations

import logging
from pathlib import Path

import pytest

from diameter_s6a.batch.logging_utils import PACKAGE_LOGGER, configure_logging, parse_level


@pytest.fixture
def package_logger():
    package = logging.getLogger(PACKAGE_LOGGER)
    before = list(package.handlers)
    level = package.level
    yield package
    for handler in package.handlers:
        if handler not in before:
            package.removeHandler(handler)
            handler.close()
    package.setLevel(level)


def test_parse_level_accepts_names_and_ints() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level(None) == logging.INFO
    assert parse_level("", default=logging.WARNING) == logging.WARNING


def test_parse_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="unknown log level: LOUD"):
        parse_level("LOUD")


def test_configure_logging_writes_package_records_to_file(tmp_path: Path, package_logger) -> None:
    log_path = tmp_path / "logs" / "run.log"
    configure_logging("debug", [str(log_path)])
    configure_logging("debug", [str(log_path)])
    assert package_logger.level == logging.DEBUG
    file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("diameter_s6a.batch.orchestrator").debug("row %s accepted", 7)
    file_handlers[0].flush()
    assert "[DEBUG] diameter_s6a.batch.orchestrator: row 7 accepted" in log_path.read_text(encoding="utf-8")
