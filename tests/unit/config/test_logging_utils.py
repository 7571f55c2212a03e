"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rpsprites.core.config import AppConfig
from rpsprites.core.config import configure_logging as configure_logging_from_config
from rpsprites.core.utils.logging import StructuredJSONFormatter, configure_logging


def test_structured_formatter_emits_json() -> None:
    record = logging.LogRecord(
        name="rpsprites.core.generator",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Wrote %s",
        args=("fire.png",),
        exc_info=None,
    )
    record.output = "fire.png"

    entry = json.loads(StructuredJSONFormatter().format(record))

    assert entry["level"] == "INFO"
    assert entry["message"] == "Wrote fire.png"
    assert entry["context"]["logger_name"] == "rpsprites.core.generator"
    assert entry["context"]["output"] == "fire.png"


def test_configure_logging_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(level="debug", filename=str(log_file))

    logging.getLogger("rpsprites.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "hello" in log_file.read_text(encoding="utf-8")
    configure_logging(level="WARNING")


def test_configured_log_file(tmp_path: Path) -> None:
    """logging.filename in the config routes records to that file."""
    log_file = tmp_path / "rpsprites.log"
    config = AppConfig.model_validate({"logging": {"level": "INFO", "filename": str(log_file)}})

    configure_logging_from_config(config)
    logging.getLogger("rpsprites.test").info("generated fire.png")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "generated fire.png" in log_file.read_text(encoding="utf-8")
    configure_logging(level="WARNING")
