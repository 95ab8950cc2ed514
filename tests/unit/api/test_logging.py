"""Tests for the loguru setup."""

import json
import logging

from loguru import logger

from src.specials_api.api.utils.app_startup import configure_logging
from src.specials_api.runtime.config.config_data import ConfigData, LoggingConfig


def _configure_file_sink(tmp_path, fmt: str):
    log_file = tmp_path / "logs" / "app.log"
    configure_logging(
        ConfigData(logging=LoggingConfig(file=str(log_file), format=fmt))
    )
    return log_file


def test_stdlib_records_reach_file_sink(tmp_path):
    log_file = _configure_file_sink(tmp_path, "plain")
    try:
        logging.getLogger("some.library").warning("hello from stdlib")
        logger.complete()

        assert "hello from stdlib" in log_file.read_text()
    finally:
        configure_logging(ConfigData())


def test_json_format_writes_one_document_per_line(tmp_path):
    log_file = _configure_file_sink(tmp_path, "json")
    try:
        with logger.contextualize(request_id="req-1"):
            logger.info("structured")
        logger.complete()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        entry = next(r for r in records if r["record"]["message"] == "structured")
        assert entry["record"]["extra"]["request_id"] == "req-1"
    finally:
        configure_logging(ConfigData())


def test_uvicorn_access_records_dropped(tmp_path):
    log_file = _configure_file_sink(tmp_path, "plain")
    try:
        logging.getLogger("uvicorn.access").critical("GET / 200")
        logger.complete()

        assert "GET / 200" not in log_file.read_text()
    finally:
        configure_logging(ConfigData())
