from __future__ import annotations

import io
import json

import pytest
from loguru import logger

from objectstore.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


def test_json_formatter_emits_one_document_per_record():
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, format=JSONFormatter(), level="DEBUG", colorize=False)

    logger.bind(bucket="photos").info("Bucket '{}' created", "photos")

    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "INFO"
    assert record["message"] == "Bucket 'photos' created"
    assert record["bucket"] == "photos"
    assert "serialized" not in record
    assert "exception" not in record


def test_json_formatter_includes_exception_info():
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, format=JSONFormatter(), level="DEBUG", colorize=False)

    try:
        raise ValueError("broken")
    except ValueError:
        logger.exception("failed")

    first_line = stream.getvalue().splitlines()[0]
    record = json.loads(first_line)
    assert record["exception"] == {"type": "ValueError", "value": "broken"}


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "store.log"
    setup_logging(level="DEBUG", json_format=True, log_file=log_file)

    logger.debug("hello {}", "file")
    logger.remove()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "hello file"


def test_setup_logging_respects_level(tmp_path):
    log_file = tmp_path / "store.log"
    setup_logging(level="WARNING", log_file=log_file)

    logger.info("hidden")
    logger.warning("shown")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text


def test_get_logger_binds_name():
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, format=JSONFormatter(), colorize=False)

    get_logger("objectstore.test").info("bound")

    assert json.loads(stream.getvalue())["name"] == "objectstore.test"
