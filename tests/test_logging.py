"""Tests for the JSON logging setup."""

import json
import logging

import pytest

from storage_gateway.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_emits_json_with_renamed_fields(restore_root_logger, capsys):
    setup_logging("INFO")

    logging.getLogger("storage_gateway.test").info("Bucket created", extra={"bucket": "photos"})

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "Bucket created"
    assert record["level"] == "INFO"
    assert record["logger"] == "storage_gateway.test"
    assert record["bucket"] == "photos"
    assert "timestamp" in record


def test_sdk_loggers_stay_quiet(restore_root_logger):
    setup_logging(logging.DEBUG)

    assert logging.getLogger("botocore").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").propagate is False
