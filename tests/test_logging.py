"""Tests for logging setup and the JSON formatter."""
import json
import logging

import pytest

from web.logging_config import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("web.test", logging.INFO, __file__, 1, "GET /health -> 200", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_includes_request_fields():
    entry = json.loads(JSONFormatter().format(
        make_record(method="GET", path="/health", status=200, duration=0.004)
    ))

    assert entry["message"] == "GET /health -> 200"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "web.test"
    assert entry["method"] == "GET"
    assert entry["path"] == "/health"
    assert entry["status"] == 200
    assert entry["duration"] == 0.004


def test_formatter_omits_absent_request_fields():
    entry = json.loads(JSONFormatter().format(make_record()))

    assert not {"method", "path", "status", "duration"} & entry.keys()


def test_setup_logging_writes_json_file(settings, tmp_path, restore_root_logger):
    configured = settings.model_copy(update={"log_dir": str(tmp_path / "logs"), "log_level": "debug"})

    log_file = setup_logging(configured)
    logging.getLogger("web.test").warning("disk almost full", extra={"path": "/api/trips"})
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[-1]["message"] == "disk almost full"
    assert lines[-1]["path"] == "/api/trips"


def test_setup_logging_replaces_previous_handlers(settings, tmp_path, restore_root_logger):
    configured = settings.model_copy(update={"log_dir": str(tmp_path)})

    setup_logging(configured)
    setup_logging(configured)

    assert len(restore_root_logger.handlers) == 2
