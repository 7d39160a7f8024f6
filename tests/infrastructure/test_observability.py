"""Structured Logging — JSON formatter surfaces plant extras."""

import json
import logging

from plants.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "plants.test", logging.WARNING, __file__, 1, "Plant %s", ("Cactus",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "plants.test"
    assert log["message"] == "Plant Cactus"
    assert "timestamp" in log


def test_json_formatter_includes_plant_extras():
    log = json.loads(JSONFormatter().format(
        _record(plant_name="Cactus", error_kind="not_found", operation=None),
    ))
    assert log["plant_name"] == "Cactus"
    assert log["error_kind"] == "not_found"
    assert "operation" not in log


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("INFO", "text")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert root.level == logging.INFO
    finally:
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
        root.setLevel(level)
