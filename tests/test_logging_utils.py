import json
import logging

from src.attendance_tracker.attendance_tracker.logging_utils import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="attendance_tracker.attendance.service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Check-in %s",
        args=("e-1",),
        exc_info=None,
    )
    record.work_date = "2025-03-12"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "Check-in e-1"
    assert payload["work_date"] == "2025-03-12"
    assert "msg" not in payload


def test_setup_logging_configures_package_logger():
    setup_logging("warning", json_output=True)

    logger = logging.getLogger("src.attendance_tracker.attendance_tracker")
    assert logger.level == logging.WARNING
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
