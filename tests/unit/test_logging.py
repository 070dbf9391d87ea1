"""Tests for logging configuration and helpers."""

import json
import logging
from io import StringIO

import structlog

from slcsp_app.logging.config import (
    configure_logging,
    get_logger,
    get_trace_logger,
    log_phase_summary,
)


class TestConfigureLogging:
    """Test structlog configuration"""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.basicConfig(force=True)

    def test_json_output_to_stream(self):
        stream = StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)

        get_logger("slcsp_app.test").info("Phase completed", records=3)

        entry = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert entry["event"] == "Phase completed"
        assert entry["records"] == 3
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_debug_filtered_at_info(self):
        stream = StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)

        get_trace_logger("slcsp_app.test").debug("Ambiguous zip code", zipcode="54923")

        assert stream.getvalue() == ""

    def test_trace_logger_at_debug(self):
        stream = StringIO()
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False, stream=stream)

        get_trace_logger("slcsp_app.test").debug("Ambiguous zip code", zipcode="54923")

        entry = json.loads(stream.getvalue().strip())
        assert entry["subsystem"] == "trace"
        assert entry["zipcode"] == "54923"
        assert "timestamp" not in entry

    def test_caller_information(self):
        stream = StringIO()
        configure_logging(level="INFO", format_json=True, include_caller=True, stream=stream)

        get_logger("slcsp_app.test").info("Phase completed")

        entry = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert entry["filename"] == "test_logging.py"
        assert isinstance(entry["lineno"], int)

    def test_no_caller_information_by_default(self):
        stream = StringIO()
        configure_logging(level="INFO", format_json=True, stream=stream)

        get_logger("slcsp_app.test").info("Phase completed")

        entry = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert "filename" not in entry
        assert "lineno" not in entry


class TestLogPhaseSummary:
    """Test the phase summary helper"""

    def test_binds_phase_fields(self, mock_logger):
        log_phase_summary(mock_logger, "zip_mapping", "zips.csv", 8, {"zip_codes": 6, "rate_areas": 7})

        mock_logger.bind.assert_any_call(phase="zip_mapping", source="zips.csv", records=8)
        mock_logger.bind.assert_any_call(zip_codes=6, rate_areas=7)
        mock_logger.info.assert_called_once_with("Phase completed")

    def test_without_context(self, mock_logger):
        log_phase_summary(mock_logger, "plan_ingestion", "plans.csv", 15)

        assert mock_logger.bind.call_count == 1
        mock_logger.info.assert_called_once_with("Phase completed")
