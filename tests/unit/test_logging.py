"""Tests for logging setup."""

import json
import logging

from peakxml.io.files import parse_bytes
from peakxml.ui.logging import close_logging, log, setup_logging


class TestSetupLogging:
    """Tests for file logging."""

    def test_disabled_without_target(self, tmp_path):
        """Without file or verbose flag nothing is configured."""
        setup_logging(None)
        log("nothing happens")
        close_logging()
        assert list(tmp_path.iterdir()) == []

    def test_text_log(self, tmp_path, peaklist_xml):
        """Library debug messages reach the log file."""
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(log_file, level=logging.DEBUG)
        parse_bytes(peaklist_xml)
        log("done", level="warning")
        close_logging()

        content = log_file.read_text()
        assert "peakxml.io.mapper" in content
        assert "Parsed <PeakList> with 1 peak list(s)" in content
        assert "WARNING | peakxml | done" in content

    def test_json_log(self, tmp_path):
        """A .json log file gets one JSON record per line."""
        log_file = tmp_path / "run.json"
        setup_logging(log_file)
        log("hello")
        close_logging()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert records[-1]["message"] == "hello"
        assert records[-1]["level"] == "INFO"

    def test_close_detaches_handlers(self, tmp_path):
        """After closing, the peakxml logger has no handlers left."""
        setup_logging(tmp_path / "run.log")
        close_logging()
        assert logging.getLogger("peakxml").handlers == []
