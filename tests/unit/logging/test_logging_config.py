"""Unit tests for logging configuration and the JSON formatter."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from vto.config.models import LoggingConfig
from vto.logging.config import configure_logging
from vto.logging.handlers import JSONFormatter, record_context


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_default_level(self) -> None:
        """Should configure info level by default."""
        configure_logging(LoggingConfig())

        assert logging.getLogger().level == logging.INFO

    def test_configure_debug_level(self) -> None:
        configure_logging(LoggingConfig(level="debug"))

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_level_case_insensitive(self) -> None:
        """Should accept level regardless of case."""
        configure_logging(LoggingConfig(level="WARNING"))

        assert logging.getLogger().level == logging.WARNING

    def test_stderr_only(self) -> None:
        """Should add a single stream handler when no file is specified."""
        configure_logging(LoggingConfig(file=None))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert not isinstance(root.handlers[0], logging.FileHandler)

    def test_replaces_existing_handlers(self) -> None:
        """Calling twice should not duplicate handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())

        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path: Path) -> None:
        """Should log to a rotating file, creating parent directories."""
        log_file = tmp_path / "logs" / "vto.log"
        configure_logging(LoggingConfig(file=log_file, max_bytes=2048, backup_count=3))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 2048
        assert handler.backupCount == 3

        logging.getLogger("vto.test").info("written to file")
        handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_file_with_stderr(self, tmp_path: Path) -> None:
        configure_logging(
            LoggingConfig(file=tmp_path / "vto.log", include_stderr=True)
        )

        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)

    def test_unwritable_file_falls_back_to_stderr(
        self, tmp_path: Path, capsys
    ) -> None:
        """A log path whose parent is a file cannot be opened."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")

        configure_logging(LoggingConfig(file=blocker / "vto.log"))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)
        assert "Could not open log file" in capsys.readouterr().err

    def test_json_format(self) -> None:
        configure_logging(LoggingConfig(format="json"))

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def _make_record(self, msg: str, *args, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="vto.transcode.selection",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg=msg,
            args=args,
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        record = self._make_record("%s handler selected", "nvenc")
        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "WARNING"
        assert entry["message"] == "nvenc handler selected"
        assert entry["logger"] == "vto.transcode.selection"
        assert entry["timestamp"].endswith("+00:00")
        assert "context" not in entry

    def test_extra_fields_in_context(self) -> None:
        record = self._make_record("built options", backend="qsv", two_pass=False)
        entry = json.loads(JSONFormatter().format(record))

        assert entry["context"] == {"backend": "qsv", "two_pass": False}

    def test_exception_included(self) -> None:
        try:
            raise ValueError("bad value")
        except ValueError:
            record = logging.LogRecord(
                name="vto",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad value" in entry["exception"]

    def test_non_serializable_context_uses_str(self) -> None:
        record = self._make_record("path", log_file=Path("/tmp/vto.log"))
        entry = json.loads(JSONFormatter().format(record))

        assert entry["context"]["log_file"] == "/tmp/vto.log"

    def test_tuple_context_serialized_as_array(self) -> None:
        record = self._make_record(
            "built options", output_options=("-vcodec h264", "-crf 23")
        )
        entry = json.loads(JSONFormatter().format(record))

        assert entry["context"]["output_options"] == ["-vcodec h264", "-crf 23"]

    def test_timestamp_has_millisecond_precision(self) -> None:
        record = self._make_record("tick")
        record.created = 0.0
        entry = json.loads(JSONFormatter().format(record))

        assert entry["timestamp"] == "1970-01-01T00:00:00.000+00:00"


class TestRecordContext:
    """Tests for record_context function."""

    def test_excludes_standard_attributes(self) -> None:
        record = logging.makeLogRecord({"msg": "x", "backend": "vaapi"})
        record.message = record.getMessage()

        assert record_context(record) == {"backend": "vaapi"}

    def test_excludes_private_attributes(self) -> None:
        record = logging.makeLogRecord({"msg": "x", "_cache": 1})
        assert record_context(record) == {}
