"""Tests for the logging helpers."""

import io
import json

import pytest
import structlog

from shlexer.core.shlex import Shlex
from shlexer.utils.logger import LibraryLogger, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_output(self):
        """Test that JSON lines carry the event and logger name."""
        stream = io.StringIO()
        configure_logging("debug", json=True, stream=stream)

        get_logger("tests").debug("something_happened", value=1)

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["event"] == "something_happened"
        assert record["logger_name"] == "shlexer.tests"
        assert record["level"] == "debug"
        assert record["value"] == 1

    def test_module_name_kept(self):
        """Test that names already under the package are not prefixed twice."""
        stream = io.StringIO()
        configure_logging("info", json=True, stream=stream)

        get_logger("shlexer.core.buffer").info("named")

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["logger_name"] == "shlexer.core.buffer"

    def test_level_filters(self):
        """Test that events below the level are dropped."""
        stream = io.StringIO()
        configure_logging("warning", stream=stream)

        get_logger("shlexer.tests").info("ignored")

        assert stream.getvalue() == ""

    def test_unknown_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError):
            configure_logging("loud")

    def test_unterminated_quote_is_logged(self):
        """Test that splitting logs unterminated quotes at debug level."""
        stream = io.StringIO()
        configure_logging("debug", json=True, stream=stream)

        list(Shlex("'open"))

        events = [json.loads(line)["event"] for line in stream.getvalue().splitlines()]
        assert "unterminated_quote" in events
        assert "buffer_grown" in events


class RecordingLogger:
    """Stand-in structlog logger that records the events it receives."""

    def __init__(self):
        self.events = []

    def info(self, event, **kw):
        self.events.append(event)


class TestUnconfigured:
    """Tests for library use when the application has not set up logging."""

    def test_get_logger_leaves_structlog_unconfigured(self):
        """Test that getting a logger does not configure structlog."""
        structlog.reset_defaults()

        log = get_logger("tests")

        assert isinstance(log, LibraryLogger)
        assert not structlog.is_configured()

    def test_library_use_leaves_structlog_unconfigured(self):
        """Test that splitting and joining keep the host's structlog defaults."""
        structlog.reset_defaults()

        s = Shlex("'open")
        list(s)
        s.reset()
        s.append_quoted("x y")
        s.join()

        assert not structlog.is_configured()

    def test_events_dropped_until_configured(self):
        """Test that events only reach structlog once it is configured."""
        recorder = RecordingLogger()
        log = LibraryLogger(recorder)
        structlog.reset_defaults()

        log.info("dropped")
        configure_logging("info")
        log.info("kept")

        assert recorder.events == ["kept"]

    def test_host_configuration_enables_events(self):
        """Test that a host structlog configuration receives library events."""
        stream = io.StringIO()
        structlog.reset_defaults()
        structlog.configure(
            processors=[structlog.processors.JSONRenderer()],
            logger_factory=structlog.PrintLoggerFactory(stream),
        )

        get_logger("tests").info("forwarded")

        assert json.loads(stream.getvalue())["event"] == "forwarded"
