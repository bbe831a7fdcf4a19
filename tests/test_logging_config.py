"""
Tests for the logging configuration.
"""

import io
import json
import logging

import pytest

from csvToJson.logging_config import ConsoleFormatter, JSONFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="converted %d rows", args=(3,), level=logging.INFO, **extra):
    record = logging.LogRecord("csvToJson.converter", level, __file__, 10, message, args, None)
    record.__dict__.update(extra)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""
    
    def test_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))
        
        assert data["level"] == "INFO"
        assert data["message"] == "converted 3 rows"
        assert data["logger"] == "csvToJson.converter"
        assert "timestamp" in data
    
    def test_extra_attributes(self):
        data = json.loads(JSONFormatter(include_timestamp=False).format(make_record(file="a.csv")))
        assert data["file"] == "a.csv"
        assert "timestamp" not in data
        assert "args" not in data


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""
    
    def test_no_colours_off_tty(self):
        formatter = ConsoleFormatter(use_colors=True, stream=io.StringIO())
        text = formatter.format(make_record())
        assert "\033[" not in text
        assert "INFO [csvToJson.converter] converted 3 rows" in text


class TestConfigureLogging:
    """Tests for configure_logging()."""
    
    def test_console_stream(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="debug", stream=stream)
        
        logging.getLogger("csvToJson.test").info("hello")
        
        assert restore_root_logger.level == logging.DEBUG
        assert "hello" in stream.getvalue()
    
    def test_json_output(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level=logging.WARNING, json_output=True, stream=stream)
        
        logging.getLogger("csvToJson.test").info("hidden")
        logging.getLogger("csvToJson.test").warning("shown")
        
        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["shown"]
    
    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(level="info", log_file=str(log_file), stream=io.StringIO())
        
        logging.getLogger("csvToJson.test").info("to file")
        for handler in restore_root_logger.handlers:
            handler.flush()
            
        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert entries[-1]["message"] == "to file"
