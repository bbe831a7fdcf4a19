#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging configuration for the csvToJson package.

Logs go to stderr so converted JSON written to stdout stays clean. Console
output is coloured on a terminal; JSON formatting is available for machine
readability and is always used for log files.
"""

import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

# Determine if we're in a production environment
IS_PRODUCTION = os.environ.get("ENVIRONMENT", "").lower() == "production"

DEFAULT_LOG_LEVEL = logging.INFO

# Attributes every LogRecord has; anything else was passed via `extra`
_STANDARD_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    GRAY = "\033[37m"


class JSONFormatter(logging.Formatter):
    """
    Log formatter that emits one JSON object per record.
    """
    def __init__(self, include_timestamp: bool = True) -> None:
        super().__init__()
        self.include_timestamp = include_timestamp
        
    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.
        
        Args:
            record: The log record to format
            
        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno
        }
        
        if self.include_timestamp:
            log_data["timestamp"] = datetime.fromtimestamp(record.created).isoformat()
            
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }
            
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS:
                log_data[key] = value
                
        return json.dumps(log_data, default=str, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """
    Log formatter for console output with coloured level names.
    """
    DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
    
    LEVEL_COLORS = {
        "DEBUG": Colors.GRAY,
        "INFO": Colors.GREEN,
        "WARNING": Colors.YELLOW,
        "ERROR": Colors.RED,
        "CRITICAL": Colors.MAGENTA
    }
    
    def __init__(self, use_colors: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Initialize the console formatter.
        
        Args:
            use_colors: Whether to use colors in the output
            stream: Stream the handler writes to; colours are only used on a TTY
        """
        super().__init__(fmt=self.DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        stream = stream or sys.stderr
        self.use_colors = use_colors and hasattr(stream, "isatty") and stream.isatty()
        
    def format(self, record: logging.LogRecord) -> str:
        # Clone the record to avoid modifying the original
        record_copy = logging.makeLogRecord(record.__dict__)
        
        if self.use_colors:
            color = self.LEVEL_COLORS.get(record_copy.levelname, "")
            if color:
                record_copy.levelname = f"{color}{record_copy.levelname}{Colors.RESET}"
                
        return super().format(record_copy)


def configure_logging(
    level: int | str = DEFAULT_LOG_LEVEL,
    json_output: bool = False,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configure the logging system for the application.
    
    Args:
        level: Logging level (name or number)
        json_output: Whether to output logs in JSON format
        log_file: Optional file to write logs to
        stream: Console stream (default: stderr)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), DEFAULT_LOG_LEVEL)
        
    stream = stream or sys.stderr
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    
    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ConsoleFormatter(use_colors=not IS_PRODUCTION, stream=stream))
        
    root_logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file).absolute()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        except OSError as e:
            root_logger.error("Error setting up log file %s: %s", log_file, str(e))
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            root_logger.addHandler(file_handler)
    
    root_logger.debug(
        "Logging configured: level=%s, json=%s, file=%s",
        logging.getLevelName(level),
        json_output,
        log_file or "none"
    )
