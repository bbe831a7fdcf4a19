#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ConverterSession:
Holds the state of one input/output conversion session (the CSV being edited,
the last JSON output and the last error) and wires the converter to its
collaborators: file loading, clipboard, downloads and user notifications.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from csvToJson.config import CSV_ENCODING, DEFAULT_DELAY, DEFAULT_INDENT
from csvToJson.converter import convert, read_csv_file
from csvToJson.errors import (
    ClipboardUnavailableError, ConversionError, DownloadError,
    FileOperationError, InvalidFileError
)
from csvToJson.exporters import JsonExporter, copy_to_clipboard
from csvToJson.highlight import highlight
from csvToJson.validators import check_csv_filename

# Configure logger
logger = logging.getLogger(__name__)

SAMPLE_CSV = """name,age,email,city,occupation
John Doe,28,john.doe@email.com,New York,Software Engineer
Jane Smith,34,jane.smith@email.com,Los Angeles,Product Manager
Mike Johnson,25,mike.johnson@email.com,Chicago,Data Analyst
Sarah Williams,31,sarah.williams@email.com,San Francisco,UX Designer
David Brown,29,david.brown@email.com,Seattle,DevOps Engineer"""


class Notification(BaseModel):
    """A short message shown to the user after an action."""
    title: str
    description: str
    variant: str = "default"


def log_notification(notification: Notification) -> None:
    """Default notification sink: write the notification to the log."""
    if notification.variant == "destructive":
        logger.error("%s: %s", notification.title, notification.description)
    else:
        logger.info("%s: %s", notification.title, notification.description)


class ConverterSession:
    """
    State and actions of a single conversion session.
    
    A failed conversion stores its message in ``error`` and clears
    ``json_output``; clipboard and download failures only produce a
    notification and leave the session state alone.
    """
    
    def __init__(
        self,
        csv_input: str = SAMPLE_CSV,
        exporter: Optional[JsonExporter] = None,
        notify: Callable[[Notification], None] = log_notification,
        clipboard: Optional[Callable[[str], None]] = None,
        indent: int = DEFAULT_INDENT,
        delay: float = DEFAULT_DELAY,
        encoding: str = CSV_ENCODING
    ):
        """
        Initialize a session.
        
        Args:
            csv_input: Initial CSV text (default: the sample data)
            exporter: Exporter used for downloads (default: current directory)
            notify: Callable receiving user notifications
            clipboard: Callable that copies text to the clipboard (default: system clipboard)
            indent: JSON indentation
            delay: Pause before conversion, in seconds
            encoding: Encoding used when loading files
        """
        self.csv_input = csv_input
        self.json_output = ""
        self.error = ""
        self.is_loading = False
        self.exporter = exporter or JsonExporter()
        self.notify = notify
        self.clipboard = clipboard
        self.indent = indent
        self.delay = delay
        self.encoding = encoding
        
    @property
    def can_convert(self) -> bool:
        """Whether there is input to convert and no conversion is running."""
        return not self.is_loading and bool(self.csv_input.strip())
        
    @property
    def has_output(self) -> bool:
        return bool(self.json_output) and not self.error
        
    def parse(self) -> bool:
        """
        Convert the current input.
        
        Returns:
            True on success, False if the conversion failed
        """
        self.is_loading = True
        self.error = ""
        
        try:
            if self.delay:
                time.sleep(self.delay)
            self.json_output = convert(self.csv_input, indent=self.indent)
        except ConversionError as e:
            logger.debug("Conversion failed (%s): %s", e.kind, e.message)
            self.error = e.message
            self.json_output = ""
            return False
        finally:
            self.is_loading = False
            
        self.notify(Notification(
            title="Success!",
            description="CSV has been successfully converted to JSON"
        ))
        return True
        
    def copy(self) -> bool:
        """
        Copy the current output to the clipboard.
        
        Returns:
            True if the output was copied
        """
        try:
            (self.clipboard or copy_to_clipboard)(self.json_output)
        except ClipboardUnavailableError as e:
            logger.debug("Clipboard copy failed: %s", e.message)
            self.notify(Notification(
                title="Error",
                description="Failed to copy to clipboard",
                variant="destructive"
            ))
            return False
            
        self.notify(Notification(title="Copied!", description="JSON output copied to clipboard"))
        return True
        
    def download(self, filename: Optional[str] = None) -> Optional[Path]:
        """
        Save the current output as a .json file.
        
        Args:
            filename: File name (default: the exporter's download file name)
            
        Returns:
            Path to the saved file, or None if saving failed
        """
        try:
            path = self.exporter.download(self.json_output, filename)
        except DownloadError as e:
            self.notify(Notification(title="Error", description=e.message, variant="destructive"))
            return None
            
        self.notify(Notification(title="Downloaded!", description="JSON file has been downloaded"))
        return path
        
    def load_file(self, path: Union[str, Path]) -> bool:
        """
        Replace the input with the contents of a CSV file.
        
        Args:
            path: Path to a .csv file
            
        Returns:
            True if the file was loaded
        """
        path = Path(path)
        try:
            self.csv_input = load_csv_upload(path, self.encoding)
        except FileOperationError as e:
            self.notify(Notification(title="Error", description=e.message, variant="destructive"))
            return False
            
        self.json_output = ""
        self.error = ""
        logger.info("Loaded %s", path.name)
        return True
        
    def reset(self) -> None:
        """Restore the sample input and clear output and error."""
        self.csv_input = SAMPLE_CSV
        self.json_output = ""
        self.error = ""
        
    def render(self, style: str = "html") -> str:
        """Return the current output with syntax highlighting applied."""
        return highlight(self.json_output, style)


def load_csv_upload(path: Path, encoding: str = CSV_ENCODING) -> str:
    """
    Read a file selected as conversion input.
    
    Args:
        path: Path to the file
        encoding: Text encoding
        
    Returns:
        The file's full text
        
    Raises:
        InvalidFileError: If the file does not have a .csv extension
        FileOperationError: If the file cannot be read or decoded
    """
    if (error := check_csv_filename(path.name)):
        raise InvalidFileError(error, file_path=str(path))
    return read_csv_file(path, encoding)
