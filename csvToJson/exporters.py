#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Output sinks for converted JSON: file downloads and the system clipboard.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pyperclip

from csvToJson.config import CSV_ENCODING, DOWNLOAD_FILENAME, DOWNLOAD_MIME_TYPE
from csvToJson.errors import ClipboardUnavailableError, DownloadError

# Configure logger
logger = logging.getLogger(__name__)


class JsonExporter:
    """
    Save converted JSON to files in an export directory.
    """
    
    mime_type = DOWNLOAD_MIME_TYPE
    
    def __init__(
        self,
        export_dir: Optional[Union[str, Path]] = None,
        filename: str = DOWNLOAD_FILENAME,
        encoding: str = CSV_ENCODING
    ):
        """
        Initialize the exporter.
        
        Args:
            export_dir: Directory for saved files (default: current directory)
            filename: Default download file name
            encoding: Encoding of written files
        """
        self.export_dir = Path(export_dir) if export_dir else Path.cwd()
        self.filename = filename
        self.encoding = encoding
        
    def download(self, json_text: str, filename: Optional[str] = None) -> Path:
        """
        Write JSON text to a .json file in the export directory.
        
        Args:
            json_text: Serialized JSON to save
            filename: File name (default: the exporter's download file name)
            
        Returns:
            Path to the saved file
            
        Raises:
            DownloadError: If the name has no .json extension or the file cannot be written
        """
        filename = filename or self.filename
        if not filename.lower().endswith(".json"):
            raise DownloadError(f"Download file name must end with .json: {filename}", file_path=filename)
            
        file_path = self.export_dir / filename
        
        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(json_text, encoding=self.encoding)
        except OSError as e:
            raise DownloadError(f"Failed to save {filename}: {e.strerror or str(e)}", file_path=str(file_path))
            
        logger.info("Saved JSON to %s", file_path)
        return file_path


def copy_to_clipboard(text: str) -> None:
    """
    Copy text to the system clipboard.
    
    Args:
        text: Text to copy
        
    Raises:
        ClipboardUnavailableError: If no clipboard mechanism is available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(f"Failed to copy to clipboard: {str(e)}")
    logger.debug("Copied %d characters to clipboard", len(text))
