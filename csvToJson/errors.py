#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error definitions for the csvToJson package.
Custom exception classes for better error handling and reporting.
Uses Python 3.10+ type annotations.
"""

from typing import Optional, List


class CsvToJsonError(Exception):
    """Base exception class for all csvToJson errors."""
    
    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConversionError(CsvToJsonError):
    """Exception for CSV to JSON conversion errors."""
    
    kind = "ConversionError"
    
    def __init__(self, message: str, file_path: Optional[str] = None,
                 row_number: Optional[int] = None, *args, **kwargs):
        self.file_path = file_path
        self.row_number = row_number
        super().__init__(message, *args, **kwargs)
        
    def get_suggestions(self) -> List[str]:
        """
        Get suggestions for fixing conversion errors.
        
        Returns:
            List of suggestion strings
        """
        suggestions = []
        
        if self.file_path:
            suggestions.append(f"Check the contents of {self.file_path}")
            
        if self.row_number is not None:
            suggestions.append(f"Error occurs at row {self.row_number}")
            
        if not suggestions:
            suggestions.append("Check the CSV format: a header line followed by comma-separated rows")
            suggestions.append("Quoted fields and alternate delimiters are not supported")
            
        return suggestions


class EmptyInputError(ConversionError):
    """The CSV input contains nothing but whitespace."""
    
    kind = "EmptyInput"
    
    def get_suggestions(self) -> List[str]:
        return [
            "Paste CSV text or load a .csv file before converting",
            "Use --sample to try the built-in sample data",
        ]


class InsufficientRowsError(ConversionError):
    """The CSV input has a header but no data rows."""
    
    kind = "InsufficientRows"
    
    def get_suggestions(self) -> List[str]:
        return [
            "Add at least one data row below the header line",
            "Make sure rows are separated by newlines",
        ]


class ColumnMismatchError(ConversionError):
    """A data row has a different number of fields than the header."""
    
    kind = "ColumnMismatch"
    
    def __init__(self, message: str, row_number: int, observed: int, expected: int,
                 file_path: Optional[str] = None, *args, **kwargs):
        self.observed = observed
        self.expected = expected
        super().__init__(message, file_path, row_number, *args, **kwargs)
        
    def get_suggestions(self) -> List[str]:
        suggestions = [
            f"Row {self.row_number} should have exactly {self.expected} comma-separated values",
        ]
        if self.observed > self.expected:
            suggestions.append("Values containing commas are split into extra columns; remove the commas")
        else:
            suggestions.append("Add empty values (e.g. 'a,,c') for missing cells")
        return suggestions


class ClipboardUnavailableError(CsvToJsonError):
    """Exception raised when the system clipboard cannot be written."""
    
    kind = "ClipboardUnavailable"
    
    def get_suggestions(self) -> List[str]:
        return [
            "Install a clipboard backend (xclip, xsel or wl-clipboard on Linux)",
            "Use --output to write the JSON to a file instead",
        ]


class DownloadError(CsvToJsonError):
    """Exception raised when the JSON output cannot be saved."""
    
    kind = "DownloadFailure"
    
    def __init__(self, message: str, file_path: Optional[str] = None, *args, **kwargs):
        self.file_path = file_path
        super().__init__(message, *args, **kwargs)
        
    def get_suggestions(self) -> List[str]:
        return [
            "Check that the export directory exists and is writable",
            "Choose a different file name with --output",
        ]


class ConfigurationError(CsvToJsonError):
    """Exception for configuration-related errors."""
    
    def get_suggestions(self) -> List[str]:
        """
        Get suggestions for fixing configuration errors.
        
        Returns:
            List of suggestion strings
        """
        suggestions = []
        
        if "download_filename" in self.message:
            suggestions.append("The download file name must end with '.json'")
            
        elif "indent" in self.message:
            suggestions.append("Set indent to a non-negative integer (default: 2)")
            
        elif "encoding" in self.message:
            suggestions.append("Set encoding to a codec name Python knows, such as utf-8 or latin-1")
            
        elif "config file" in self.message.lower():
            suggestions.append("Check that the config file exists and has correct permissions")
            suggestions.append("Use --config option to specify an alternate config file")
            
        if not suggestions:
            suggestions.append("Check your configuration settings and CSVTOJSON_* environment variables")
            suggestions.append("Run with --log-level debug for more detailed information")
            
        return suggestions


class FileOperationError(CsvToJsonError):
    """Exception for file operation errors."""
    
    def __init__(self, message: str, file_path: Optional[str] = None, *args, **kwargs):
        self.file_path = file_path
        super().__init__(message, *args, **kwargs)
        
    def get_suggestions(self) -> List[str]:
        """
        Get suggestions for fixing file operation errors.
        
        Returns:
            List of suggestion strings
        """
        suggestions = []
        
        if "permission denied" in self.message.lower():
            suggestions.append("Check file permissions")
            suggestions.append("Ensure you have read/write access to the file")
            
        elif "no such file" in self.message.lower() or "not found" in self.message.lower():
            suggestions.append("Verify the file path is correct")
            suggestions.append("Check that the file exists")
            
        elif "is a directory" in self.message.lower():
            suggestions.append("Expected a file but found a directory")
            suggestions.append("Specify a file path, not a directory")
            
        elif "decode" in self.message.lower():
            suggestions.append("Save the file as UTF-8 text")
            
        if not suggestions:
            suggestions.append("Check the file path and permissions")
            suggestions.append("Ensure the directory exists and is accessible")
            
        return suggestions


class InvalidFileError(FileOperationError):
    """Exception raised when a file that is not a CSV file is loaded."""
    
    def get_suggestions(self) -> List[str]:
        return [
            "Select a file with a .csv extension",
        ]
