#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error formatting utilities for displaying conversion and I/O errors.
Provides user-friendly error messages with context and suggestions.
"""

import textwrap
from typing import Any, Dict, List

from csvToJson.errors import (
    CsvToJsonError, ClipboardUnavailableError, ColumnMismatchError,
    ConfigurationError, ConversionError, DownloadError, FileOperationError
)


class ErrorFormatter:
    """Format errors into user-friendly messages with context and suggestions."""
    
    # ANSI color codes for terminal output
    COLORS = {
        'reset': '\033[0m',
        'red': '\033[31m',
        'green': '\033[32m',
        'cyan': '\033[36m',
        'bold': '\033[1m',
    }
    
    TITLES = {
        ConversionError: "Conversion Error",
        ClipboardUnavailableError: "Clipboard Unavailable",
        DownloadError: "Download Failed",
        ConfigurationError: "Configuration Error",
        FileOperationError: "File Operation Error",
    }
    
    def __init__(self, use_colors: bool = True, terminal_width: int = 80):
        """
        Initialize the error formatter.
        
        Args:
            use_colors: Whether to use ANSI colors in output
            terminal_width: Terminal width for text wrapping
        """
        self.use_colors = use_colors
        self.terminal_width = terminal_width
    
    def format(self, error: Any) -> str:
        """
        Format an error into a user-friendly message.
        
        Args:
            error: Error object or exception
            
        Returns:
            Formatted error message with context and suggestions
        """
        if isinstance(error, CsvToJsonError):
            return self._format_error(error)
        elif isinstance(error, Exception):
            return self._format_exception(error)
        else:
            return self._join([
                self._format_header("Unknown Error"),
                self._format_message(str(error)),
            ])
    
    def _apply_color(self, text: str, color: str) -> str:
        """Apply ANSI color if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"
    
    def _wrap_text(self, text: str, indent: int = 0) -> str:
        return textwrap.fill(
            text,
            width=self.terminal_width - indent,
            initial_indent=' ' * indent,
            subsequent_indent=' ' * indent
        )
    
    def _format_header(self, error_type: str) -> str:
        return self._apply_color(f"ERROR: {error_type}", 'bold')
    
    def _format_message(self, message: str) -> str:
        return self._apply_color(self._wrap_text(message, indent=2), 'red')
    
    def _format_context(self, context_items: Dict[str, Any]) -> str:
        """Format error context information."""
        if not context_items:
            return ""
            
        lines = [self._apply_color("Context:", 'bold')]
        for key, value in context_items.items():
            key_str = self._apply_color(f"{key}:", 'cyan')
            lines.append(f"  {key_str} {value}")
        
        return "\n".join(lines)
    
    def _format_suggestions(self, suggestions: List[str]) -> str:
        """Format error fix suggestions."""
        if not suggestions:
            return ""
            
        lines = [self._apply_color("Suggestions:", 'bold')]
        for i, suggestion in enumerate(suggestions, 1):
            bullet = self._apply_color(f"{i}.", 'green')
            suggestion_text = self._wrap_text(suggestion, indent=5)
            lines.append(f"  {bullet} {suggestion_text[5:]}")
        
        return "\n".join(lines)
    
    def _title_for(self, error: CsvToJsonError) -> str:
        for error_class, title in self.TITLES.items():
            if isinstance(error, error_class):
                return title
        return error.__class__.__name__.replace("Error", " Error").strip()
    
    def _format_error(self, error: CsvToJsonError) -> str:
        """Format package errors with their context and suggestions."""
        context: Dict[str, Any] = {}
        if getattr(error, "kind", None):
            context["Kind"] = error.kind
        if getattr(error, "file_path", None):
            context["File"] = error.file_path
        if getattr(error, "row_number", None) is not None:
            context["Row"] = error.row_number
        if isinstance(error, ColumnMismatchError):
            context["Columns"] = f"{error.observed} found, {error.expected} expected"
        
        suggestions = error.get_suggestions() if hasattr(error, 'get_suggestions') else []
        
        return self._join([
            self._format_header(self._title_for(error)),
            self._format_message(error.message),
            self._format_context(context),
            self._format_suggestions(suggestions)
        ])
    
    def _format_exception(self, error: Exception) -> str:
        """Format standard Python exceptions."""
        return self._join([
            self._format_header(f"Python {error.__class__.__name__}"),
            self._format_message(str(error)),
            self._format_suggestions([
                "This is an unexpected error in the application",
                "Try running with --log-level debug for more detailed information",
            ])
        ])
    
    @staticmethod
    def _join(parts: List[str]) -> str:
        return "\n\n".join(filter(bool, parts))


def format_error(error: Any, use_colors: bool = True) -> str:
    """
    Format an error for user-friendly display.
    
    Args:
        error: Error object or exception
        use_colors: Whether to use colors in the output
        
    Returns:
        Formatted error message
    """
    return ErrorFormatter(use_colors=use_colors).format(error)


def get_error_summary(error: Any) -> Dict[str, Any]:
    """
    Get a structured summary of an error for logging or display.
    
    Args:
        error: Error object or exception
        
    Returns:
        Dictionary with error information
    """
    summary: Dict[str, Any] = {
        "type": type(error).__name__,
        "message": str(error),
    }
    
    if kind := getattr(error, "kind", None):
        summary["kind"] = kind
    if file_path := getattr(error, "file_path", None):
        summary["file"] = file_path
    if isinstance(error, ConversionError) and error.row_number is not None:
        summary["row"] = error.row_number
    if isinstance(error, ColumnMismatchError):
        summary["observed"] = error.observed
        summary["expected"] = error.expected
        
    return summary
