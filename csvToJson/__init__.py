"""
csvToJson: convert CSV text into formatted JSON.
"""

from csvToJson.converter import CSVConverter, coerce_cell, convert, csv_to_records, parse_line
from csvToJson.errors import (
    ColumnMismatchError, ConversionError, CsvToJsonError,
    EmptyInputError, InsufficientRowsError
)

__version__ = "0.1.0"

__all__ = [
    "CSVConverter",
    "ColumnMismatchError",
    "ConversionError",
    "CsvToJsonError",
    "EmptyInputError",
    "InsufficientRowsError",
    "coerce_cell",
    "convert",
    "csv_to_records",
    "parse_line",
]
