#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CSV to JSON conversion.

Converts CSV text into a pretty-printed JSON array of objects, one object per
data row, inferring numbers, booleans and nulls from each cell. Fields are split
on plain commas: quoting, escaped delimiters and embedded newlines are not
supported.

Uses Python 3.10+ type annotations.
"""

import json
import logging
import math
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

from csvToJson.config import CSV_ENCODING, CSV_PATTERN, DEFAULT_INDENT
from csvToJson.errors import (
    ColumnMismatchError, ConversionError, EmptyInputError,
    FileOperationError, InsufficientRowsError
)

# Configure logger
logger = logging.getLogger(__name__)

CellValue = int | float | bool | None | str

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Largest magnitude at which every integer is exactly representable as a float
_MAX_EXACT_FLOAT_INT = 2 ** 53


def parse_line(line: str) -> list[str]:
    """
    Split one CSV line on commas and trim each field.
    
    Args:
        line: A single line of CSV text
        
    Returns:
        list of trimmed fields
    """
    return [field.strip() for field in line.split(",")]


def _parse_number(cell: str) -> Optional[int | float]:
    """Return the numeric value of a decimal literal, or None if it is not one."""
    if _INTEGER_RE.fullmatch(cell):
        try:
            return int(cell)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            pass
    elif not _DECIMAL_RE.fullmatch(cell):
        return None

    value = float(cell)
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) <= _MAX_EXACT_FLOAT_INT:
        return int(value)
    return value


def coerce_cell(cell: str) -> CellValue:
    """
    Infer the JSON type of a trimmed cell.
    
    Precedence: number, boolean, null, string. The empty string is never a
    number; it becomes null.
    
    Args:
        cell: Trimmed cell text
        
    Returns:
        int, float, bool, None or the original string
    """
    if cell != "":
        number = _parse_number(cell)
        if number is not None:
            return number
            
    lowered = cell.lower()
    if lowered == "true" or lowered == "false":
        return lowered == "true"
    if lowered == "null" or cell == "":
        return None
    return cell


def csv_to_records(csv_text: str) -> list[dict[str, CellValue]]:
    """
    Parse CSV text into a list of records keyed by the header names.
    
    Args:
        csv_text: Raw CSV text, header on the first line
        
    Returns:
        list of dicts in input row order
        
    Raises:
        EmptyInputError: If the input is empty or whitespace only
        InsufficientRowsError: If there is no data row after the header
        ColumnMismatchError: If a row's field count differs from the header's
    """
    text = csv_text.strip()
    if not text:
        raise EmptyInputError("CSV input is empty")
        
    lines = text.split("\n")
    if len(lines) < 2:
        raise InsufficientRowsError("CSV must have at least a header row and one data row")
        
    headers = parse_line(lines[0])
    records = []
    
    for row_number, line in enumerate(lines[1:], start=2):
        values = parse_line(line)
        
        if len(values) != len(headers):
            raise ColumnMismatchError(
                f"Row {row_number} has {len(values)} columns, "
                f"but header has {len(headers)} columns",
                row_number=row_number,
                observed=len(values),
                expected=len(headers)
            )
            
        record: dict[str, CellValue] = {}
        for header, value in zip(headers, values):
            record[header] = coerce_cell(value)
        records.append(record)
        
    logger.debug("Parsed %d columns and %d rows", len(headers), len(records))
    return records


def to_json(records: Sequence[dict[str, Any]], indent: int = DEFAULT_INDENT) -> str:
    """Serialize records the way the converter outputs them."""
    return json.dumps(list(records), indent=indent, ensure_ascii=False)


def convert(csv_text: str, indent: int = DEFAULT_INDENT) -> str:
    """
    Convert CSV text into a pretty-printed JSON array of objects.
    
    Args:
        csv_text: Raw CSV text, header on the first line
        indent: JSON indentation (2 spaces by default)
        
    Returns:
        The JSON document as a string
        
    Raises:
        ConversionError: On empty input, missing data rows or a row length mismatch
    """
    return to_json(csv_to_records(csv_text), indent=indent)


def read_csv_file(csv_path: Path, encoding: str = CSV_ENCODING) -> str:
    """
    Read the full text of a CSV file.

    Args:
        csv_path: Path to the CSV file
        encoding: Text encoding; a UTF-8 byte order mark is dropped

    Returns:
        The decoded file contents

    Raises:
        FileOperationError: If the file cannot be read or decoded
    """
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"

    try:
        return csv_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileOperationError(
            f"Failed to decode {csv_path.name}: {str(e)}",
            file_path=str(csv_path)
        )
    except OSError as e:
        raise FileOperationError(
            f"Failed to read {csv_path.name}: {e.strerror or str(e)}",
            file_path=str(csv_path)
        )


class CSVConverter:
    """
    Converts CSV files on disk into JSON files.
    """
    def __init__(
        self,
        input_dir: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        csv_pattern: str = CSV_PATTERN,
        encoding: str = CSV_ENCODING,
        indent: int = DEFAULT_INDENT
    ):
        """
        Initialize CSV converter with configurable paths.
        
        Args:
            input_dir: Directory containing CSV files (defaults to the current directory)
            output_dir: Directory for output JSON files (defaults to each CSV file's directory)
            csv_pattern: Glob pattern for matching CSV files
            encoding: File encoding for reading/writing
            indent: JSON indentation
        """
        self.input_dir = input_dir or Path.cwd()
        self.output_dir = output_dir
        self.csv_pattern = csv_pattern
        self.encoding = encoding
        self.indent = indent
    
    def find_csv_files(self) -> list[Path]:
        """
        Find CSV files matching the pattern in the input directory.
        
        Returns:
            list of Path objects for matching CSV files
        """
        return sorted(self.input_dir.glob(self.csv_pattern))
    
    def convert_text(self, text: str) -> str:
        """Convert CSV text using this converter's indentation."""
        return convert(text, indent=self.indent)
    
    def convert_file(self, csv_path: Path, json_path: Optional[Path] = None) -> Path:
        """
        Convert a single CSV file to JSON.
        
        Args:
            csv_path: Path to CSV file
            json_path: Optional output JSON path (defaults to same name with .json extension)
            
        Returns:
            Path to the generated JSON file
            
        Raises:
            ConversionError: If the CSV content cannot be converted
            FileOperationError: If the CSV cannot be read or the JSON cannot be written
        """
        if json_path is None:
            json_path = (self.output_dir or csv_path.parent) / csv_path.with_suffix('.json').name
            
        text = read_csv_file(csv_path, self.encoding)
        
        try:
            output = self.convert_text(text)
        except ConversionError as e:
            e.file_path = str(csv_path)
            raise
            
        try:
            json_path.parent.mkdir(parents=True, exist_ok=True)
            json_path.write_text(output, encoding=self.encoding)
        except OSError as e:
            raise FileOperationError(
                f"Failed to write JSON file: {e.strerror or str(e)}",
                file_path=str(json_path)
            )
            
        logger.info(f"Converted {csv_path.name} -> {json_path.name}")
        return json_path

    def run(self) -> list[Path]:
        """
        Batch-convert all matching CSVs to JSON files.
        
        Returns:
            list of paths to generated JSON files
        """
        csv_files = self.find_csv_files()
        json_files = []
        
        if not csv_files:
            logger.warning(f"No CSV files found matching '{self.csv_pattern}' in {self.input_dir}")
            return []
            
        for csv_file in csv_files:
            try:
                json_path = self.convert_file(csv_file)
                json_files.append(json_path)
            except (ConversionError, FileOperationError) as e:
                logger.error(f"{csv_file.name}: {e.message}")
                
        return json_files
