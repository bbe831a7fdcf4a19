"""
Validation of output options and uploaded files.
Uses Python 3.10 type annotations and Pydantic v2 for schema validation.
"""

import codecs
from typing import Any, Optional
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from csvToJson.errors import ConfigurationError


class OutputOptions(BaseModel):
    """Options controlling how converted JSON is rendered and saved."""
    indent: int = Field(2, ge=0, description="JSON indentation in spaces")
    encoding: str = Field("utf-8", min_length=1, description="Encoding for reading and writing files")
    download_filename: str = Field("converted-data.json", description="File name used for downloads")
    delay: float = Field(0.0, ge=0, description="Pause before conversion, in seconds")
    
    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding '{value}'")
        return value
    
    @field_validator('download_filename')
    @classmethod
    def validate_download_filename(cls, value: str) -> str:
        """The download file name must be a bare name with a .json extension."""
        if not value.lower().endswith(".json"):
            raise ValueError("must end with '.json'")
        if "/" in value or "\\" in value:
            raise ValueError("must be a file name, not a path")
        return value


class CsvUpload(BaseModel):
    """A file selected as conversion input."""
    filename: str = Field(..., min_length=1)
    
    @field_validator('filename')
    @classmethod
    def validate_csv_extension(cls, value: str) -> str:
        if not value.lower().endswith(".csv"):
            raise ValueError("Please select a valid CSV file")
        return value


def _first_error(error: ValidationError) -> str:
    """Format the first validation error as 'location: message'."""
    errors = error.errors()
    if not errors:
        return "Unknown validation error"
    first = errors[0]
    location = ".".join(str(loc) for loc in first["loc"])
    return f"{location}: {first['msg']}"


def validate_output_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate output options.
    
    Args:
        options: Mapping of option names to values
        
    Returns:
        The validated options as a plain dict
        
    Raises:
        ConfigurationError: If any option is invalid
    """
    try:
        return OutputOptions(**options).model_dump()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid output option {_first_error(e)}")


def check_csv_filename(filename: str) -> Optional[str]:
    """
    Check that a file name looks like a CSV file.
    
    Args:
        filename: Name of the selected file
        
    Returns:
        An error message string if invalid, or None if valid
    """
    try:
        CsvUpload(filename=filename)
        return None
    except ValidationError:
        return "Please select a valid CSV file"
