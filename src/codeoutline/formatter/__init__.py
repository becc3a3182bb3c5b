"""Formatter package for rendering outlines."""

from .formats import (
    Formatter,
    OutputFormat,
    format_ascii,
    format_json,
    format_yaml,
    format_llmtext,
    validate_format,
)

__all__ = [
    "Formatter",
    "OutputFormat",
    "format_ascii",
    "format_json",
    "format_yaml",
    "format_llmtext",
    "validate_format",
]
