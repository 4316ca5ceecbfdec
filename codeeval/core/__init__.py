"""Core functionality module."""

from codeeval.core.constants import FormattingConstants
from codeeval.core.extractor import extract_json, parse_records

__all__ = [
    "FormattingConstants",
    "extract_json",
    "parse_records",
]
