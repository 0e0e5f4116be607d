"""
Output formatters for the GS1 label encoder.
"""

from .json_formatter import (
    format_gs1_to_json,
    format_gs1_to_dict,
    format_date_ddmmyyyy,
)

__all__ = [
    "format_gs1_to_json",
    "format_gs1_to_dict",
    "format_date_ddmmyyyy",
]
