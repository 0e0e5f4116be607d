"""
Validation modules for the GS1 label encoder.
"""

from .validators import (
    validate_gs1_params,
    normalize_params,
    parse_count,
    is_present,
    ValidationResult,
    ValidationIssue,
    ErrorCode,
    CSET82,
)

__all__ = [
    "validate_gs1_params",
    "normalize_params",
    "parse_count",
    "is_present",
    "ValidationResult",
    "ValidationIssue",
    "ErrorCode",
    "CSET82",
]
