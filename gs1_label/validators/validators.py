"""
GS1 Encoding Request Validation

Checks a field map against the AI registry before any string assembly:
- GTIN presence and digit length
- Lot/serial length and GS1 character set (CSET 82)
- Calendar-valid dates
- Count ranges
- Template-required fields

Every violation is collected; validation never stops at the first one.
Check-digit mismatches and dates outside the decode window are reported
as warnings and do not block encoding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config import (
    CENTURY_PIVOT,
    COUNT_FIELDS,
    COUNT_MAX,
    COUNT_MIN,
    DATE_FIELDS,
    FIELD_ALIASES,
    GTIN_LENGTH,
    GTIN_MIN_DIGITS,
    MAX_TEXT_LENGTH,
    SSCC_LENGTH,
)
from ..core.ai_registry import get_ai_for_field
from ..core.codecs import (
    calculate_check_digit,
    digits_only,
    has_valid_check_digit,
    is_ascii_digits,
    parse_iso_date,
)
from ..templates import LABEL_TEMPLATES, get_template

logger = logging.getLogger(__name__)


# GS1 AI encodable character set 82
CSET82 = frozenset(
    '!"%&\'()*+,-./0123456789:;<=>?'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
    'abcdefghijklmnopqrstuvwxyz'
)


class ErrorCode(str, Enum):
    """Validation error codes."""
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    INVALID_DATE = "INVALID_DATE"
    INVALID_COUNT = "INVALID_COUNT"
    UNKNOWN_TEMPLATE = "UNKNOWN_TEMPLATE"


@dataclass
class ValidationIssue:
    code: ErrorCode
    field: str
    message: str


@dataclass
class ValidationResult:
    """Result of validating an encoding request."""
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, code: ErrorCode, field_name: str, message: str) -> None:
        self.valid = False
        self.errors.append(message)
        self.issues.append(ValidationIssue(code, field_name, message))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def is_present(value: Any) -> bool:
    """None and blank strings are absent; anything else, 0 included, is present."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def normalize_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Map camelCase form keys to field names and drop absent values.

    A snake_case key wins over its camelCase alias when both are given.
    """
    normalized: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if not is_present(value):
            continue
        name = FIELD_ALIASES.get(key, key)
        if name != key and name in normalized:
            continue
        normalized[name] = value
    return normalized


def parse_count(value: Any) -> Optional[int]:
    """Integer value of a count field, or None if it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if is_ascii_digits(text.lstrip("+-")):
            return int(text)
    return None


def _title(field_name: str) -> str:
    entry = get_ai_for_field(field_name)
    return entry.title if entry else field_name


def _validate_gtin_like(result: ValidationResult, field_name: str, value: Any) -> None:
    digits = digits_only(value)
    title = _title(field_name)
    if not GTIN_MIN_DIGITS <= len(digits) <= GTIN_LENGTH:
        result.add_error(
            ErrorCode.INVALID_LENGTH,
            field_name,
            f"{title} must have between {GTIN_MIN_DIGITS} and {GTIN_LENGTH} digits "
            f"(got {len(digits)})",
        )
    elif not has_valid_check_digit(digits):
        expected = calculate_check_digit(digits[:-1])
        result.warnings.append(
            f"{title} check digit mismatch: expected {expected}, got {digits[-1]}"
        )


def _validate_sscc(result: ValidationResult, value: Any) -> None:
    text = str(value).strip()
    if not is_ascii_digits(text):
        result.add_error(
            ErrorCode.INVALID_CHARACTERS, "sscc", "SSCC must contain only digits"
        )
    elif len(text) > SSCC_LENGTH:
        result.add_error(
            ErrorCode.INVALID_LENGTH,
            "sscc",
            f"SSCC must have at most {SSCC_LENGTH} digits (got {len(text)})",
        )
    elif len(text) == SSCC_LENGTH and not has_valid_check_digit(text):
        expected = calculate_check_digit(text[:-1])
        result.warnings.append(
            f"SSCC check digit mismatch: expected {expected}, got {text[-1]}"
        )


def _validate_text(result: ValidationResult, field_name: str, value: Any) -> None:
    text = str(value)
    title = _title(field_name)
    if len(text) > MAX_TEXT_LENGTH:
        result.add_error(
            ErrorCode.INVALID_LENGTH,
            field_name,
            f"{title} must not exceed {MAX_TEXT_LENGTH} characters (got {len(text)})",
        )
    invalid = sorted(set(text) - CSET82)
    if invalid:
        shown = "".join(invalid)
        result.add_error(
            ErrorCode.INVALID_CHARACTERS,
            field_name,
            f"{title} contains characters not allowed in GS1 data: {shown!r}",
        )


def _validate_date(result: ValidationResult, field_name: str, value: Any) -> None:
    parsed = parse_iso_date(value)
    title = _title(field_name)
    if parsed is None:
        result.add_error(
            ErrorCode.INVALID_DATE,
            field_name,
            f"{title} is not a valid date: {value!r}",
        )
        return

    year = parsed.year
    if not 1900 + CENTURY_PIVOT <= year < 2000 + CENTURY_PIVOT:
        result.warnings.append(
            f"{title} year {year} is outside {1900 + CENTURY_PIVOT}-"
            f"{1999 + CENTURY_PIVOT} and will not decode back to the same century"
        )


def _validate_count(result: ValidationResult, field_name: str, value: Any) -> None:
    count = parse_count(value)
    if count is None or not COUNT_MIN <= count <= COUNT_MAX:
        result.add_error(
            ErrorCode.INVALID_COUNT,
            field_name,
            f"{_title(field_name)} must be an integer between {COUNT_MIN} and {COUNT_MAX}",
        )


def validate_gs1_params(
    params: Optional[Dict[str, Any]],
    template: Optional[str] = None,
) -> ValidationResult:
    """
    Validate an encoding request.

    Args:
        params: Field map (snake_case or camelCase keys)
        template: Optional label template key; its required fields must be present

    Returns:
        ValidationResult with every problem found
    """
    result = ValidationResult()
    fields = normalize_params(params)

    if "gtin" not in fields:
        result.add_error(ErrorCode.MISSING_FIELD, "gtin", "GTIN is required")
    else:
        _validate_gtin_like(result, "gtin", fields["gtin"])

    if "content" in fields:
        _validate_gtin_like(result, "content", fields["content"])

    if "sscc" in fields:
        _validate_sscc(result, fields["sscc"])

    for name in ("lot", "serial"):
        if name in fields:
            _validate_text(result, name, fields[name])

    for name in DATE_FIELDS:
        if name in fields:
            _validate_date(result, name, fields[name])

    for name in COUNT_FIELDS:
        if name in fields:
            _validate_count(result, name, fields[name])

    if template:
        label_template = get_template(template)
        if label_template is None:
            result.add_error(
                ErrorCode.UNKNOWN_TEMPLATE,
                "template",
                f"Unknown label template: {template!r} "
                f"(expected one of {', '.join(LABEL_TEMPLATES)})",
            )
        else:
            for name in label_template.required:
                if name not in fields:
                    result.add_error(
                        ErrorCode.MISSING_FIELD,
                        name,
                        f"{_title(name)} is required for the "
                        f"{label_template.name} template",
                    )

    if not result.valid:
        logger.debug("Rejected GS1 request: %s", "; ".join(result.errors))

    return result
