"""
Primitive codecs for GS1 element values.

- ISO calendar date <-> GS1 YYMMDD
- GTIN normalization to GTIN-14
- GS1 Mod10 check digit

None of these raise on bad data; the date and GTIN codecs return None
for input they cannot parse.
"""

from __future__ import annotations

import re
from calendar import monthrange
from datetime import date, datetime
from typing import Optional, Union

from dateutil.parser import isoparse

from ..config import CENTURY_PIVOT, GTIN_LENGTH

_NON_DIGITS = re.compile(r"[^0-9]")

DateInput = Union[str, date, datetime, None]


def parse_iso_date(value: DateInput) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return isoparse(value.strip()).date()
    except (ValueError, OverflowError):
        return None


def format_date_to_gs1(iso_date: DateInput) -> Optional[str]:
    """
    Convert an ISO calendar date to GS1 YYMMDD.

    Args:
        iso_date: ISO-8601 date string ("2025-12-31"), or a date/datetime

    Returns:
        Six-digit YYMMDD string, or None if the input does not parse

    Example:
        >>> format_date_to_gs1("2025-12-31")
        '251231'
    """
    parsed = parse_iso_date(iso_date)
    if parsed is None:
        return None
    return f"{parsed.year % 100:02d}{parsed.month:02d}{parsed.day:02d}"


def format_gs1_to_date(gs1_date: Optional[str]) -> Optional[str]:
    """
    Convert GS1 YYMMDD to an ISO date string.

    Century window: YY < 50 -> 20YY, YY >= 50 -> 19YY.
    DD=00 means the day is unspecified and resolves to the last day
    of the month.

    Returns:
        "YYYY-MM-DD", or None unless given six digits forming a real date
    """
    if not isinstance(gs1_date, str) or len(gs1_date) != 6 or not is_ascii_digits(gs1_date):
        return None

    yy = int(gs1_date[0:2])
    mm = int(gs1_date[2:4])
    dd = int(gs1_date[4:6])
    year = 2000 + yy if yy < CENTURY_PIVOT else 1900 + yy

    if mm < 1 or mm > 12:
        return None

    max_day = monthrange(year, mm)[1]
    if dd == 0:
        dd = max_day
    if dd > max_day:
        return None

    return f"{year:04d}-{mm:02d}-{dd:02d}"


def is_ascii_digits(text: str) -> bool:
    """True for a non-empty string of ASCII 0-9 only."""
    return text.isascii() and text.isdigit()


def digits_only(code: object) -> str:
    if code is None:
        return ""
    return _NON_DIGITS.sub("", str(code))


def normalize_to_gtin14(code: object) -> Optional[str]:
    """
    Normalize an EAN/UPC/GTIN to GTIN-14.

    Strips every non-digit character and left-pads with zeros, so GTIN-8,
    GTIN-12 and GTIN-13 all map to 14 digits. Longer inputs are returned
    as their digits, unpadded.

    Example:
        >>> normalize_to_gtin14("750-1234-567890")
        '07501234567890'
    """
    digits = digits_only(code)
    if not digits:
        return None
    return digits.zfill(GTIN_LENGTH)


def calculate_check_digit(code: object) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1; the rightmost
       data digit (the one next to where the check digit goes) takes 3
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Non-digit characters, including non-ASCII digits, are ignored.

    Args:
        code: Data digits only. Passing a complete code that already ends
            in its check digit shifts the weights and gives a wrong answer.

    Returns:
        Calculated check digit (0-9)
    """
    total = 0
    for i, digit in enumerate(reversed(digits_only(code))):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def has_valid_check_digit(code: object) -> bool:
    """True if the last digit of code is its correct Mod10 check digit."""
    digits = digits_only(code)
    if len(digits) < 2:
        return False
    return calculate_check_digit(digits[:-1]) == int(digits[-1])
