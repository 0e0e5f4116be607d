"""
Shared constants for the GS1 label encoder.

Single source of truth for wire-format characters, length bounds and
field name aliases used by the registry, validator, encoder and decoder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# FNC1 as transmitted by scanners: ASCII 29, Group Separator
GROUP_SEPARATOR = "\x1d"

# Symbology identifiers (ISO/IEC 15424) stripped before decoding
SYMBOLOGY_IDENTIFIERS: Mapping[str, str] = MappingProxyType({
    "]C1": "GS1-128",
    "]e0": "GS1 DataBar",
    "]d2": "GS1 DataMatrix",
    "]Q3": "GS1 QR Code",
    "]J1": "GS1 DotCode",
})

# Two-digit years below the pivot are 20YY, the rest 19YY
CENTURY_PIVOT = 50

GTIN_LENGTH = 14
GTIN_MIN_DIGITS = 8
SSCC_LENGTH = 18
MAX_TEXT_LENGTH = 20
COUNT_MIN = 1
COUNT_MAX = 99999999

DATE_FIELDS: Tuple[str, ...] = (
    "expiration_date",
    "best_before_date",
    "packaging_date",
    "production_date",
)

COUNT_FIELDS: Tuple[str, ...] = ("count", "var_count")

# Web forms post camelCase keys
FIELD_ALIASES: Mapping[str, str] = MappingProxyType({
    "expirationDate": "expiration_date",
    "productionDate": "production_date",
    "packagingDate": "packaging_date",
    "bestBeforeDate": "best_before_date",
    "varCount": "var_count",
})
