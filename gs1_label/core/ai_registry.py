"""
AI Registry for the GS1 label encoder

Static table of the Application Identifiers this package can emit and
decode, written in GS1 Barcode Syntax Dictionary notation and parsed once
at import time into immutable descriptors.

Reference: https://ref.gs1.org/tools/gs1-barcode-syntax-resource/syntax-dictionary/
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class AIDescriptor:
    """
    A single supported GS1 Application Identifier.

    Attributes:
        code: The Application Identifier code (2-3 digits)
        field_name: Semantic field name used in encoding requests
        title: Human-facing name, used for messages and display only
        length: Exact length for fixed AIs, maximum length for variable AIs
        fixed_length: True if the value is concatenated without separator
        data_type: 'N' for numeric, 'X' for alphanumeric (CSET 82)
        check_digit: True if the last digit is a mod-10 check digit
        date_format: 'YYMMDD' for date AIs, None otherwise
    """
    code: str
    field_name: str
    title: str
    length: int
    fixed_length: bool
    data_type: str = "X"
    check_digit: bool = False
    date_format: Optional[str] = None

    @property
    def is_numeric(self) -> bool:
        return self.data_type == "N"

    def to_dict(self) -> Dict[str, object]:
        return {
            "code": self.code,
            "field_name": self.field_name,
            "title": self.title,
            "length": self.length,
            "fixed_length": self.fixed_length,
            "data_type": self.data_type,
        }


# AI    Field               Specification      Title
RAW_AI_REGISTRY = """
00      sscc                N18,csum           # SSCC
01      gtin                N14,csum           # GTIN
02      content             N14,csum           # Content GTIN
10      lot                 X..20              # Batch/Lot Number
11      production_date     N6,yymmdd          # Production Date
13      packaging_date      N6,yymmdd          # Packaging Date
15      best_before_date    N6,yymmdd          # Best Before Date
17      expiration_date     N6,yymmdd          # Expiry Date
21      serial              X..20              # Serial Number
30      var_count           N..8               # Variable Count
37      count               N..8               # Count of Trade Items
"""

# Canonical emission order for composite codes
AI_ORDER: Tuple[str, ...] = (
    "00",  # SSCC
    "01",  # GTIN
    "02",  # content
    "17",  # expiration
    "15",  # best before
    "13",  # packaging
    "11",  # production
    "10",  # lot
    "21",  # serial
    "37",  # count
    "30",  # variable count
)


def _parse_syntax_spec(spec: str) -> Tuple[str, int, bool, List[str]]:
    """
    Parse a GS1 Syntax Dictionary specification.

    Examples:
        "N14,csum" -> ('N', 14, True, ['csum'])
        "X..20" -> ('X', 20, False, [])
        "N6,yymmdd" -> ('N', 6, True, ['yymmdd'])

    Returns:
        (data_type, length, fixed_length, linters)
    """
    parts = spec.split(",")
    type_len = parts[0]
    linters = parts[1:]

    data_type = type_len[0]
    len_spec = type_len[1:]

    if ".." in len_spec:
        return data_type, int(len_spec.replace("..", "")), False, linters
    return data_type, int(len_spec), True, linters


def _parse_raw_registry(raw: str) -> Dict[str, AIDescriptor]:
    entries: Dict[str, AIDescriptor] = {}
    for line in raw.strip().splitlines():
        body, _, title = line.partition("#")
        code, field_name, spec = body.split()
        data_type, length, fixed, linters = _parse_syntax_spec(spec)
        entries[code] = AIDescriptor(
            code=code,
            field_name=field_name,
            title=title.strip(),
            length=length,
            fixed_length=fixed,
            data_type=data_type,
            check_digit="csum" in linters,
            date_format="YYMMDD" if "yymmdd" in linters else None,
        )
    return entries


class AIRegistry:
    """
    Read-only collection of AI descriptors.

    Lookups are by exact code or by semantic field name. The underlying
    mappings are exposed only through ``MappingProxyType``.
    """

    def __init__(self, entries: Dict[str, AIDescriptor]):
        self._entries: Mapping[str, AIDescriptor] = MappingProxyType(dict(entries))
        self._by_field: Mapping[str, AIDescriptor] = MappingProxyType(
            {entry.field_name: entry for entry in entries.values()}
        )

    def get(self, code: str) -> Optional[AIDescriptor]:
        """Get descriptor by exact AI code."""
        return self._entries.get(code)

    def for_field(self, field_name: str) -> Optional[AIDescriptor]:
        return self._by_field.get(field_name)

    def find_match(self, text: str, start: int = 0) -> Optional[AIDescriptor]:
        """
        Find the AI starting at position 'start'.

        Tries a 2-character code first, then a 3-character code.
        """
        for size in (2, 3):
            candidate = text[start:start + size]
            if len(candidate) < size:
                break
            entry = self._entries.get(candidate)
            if entry is not None:
                return entry
        return None

    def __contains__(self, code: str) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def all_entries(self) -> Mapping[str, AIDescriptor]:
        return self._entries


REGISTRY = AIRegistry(_parse_raw_registry(RAW_AI_REGISTRY))


def get_ai_config(ai_code: str) -> Optional[AIDescriptor]:
    """Return the descriptor for an AI code, or None if unsupported."""
    return REGISTRY.get(ai_code)


def get_ai_for_field(field_name: str) -> Optional[AIDescriptor]:
    """Return the descriptor carrying a semantic field, or None."""
    return REGISTRY.for_field(field_name)


def list_supported_ais() -> List[AIDescriptor]:
    """All supported AIs in canonical emission order."""
    return [REGISTRY.get(code) for code in AI_ORDER]
