"""
GS1-128 Element String Encoder

Builds the data string a GS1-128 symbol encodes, plus its human-readable
interpretation, from a map of semantic fields.

Key GS1 Rules:
- Variable-length AIs SHALL be delimited by FNC1/GS unless they are the last element
- FNC1 is transmitted as <GS> (ASCII 29, 0x1D)
- Fixed-length AIs do not require separators
- Element order is fixed by AI_ORDER so output is deterministic
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import GROUP_SEPARATOR, SSCC_LENGTH
from ..validators.validators import normalize_params, parse_count, validate_gs1_params
from .ai_registry import AI_ORDER, AIDescriptor, REGISTRY
from .codecs import format_date_to_gs1, normalize_to_gtin14

logger = logging.getLogger(__name__)


@dataclass
class EncodingResult:
    """
    Result of encoding a field map.

    Attributes:
        code: Data string with GS between variable-length elements, None on errors
        human_readable: "(AI)value" groups joined by spaces, None on errors
        errors: Validation errors; non-empty means nothing was encoded
        warnings: Non-blocking notices (check digit, date window)
    """
    code: Optional[str] = None
    human_readable: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "human_readable": self.human_readable,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _encode_sscc(value: Any) -> Optional[str]:
    return str(value).strip().zfill(SSCC_LENGTH)


def _encode_text(value: Any) -> Optional[str]:
    return str(value)


def _encode_count(value: Any) -> Optional[str]:
    count = parse_count(value)
    return None if count is None else str(count)


# Value transform per AI; a None result means the field is left out
VALUE_ENCODERS: Dict[str, Callable[[Any], Optional[str]]] = {
    "00": _encode_sscc,
    "01": normalize_to_gtin14,
    "02": normalize_to_gtin14,
    "10": _encode_text,
    "11": format_date_to_gs1,
    "13": format_date_to_gs1,
    "15": format_date_to_gs1,
    "17": format_date_to_gs1,
    "21": _encode_text,
    "30": _encode_count,
    "37": _encode_count,
}


def collect_elements(fields: Dict[str, Any]) -> List[Tuple[AIDescriptor, str]]:
    """
    Walk AI_ORDER and return (descriptor, encoded value) for each present field.

    Args:
        fields: Field map already passed through normalize_params()
    """
    elements: List[Tuple[AIDescriptor, str]] = []
    for code in AI_ORDER:
        entry = REGISTRY.get(code)
        if entry.field_name not in fields:
            continue
        value = VALUE_ENCODERS[code](fields[entry.field_name])
        if value is None:
            continue
        elements.append((entry, value))
    return elements


def join_elements(elements: List[Tuple[AIDescriptor, str]]) -> Tuple[str, str]:
    """
    Assemble the data string and the human-readable string.

    Returns:
        (data string, human-readable string)
    """
    wire: List[str] = []
    readable: List[str] = []
    last = len(elements) - 1

    for i, (entry, value) in enumerate(elements):
        wire.append(entry.code + value)
        if not entry.fixed_length and i < last:
            wire.append(GROUP_SEPARATOR)
        readable.append(f"({entry.code}){value}")

    return "".join(wire), " ".join(readable)


def generate_gs1_code(
    params: Optional[Dict[str, Any]],
    template: Optional[str] = None,
) -> EncodingResult:
    """
    Encode a field map as a GS1-128 element string.

    Args:
        params: Field map, e.g. {"gtin": "7501234567890", "expirationDate": "2025-12-31"}
        template: Optional label template key whose required fields are enforced

    Returns:
        EncodingResult; on validation errors code and human_readable are None

    Example:
        >>> result = generate_gs1_code({"gtin": "7501234567890", "serial": "A"})
        >>> result.human_readable
        '(01)07501234567890 (21)A'
    """
    validation = validate_gs1_params(params, template=template)
    if not validation.valid:
        return EncodingResult(
            errors=list(validation.errors),
            warnings=list(validation.warnings),
        )

    elements = collect_elements(normalize_params(params))
    code, human_readable = join_elements(elements)
    logger.debug("Encoded %d GS1 elements: %s", len(elements), human_readable)

    return EncodingResult(
        code=code,
        human_readable=human_readable,
        warnings=list(validation.warnings),
    )
