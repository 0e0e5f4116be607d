"""
JSON Formatter for decoded GS1 strings

Display-oriented output:
- Human-readable field names taken from the AI registry
- Date formatting (dd/mm/yyyy)
- First occurrence wins when an AI repeats
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from ..core.ai_registry import get_ai_config
from ..core.codecs import format_gs1_to_date
from ..core.decoder import DecodeOptions, decode_gs1

logger = logging.getLogger(__name__)


def format_date_ddmmyyyy(gs1_date: str) -> str:
    """
    Format a YYMMDD value as dd/mm/yyyy.

    Values that are not valid dates are returned unchanged.
    """
    iso = format_gs1_to_date(gs1_date)
    if iso is None:
        return gs1_date
    return f"{iso[8:10]}/{iso[5:7]}/{iso[0:4]}"


def format_gs1_to_dict(
    raw: Optional[str],
    include_ai_codes: bool = False,
    options: Optional[DecodeOptions] = None,
) -> Dict[str, Any]:
    """
    Decode a GS1 data string into a {field title: value} dictionary.

    Args:
        raw: Raw data string, optionally with symbology identifier
        include_ai_codes: Add an "_ai" entry mapping titles to AI codes
        options: DecodeOptions passed to the decoder

    Example:
        >>> format_gs1_to_dict("010750123456789017251231")
        {'GTIN': '07501234567890', 'Expiry Date': '31/12/2025'}
    """
    output: Dict[str, Any] = {}
    codes: Dict[str, str] = {}

    for element in decode_gs1(raw, options):
        if element.title in output:
            logger.warning(
                "Duplicate AI (%s) at index %d ignored", element.ai, element.start_index
            )
            continue

        entry = get_ai_config(element.ai)
        if entry is not None and entry.date_format:
            value = format_date_ddmmyyyy(element.value)
        else:
            value = element.value

        output[element.title] = value
        codes[element.title] = element.ai

    if include_ai_codes:
        output["_ai"] = codes

    return output


def format_gs1_to_json(
    raw: Optional[str],
    include_ai_codes: bool = False,
    options: Optional[DecodeOptions] = None,
) -> str:
    """JSON string version of format_gs1_to_dict()."""
    return json.dumps(
        format_gs1_to_dict(raw, include_ai_codes=include_ai_codes, options=options),
        ensure_ascii=False,
        indent=2,
    )
