"""
GS1 Element String Decoder

Best-effort decoding of a raw GS1 data string into (AI)value groups for
display. The scan never fails: bytes that do not start a known AI are
skipped one at a time. The result is advisory only and is not meant to
rebuild a field map exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import GROUP_SEPARATOR, SYMBOLOGY_IDENTIFIERS
from .ai_registry import REGISTRY
from .codecs import is_ascii_digits

logger = logging.getLogger(__name__)


@dataclass
class DecodeOptions:
    """
    Configuration options for decoding.

    Attributes:
        strip_symbology: Remove a leading symbology identifier (]C1, ]d2, ...)
        separator_aliases: Text tokens to treat as GS, e.g. "<GS>" typed by hand
    """
    strip_symbology: bool = True
    separator_aliases: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class DecodedElement:
    """
    A decoded GS1 element.

    Attributes:
        ai: Application Identifier code
        title: Human-readable name of the AI
        value: Value as found in the data string
        start_index: Position of the AI in the scanned text
    """
    ai: str
    title: str
    value: str
    start_index: int = 0

    def human_readable(self) -> str:
        return f"({self.ai}){self.value}"


def strip_symbology_identifier(raw: str) -> Tuple[str, Optional[str]]:
    """
    Remove a leading symbology identifier.

    Returns:
        (remaining text, stripped identifier or None)
    """
    for prefix in SYMBOLOGY_IDENTIFIERS:
        if raw.startswith(prefix):
            return raw[len(prefix):], prefix
    return raw, None


def _prepare(raw: Optional[str], options: DecodeOptions) -> str:
    text = raw or ""
    if options.strip_symbology:
        text, identifier = strip_symbology_identifier(text)
        if identifier:
            logger.debug(
                "Stripped symbology identifier %s (%s)",
                identifier,
                SYMBOLOGY_IDENTIFIERS[identifier],
            )
    for alias in options.separator_aliases:
        if alias:
            text = text.replace(alias, GROUP_SEPARATOR)
    return text


def decode_gs1(
    raw: Optional[str],
    options: Optional[DecodeOptions] = None,
) -> List[DecodedElement]:
    """
    Decode a GS1 data string into elements, in scan order.

    Fixed-length AIs take exactly their registry length (less if the input
    ends early). Variable-length AIs run to the next GS or the end of input.

    Args:
        raw: Data string, optionally prefixed by a symbology identifier
        options: DecodeOptions; defaults strip the symbology identifier

    Returns:
        Decoded elements; never raises on malformed input
    """
    options = options or DecodeOptions()
    text = _prepare(raw, options)

    elements: List[DecodedElement] = []
    pos = 0
    while pos < len(text):
        entry = REGISTRY.find_match(text, pos)
        if entry is None:
            logger.debug("Skipping undecodable character %r at index %d", text[pos], pos)
            pos += 1
            continue

        start = pos + len(entry.code)
        if entry.fixed_length:
            end = min(start + entry.length, len(text))
            next_pos = end
        else:
            end = text.find(GROUP_SEPARATOR, start)
            if end == -1:
                end = len(text)
            next_pos = end + 1

        elements.append(DecodedElement(
            ai=entry.code,
            title=entry.title,
            value=text[start:end],
            start_index=pos,
        ))
        pos = next_pos

    return elements


def format_gs1_human_readable(
    raw: Optional[str],
    options: Optional[DecodeOptions] = None,
) -> str:
    """
    Render a raw GS1 data string as "(AI)value" groups joined by spaces.

    Example:
        >>> format_gs1_human_readable("]C101075012345678901725123121A")
        '(01)07501234567890 (17)251231 (21)A'
    """
    return " ".join(element.human_readable() for element in decode_gs1(raw, options))


def extract_product_code(scan: Optional[str]) -> str:
    """
    Product code to look up for a scanned barcode.

    Returns the GTIN-14 from AI (01) when the scan is a GS1 element string
    carrying one, otherwise the scan text itself, trimmed. A scan counts as
    GS1 only if an AI starts at its first character, so plain EAN/UPC
    codes come back unchanged.
    """
    text = (scan or "").strip()
    elements = decode_gs1(text)
    if not elements or elements[0].start_index != 0:
        return text
    for element in elements:
        if element.ai == "01" and len(element.value) == 14 and is_ascii_digits(element.value):
            return element.value
    return text
