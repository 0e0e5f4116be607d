"""
Core encoding and decoding modules for the GS1 label encoder.
"""

from .ai_registry import (
    AI_ORDER,
    AIDescriptor,
    AIRegistry,
    REGISTRY,
    get_ai_config,
    get_ai_for_field,
    list_supported_ais,
)
from .codecs import (
    calculate_check_digit,
    format_date_to_gs1,
    format_gs1_to_date,
    has_valid_check_digit,
    normalize_to_gtin14,
)
from .encoder import EncodingResult, generate_gs1_code
from .decoder import (
    DecodedElement,
    DecodeOptions,
    decode_gs1,
    extract_product_code,
    format_gs1_human_readable,
    strip_symbology_identifier,
)

__all__ = [
    "AI_ORDER",
    "AIDescriptor",
    "AIRegistry",
    "REGISTRY",
    "get_ai_config",
    "get_ai_for_field",
    "list_supported_ais",
    "calculate_check_digit",
    "format_date_to_gs1",
    "format_gs1_to_date",
    "has_valid_check_digit",
    "normalize_to_gtin14",
    "EncodingResult",
    "generate_gs1_code",
    "DecodedElement",
    "DecodeOptions",
    "decode_gs1",
    "extract_product_code",
    "format_gs1_human_readable",
    "strip_symbology_identifier",
]
