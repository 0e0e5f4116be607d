"""
GS1-128 Label Data Encoder

Builds GS1-128 element strings (GTIN, batch/lot, serial, dates, counts,
SSCC) for inventory labels and renders existing element strings as
human-readable (AI)value text.

Based on GS1 General Specifications and the GS1 Barcode Syntax Dictionary.
"""

from .core.ai_registry import (
    AI_ORDER,
    AIDescriptor,
    get_ai_config,
    get_ai_for_field,
    list_supported_ais,
)
from .core.codecs import (
    calculate_check_digit,
    format_date_to_gs1,
    format_gs1_to_date,
    has_valid_check_digit,
    normalize_to_gtin14,
)
from .core.encoder import EncodingResult, generate_gs1_code
from .core.decoder import (
    DecodedElement,
    DecodeOptions,
    decode_gs1,
    extract_product_code,
    format_gs1_human_readable,
)
from .validators.validators import validate_gs1_params, ValidationResult
from .formatters.json_formatter import format_gs1_to_dict, format_gs1_to_json
from .templates import LABEL_TEMPLATES, LabelTemplate, apply_template, get_template

__version__ = "1.0.0"
__all__ = [
    "AI_ORDER",
    "AIDescriptor",
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
    "validate_gs1_params",
    "ValidationResult",
    "format_gs1_to_dict",
    "format_gs1_to_json",
    "LABEL_TEMPLATES",
    "LabelTemplate",
    "apply_template",
    "get_template",
]
