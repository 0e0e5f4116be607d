"""
CLI interface for the GS1 label encoder.

Usage:
    python -m gs1_label encode --gtin 7501234567890 --expiration-date 2025-12-31 --serial A
    python -m gs1_label decode "]C101075012345678901725123121A"
    python -m gs1_label ais
    python -m gs1_label check-digit 03600029145
    python -m gs1_label batch labels.csv -o encoded.csv

Options:
    -v, --verbose    Debug logging on stderr
    -q, --quiet      Warnings only
    --json           Output as JSON (encode, decode, ais)
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .batch import encode_csv
from .config import GROUP_SEPARATOR
from .core.ai_registry import list_supported_ais
from .core.codecs import calculate_check_digit, digits_only
from .core.decoder import DecodeOptions, format_gs1_human_readable
from .core.encoder import EncodingResult, generate_gs1_code
from .formatters.json_formatter import format_gs1_to_json
from .log_config import setup_logging
from .templates import LABEL_TEMPLATES

logger = logging.getLogger(__name__)

ENCODE_FIELDS = [
    ("--gtin", "gtin", "GTIN-8/12/13/14 (AI 01), required"),
    ("--lot", "lot", "Batch/lot number (AI 10), max 20 characters"),
    ("--serial", "serial", "Serial number (AI 21), max 20 characters"),
    ("--expiration-date", "expiration_date", "Expiry date YYYY-MM-DD (AI 17)"),
    ("--best-before-date", "best_before_date", "Best before date YYYY-MM-DD (AI 15)"),
    ("--packaging-date", "packaging_date", "Packaging date YYYY-MM-DD (AI 13)"),
    ("--production-date", "production_date", "Production date YYYY-MM-DD (AI 11)"),
    ("--count", "count", "Count of trade items (AI 37)"),
    ("--var-count", "var_count", "Variable count (AI 30)"),
    ("--sscc", "sscc", "Serial Shipping Container Code (AI 00)"),
    ("--content", "content", "GTIN of contained items (AI 02)"),
]


def visible_separators(code: str) -> str:
    """Show GS characters as <GS> for terminal output."""
    return code.replace(GROUP_SEPARATOR, "<GS>")


def format_encoding_result(result: EncodingResult) -> str:
    """Format an encoding result for display."""
    lines = [
        "=" * 60,
        "GS1-128 Encoding Result",
        "=" * 60,
    ]

    if result.ok:
        lines.extend([
            f"Data String: {visible_separators(result.code)}",
            f"Human Readable: {result.human_readable}",
        ])
    else:
        lines.extend(["Errors:", "-" * 40])
        lines.extend(f"  {error}" for error in result.errors)

    if result.warnings:
        lines.extend(["", "Warnings:", "-" * 40])
        lines.extend(f"  {warning}" for warning in result.warnings)

    return "\n".join(lines)


def cmd_encode(args: argparse.Namespace) -> int:
    params = {
        dest: getattr(args, dest)
        for _, dest, _ in ENCODE_FIELDS
        if getattr(args, dest) is not None
    }
    result = generate_gs1_code(params, template=args.template)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_encoding_result(result))

    return 0 if result.ok else 1


def cmd_decode(args: argparse.Namespace) -> int:
    options = DecodeOptions(
        strip_symbology=not args.keep_symbology,
        separator_aliases=tuple(args.separator or ()),
    )

    if args.json:
        print(format_gs1_to_json(args.barcode, include_ai_codes=args.ai_codes, options=options))
    else:
        print(format_gs1_human_readable(args.barcode, options=options))
    return 0


def cmd_ais(args: argparse.Namespace) -> int:
    ais = list_supported_ais()
    if args.json:
        print(json.dumps([entry.to_dict() for entry in ais], indent=2, ensure_ascii=False))
        return 0

    for entry in ais:
        kind = "fixed" if entry.fixed_length else "max"
        print(f"  ({entry.code:<3}) {entry.title:<22} {entry.data_type} {kind} {entry.length}")
    return 0


def cmd_check_digit(args: argparse.Namespace) -> int:
    digits = digits_only(args.code)
    if not digits:
        print("Code must contain digits", file=sys.stderr)
        return 1

    check = calculate_check_digit(digits)
    print(f"{digits}{check}" if args.full else check)
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    try:
        df = encode_csv(args.input, output_path=args.output, template=args.template)
    except (OSError, ValueError) as exc:
        error_output = {
            "error": str(exc),
            "input": args.input,
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        return 1

    if args.output is None:
        df.to_csv(sys.stdout, index=False)

    return 0 if bool(df["valid"].all()) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gs1_label",
        description="Encode and decode GS1-128 label data strings",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Build a GS1-128 data string")
    for flag, dest, help_text in ENCODE_FIELDS:
        encode.add_argument(flag, dest=dest, default=None, help=help_text)
    encode.add_argument(
        "--template",
        choices=sorted(LABEL_TEMPLATES),
        default=None,
        help="Enforce the required fields of a label template",
    )
    encode.add_argument("--json", action="store_true", help="Output result as JSON")
    encode.set_defaults(func=cmd_encode)

    decode = subparsers.add_parser("decode", help="Render a GS1 data string as (AI)value groups")
    decode.add_argument("barcode", help="Raw barcode data")
    decode.add_argument(
        "--separator",
        action="append",
        help='Text token to treat as GS, e.g. "<GS>" (repeatable)',
    )
    decode.add_argument(
        "--keep-symbology",
        action="store_true",
        help="Do not strip a leading symbology identifier",
    )
    decode.add_argument("--json", action="store_true", help="Output fields as JSON")
    decode.add_argument(
        "--ai-codes",
        action="store_true",
        help="Include title to AI code mapping (JSON only)",
    )
    decode.set_defaults(func=cmd_decode)

    ais = subparsers.add_parser("ais", help="List supported Application Identifiers")
    ais.add_argument("--json", action="store_true", help="Output as JSON")
    ais.set_defaults(func=cmd_ais)

    check = subparsers.add_parser("check-digit", help="Calculate a GS1 Mod10 check digit")
    check.add_argument("code", help="Digits without check digit")
    check.add_argument("--full", action="store_true", help="Print the code with its check digit")
    check.set_defaults(func=cmd_check_digit)

    batch = subparsers.add_parser("batch", help="Encode every row of a CSV file")
    batch.add_argument("input", help="CSV with one column per field (gtin, lot, ...)")
    batch.add_argument("-o", "--output", default=None, help="Write results to this CSV")
    batch.add_argument(
        "--template",
        choices=sorted(LABEL_TEMPLATES),
        default=None,
        help="Enforce the required fields of a label template",
    )
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
