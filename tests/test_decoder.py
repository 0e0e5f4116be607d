"""
Tests for the best-effort GS1 decoder.

Tests cover:
- Symbology prefix handling
- GS separator handling
- Scan order preservation
- Skipping of undecodable bytes
- Product code extraction for scans
"""

import pytest

from gs1_label import DecodeOptions, decode_gs1, extract_product_code, format_gs1_human_readable
from gs1_label.core.decoder import strip_symbology_identifier

GS = "\x1d"
GTIN_ELEMENT = "0107501234567890"


class TestSymbology:
    """Tests for symbology identifier stripping."""

    @pytest.mark.parametrize("prefix", ["]C1", "]e0", "]d2", "]Q3", "]J1"])
    def test_known_prefixes(self, prefix):
        """Test every known identifier is stripped."""
        assert format_gs1_human_readable(prefix + GTIN_ELEMENT) == "(01)07501234567890"

    def test_strip_returns_identifier(self):
        """Test the stripped identifier is reported."""
        assert strip_symbology_identifier("]d2" + GTIN_ELEMENT) == (GTIN_ELEMENT, "]d2")
        assert strip_symbology_identifier(GTIN_ELEMENT) == (GTIN_ELEMENT, None)

    def test_keep_symbology_misreads(self):
        """Test that without stripping the prefix bytes shift the scan."""
        options = DecodeOptions(strip_symbology=False)
        assert format_gs1_human_readable("]C1" + GTIN_ELEMENT, options) == "(10)107501234567890"


class TestScanning:
    """Tests for element scanning."""

    def test_fixed_elements(self):
        """Test consecutive fixed-length AIs."""
        raw = GTIN_ELEMENT + "17251231" + "11240110"
        assert format_gs1_human_readable(raw) == "(01)07501234567890 (17)251231 (11)240110"

    def test_variable_with_separator(self):
        """Test variable-length AIs end at GS."""
        raw = GTIN_ELEMENT + "10ABC" + GS + "21XYZ"
        assert format_gs1_human_readable(raw) == "(01)07501234567890 (10)ABC (21)XYZ"

    def test_variable_runs_to_end(self):
        """Test the last variable-length AI runs to end of input."""
        raw = GTIN_ELEMENT + "21SERIAL-0001"
        assert format_gs1_human_readable(raw) == "(01)07501234567890 (21)SERIAL-0001"

    def test_scan_order_preserved(self):
        """Test output follows input order, not canonical order."""
        raw = "21XYZ" + GS + GTIN_ELEMENT
        assert format_gs1_human_readable(raw) == "(21)XYZ (01)07501234567890"

    def test_skips_undecodable_bytes(self):
        """Test leading garbage is skipped one character at a time."""
        assert format_gs1_human_readable("##" + GTIN_ELEMENT) == "(01)07501234567890"

    def test_stray_separators_skipped(self):
        """Test a leading GS does not stop the scan."""
        assert format_gs1_human_readable(GS + GTIN_ELEMENT) == "(01)07501234567890"

    def test_truncated_fixed_element(self):
        """Test a fixed-length AI at end of input takes what is left."""
        assert format_gs1_human_readable("01123") == "(01)123"

    @pytest.mark.parametrize("raw", ["", None, "zzz", GS])
    def test_nothing_decodable(self, raw):
        """Test input without AIs yields an empty string."""
        assert format_gs1_human_readable(raw) == ""

    def test_separator_aliases(self):
        """Test textual separators can stand in for GS."""
        raw = GTIN_ELEMENT + "10ABC<GS>21XYZ"
        options = DecodeOptions(separator_aliases=("<GS>",))

        assert format_gs1_human_readable(raw, options) == "(01)07501234567890 (10)ABC (21)XYZ"
        assert format_gs1_human_readable(raw) == "(01)07501234567890 (10)ABC<GS>21XYZ"

    def test_element_details(self):
        """Test decoded element attributes."""
        elements = decode_gs1("]C1" + GTIN_ELEMENT + "10L1")

        assert [e.ai for e in elements] == ["01", "10"]
        assert elements[0].title == "GTIN"
        assert elements[0].start_index == 0
        assert elements[1].value == "L1"
        assert elements[1].start_index == 16


class TestExtractProductCode:
    """Tests for product code extraction from scans."""

    def test_gs1_scan(self):
        """Test GTIN is taken from a GS1 scan."""
        assert extract_product_code("]C1" + GTIN_ELEMENT + "17251231") == "07501234567890"
        assert extract_product_code(GTIN_ELEMENT + "10ABC") == "07501234567890"

    def test_plain_ean(self):
        """Test a plain EAN-13 is returned unchanged."""
        assert extract_product_code("7501234567890") == "7501234567890"
        assert extract_product_code("0123456789012") == "0123456789012"

    def test_free_text(self):
        """Test SKU-style text is trimmed and returned."""
        assert extract_product_code("  SKU-001 ") == "SKU-001"
        assert extract_product_code("") == ""
        assert extract_product_code(None) == ""
