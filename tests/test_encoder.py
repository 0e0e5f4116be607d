"""
Tests for the GS1-128 encoder.

Tests cover:
- Canonical element order
- FNC1/GS placement between variable-length elements
- Fixed-length padding
- Validation short-circuit and warnings
"""

import pytest

from gs1_label import decode_gs1, format_gs1_human_readable, generate_gs1_code, get_ai_config

GS = "\x1d"


class TestScenarios:
    """Tests for end-to-end encode scenarios."""

    def test_gtin_expiry_serial(self):
        """Test GTIN + expiry + serial in canonical order."""
        result = generate_gs1_code({
            "gtin": "7501234567890",
            "expirationDate": "2025-12-31",
            "serial": "A",
        })

        assert result.errors == []
        assert result.human_readable == "(01)07501234567890 (17)251231 (21)A"
        assert result.code == "0107501234567890" "17251231" "21A"

    def test_gtin_only(self):
        """Test minimal request produces one fixed-length element."""
        result = generate_gs1_code({"gtin": "7501234567890"})

        assert result.code == "0107501234567890"
        assert result.human_readable == "(01)07501234567890"

    def test_decode_matches_encode(self):
        """Test decoding the data string reproduces the same groups."""
        result = generate_gs1_code({
            "gtin": "7501234567890",
            "expirationDate": "2025-12-31",
            "serial": "A",
        })

        assert format_gs1_human_readable(result.code) == result.human_readable


class TestSeparators:
    """Tests for GS placement."""

    def test_variable_followed_by_variable(self):
        """Test lot then serial are separated by GS."""
        result = generate_gs1_code({"gtin": "12345678901231", "lot": "ABC", "serial": "XYZ"})

        assert result.code == "0112345678901231" "10ABC" + GS + "21XYZ"
        assert result.human_readable == "(01)12345678901231 (10)ABC (21)XYZ"

    def test_last_variable_has_no_separator(self):
        """Test a trailing variable-length element is not terminated."""
        result = generate_gs1_code({
            "gtin": "12345678901231",
            "lot": "ABC",
            "expiration_date": "2026-03-31",
        })

        assert result.code == "0112345678901231" "17260331" "10ABC"
        assert not result.code.endswith(GS)

    def test_serial_then_count(self):
        """Test serial gets GS before count, count stays unterminated."""
        result = generate_gs1_code({"gtin": "12345678901231", "serial": "S1", "count": "007"})

        assert result.code == "0112345678901231" "21S1" + GS + "377"
        assert result.human_readable == "(01)12345678901231 (21)S1 (37)7"

    def test_human_readable_has_no_separator(self):
        """Test GS never leaks into the human-readable text."""
        result = generate_gs1_code({
            "gtin": "12345678901231",
            "lot": "L1",
            "serial": "S1",
            "count": 5,
            "varCount": 3,
        })

        assert GS not in result.human_readable
        assert result.code.count(GS) == 3

    @pytest.mark.parametrize(
        "params",
        [
            {"gtin": "12345678901231", "lot": "L"},
            {"gtin": "12345678901231", "serial": "S"},
            {"gtin": "12345678901231", "count": 1},
            {"gtin": "12345678901231", "varCount": 99999999},
            {"gtin": "12345678901231", "lot": "L", "serial": "S", "count": 2, "varCount": 3},
        ],
    )
    def test_never_ends_with_separator(self, params):
        """Test the data string never ends with GS."""
        result = generate_gs1_code(params)
        assert result.code
        assert not result.code.endswith(GS)


class TestOrderingAndPadding:
    """Tests for canonical order and fixed-length values."""

    FULL_REQUEST = {
        "varCount": "4",
        "count": "12",
        "serial": "SN1",
        "lot": "LOT9",
        "productionDate": "2024-01-10",
        "packagingDate": "2024-01-11",
        "bestBeforeDate": "2025-06-30",
        "expirationDate": "2025-12-31",
        "content": "12345670",
        "gtin": "12345670",
        "sscc": "123",
    }

    def test_canonical_order(self):
        """Test element order ignores request key order."""
        result = generate_gs1_code(self.FULL_REQUEST)
        ais = [element.ai for element in decode_gs1(result.code)]

        assert ais == ["00", "01", "02", "17", "15", "13", "11", "10", "21", "37", "30"]

    def test_fixed_length_values(self):
        """Test fixed-length values have exactly the registry length."""
        result = generate_gs1_code(self.FULL_REQUEST)

        for element in decode_gs1(result.code):
            entry = get_ai_config(element.ai)
            if entry.fixed_length:
                assert len(element.value) == entry.length, element.ai

    def test_sscc_padding(self):
        """Test SSCC is left-padded to 18 digits."""
        result = generate_gs1_code(self.FULL_REQUEST)
        assert result.human_readable.startswith("(00)000000000000000123 (01)00000012345670")

    def test_dates_compressed(self):
        """Test dates are emitted as YYMMDD."""
        result = generate_gs1_code(self.FULL_REQUEST)
        assert "(17)251231 (15)250630 (13)240111 (11)240110" in result.human_readable


class TestAbsentFields:
    """Tests for fields left out of the request."""

    def test_blank_values_ignored(self):
        """Test empty strings and None contribute nothing."""
        result = generate_gs1_code({
            "gtin": "7501234567890",
            "lot": "",
            "serial": None,
            "expirationDate": "",
            "count": "",
        })

        assert result.code == "0107501234567890"

    def test_unknown_keys_ignored(self):
        """Test keys outside the registry are ignored."""
        result = generate_gs1_code({"gtin": "7501234567890", "color": "red"})
        assert result.human_readable == "(01)07501234567890"


class TestErrors:
    """Tests for rejected requests."""

    def test_empty_request(self):
        """Test nothing is encoded when validation fails."""
        result = generate_gs1_code({})

        assert result.code is None
        assert result.human_readable is None
        assert not result.ok
        assert any("GTIN" in error for error in result.errors)

    def test_non_ascii_gtin_rejected(self):
        """Test a GTIN typed in Arabic-Indic digits never reaches the data string."""
        arabic_gtin = "\u0667\u0665\u0660\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669\u0660"
        result = generate_gs1_code({"gtin": arabic_gtin})
        assert result.code is None
        assert "GTIN must have between 8 and 14 digits (got 0)" in result.errors

    def test_non_ascii_sscc_rejected(self):
        """Test SSCC digits must be ASCII."""
        result = generate_gs1_code({"gtin": "7501234567890", "sscc": "\u0661\u0662\u0663"})
        assert result.code is None
        assert "SSCC must contain only digits" in result.errors

    def test_invalid_count(self):
        """Test out-of-range count blocks encoding."""
        result = generate_gs1_code({"gtin": "7501234567890", "count": 0})
        assert result.code is None
        assert len(result.errors) == 1

    def test_template_requirements(self):
        """Test template-required fields are enforced."""
        result = generate_gs1_code({"gtin": "7501234567890"}, template="LOGISTICS")
        assert result.code is None
        assert "Count of Trade Items is required for the Logistics template" in result.errors

    def test_warnings_carried(self):
        """Test check-digit warnings come through on success."""
        result = generate_gs1_code({"gtin": "7501234567890"})
        assert result.ok
        assert result.warnings

    def test_to_dict(self):
        """Test dictionary form."""
        data = generate_gs1_code({"gtin": "06285096000842"}).to_dict()
        assert data == {
            "code": "0106285096000842",
            "human_readable": "(01)06285096000842",
            "errors": [],
            "warnings": [],
        }
