"""Tests for sensor value typing."""

import math

import pytest

from knot_cloud.core.error import UnsupportedValueTypeError
from knot_cloud.data.value import SensorValue, ValueType, coerce, is_base64, parse_number


class TestNumbers:
    """Numbers are recognized first, by leading literal."""

    @pytest.mark.parametrize("text, expected", [
        ("42", 42.0),
        ("-7", -7.0),
        ("+3", 3.0),
        ("3.14", 3.14),
        (".5", 0.5),
        ("1.", 1.0),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
        ("  12  ", 12.0),
    ])
    def test_numeric_literals(self, text, expected):
        value = coerce(text)
        assert value.type is ValueType.NUMBER
        assert value.value == pytest.approx(expected)

    @pytest.mark.parametrize("text, expected", [
        ("3.14abc", 3.14),
        ("1e3x", 1000.0),
        ("1e", 1.0),
        ("0x1A", 0.0),
        ("12 volts", 12.0),
    ])
    def test_leading_prefix_is_taken(self, text, expected):
        """Trailing garbage after a numeric literal is ignored."""
        assert coerce(text) == SensorValue.number(expected)

    def test_infinity(self):
        assert coerce("Infinity").value == math.inf
        assert coerce("-Infinity").value == -math.inf

    @pytest.mark.parametrize("text", ["1234", "0000", "1abc", "9f8e"])
    def test_numbers_win_over_base64(self, text):
        """Numeric-looking Base64 is sent as a number."""
        assert is_base64(text)
        assert coerce(text).type is ValueType.NUMBER

    @pytest.mark.parametrize("text", [
        "abc", "NaN", "inf", "e5", "-", ".", "",
        "\u0661\u0662",
        "\uff11\uff12",
        "\u0663.5",
        "\u008512",
    ])
    def test_parse_number_rejects(self, text):
        assert parse_number(text) is None

    @pytest.mark.parametrize("text", ["\u0661\u0662", "\uff11\uff12", "\u0663.5"])
    def test_non_ascii_digits_are_not_numbers(self, text):
        """Only ASCII digits form a numeric literal."""
        with pytest.raises(UnsupportedValueTypeError):
            coerce(text)

    @pytest.mark.parametrize("text", ["\u00a012", "\u3000\t12", "\ufeff12", "\u2028 12"])
    def test_javascript_whitespace_is_skipped(self, text):
        assert parse_number(text) == 12

    @pytest.mark.parametrize("text, expected", [
        ("42", 42),
        ("-7", -7),
        ("1e3", 1000),
        ("4.0", 4),
    ])
    def test_integral_values_are_int(self, text, expected):
        value = coerce(text).to_wire()
        assert value == expected
        assert type(value) is int

    @pytest.mark.parametrize("text", ["2.5", "1e300", "Infinity"])
    def test_other_values_stay_float(self, text):
        assert type(coerce(text).to_wire()) is float


class TestBooleans:

    def test_true(self):
        assert coerce("true") == SensorValue.boolean(True)

    def test_false(self):
        assert coerce("false") == SensorValue.boolean(False)

    @pytest.mark.parametrize("text", ["TRUE", "True", "False", "FALSE", "tRuE"])
    def test_case_sensitive(self, text):
        with pytest.raises(UnsupportedValueTypeError):
            coerce(text)

    def test_padded_boolean_is_not_boolean(self):
        with pytest.raises(UnsupportedValueTypeError):
            coerce(" true")


class TestBase64:

    @pytest.mark.parametrize("text", ["aGVsbG8=", "SGVsbG8gd29ybGQ=", "YWJj", "a+/B"])
    def test_base64_kept_verbatim(self, text):
        value = coerce(text)
        assert value == SensorValue.string(text)
        assert value.to_wire() == text

    def test_empty_string_is_base64(self):
        assert coerce("") == SensorValue.string("")

    @pytest.mark.parametrize("text", [
        "not-base64-@@@",
        "aGVsbG8",
        "hello world",
        "abc=def=",
        "café",
    ])
    def test_invalid_inputs(self, text):
        with pytest.raises(UnsupportedValueTypeError) as exc_info:
            coerce(text)
        assert exc_info.value.value == text

    def test_non_string_rejected(self):
        with pytest.raises(UnsupportedValueTypeError):
            coerce(42)


def test_coerce_is_deterministic():
    for text in ("42", "true", "aGVsbG8="):
        assert coerce(text) == coerce(text)
