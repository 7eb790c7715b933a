import pytest

from tcconv.errors import InvalidFormat
from tcconv.fields import (
    FieldReader, format_bare_hex, format_prefixed_hex, parse_bare_hex, parse_prefixed_hex,
)
from tcconv.tc_constants import MissingFieldPolicy


@pytest.mark.parametrize("text,value", [
    ("#000000", 0x000000),
    ("#FFFFFF", 0xFFFFFF),
    ("#abCDef", 0xABCDEF),
])
def test_parse_prefixed_hex_is_case_insensitive(text, value):
    assert parse_prefixed_hex(text) == value


@pytest.mark.parametrize("text", ["000000", "#FFF", "#GGGGGG", "#1234567", "#123456\n", "", None, 0xFFFFFF])
def test_parse_prefixed_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_prefixed_hex(text)


def test_parse_bare_hex():
    assert parse_bare_hex("ff") == 0xFF
    assert parse_bare_hex("A0b0C0") == 0xA0B0C0
    for bad in ("#a0b0c0", "0x10", "1234567", "", "zz"):
        with pytest.raises(ValueError):
            parse_bare_hex(bad)


def test_format_hex_padding_and_case():
    assert format_prefixed_hex(0xab) == "#0000AB"
    assert format_bare_hex(0xABCDEF) == "abcdef"
    assert format_bare_hex(0) == "000000"


def test_fail_policy_reports_missing_key():
    reader = FieldReader({"red": "#ff0000"}, "scheme", MissingFieldPolicy.FAIL)
    assert reader.color("red") == 0xFF0000
    with pytest.raises(InvalidFormat, match="missing required field 'blue'"):
        reader.color("blue")


def test_default_zero_policy_substitutes_black():
    reader = FieldReader({}, "[x]", MissingFieldPolicy.DEFAULT_ZERO)
    assert reader.color("blue", prefixed=False) == 0
    assert reader.text("name") == ""


def test_default_zero_policy_still_rejects_malformed_value():
    reader = FieldReader({"blue": "nothex"}, "[x]", MissingFieldPolicy.DEFAULT_ZERO)
    with pytest.raises(InvalidFormat, match=r"\[x\]\.blue"):
        reader.color("blue", prefixed=False)


def test_text_and_section_type_checks():
    reader = FieldReader({"name": 3, "sub": [1]}, "root")
    with pytest.raises(InvalidFormat, match="expected a string"):
        reader.text("name")
    with pytest.raises(InvalidFormat, match="expected a mapping"):
        reader.section("sub")


def test_reader_requires_mapping():
    with pytest.raises(InvalidFormat):
        FieldReader(["a"], "root")
