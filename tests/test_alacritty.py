import logging

import pytest
import yaml

from conftest import SOLARIZED
from tcconv.alacritty import AlacrittyDecoder, AlacrittyEncoder
from tcconv.errors import InvalidFormat, UnsupportedFormat
from tcconv.models import ColorSchemes
from tcconv.schema import ConversionSettings
from tcconv.tc_constants import MultiSchemeMode

SAMPLE_YAML = """\
# Colors (Tomorrow Night)
window:
  opacity: 0.9
colors:
  primary:
    background: '#1d1f21'
    foreground: '#C5C8C6'
  normal:
    black:   '#1d1f21'
    red:     '#cc6666'
    green:   '#b5bd68'
    yellow:  '#f0c674'
    blue:    '#81a2be'
    magenta: '#b294bb'
    cyan:    '#8abeb7'
    white:   '#c5c8c6'
  bright:
    black:   '#666666'
    red:     '#d54e53'
    green:   '#b9ca4a'
    yellow:  '#e7c547'
    blue:    '#7aa6da'
    magenta: '#c397d8'
    cyan:    '#70c0b1'
    white:   '#eaeaea'
"""


def test_decode_sample_yields_single_default_scheme():
    schemes = AlacrittyDecoder().decode(SAMPLE_YAML)
    assert len(schemes) == 1
    scheme = schemes[0]
    assert scheme.name == "default"
    assert scheme.background == 0x1D1F21
    assert scheme.foreground == 0xC5C8C6
    assert scheme.magenta == 0xB294BB
    assert scheme.bright_magenta == 0xC397D8
    assert scheme.bright_white == 0xEAEAEA


@pytest.mark.parametrize("text", [
    "colors: [unclosed",
    "",
    "- a\n- b\n",
    "window:\n  opacity: 1\n",
    "colors: 3\n",
    "colors:\n  primary: {}\n  normal: {}\n",
])
def test_decode_structural_errors(text):
    with pytest.raises(InvalidFormat):
        AlacrittyDecoder().decode(text)


def test_decode_missing_color_is_fatal():
    text = SAMPLE_YAML.replace("    cyan:    '#70c0b1'\n", "")
    with pytest.raises(InvalidFormat, match=r"colors\.bright.*cyan"):
        AlacrittyDecoder().decode(text)


@pytest.mark.parametrize("value", ["'0x1d1f21'", "'#1d1f2'", "'#1d1f21 '", "123456"])
def test_decode_requires_hash_rrggbb(value):
    text = SAMPLE_YAML.replace("background: '#1d1f21'", f"background: {value}")
    with pytest.raises(InvalidFormat):
        AlacrittyDecoder().decode(text)


def test_encode_layout(solarized):
    text = AlacrittyEncoder().encode(ColorSchemes([solarized]))
    doc = yaml.safe_load(text)
    assert list(doc) == ["colors"]
    assert list(doc["colors"]) == ["primary", "normal", "bright"]
    assert doc["colors"]["primary"] == {"foreground": "#839496", "background": "#002B36"}
    assert list(doc["colors"]["normal"]) == [
        "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    ]
    assert doc["colors"]["normal"]["magenta"] == "#D33682"
    assert doc["colors"]["bright"]["white"] == "#FDF6E3"


def test_round_trip_renames_to_default(solarized):
    text = AlacrittyEncoder().encode(ColorSchemes([solarized]))
    decoded = AlacrittyDecoder().decode(text)
    assert decoded[0].name == "default"
    assert decoded[0].colors() == SOLARIZED


def test_multiple_schemes_concatenate_with_warning(three_schemes, caplog):
    with caplog.at_level(logging.WARNING):
        text = AlacrittyEncoder().encode(three_schemes)
    assert text.count("colors:") == 3
    assert "---" not in text
    assert "single color scheme" in caplog.text


def test_multiple_schemes_fail_mode(three_schemes):
    encoder = AlacrittyEncoder(ConversionSettings(multi_scheme_mode=MultiSchemeMode.FAIL))
    with pytest.raises(UnsupportedFormat, match="3"):
        encoder.encode(three_schemes)


def test_single_scheme_fail_mode_is_fine(solarized):
    encoder = AlacrittyEncoder(ConversionSettings(multi_scheme_mode="fail"))
    assert "colors:" in encoder.encode(ColorSchemes([solarized]))


def test_encoder_declares_single_scheme_capability():
    assert AlacrittyEncoder.supports_multiple_schemes is False
