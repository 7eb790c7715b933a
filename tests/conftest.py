# conftest.py — shared sample schemes
import json

import pytest

from tcconv.models import ColorScheme, ColorSchemes

SOLARIZED = dict(
    black=0x073642, red=0xDC322F, green=0x859900, yellow=0xB58900,
    blue=0x268BD2, magenta=0xD33682, cyan=0x2AA198, white=0xEEE8D5,
    bright_black=0x002B36, bright_red=0xCB4B16, bright_green=0x586E75, bright_yellow=0x657B83,
    bright_blue=0x839496, bright_magenta=0x6C71C4, bright_cyan=0x93A1A1, bright_white=0xFDF6E3,
    background=0x002B36, foreground=0x839496,
)

WT_KEYS = {
    "black": "black", "red": "red", "green": "green", "yellow": "yellow",
    "blue": "blue", "magenta": "purple", "cyan": "cyan", "white": "white",
    "bright_black": "brightBlack", "bright_red": "brightRed", "bright_green": "brightGreen",
    "bright_yellow": "brightYellow", "bright_blue": "brightBlue", "bright_magenta": "brightPurple",
    "bright_cyan": "brightCyan", "bright_white": "brightWhite",
    "background": "background", "foreground": "foreground",
}


def wt_entry(name, colors):
    entry = {"name": name}
    for field, key in WT_KEYS.items():
        entry[key] = f"#{colors[field]:06x}"
    return entry


def gray_scheme(name, level):
    value = (level << 16) | (level << 8) | level
    return ColorScheme.from_colors(name, {f: value for f in SOLARIZED})


def solid_scheme(name, **overrides):
    colors = {f: 0 for f in SOLARIZED}
    colors.update(overrides)
    return ColorScheme.from_colors(name, colors)


@pytest.fixture
def solarized():
    return ColorScheme.from_colors("Solarized Dark", SOLARIZED)


@pytest.fixture
def three_schemes(solarized):
    return ColorSchemes([gray_scheme("A", 0x11), gray_scheme("B", 0x22), solarized])


@pytest.fixture
def wt_text():
    def build(*entries, **extra):
        doc = dict(extra)
        doc["schemes"] = list(entries)
        return json.dumps(doc)
    return build
