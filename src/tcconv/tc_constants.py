"""Format tags, field tables and other fixed values."""
from enum import Enum, IntEnum

from tcconv.errors import UnsupportedFormat


class SchemeFormat(IntEnum):
    WINDOWS_TERMINAL = 0
    SECURECRT = 1
    XSHELL = 2
    ALACRITTY = 3
    MOBAXTERM = 4

    @classmethod
    def from_str(cls, value: str) -> "SchemeFormat":
        """Resolve a user supplied tag (case-insensitive, aliases allowed)."""
        key = str(value).strip().lower()
        try:
            return ConstantStuff.FORMAT_ALIASES[key]
        except KeyError:
            raise UnsupportedFormat(f"Unsupported format: {value!r}") from None

    @property
    def label(self) -> str:
        return ConstantStuff.FORMAT_LABELS[self]


class MissingFieldPolicy(str, Enum):
    FAIL = "fail"
    DEFAULT_ZERO = "default_zero"


class MultiSchemeMode(str, Enum):
    # write every scheme back to back and warn
    CONCATENATE = "concatenate"
    FAIL = "fail"


class ConstantStuff:
    # ---------------------------
    # Color values
    # ---------------------------
    RGB_MIN = 0x000000
    RGB_MAX = 0xFFFFFF
    DEFAULT_COLOR = 0x000000

    # Canonical field order: 8 base colors, their bright variants, then primaries
    BASE_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
    BRIGHT_COLORS = tuple(f"bright_{c}" for c in BASE_COLORS)
    COLOR_FIELDS = BASE_COLORS + BRIGHT_COLORS + ("background", "foreground")

    # ---------------------------
    # Format tags
    # ---------------------------
    FORMAT_ALIASES = {
        "windowsterminal": SchemeFormat.WINDOWS_TERMINAL,
        "windows_terminal": SchemeFormat.WINDOWS_TERMINAL,
        "wt": SchemeFormat.WINDOWS_TERMINAL,
        "securecrt": SchemeFormat.SECURECRT,
        "crt": SchemeFormat.SECURECRT,
        "xshell": SchemeFormat.XSHELL,
        "xcs": SchemeFormat.XSHELL,
        "alacritty": SchemeFormat.ALACRITTY,
        "mobaxterm": SchemeFormat.MOBAXTERM,
        "moba": SchemeFormat.MOBAXTERM,
    }
    FORMAT_LABELS = {
        SchemeFormat.WINDOWS_TERMINAL: "Windows Terminal (JSON)",
        SchemeFormat.SECURECRT: "SecureCRT",
        SchemeFormat.XSHELL: "XShell (INI)",
        SchemeFormat.ALACRITTY: "Alacritty (YAML)",
        SchemeFormat.MOBAXTERM: "MobaXterm",
    }

    # ---------------------------
    # Windows Terminal
    # ---------------------------
    WT_SCHEMA_URL = "https://aka.ms/terminal-profiles-schema"
    # canonical field -> settings.json key
    WT_KEYS = {
        "black": "black",
        "red": "red",
        "green": "green",
        "yellow": "yellow",
        "blue": "blue",
        "magenta": "purple",
        "cyan": "cyan",
        "white": "white",
        "bright_black": "brightBlack",
        "bright_red": "brightRed",
        "bright_green": "brightGreen",
        "bright_yellow": "brightYellow",
        "bright_blue": "brightBlue",
        "bright_magenta": "brightPurple",
        "bright_cyan": "brightCyan",
        "bright_white": "brightWhite",
        "background": "background",
        "foreground": "foreground",
    }

    # ---------------------------
    # XShell
    # ---------------------------
    XSHELL_NAMES_SECTION = "Names"
    XSHELL_KEYS = {
        "foreground": "text",
        "background": "background",
        **{c: c for c in BASE_COLORS},
        **{f"bright_{c}": f"{c}(bold)" for c in BASE_COLORS},
    }
    # (ini key, canonical field) in the order XShell itself writes them
    XSHELL_WRITE_ORDER = (
        ("text", "foreground"),
        ("cyan(bold)", "bright_cyan"),
        ("text(bold)", "foreground"),
        ("magenta", "magenta"),
        ("green", "green"),
        ("green(bold)", "bright_green"),
        ("background", "background"),
        ("cyan", "cyan"),
        ("red(bold)", "bright_red"),
        ("yellow", "yellow"),
        ("magenta(bold)", "bright_magenta"),
        ("yellow(bold)", "bright_yellow"),
        ("red", "red"),
        ("white", "white"),
        ("blue(bold)", "bright_blue"),
        ("white(bold)", "bright_white"),
        ("black", "black"),
        ("blue", "blue"),
        ("black(bold)", "bright_black"),
    )

    # ---------------------------
    # Alacritty
    # ---------------------------
    ALACRITTY_SCHEME_NAME = "default"
    ALACRITTY_ROOT_KEY = "colors"

    # ---------------------------
    # Environment
    # ---------------------------
    ENV_MULTI_SCHEME = "TCCONV_MULTI_SCHEME"
    ENV_JSON_INDENT = "TCCONV_JSON_INDENT"
    JSON_INDENT_DEFAULT = 4
