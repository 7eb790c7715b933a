"""tcconv — convert terminal color schemes between Windows Terminal, XShell and Alacritty."""
from tcconv.converter import convert, convert_bytes, decode, decode_bytes, encode
from tcconv.errors import EncodingFailure, InvalidFormat, SchemeError, UnsupportedFormat
from tcconv.models import ColorScheme, ColorSchemes
from tcconv.schema import ConversionSettings, load_settings
from tcconv.tc_constants import MissingFieldPolicy, MultiSchemeMode, SchemeFormat

__version__ = "0.1.0"

__all__ = [
    "ColorScheme",
    "ColorSchemes",
    "ConversionSettings",
    "EncodingFailure",
    "InvalidFormat",
    "MissingFieldPolicy",
    "MultiSchemeMode",
    "SchemeError",
    "SchemeFormat",
    "UnsupportedFormat",
    "convert",
    "convert_bytes",
    "decode",
    "decode_bytes",
    "encode",
    "load_settings",
]
