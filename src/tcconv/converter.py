"""Conversion driver: text in one format -> canonical model -> text in another."""
import codecs
import logging
from typing import Optional, Union

from charset_normalizer import from_bytes

from tcconv.errors import EncodingFailure
from tcconv.models import ColorSchemes
from tcconv.registry import get_decoder, get_encoder
from tcconv.schema import ConversionSettings
from tcconv.tc_constants import SchemeFormat

FormatLike = Union[SchemeFormat, str]

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def _resolve(fmt: FormatLike) -> SchemeFormat:
    if isinstance(fmt, SchemeFormat):
        return fmt
    return SchemeFormat.from_str(fmt)


def decode_bytes(data: bytes) -> str:
    """Guess the encoding of ``data`` and decode it strictly."""
    if not data:
        return ""
    encoding = next((enc for bom, enc in _BOMS if data.startswith(bom)), None)
    if encoding is None:
        best = from_bytes(data).best()
        if best is None:
            raise EncodingFailure("Could not detect the character encoding of the input")
        encoding = best.encoding
    logging.debug("Input encoding: %s", encoding)
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise EncodingFailure(f"Input is not valid {encoding}: {e}") from e


def decode(text: str, source: FormatLike) -> ColorSchemes:
    fmt = _resolve(source)
    schemes = get_decoder(fmt).decode(text)
    logging.info("Read %d scheme(s) from %s", len(schemes), fmt.label)
    return schemes


def encode(schemes: ColorSchemes, destination: FormatLike,
           settings: Optional[ConversionSettings] = None) -> str:
    fmt = _resolve(destination)
    encoder = get_encoder(fmt, settings)
    text = encoder.encode(schemes)
    logging.info("Wrote %d scheme(s) as %s", len(schemes), fmt.label)
    return text


def convert(text: str, source: FormatLike, destination: FormatLike,
            settings: Optional[ConversionSettings] = None) -> str:
    # resolve both tags before decoding so a bad destination fails fast
    src, dst = _resolve(source), _resolve(destination)
    get_encoder(dst, settings)
    return encode(decode(text, src), dst, settings)


def convert_bytes(data: bytes, source: FormatLike, destination: FormatLike,
                  settings: Optional[ConversionSettings] = None) -> str:
    return convert(decode_bytes(data), source, destination, settings)
