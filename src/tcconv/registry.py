"""Capability table: which formats can be read and which can be written."""
from typing import Dict, NamedTuple, Optional, Type

from tcconv.alacritty import AlacrittyDecoder, AlacrittyEncoder
from tcconv.codec import SchemeDecoder, SchemeEncoder
from tcconv.errors import UnsupportedFormat
from tcconv.schema import ConversionSettings
from tcconv.tc_constants import SchemeFormat
from tcconv.windows_terminal import WindowsTerminalDecoder, WindowsTerminalEncoder
from tcconv.xshell import XShellDecoder, XShellEncoder


class FormatCodecs(NamedTuple):
    decoder: Optional[Type[SchemeDecoder]]
    encoder: Optional[Type[SchemeEncoder]]


CAPABILITIES: Dict[SchemeFormat, FormatCodecs] = {
    SchemeFormat.WINDOWS_TERMINAL: FormatCodecs(WindowsTerminalDecoder, WindowsTerminalEncoder),
    SchemeFormat.SECURECRT: FormatCodecs(None, None),
    SchemeFormat.XSHELL: FormatCodecs(XShellDecoder, XShellEncoder),
    SchemeFormat.ALACRITTY: FormatCodecs(AlacrittyDecoder, AlacrittyEncoder),
    SchemeFormat.MOBAXTERM: FormatCodecs(None, None),
}


def _capabilities(fmt: SchemeFormat) -> FormatCodecs:
    return CAPABILITIES.get(fmt, FormatCodecs(None, None))


def get_decoder(fmt: SchemeFormat) -> SchemeDecoder:
    decoder_cls = _capabilities(fmt).decoder
    if decoder_cls is None:
        raise UnsupportedFormat(f"Reading {fmt.label} is not supported")
    return decoder_cls()


def get_encoder(fmt: SchemeFormat, settings: Optional[ConversionSettings] = None) -> SchemeEncoder:
    encoder_cls = _capabilities(fmt).encoder
    if encoder_cls is None:
        raise UnsupportedFormat(f"Writing {fmt.label} is not supported")
    return encoder_cls(settings)


def describe_formats() -> list:
    """(format, can_decode, can_encode) for every declared format."""
    return [(fmt, caps.decoder is not None, caps.encoder is not None)
            for fmt, caps in CAPABILITIES.items()]
