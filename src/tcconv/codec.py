"""Base classes shared by the per-format decoders and encoders."""
from typing import Optional

from tcconv.models import ColorSchemes
from tcconv.schema import ConversionSettings
from tcconv.tc_constants import MissingFieldPolicy, SchemeFormat


class SchemeDecoder:
    fmt: SchemeFormat
    missing_field_policy: MissingFieldPolicy = MissingFieldPolicy.FAIL

    def decode(self, text: str) -> ColorSchemes:
        raise NotImplementedError


class SchemeEncoder:
    fmt: SchemeFormat
    supports_multiple_schemes: bool = True

    def __init__(self, settings: Optional[ConversionSettings] = None):
        self.settings = settings or ConversionSettings()

    def encode(self, schemes: ColorSchemes) -> str:
        raise NotImplementedError
