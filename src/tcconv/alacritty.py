"""Alacritty ``colors:`` YAML block. Single scheme per document."""
import logging

import yaml
from pydantic import ValidationError

from tcconv.codec import SchemeDecoder, SchemeEncoder
from tcconv.errors import InvalidFormat, UnsupportedFormat
from tcconv.fields import FieldReader, format_prefixed_hex
from tcconv.models import ColorScheme, ColorSchemes
from tcconv.schema import AlacrittyDocument
from tcconv.tc_constants import ConstantStuff as CS, MissingFieldPolicy, MultiSchemeMode, SchemeFormat

_PRIMARY = {"foreground": "foreground", "background": "background"}
_NORMAL = {c: c for c in CS.BASE_COLORS}
_BRIGHT = {f"bright_{c}": c for c in CS.BASE_COLORS}


class AlacrittyDecoder(SchemeDecoder):
    fmt = SchemeFormat.ALACRITTY
    missing_field_policy = MissingFieldPolicy.FAIL

    def decode(self, text: str) -> ColorSchemes:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidFormat(f"Not valid YAML: {e}") from e
        if not isinstance(raw, dict):
            raise InvalidFormat(f"Expected a YAML mapping at the top level, got {type(raw).__name__}")
        if CS.ALACRITTY_ROOT_KEY not in raw:
            raise InvalidFormat(f"Missing '{CS.ALACRITTY_ROOT_KEY}' key")
        try:
            doc = AlacrittyDocument.model_validate(raw)
        except ValidationError as e:
            raise InvalidFormat(f"Not an Alacritty color document: {e}") from e

        root = CS.ALACRITTY_ROOT_KEY
        policy = self.missing_field_policy
        colors = {}
        colors.update(FieldReader(doc.colors.primary, f"{root}.primary", policy).colors(_PRIMARY))
        colors.update(FieldReader(doc.colors.normal, f"{root}.normal", policy).colors(_NORMAL))
        colors.update(FieldReader(doc.colors.bright, f"{root}.bright", policy).colors(_BRIGHT))
        logging.debug("Alacritty: decoded 1 scheme")
        return ColorSchemes([ColorScheme.from_colors(CS.ALACRITTY_SCHEME_NAME, colors)])


class AlacrittyEncoder(SchemeEncoder):
    fmt = SchemeFormat.ALACRITTY
    supports_multiple_schemes = False

    def encode(self, schemes: ColorSchemes) -> str:
        if len(schemes) > 1:
            if self.settings.multi_scheme_mode is MultiSchemeMode.FAIL:
                raise UnsupportedFormat(
                    f"Alacritty holds a single color scheme; got {len(schemes)} ({', '.join(schemes.names())})"
                )
            logging.warning(
                "Alacritty holds a single color scheme; writing %d documents back to back", len(schemes)
            )
        return "".join(self._dump(s) for s in schemes)

    @staticmethod
    def _dump(scheme: ColorScheme) -> str:
        hx = format_prefixed_hex
        doc = {
            CS.ALACRITTY_ROOT_KEY: {
                "primary": {k: hx(getattr(scheme, f)) for f, k in _PRIMARY.items()},
                "normal": {k: hx(getattr(scheme, f)) for f, k in _NORMAL.items()},
                "bright": {k: hx(getattr(scheme, f)) for f, k in _BRIGHT.items()},
            }
        }
        return yaml.safe_dump(doc, sort_keys=False, default_flow_style=False, indent=2)
