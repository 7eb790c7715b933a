"""Windows Terminal ``settings.json`` color schemes."""
import json
import logging

from pydantic import ValidationError

from tcconv.codec import SchemeDecoder, SchemeEncoder
from tcconv.errors import InvalidFormat
from tcconv.fields import FieldReader, format_prefixed_hex
from tcconv.models import ColorScheme, ColorSchemes
from tcconv.schema import WindowsTerminalDocument
from tcconv.tc_constants import ConstantStuff as CS, MissingFieldPolicy, SchemeFormat


class WindowsTerminalDecoder(SchemeDecoder):
    fmt = SchemeFormat.WINDOWS_TERMINAL
    missing_field_policy = MissingFieldPolicy.FAIL

    def decode(self, text: str) -> ColorSchemes:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidFormat(f"Not valid JSON: {e}") from e
        try:
            doc = WindowsTerminalDocument.model_validate(raw)
        except ValidationError as e:
            raise InvalidFormat(f"Not a Windows Terminal scheme document: {e}") from e

        schemes = ColorSchemes(self._read_scheme(i, entry) for i, entry in enumerate(doc.schemes))
        logging.debug("Windows Terminal: decoded %d scheme(s)", len(schemes))
        return schemes

    def _read_scheme(self, index: int, entry: dict) -> ColorScheme:
        reader = FieldReader(entry, f"schemes[{index}]", self.missing_field_policy)
        name = reader.text("name")
        reader.where = f"schemes[{index}] ({name})"
        return ColorScheme.from_colors(name, reader.colors(CS.WT_KEYS))


class WindowsTerminalEncoder(SchemeEncoder):
    fmt = SchemeFormat.WINDOWS_TERMINAL
    supports_multiple_schemes = True

    def encode(self, schemes: ColorSchemes) -> str:
        doc = {
            "$schema": CS.WT_SCHEMA_URL,
            "schemes": [self._scheme_to_dict(s) for s in schemes],
        }
        return json.dumps(doc, indent=self.settings.json_indent, ensure_ascii=False) + "\n"

    @staticmethod
    def _scheme_to_dict(scheme: ColorScheme) -> dict:
        hx = format_prefixed_hex
        out = {
            "name": scheme.name,
            "background": hx(scheme.background),
            "foreground": hx(scheme.foreground),
            # Windows Terminal needs these; derived, not round-tripped
            "cursorColor": hx(scheme.foreground),
            "selectionBackground": hx(scheme.foreground),
        }
        for field in CS.BASE_COLORS + CS.BRIGHT_COLORS:
            out[CS.WT_KEYS[field]] = hx(getattr(scheme, field))
        return out
