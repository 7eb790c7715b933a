"""XShell ``.xcs`` color scheme files (INI).

One section per scheme, named after it, plus a trailing ``[Names]`` section::

    [Solarized]
    text=839496
    ...
    [Names]
    name2=Solarized
    name1=Monokai
    count=2

Schemes are numbered from ``count`` down to 1 in file order. Absent color keys
read as black rather than failing.
"""
import configparser
import logging
import re
from typing import Dict, List

from tcconv.codec import SchemeDecoder, SchemeEncoder
from tcconv.errors import InvalidFormat
from tcconv.fields import FieldReader, format_bare_hex
from tcconv.models import ColorScheme, ColorSchemes
from tcconv.tc_constants import ConstantStuff as CS, MissingFieldPolicy, SchemeFormat

NAME_KEY_RE = re.compile(r"name(\d+)")


def _is_names_section(section: str) -> bool:
    return section.strip().lower() == CS.XSHELL_NAMES_SECTION.lower()


class XShellDecoder(SchemeDecoder):
    fmt = SchemeFormat.XSHELL
    missing_field_policy = MissingFieldPolicy.DEFAULT_ZERO

    def decode(self, text: str) -> ColorSchemes:
        # "\0" can never be a section header, so no section is treated as DEFAULT
        parser = configparser.ConfigParser(interpolation=None, strict=True, default_section="\0")
        try:
            parser.read_string(text)
        except configparser.Error as e:
            raise InvalidFormat(f"Not a valid INI document: {e}") from e

        by_section: Dict[str, ColorScheme] = {}
        names_section = None
        for section in parser.sections():
            if _is_names_section(section):
                names_section = section
                continue
            reader = FieldReader(dict(parser[section]), f"[{section}]", self.missing_field_policy)
            by_section[section] = ColorScheme.from_colors(
                section, reader.colors(CS.XSHELL_KEYS, prefixed=False)
            )

        order = self._order(parser, names_section, list(by_section))
        schemes = ColorSchemes(by_section[s] for s in order)
        logging.debug("XShell: decoded %d scheme(s)", len(schemes))
        return schemes

    @staticmethod
    def _order(parser: configparser.ConfigParser, names_section, sections: List[str]) -> List[str]:
        """Section names ordered by descending ``name<N>``, unlisted ones last."""
        if names_section is None:
            return sections
        numbered = []
        for key, value in parser[names_section].items():
            m = NAME_KEY_RE.fullmatch(key)
            if not m:
                continue
            if value not in sections:
                logging.warning("XShell: [%s] %s=%s has no matching section, ignored",
                                names_section, key, value)
                continue
            numbered.append((int(m.group(1)), value))

        ordered = []
        for _, section in sorted(numbered, key=lambda item: item[0], reverse=True):
            if section not in ordered:
                ordered.append(section)
        ordered.extend(s for s in sections if s not in ordered)
        return ordered


class XShellEncoder(SchemeEncoder):
    fmt = SchemeFormat.XSHELL
    supports_multiple_schemes = True

    def encode(self, schemes: ColorSchemes) -> str:
        self._check_names(schemes)
        blocks = [self._section(s) for s in schemes]
        total = len(schemes)
        names = [f"[{CS.XSHELL_NAMES_SECTION}]"]
        for index, scheme in enumerate(schemes):
            names.append(f"name{total - index}={scheme.name}")
        names.append(f"count={total}")
        blocks.append("\n".join(names))
        return "\n".join(blocks) + "\n"

    @staticmethod
    def _check_names(schemes: ColorSchemes) -> None:
        """Every name must survive as a distinct INI section header."""
        seen = set()
        for index, scheme in enumerate(schemes):
            name = scheme.name
            where = f"schemes[{index}] ({name!r})"
            if not name:
                raise InvalidFormat(f"{where}: XShell needs a non-empty scheme name")
            if name != name.strip():
                raise InvalidFormat(f"{where}: leading or trailing whitespace is lost in an XShell section name")
            if not name.isprintable():
                raise InvalidFormat(f"{where}: XShell section names cannot hold line breaks or control characters")
            if _is_names_section(name):
                raise InvalidFormat(f"{where}: '{CS.XSHELL_NAMES_SECTION}' is reserved in XShell files")
            if name in seen:
                raise InvalidFormat(f"{where}: duplicate scheme name, XShell sections must be unique")
            seen.add(name)

    @staticmethod
    def _section(scheme: ColorScheme) -> str:
        lines = [f"[{scheme.name}]"]
        for key, field in CS.XSHELL_WRITE_ORDER:
            lines.append(f"{key}={format_bare_hex(getattr(scheme, field))}")
        return "\n".join(lines)
