"""Typed access to fields of a generic JSON/YAML/INI tree.

Every decoder reads its colors through a ``FieldReader`` so that presence,
type and hex shape of a field are checked in one place. What happens when a
key is absent is decided by the reader's ``MissingFieldPolicy``; a present but
malformed value is always an ``InvalidFormat``.
"""
import logging
import re
from typing import Any, Mapping

from tcconv.errors import InvalidFormat
from tcconv.tc_constants import ConstantStuff as CS, MissingFieldPolicy

HEX6_RE = re.compile(r"#([0-9A-Fa-f]{6})")
BARE_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,6}")

_MISSING = object()


def parse_prefixed_hex(text: Any) -> int:
    """``#RRGGBB`` (any case) -> int. Raises ValueError otherwise."""
    if not isinstance(text, str):
        raise ValueError(f"expected a '#RRGGBB' string, got {type(text).__name__}")
    m = HEX6_RE.fullmatch(text)
    if not m:
        raise ValueError(f"expected a '#RRGGBB' string, got {text!r}")
    return int(m.group(1), 16)


def parse_bare_hex(text: Any) -> int:
    """``rrggbb`` without prefix, 1-6 digits, any case."""
    if not isinstance(text, str):
        raise ValueError(f"expected a hex string, got {type(text).__name__}")
    text = text.strip()
    if not BARE_HEX_RE.fullmatch(text):
        raise ValueError(f"expected up to 6 hex digits, got {text!r}")
    return int(text, 16)


def format_prefixed_hex(value: int) -> str:
    return f"#{value:06X}"


def format_bare_hex(value: int) -> str:
    return f"{value:06x}"


class FieldReader:
    def __init__(self, data: Mapping[str, Any], where: str,
                 policy: MissingFieldPolicy = MissingFieldPolicy.FAIL):
        if not isinstance(data, Mapping):
            raise InvalidFormat(f"{where}: expected a mapping, got {type(data).__name__}")
        self.data = data
        self.where = where
        self.policy = policy

    def _get(self, key: str) -> Any:
        value = self.data.get(key, _MISSING)
        if value is _MISSING or value is None:
            return _MISSING
        return value

    def _missing(self, key: str, default: Any) -> Any:
        if self.policy is MissingFieldPolicy.DEFAULT_ZERO:
            logging.debug("%s: '%s' absent, using %r", self.where, key, default)
            return default
        raise InvalidFormat(f"{self.where}: missing required field '{key}'")

    def text(self, key: str) -> str:
        value = self._get(key)
        if value is _MISSING:
            return self._missing(key, "")
        if not isinstance(value, str):
            raise InvalidFormat(f"{self.where}.{key}: expected a string, got {type(value).__name__}")
        return value

    def section(self, key: str) -> "FieldReader":
        value = self._get(key)
        if value is _MISSING:
            value = self._missing(key, {})
        return FieldReader(value, f"{self.where}.{key}", self.policy)

    def color(self, key: str, prefixed: bool = True) -> int:
        value = self._get(key)
        if value is _MISSING:
            return self._missing(key, CS.DEFAULT_COLOR)
        try:
            return parse_prefixed_hex(value) if prefixed else parse_bare_hex(value)
        except ValueError as e:
            raise InvalidFormat(f"{self.where}.{key}: {e}") from e

    def colors(self, key_map: Mapping[str, str], prefixed: bool = True) -> dict:
        """Read every ``canonical -> source key`` entry of ``key_map``."""
        return {field: self.color(key, prefixed) for field, key in key_map.items()}
