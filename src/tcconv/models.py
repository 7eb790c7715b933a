# models.py
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Iterator, List, Mapping

from tcconv.tc_constants import ConstantStuff as CS


@dataclass(frozen=True)
class ColorScheme:
    name: str

    black: int
    red: int
    green: int
    yellow: int
    blue: int
    magenta: int
    cyan: int
    white: int

    bright_black: int
    bright_red: int
    bright_green: int
    bright_yellow: int
    bright_blue: int
    bright_magenta: int
    bright_cyan: int
    bright_white: int

    background: int
    foreground: int

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError(f"scheme name must be a string, got {type(self.name).__name__}")
        for key in CS.COLOR_FIELDS:
            value = getattr(self, key)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{self.name}.{key}: expected int, got {value!r}")
            if not CS.RGB_MIN <= value <= CS.RGB_MAX:
                raise ValueError(f"{self.name}.{key}: {value:#x} is not a 24-bit RGB value")

    @classmethod
    def from_colors(cls, name: str, colors: Mapping[str, int]) -> "ColorScheme":
        """Build a scheme from a canonical field name -> RGB mapping."""
        unknown = set(colors) - set(CS.COLOR_FIELDS)
        if unknown:
            raise ValueError(f"unknown color field(s): {', '.join(sorted(unknown))}")
        missing = [f for f in CS.COLOR_FIELDS if f not in colors]
        if missing:
            raise ValueError(f"{name}: missing color field(s): {', '.join(missing)}")
        return cls(name=name, **colors)

    def colors(self) -> Dict[str, int]:
        return {key: getattr(self, key) for key in CS.COLOR_FIELDS}

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, **self.colors()}


class ColorSchemes:
    """Ordered, read-only collection of color schemes."""

    def __init__(self, schemes: Iterable[ColorScheme] = ()):
        items = list(schemes)
        for s in items:
            if not isinstance(s, ColorScheme):
                raise TypeError(f"expected ColorScheme, got {type(s).__name__}")
        self._schemes = tuple(items)

    def __iter__(self) -> Iterator[ColorScheme]:
        return iter(self._schemes)

    def __len__(self) -> int:
        return len(self._schemes)

    def __getitem__(self, index: int) -> ColorScheme:
        return self._schemes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorSchemes):
            return NotImplemented
        return self._schemes == other._schemes

    def __repr__(self) -> str:
        return f"ColorSchemes({list(self.names())!r})"

    def names(self) -> List[str]:
        return [s.name for s in self._schemes]

    def clone(self) -> "ColorSchemes":
        return ColorSchemes(replace(s) for s in self._schemes)
