"""CSS lengths and plain numbers, with their text forms."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_f64(text: str) -> float | None:
    """Parse a float the strict way: no surrounding blanks, no underscores."""
    if _FLOAT.fullmatch(text) is None:
        return None
    return float(text)


def _format_fixed(value: float, places: int) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.{places}f}"


class UnitKind(Enum):
    """The unit a value is measured in; the value is its written suffix."""

    AUTO = "inherit"
    CH = "ch"
    CM = "cm"
    DPI = "dpi"
    DPCM = "dpcm"
    DPPX = "dppx"
    EM = "em"
    FR = "fr"
    IN = "in"
    MM = "mm"
    PC = "pc"
    PT = "pt"
    PX = "px"
    Q = "Q"
    REM = "rem"
    VH = "vh"
    VMAX = "vmax"
    VMIN = "vmin"
    VW = "vw"
    PERCENT = "%"
    NONE = ""


_BY_SUFFIX = {kind.value.lower(): kind for kind in UnitKind if kind is not UnitKind.NONE}


@dataclass(frozen=True, eq=False)
class Unit:
    """A measured value; two units are equal when they are written the same."""

    kind: UnitKind = UnitKind.EM
    value: float = 1.0

    @classmethod
    def from_str(cls, s: str) -> Unit:
        """Read a unit such as ``1.5rem``, ``50%``, ``42`` or ``inherit``."""
        text = s.strip()
        split = next(
            (i for i, char in enumerate(text) if not char.isnumeric() and char != "."),
            0,
        )
        head, tail = text[:split], text[split:].strip()

        value = _parse_f64(head.strip())
        if value is None:
            value = _parse_f64(tail)
        if value is None:
            value = 1.0

        kind = _BY_SUFFIX.get(tail.lower(), UnitKind.NONE)
        if kind is UnitKind.AUTO:
            return cls(UnitKind.AUTO, 0.0)
        if kind is UnitKind.PERCENT:
            percent = _parse_f64(head)
            return cls(UnitKind.PERCENT, 100.0 if percent is None else percent)
        return cls(kind, value)

    @classmethod
    def de(cls, s: str) -> Unit:
        """Read a unit from its text form."""
        return cls.from_str(s)

    def ser(self) -> str:
        """Write the unit: one decimal and the suffix, or a whole number alone."""
        if self.kind is UnitKind.AUTO:
            return "inherit"
        if self.kind is UnitKind.NONE:
            return _format_fixed(self.value, 0)
        return _format_fixed(self.value, 1) + self.kind.value

    def __str__(self) -> str:
        return self.ser()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.ser() == other.ser()

    def __hash__(self) -> int:
        return hash(self.ser())