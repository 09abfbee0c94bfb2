"""Material design colours and free opacity/RGB colours."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass

from elvisui.errors import DeserializeHtmlError

_NAMED_HEX = {
    "Inherit": "0xFFFFFFFF",
    "Amber": "0xFFFFC107",
    "AmberAccent": "0xFFFFD740",
    "Black": "0xFF000000",
    "Blue": "0xFF2196F3",
    "BlueAccent": "0xFF448AFF",
    "BlueGrey": "0xFF607D8B",
    "Brown": "0xFF795548",
    "Cyan": "0xFF00BCD4",
    "CyanAccent": "0xFF18FFFF",
    "DeepOrange": "0xFFFF5722",
    "DeepOrangeAccent": "0xFFFF6E40",
    "DeepPurple": "0xFF673AB7",
    "DeepPurpleAccent": "0xFF7C4DFF",
    "Green": "0xFF4CAF50",
    "GreenAccent": "0xFF69F0AE",
    "Grey": "FF9E9E9E",
    "Indigo": "0xFF3F51B5",
    "IndigoAccent": "0xFF536DFE",
    "LightBlue": "0xFF03A9FA",
    "LightBlueAccent": "0xFF40C4FF",
    "LightGreen": "0xFF8BC34A",
    "LightGreenAccent": "0xFFB2FF59",
    "Lime": "0xFFCDDC39",
    "LimeAccent": "0xFFEEFF41",
    "Orange": "0xFFFF9800",
    "OrangeAccent": "0xFFFFAB40",
    "Pink": "0xFFE91E63",
    "PinkAccent": "0xFFFF4081",
    "Purple": "0xFF9C27B0",
    "PurpleAccent": "0xFFE040FB",
    "Red": "0xFFF44336",
    "RedAccent": "0xFFFF5252",
    "Teal": "0xFF009688",
    "TealAccent": "0xFF64FFDA",
    "Transparent": "0xFFFFFFFF",
    "White": "0xFFFFFFFF",
    "Yellow": "0xFFFFEB3B",
    "YellowAccent": "0xFFFFFF00",
}

_ORGB = "ORGB"
_HEX_LETTERS = {"A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15}
_I16_MIN, _I16_MAX = -(2**15), 2**15 - 1
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT = re.compile(r"[+-]?[0-9]+")


def _f32(value: float) -> float:
    """Round to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_f32(text: str) -> float | None:
    if _FLOAT.fullmatch(text) is None:
        return None
    return _f32(float(text))


def _parse_i16(text: str) -> int | None:
    if _INT.fullmatch(text) is None:
        return None
    value = int(text)
    return value if _I16_MIN <= value <= _I16_MAX else None


def _saturating_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.trunc(value)))


def _hex(value: int, bits: int) -> str:
    return format(value & ((1 << bits) - 1), "X")


def _dec(char: str) -> int:
    """Read one hex digit; lower-case letters count as zero."""
    stripped = char.strip()
    if not stripped:
        raise DeserializeHtmlError(f"blank hex digit: {char!r}")
    letter = _HEX_LETTERS.get(stripped[0])
    if letter is not None:
        return letter
    parsed = _parse_i16(char)
    return 0 if parsed is None else parsed


@dataclass(frozen=True, eq=False)
class Color:
    """A named colour, or an opacity plus red, green and blue components.

    Two colours are equal when their hex forms are equal.
    """

    name: str = "Pink"
    components: tuple[float, int, int, int] | None = None

    def __post_init__(self) -> None:
        if self.name == _ORGB:
            if self.components is None:
                raise ValueError("an ORGB colour needs its components")
        elif self.name not in _NAMED_HEX:
            raise ValueError(f"unknown colour: {self.name!r}")
        elif self.components is not None:
            raise ValueError("a named colour takes no components")

    @classmethod
    def named(cls, name: str) -> Color:
        """The colour with this name, such as ``Red`` or ``DeepOrangeAccent``."""
        return cls(name)

    @classmethod
    def orgb(cls, o: float, r: int, g: int, b: int) -> Color:
        """A colour from opacity (0 to 1) and 16-bit signed red, green and blue."""
        channels = (int(r), int(g), int(b))
        for channel in channels:
            if not _I16_MIN <= channel <= _I16_MAX:
                raise ValueError(f"colour channel out of range: {channel}")
        return cls(_ORGB, (_f32(float(o)), *channels))

    @classmethod
    def from_hex(cls, h: str) -> Color:
        """The named colour with this hex form, or else an ORGB colour."""
        h = h[:10]
        for name, hex_form in _NAMED_HEX.items():
            if name != "Inherit" and hex_form == h:
                return cls(name)
        return cls.from_hex_to_orgb(h)

    @classmethod
    def from_hex_to_orgb(cls, h: str) -> Color:
        """Read ``0xOORRGGBB`` into an ORGB colour."""
        h = h[:10]
        if len(h) < 10:
            raise DeserializeHtmlError(f"hex colour too short: {h!r}")
        pairs = [_dec(h[i]) * 16 + _dec(h[i + 1]) for i in range(2, 10, 2)]
        opacity = _f32(_f32(float(pairs[0])) / 255.0)
        return cls(_ORGB, (opacity, pairs[1], pairs[2], pairs[3]))

    def to_hex(self) -> str:
        """The hex form, ``0x`` followed by opacity, red, green and blue."""
        if self.components is None:
            return _NAMED_HEX[self.name]
        o, r, g, b = self.components
        opacity = _saturating_i32(_f32(o * 255.0))
        return "0x" + _hex(opacity, 32) + _hex(r, 16) + _hex(g, 16) + _hex(b, 16)

    def to_orgb(self) -> Color:
        """The same colour as an ORGB colour."""
        return Color.from_hex_to_orgb(self.to_hex())

    @classmethod
    def de(cls, s: str) -> Color:
        """Read ``rgba(r, g, b, a)`` or anything containing ``inherit``."""
        if "inherit" in s:
            return cls("Inherit")
        if len(s) < 6:
            raise DeserializeHtmlError(f"colour too short: {s!r}")
        parts = s[5:-1].split(",")
        if len(parts) < 4:
            raise DeserializeHtmlError(f"colour needs four components: {s!r}")
        r, g, b, a = (part.strip() for part in parts[:4])
        opacity = _parse_f32(a)
        return cls.orgb(
            0.0 if opacity is None else opacity,
            _parse_i16(r) or 0,
            _parse_i16(g) or 0,
            _parse_i16(b) or 0,
        )

    def ser(self) -> str:
        """Write the colour as ``rgba(r, g, b, a)``, or ``inherit``."""
        if self.name == "Inherit":
            return "inherit"
        source = self if self.components is not None else self.to_orgb()
        o, r, g, b = source.components
        opacity = "NaN" if math.isnan(o) else f"{o:.1f}"
        return f"rgba({r}, {g}, {b}, {opacity})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_hex() == other.to_hex()

    def __hash__(self) -> int:
        return hash(self.to_hex())