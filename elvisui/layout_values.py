"""Layout keywords (alignment, flex and grid settings) and their CSS text forms."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from elvisui.errors import DeserializeHtmlError
from elvisui.unit import Unit, UnitKind

_WHITESPACE = re.compile(r"\s")
_INT = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


def _colon_parts(s: str, *, exact: bool) -> list[str]:
    """Split a ``key: value`` declaration at its colons."""
    parts = s.split(":")
    if exact and len(parts) != 2:
        raise DeserializeHtmlError(f"expected exactly one ':' in {s!r}")
    if len(parts) < 2:
        raise DeserializeHtmlError(f"expected a ':' in {s!r}")
    return parts


def _split_whitespace(text: str) -> list[str]:
    """Split at every single whitespace character, keeping empty pieces."""
    return _WHITESPACE.split(text)


def _parse_i32(text: str) -> int | None:
    if _INT.fullmatch(text) is None:
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _inner(text: str) -> str | None:
    """The text from the first ``(`` up to, not including, the last character."""
    start = text.find("(")
    if start < 0:
        return None
    return text[start:len(text) - 1]


def _min_max_units(inner: str) -> tuple[Unit, Unit]:
    bounds = inner.split(",")
    if len(bounds) != 2:
        raise DeserializeHtmlError(f"minmax needs two bounds: {inner!r}")
    return Unit.de(bounds[0].strip()), Unit.de(bounds[1].strip())


def _plain_units(text: str) -> tuple[Unit, ...]:
    return tuple(Unit.de(piece) for piece in _split_whitespace(text))


def _ser_plain(units: tuple[Unit, ...]) -> str:
    return "".join(unit.ser() + " " for unit in units)


class Alignments(Enum):
    """Where a flex child sits: the values are ``(align-items, justify-content)``."""

    BOTTOM_CENTER = ("flex-end", "center")
    BOTTOM_LEFT = ("flex-end", "flex-start")
    BOTTOM_RIGHT = ("flex-end", "flex-end")
    CENTER = ("center", "center")
    CENTER_LEFT = ("center", "flex-start")
    CENTER_RIGHT = ("center", "flex-end")
    TOP_CENTER = ("flex-start", "center")
    TOP_LEFT = ("flex-start", "flex-start")
    TOP_RIGHT = ("flex-start", "flex-end")

    @classmethod
    def de(cls, s: str) -> Alignments:
        """Read two ``;``-separated parts; unknown pairs fall back to CENTER."""
        parts = s.split(";")
        if len(parts) != 2:
            raise DeserializeHtmlError(f"alignment needs exactly two parts: {s!r}")

        def value(part: str) -> str:
            colon = part.find(":")
            return part[max(colon, 0):].strip()

        try:
            return cls((value(parts[0]), value(parts[1])))
        except ValueError:
            return cls.CENTER

    def ser(self) -> str:
        """Write the ``align-items`` and ``justify-content`` declarations."""
        align_items, justify_content = self.value
        return f"align-items: {align_items}; justify-content: {justify_content};"


class FlexDirection(Enum):
    """The ``flex-direction`` property."""

    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"
    ROW = "row"
    ROW_REVERSE = "row-reverse"

    @classmethod
    def de(cls, s: str) -> FlexDirection:
        """Read ``flex-direction: value``; unknown values give COLUMN."""
        value = _colon_parts(s, exact=True)[1].strip()
        try:
            return cls(value)
        except ValueError:
            return cls.COLUMN

    def ser(self) -> str:
        """Write the ``flex-direction`` declaration."""
        return f"flex-direction: {self.value};"


class GridFlow(Enum):
    """The ``grid-auto-flow`` property."""

    COLUMN = "column"
    ROW = "row"
    DENSE = "dense"
    COLUMN_DENSE = "column dense"
    ROW_DENSE = "row dense"
    INHERIT = "inherit"
    INITIAL = "initial"
    UNSET = "unset"

    @classmethod
    def de(cls, s: str) -> GridFlow:
        """Read the value after the first colon; unknown values give UNSET."""
        value = _colon_parts(s, exact=False)[1].strip()
        try:
            return cls(value)
        except ValueError:
            return cls.UNSET

    def ser(self) -> str:
        """Write the bare keyword."""
        return self.value


class MultiColumnLineStyle(Enum):
    """The ``column-rule-style`` property."""

    NONE = "none"
    HIDDEN = "hidden"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUT_SET = "outset"

    @classmethod
    def de(cls, s: str) -> MultiColumnLineStyle:
        """Read ``key:value`` with the value taken exactly as written; else NONE."""
        value = _colon_parts(s, exact=True)[1]
        for style in cls:
            if style is not cls.DASHED and style.value == value:
                return style
        return cls.NONE

    def ser(self) -> str:
        """Write the ``style`` declaration."""
        return f"style: {self.value};"


@dataclass(frozen=True)
class FlexBasis:
    """The ``flex-basis`` property: a keyword, or a length for NUMBER."""

    class Kind(Enum):
        FILL = "fill"
        MAX_CONTENT = "max-content"
        MIN_CONTENT = "min-content"
        FIT_CONTENT = "fit-content"
        NUMBER = "number"

    kind: Kind = Kind.FILL
    unit: Unit | None = None

    def __post_init__(self) -> None:
        if self.kind is FlexBasis.Kind.NUMBER:
            if self.unit is None:
                raise ValueError("a numeric flex basis needs a unit")
        elif self.unit is not None:
            raise ValueError(f"flex basis {self.kind.value} takes no unit")

    @classmethod
    def de(cls, s: str) -> FlexBasis:
        """Read ``flex-basis: value``; anything but a keyword is read as a length."""
        value = _colon_parts(s, exact=True)[1].strip()
        for kind in cls.Kind:
            if kind is not cls.Kind.NUMBER and kind.value == value:
                return cls(kind)
        return cls(cls.Kind.NUMBER, Unit.de(value))

    def ser(self) -> str:
        """Write the ``flex-basis`` declaration."""
        if self.kind is FlexBasis.Kind.NUMBER:
            assert self.unit is not None
            return f"flex-basis: {self.unit.ser()};"
        return f"flex-basis: {self.kind.value};"


_GRID_AUTO_ARITY = {"FIXED": 1, "MIN_MAX": 2}


@dataclass(frozen=True)
class GridAuto:
    """The ``grid-auto-columns`` / ``grid-auto-rows`` properties."""

    class Kind(Enum):
        AUTO = "auto"
        FIXED = "fixed"
        INHERIT = "inherit"
        INITIAL = "initial"
        MAX_CONTENT = "max-content"
        MIN_CONTENT = "min-content"
        MIN_MAX = "minmax"
        PLAIN = "plain"
        UNSET = "unset"

    kind: Kind = Kind.UNSET
    units: tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "units", tuple(self.units))
        if self.kind is GridAuto.Kind.PLAIN:
            return
        expected = _GRID_AUTO_ARITY.get(self.kind.name, 0)
        if len(self.units) != expected:
            raise ValueError(f"grid auto {self.kind.name} takes {expected} unit(s)")

    @classmethod
    def de(cls, s: str) -> GridAuto:
        """Read the value after the first colon of a declaration."""
        value = _colon_parts(s, exact=False)[1].strip()
        for kind in (
            cls.Kind.AUTO,
            cls.Kind.MAX_CONTENT,
            cls.Kind.MIN_CONTENT,
            cls.Kind.INHERIT,
            cls.Kind.INITIAL,
            cls.Kind.UNSET,
        ):
            if kind.value == value:
                return cls(kind)
        if "minmax" in value:
            inner = _inner(value)
            if inner is None:
                return cls(cls.Kind.UNSET)
            return cls(cls.Kind.MIN_MAX, _min_max_units(inner))
        if any(char.isspace() for char in value.strip()):
            return cls(cls.Kind.PLAIN, _plain_units(value))
        return cls(cls.Kind.FIXED, (Unit.de(value),))

    def ser(self) -> str:
        """Write the bare value."""
        if self.kind is GridAuto.Kind.MIN_MAX:
            low, high = self.units
            return f"minmax({low.ser()}, {high.ser()})"
        if self.kind is GridAuto.Kind.FIXED:
            return self.units[0].ser()
        if self.kind is GridAuto.Kind.PLAIN:
            return _ser_plain(self.units)
        return self.kind.value


_GRID_TEMPLATE_ARITY = {"FIT_CONTENT": 1, "MIN_MAX": 2, "REPEAT": 1}


@dataclass(frozen=True)
class GridTemplate:
    """The ``grid-template-columns`` / ``grid-template-rows`` properties.

    The default is a single repeat of ``1.0fr``; a REPEAT given no unit uses ``1.0fr``.
    """

    class Kind(Enum):
        FIT_CONTENT = "fit-content"
        INHERIT = "inherit"
        INITIAL = "initial"
        MIN_MAX = "minmax"
        NONE = "none"
        PLAIN = "plain"
        REPEAT = "repeat"
        SUB_GRID = "subgrid"
        UNSET = "unset"

    kind: Kind = Kind.REPEAT
    units: tuple[Unit, ...] = ()
    count: int = 1

    def __post_init__(self) -> None:
        units = tuple(self.units)
        if self.kind is GridTemplate.Kind.REPEAT and not units:
            units = (Unit(UnitKind.FR, 1.0),)
        object.__setattr__(self, "units", units)
        if self.kind is GridTemplate.Kind.PLAIN:
            return
        expected = _GRID_TEMPLATE_ARITY.get(self.kind.name, 0)
        if len(units) != expected:
            raise ValueError(f"grid template {self.kind.name} takes {expected} unit(s)")

    @classmethod
    def de(cls, s: str) -> GridTemplate:
        """Read a ``key: value`` declaration."""
        raw = _colon_parts(s, exact=True)[1]
        value = raw.strip()
        for kind in (
            cls.Kind.INHERIT,
            cls.Kind.INITIAL,
            cls.Kind.SUB_GRID,
            cls.Kind.UNSET,
            cls.Kind.NONE,
        ):
            if kind.value == value:
                return cls(kind)
        if "fit-content" in value:
            inner = _inner(value)
            if inner is None:
                return cls(cls.Kind.UNSET)
            return cls(cls.Kind.FIT_CONTENT, (Unit.de(inner.strip()),))
        if "minmax" in value:
            inner = _inner(value)
            if inner is None:
                return cls(cls.Kind.UNSET)
            return cls(cls.Kind.MIN_MAX, _min_max_units(inner))

        inner = _inner(raw)
        if inner is None:
            return cls(cls.Kind.PLAIN, _plain_units(raw))
        parts = inner.split(",")
        if len(parts) != 2:
            raise DeserializeHtmlError(f"repeat needs a count and a unit: {s!r}")
        count = _parse_i32(parts[0])
        return cls(
            cls.Kind.REPEAT,
            (Unit.de(parts[1]),),
            1 if count is None else count,
        )

    def ser(self) -> str:
        """Write the bare value."""
        kind = self.kind
        if kind is GridTemplate.Kind.FIT_CONTENT:
            return f"fit-content({self.units[0].ser()})"
        if kind is GridTemplate.Kind.MIN_MAX:
            low, high = self.units
            return f"minmax({low.ser()}, {high.ser()})"
        if kind is GridTemplate.Kind.PLAIN:
            return _ser_plain(self.units)
        if kind is GridTemplate.Kind.REPEAT:
            return f"({self.count}, {self.units[0].ser()})"
        if kind is GridTemplate.Kind.UNSET:
            return "unit"
        return kind.value