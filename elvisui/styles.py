"""Style settings of the layout and text widgets, with their CSS text forms."""

from __future__ import annotations

from dataclasses import dataclass, field

from elvisui.color import Color
from elvisui.layout_values import (
    Alignments,
    FlexBasis,
    FlexDirection,
    GridAuto,
    GridFlow,
    GridTemplate,
    MultiColumnLineStyle,
)
from elvisui.unit import Unit, UnitKind


def _unit(kind: UnitKind, value: float) -> Unit:
    return Unit(kind, value)


def _auto() -> Unit:
    return Unit(UnitKind.AUTO, 0.0)


def parse_style(s: str) -> list[tuple[str, str]]:
    """Split ``key: value; ...`` into pairs.

    The key is trimmed; the value keeps its leading colon, so that it can be
    handed on to readers that expect a ``key: value`` declaration. Pieces with
    no colon are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for piece in s.split(";"):
        colon = piece.find(":")
        if colon >= 0:
            pairs.append((piece[:colon].strip(), piece[colon:].strip()))
    return pairs


def _alignment_source(pairs: list[tuple[str, str]]) -> str:
    """Collect the alignment declarations the way the alignment reader expects them."""
    return "".join(
        f"{key}: {value};"
        for key, value in pairs
        if key in ("align-items", "justify-content")
    )


@dataclass
class AlignStyle:
    """Style of ``Align``: just the alignment."""

    align: Alignments = Alignments.CENTER

    @classmethod
    def de(cls, s: str) -> AlignStyle:
        """Read the alignment declarations."""
        return cls(Alignments.de(s))

    def ser(self) -> str:
        """Write the alignment declarations."""
        return self.align.ser()


@dataclass
class ContainerStyle:
    """Style of ``Container``."""

    align: Alignments = Alignments.CENTER
    height: Unit = field(default_factory=Unit)
    width: Unit = field(default_factory=Unit)
    padding: Unit = field(default_factory=Unit)
    margin: Unit = field(default_factory=Unit)
    background_color: Color = field(default_factory=Color)

    @classmethod
    def de(cls, s: str) -> ContainerStyle:
        """Read a container style; the alignment part must be readable."""
        style = cls()
        pairs = parse_style(s)
        for key, value in pairs:
            if key == "height":
                style.height = Unit.de(value)
            elif key == "width":
                style.width = Unit.de(value)
            elif key == "padding":
                style.padding = Unit.de(value)
            elif key == "margin":
                style.margin = Unit.de(value)
            elif key == "background-color":
                style.background_color = Color.de(value)
        style.align = Alignments.de(_alignment_source(pairs))
        return style

    def ser(self) -> str:
        """Write the container style declarations."""
        return (
            self.align.ser()
            + f"height: {self.height.ser()};"
            + f"width: {self.width.ser()};"
            + f"padding: {self.padding.ser()};"
            + f"margin: {self.margin.ser()};"
            + f"background-color: {self.background_color.ser()};"
        )


@dataclass
class SizedBoxStyle:
    """Style of ``SizedBox``: a height and a width."""

    height: Unit = field(default_factory=_auto)
    width: Unit = field(default_factory=_auto)

    @classmethod
    def de(cls, s: str) -> SizedBoxStyle:
        """Read the height and width declarations."""
        style = cls()
        for key, value in parse_style(s):
            if key == "height":
                style.height = Unit.de(value)
            elif key == "width":
                style.width = Unit.de(value)
        return style

    def ser(self) -> str:
        """Write the height and width declarations."""
        return f"height: {self.height.ser()}; width: {self.width.ser()};"


@dataclass
class FlexStyle:
    """Style of ``Flex``."""

    align: Alignments = Alignments.CENTER
    basis: FlexBasis = field(default_factory=FlexBasis)
    direction: FlexDirection = FlexDirection.COLUMN
    grow: Unit = field(default_factory=lambda: _unit(UnitKind.NONE, 1.0))
    order: Unit = field(default_factory=lambda: _unit(UnitKind.NONE, 1.0))
    wrap: bool = True

    @classmethod
    def de(cls, s: str) -> FlexStyle:
        """Read a flex style; the alignment part must be readable."""
        style = cls()
        pairs = parse_style(s)
        for key, value in pairs:
            if key == "flex-basis":
                style.basis = FlexBasis.de(value)
            elif key == "flex-direction":
                style.direction = FlexDirection.de(value)
            elif key == "flex-grow":
                style.grow = Unit.de(value)
            elif key == "flex-order":
                style.order = Unit.de(value)
            elif key == "flex-wrap":
                style.wrap = value == "wrap"
        style.align = Alignments.de(_alignment_source(pairs))
        return style

    def ser(self) -> str:
        """Write the flex style declarations."""
        wrap = "wrap" if self.wrap else "no-wrap"
        return (
            self.align.ser()
            + self.basis.ser()
            + self.direction.ser()
            + f"flex-grow: {self.grow.ser()};"
            + f"flex-order: {self.order.ser()};"
            + f"wrap: {wrap};"
        )


@dataclass
class GridStyle:
    """Style of ``Grid``."""

    col: GridAuto = field(default_factory=lambda: GridAuto(GridAuto.Kind.AUTO))
    col_gap: Unit = field(default_factory=lambda: _unit(UnitKind.NONE, 0.0))
    flow: GridFlow = GridFlow.ROW
    row: GridAuto = field(default_factory=lambda: GridAuto(GridAuto.Kind.AUTO))
    row_gap: Unit = field(default_factory=lambda: _unit(UnitKind.NONE, 0.0))
    template_col: GridTemplate = field(
        default_factory=lambda: GridTemplate(GridTemplate.Kind.NONE)
    )
    template_row: GridTemplate = field(
        default_factory=lambda: GridTemplate(GridTemplate.Kind.NONE)
    )

    @classmethod
    def de(cls, s: str) -> GridStyle:
        """Read the grid declarations; unknown keys are ignored."""
        style = cls()
        for key, value in parse_style(s):
            if key == "grid-auto-columns":
                style.col = GridAuto.de(value)
            elif key == "grid-auto-flow":
                style.flow = GridFlow.de(value)
            elif key == "grid-auto-rows":
                style.row = GridAuto.de(value)
            elif key == "grid-column-gap":
                style.col_gap = Unit.de(value)
            elif key == "grid-row-gap":
                style.row_gap = Unit.de(value)
            elif key == "grid-template-columns":
                style.template_col = GridTemplate.de(value)
            elif key == "grid-template-rows":
                style.template_row = GridTemplate.de(value)
        return style

    def ser(self) -> str:
        """Write the grid declarations, starting with ``display: grid``."""
        return (
            "display: grid;"
            + f"grid-auto-columns: {self.col.ser()};"
            + f"grid-auto-flow: {self.flow.ser()};"
            + f"grid-auto-rows: {self.row.ser()};"
            + f"grid-column-gap: {self.col_gap.ser()};"
            + f"grid-row-gap: {self.row_gap.ser()};"
            + f"grid-template-columns: {self.template_col.ser()};"
            + f"grid-template-rows: {self.template_row.ser()};"
        )


@dataclass
class MultiColumnStyle:
    """Style of ``MultiColumn``."""

    color: Color = field(default_factory=lambda: Color.named("Inherit"))
    count: Unit = field(default_factory=_auto)
    gap: Unit = field(default_factory=_auto)
    style: MultiColumnLineStyle = MultiColumnLineStyle.NONE

    @classmethod
    def de(cls, s: str) -> MultiColumnStyle:
        """Read the column declarations; unknown keys are ignored."""
        result = cls()
        for key, value in parse_style(s):
            if key == "column-count":
                result.count = Unit.de(value)
            elif key == "column-gap":
                result.gap = Unit.de(value)
            elif key == "column-rule-color":
                result.color = Color.de(value)
            elif key == "column-rule-style":
                result.style = MultiColumnLineStyle.de(value)
        return result

    def ser(self) -> str:
        """Write the column declarations."""
        return (
            f"column-count: {self.count.ser()}"
            + f"column-gap: {self.gap.ser()}"
            + f"column-rule-color: {self.color.ser()}"
            + f"column-rule-style: {self.style.ser()}"
        )


@dataclass
class TextStyle:
    """Style of ``Text``."""

    bold: bool = True
    color: Color = field(default_factory=lambda: Color.named("Pink"))
    italic: bool = True
    size: Unit = field(default_factory=lambda: _unit(UnitKind.REM, 42.0))
    weight: Unit = field(default_factory=lambda: _unit(UnitKind.NONE, 400.0))
    height: Unit = field(default_factory=lambda: _unit(UnitKind.REM, 1.0))
    stretch: Unit = field(default_factory=lambda: _unit(UnitKind.PERCENT, 100.0))

    @classmethod
    def de(cls, s: str) -> TextStyle:
        """Read text declarations, starting from the default style."""
        style = cls()
        for piece in s.split(";"):
            if not piece:
                continue
            value = piece[piece.find(":") + 1:].strip() if ":" in piece else piece[1:].strip()
            if "color" in piece:
                style.color = Color.de(value)
            elif "font-weight" in piece:
                style.weight = Unit.de(value)
                style.bold = (
                    style.weight.kind is UnitKind.NONE and style.weight.value == 700.0
                )
            elif "font-style" in piece:
                style.italic = value == "italic"
            elif "font-size" in piece:
                style.size = Unit.de(value)
            elif "height" in piece:
                style.height = Unit.de(value)
            elif "font-stretch" in piece:
                style.stretch = Unit.de(value)
        return style

    def ser(self) -> str:
        """Write the text declarations; a bold style is written with weight 700."""
        weight = "700" if self.bold else self.weight.ser()
        font_style = "italic" if self.italic else "normal"
        return (
            f"color: {self.color.ser()}; font-weight: {weight}; "
            f"font-style: {font_style}; font-size: {self.size.ser()}; "
            f"font-stretch: {self.stretch.ser()}; line-height: {self.height.ser()};"
        )