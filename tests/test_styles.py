import pytest

from elvisui.color import Color
from elvisui.errors import DeserializeHtmlError
from elvisui.layout_values import (
    Alignments,
    FlexBasis,
    FlexDirection,
    GridAuto,
    GridFlow,
    GridTemplate,
    MultiColumnLineStyle,
)
from elvisui.styles import (
    AlignStyle,
    ContainerStyle,
    FlexStyle,
    GridStyle,
    MultiColumnStyle,
    SizedBoxStyle,
    TextStyle,
    parse_style,
)
from elvisui.unit import Unit, UnitKind


def test_text_style():
    ts = TextStyle(
        True,
        Color.named("Red"),
        True,
        Unit(UnitKind.REM, 1.0),
        Unit(UnitKind.NONE, 700.0),
        Unit(UnitKind.REM, 1.0),
        Unit(UnitKind.PERCENT, 100.0),
    )
    sr = (
        "color: rgba(244, 67, 54, 1.0); font-weight: 700; font-style: italic; "
        "font-size: 1.0rem; height: 1.0rem; font-stretch: 100.0%"
    )
    assert TextStyle.de(sr) == ts


def test_text_style_ser():
    ts = TextStyle(
        True,
        Color.named("Red"),
        True,
        Unit(UnitKind.REM, 1.0),
        Unit(UnitKind.NONE, 700.0),
        Unit(UnitKind.REM, 1.0),
        Unit(UnitKind.PERCENT, 100.0),
    )
    assert ts.ser() == (
        "color: rgba(244, 67, 54, 1.0); font-weight: 700; font-style: italic; "
        "font-size: 1.0rem; font-stretch: 100.0%; line-height: 1.0rem;"
    )


def test_text_style_round_trip_not_bold():
    ts = TextStyle(
        False,
        Color.named("Blue"),
        False,
        Unit(UnitKind.PX, 12.0),
        Unit(UnitKind.NONE, 400.0),
        Unit(UnitKind.EM, 2.0),
        Unit(UnitKind.PERCENT, 50.0),
    )
    text = ts.ser()
    assert "font-weight: 400;" in text
    assert "font-style: normal;" in text
    assert TextStyle.de(text) == ts


def test_text_style_empty_is_default():
    assert TextStyle.de("") == TextStyle()


def test_text_style_weight_decides_bold():
    assert TextStyle.de("font-weight: 300").bold is False
    assert TextStyle.de("font-weight: 700").bold is True


def test_parse_style_keeps_colon_in_value():
    assert parse_style("height: 20; width:5;nothing") == [
        ("height", ": 20"),
        ("width", ":5"),
    ]


def test_align_style():
    assert AlignStyle(Alignments.TOP_LEFT).ser() == (
        "align-items: flex-start; justify-content: flex-start;"
    )
    assert AlignStyle.de("flex-end;center").align is Alignments.BOTTOM_CENTER
    with pytest.raises(DeserializeHtmlError):
        AlignStyle.de("a;b;c")


def test_container_style_ser_default():
    assert ContainerStyle().ser() == (
        "align-items: center; justify-content: center;"
        "height: 1.0em;width: 1.0em;padding: 1.0em;margin: 1.0em;"
        "background-color: rgba(233, 30, 99, 1.0);"
    )


def test_container_style_de_with_one_alignment():
    style = ContainerStyle.de("align-items: center; background-color: inherit")
    assert style.align is Alignments.CENTER
    assert style.background_color == Color.named("Inherit")
    assert style.width == Unit(UnitKind.EM, 1.0)


def test_container_style_de_needs_alignment():
    with pytest.raises(DeserializeHtmlError):
        ContainerStyle.de("height: 10px")
    with pytest.raises(DeserializeHtmlError):
        ContainerStyle.de(ContainerStyle().ser())


def test_sized_box_style():
    assert SizedBoxStyle().ser() == "height: inherit; width: inherit;"
    assert SizedBoxStyle.de("") == SizedBoxStyle()
    style = SizedBoxStyle.de("height: 3rem")
    assert style.height == Unit(UnitKind.NONE, 1.0)
    assert style.width == Unit(UnitKind.AUTO, 0.0)


def test_flex_style_ser_default():
    assert FlexStyle().ser() == (
        "align-items: center; justify-content: center;"
        "flex-basis: fill;flex-direction: column;"
        "flex-grow: 1;flex-order: 1;wrap: wrap;"
    )


def test_flex_style_de():
    style = FlexStyle.de(
        "align-items: center; flex-wrap: wrap; flex-direction: row; flex-basis: max-content"
    )
    assert style.align is Alignments.CENTER
    assert style.direction is FlexDirection.ROW
    assert style.basis == FlexBasis(FlexBasis.Kind.MAX_CONTENT)
    assert style.wrap is False


def test_flex_style_de_needs_alignment():
    with pytest.raises(DeserializeHtmlError):
        FlexStyle.de("flex-direction: row")


def test_grid_style_ser_default():
    assert GridStyle().ser() == (
        "display: grid;grid-auto-columns: auto;grid-auto-flow: row;"
        "grid-auto-rows: auto;grid-column-gap: 0;grid-row-gap: 0;"
        "grid-template-columns: none;grid-template-rows: none;"
    )


def test_grid_style_de():
    style = GridStyle.de(
        "display: grid; grid-auto-columns: max-content; grid-auto-flow: column; "
        "grid-auto-rows: unset; grid-template-columns: subgrid"
    )
    assert style.col == GridAuto(GridAuto.Kind.MAX_CONTENT)
    assert style.flow is GridFlow.COLUMN
    assert style.row == GridAuto(GridAuto.Kind.UNSET)
    assert style.template_col == GridTemplate(GridTemplate.Kind.SUB_GRID)
    assert style.template_row == GridTemplate(GridTemplate.Kind.NONE)


def test_multi_column_style_ser_default():
    assert MultiColumnStyle().ser() == (
        "column-count: inheritcolumn-gap: inherit"
        "column-rule-color: inheritcolumn-rule-style: style: none;"
    )


def test_multi_column_style_de():
    style = MultiColumnStyle.de(
        "column-rule-color: inherit; column-rule-style: solid"
    )
    assert style.color == Color.named("Inherit")
    assert style.style is MultiColumnLineStyle.NONE
    assert style.count == Unit(UnitKind.AUTO, 0.0)


def test_multi_column_style_empty_is_default():
    assert MultiColumnStyle.de("") == MultiColumnStyle()