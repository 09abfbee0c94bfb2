import pytest

from elvisui.color import Color
from elvisui.errors import DeserializeHtmlError
from elvisui.layout_values import Alignments, GridFlow
from elvisui.styles import (
    AlignStyle,
    ContainerStyle,
    FlexStyle,
    GridStyle,
    MultiColumnStyle,
    SizedBoxStyle,
    TextStyle,
)
from elvisui.tree import Tree
from elvisui.unit import Unit, UnitKind
from elvisui.widgets import (
    Align,
    Center,
    Col,
    Container,
    Flex,
    Grid,
    Image,
    ImageSrc,
    List,
    MultiColumn,
    Row,
    SizedBox,
    Text,
)


def _bold_style():
    return TextStyle(
        bold=True,
        color=Color.named("Red"),
        italic=True,
        size=Unit(UnitKind.REM, 1.0),
        weight=Unit(UnitKind.NONE, 700.0),
        height=Unit(UnitKind.REM, 1.0),
        stretch=Unit(UnitKind.PERCENT, 100.0),
    )


def test_text_to_tree():
    style = _bold_style()
    tree = Text("hello", style).to_tree()
    assert tree.tag == "p"
    assert tree.attrs == {"style": style.ser()}
    assert len(tree.children) == 1
    assert tree.children[0].tag == "plain"
    assert tree.children[0].attrs == {"text": "hello"}


def test_text_ser():
    style = _bold_style()
    assert Text("hello", style).ser() == f'<p style="{style.ser()}">hello</p>'


def test_text_round_trip():
    original = Text("hello", _bold_style())
    assert Text.de(original.ser()) == original


@pytest.mark.parametrize("markup", ["<p></p>", "<p><a></a><b></b></p>"])
def test_text_de_needs_one_child(markup):
    with pytest.raises(DeserializeHtmlError):
        Text.de(markup)


def test_image_src():
    assert ImageSrc("pic.png").ser() == "background-image: url(pic.png)"
    assert ImageSrc.de("pic.png") == ImageSrc("pic.png")
    assert bytes(ImageSrc("pic.png")) == b"pic.png"


def test_image_accepts_plain_string():
    assert Image("pic.png").src == ImageSrc("pic.png")


def test_image_to_tree():
    child = Tree("p")
    tree = Image("pic.png", child).to_tree()
    assert tree.tag == "div"
    assert tree.attrs == {
        "class": "elvis-image",
        "style": "background-image: url(pic.png)",
    }
    assert tree.children == [child]


def test_image_de():
    image = Image.de('<div src="pic.png"><p></p></div>')
    assert image.src == ImageSrc("pic.png")
    assert image.child.tag == "p"


def test_image_de_needs_one_child():
    with pytest.raises(DeserializeHtmlError):
        Image.de('<div src="pic.png"></div>')


def test_center_to_tree():
    child = Tree("p")
    tree = Center(child).to_tree()
    assert tree.attrs == {"class": "elvis-center elvis-flex"}
    assert tree.children == [child]


@pytest.mark.parametrize(
    "widget, attrs",
    [
        (Col, {"class": "elvis-col elvis-flex"}),
        (Row, {"class": "elvis-row elvis-flex"}),
        (List, {}),
    ],
)
def test_multi_child_trees(widget, attrs):
    children = [Tree("a"), Tree("b")]
    tree = widget(children).to_tree()
    assert tree.tag == "div"
    assert tree.attrs == attrs
    assert [child.tag for child in tree.children] == ["a", "b"]


def test_children_are_copied():
    children = [Tree("a")]
    tree = Col(children).to_tree()
    tree.children[0].attrs["id"] = "x"
    assert children[0].attrs == {}
    assert tree.children[0] is not children[0]


@pytest.mark.parametrize(
    "widget, style",
    [
        (Align, AlignStyle()),
        (Container, ContainerStyle()),
        (Flex, FlexStyle()),
        (SizedBox, SizedBoxStyle()),
    ],
)
def test_single_child_trees(widget, style):
    child = Tree("p")
    tree = widget(child, style).to_tree()
    assert tree.tag == "div"
    assert tree.attrs == {"style": style.ser(), "class": "elvis-flex"}
    assert tree.children == [child]


@pytest.mark.parametrize(
    "widget, style", [(Grid, GridStyle()), (MultiColumn, MultiColumnStyle())]
)
def test_styled_multi_child_trees(widget, style):
    tree = widget([Tree("a")], style).to_tree()
    assert tree.attrs == {"style": style.ser()}
    assert [child.tag for child in tree.children] == ["a"]


def test_grid_ser_matches_tree():
    grid = Grid([Tree("a")])
    assert grid.ser() == grid.to_tree().ser()


def test_sized_box_de_without_style():
    box = SizedBox.de("<div><p></p></div>")
    assert box.child.tag == "p"
    assert box.style == SizedBoxStyle()


def test_sized_box_de_needs_one_child():
    with pytest.raises(DeserializeHtmlError):
        SizedBox.de("<div><a></a><b></b></div>")


def test_align_de():
    align = Align.de(
        '<div style="align-items: flex-end; justify-content: center"><p></p></div>'
    )
    assert align.child.tag == "p"
    assert align.style.align is Alignments.CENTER


def test_align_de_without_style_fails():
    with pytest.raises(DeserializeHtmlError):
        Align.de("<div><p></p></div>")


def test_container_de():
    container = Container.de('<div style="align-items: center"><p></p></div>')
    assert container.child.tag == "p"
    assert container.style.align is Alignments.CENTER


def test_container_de_without_alignment_fails():
    with pytest.raises(DeserializeHtmlError):
        Container.de("<div><p></p></div>")


def test_grid_de():
    grid = Grid.de("<div><a></a><b></b></div>")
    assert [child.tag for child in grid.children] == ["a", "b"]
    assert grid.style == GridStyle()


def test_grid_de_reads_flow():
    grid = Grid.de('<div style="grid-auto-flow: column;"></div>')
    assert grid.children == []
    assert grid.style.flow is GridFlow.COLUMN


def test_multi_column_de():
    layout = MultiColumn.de("<div><a></a></div>")
    assert [child.tag for child in layout.children] == ["a"]
    assert layout.style == MultiColumnStyle()