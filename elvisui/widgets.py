"""Widgets and layouts, and how they turn into trees and markup."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from elvisui.errors import DeserializeHtmlError
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


def _copies(children: list[Tree]) -> list[Tree]:
    return [copy.copy(child) for child in children]


def _only_child(tree: Tree, widget: str) -> Tree:
    if len(tree.children) != 1:
        raise DeserializeHtmlError(
            f"deserialize {widget} failed, children's length should be 1"
        )
    return copy.copy(tree.children[0])


def _style_of(tree: Tree) -> str:
    return tree.attrs.get("style", "")


def _single_child_tree(style: str, child: Tree) -> Tree:
    return Tree("div", {"style": style, "class": "elvis-flex"}, [copy.copy(child)])


def _styled_children_tree(style: str, children: list[Tree]) -> Tree:
    return Tree("div", {"style": style}, _copies(children))


def _flex_children_tree(name: str, children: list[Tree]) -> Tree:
    return Tree("div", {"class": f"elvis-{name} elvis-flex"}, _copies(children))


# widgets


@dataclass(frozen=True)
class ImageSrc:
    """The address of an image."""

    url: str

    @classmethod
    def de(cls, s: str) -> ImageSrc:
        """Take the text as the address."""
        return cls(s)

    def ser(self) -> str:
        """Write the address as a ``background-image`` declaration."""
        return f"background-image: url({self.url})"

    def __bytes__(self) -> bytes:
        return self.url.encode()


@dataclass
class Text:
    """A paragraph of text with its style."""

    text: str = ""
    style: TextStyle = field(default_factory=TextStyle)

    def to_tree(self) -> Tree:
        """A ``p`` tree holding one text node."""
        return Tree(
            "p",
            {"style": self.style.ser()},
            [Tree("plain", {"text": self.text})],
        )

    @classmethod
    def de(cls, s: str) -> Text:
        """Read a text widget from markup with exactly one child."""
        tree = Tree.de(s)
        if len(tree.children) != 1:
            raise DeserializeHtmlError(
                "deserialize Text failed, children's length should be 1"
            )
        content = tree.children[0].attrs.get("text", "")
        return cls(content, TextStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


@dataclass
class Image:
    """An image filling its parent, drawn behind its child."""

    src: ImageSrc
    child: Tree = field(default_factory=Tree)

    def __post_init__(self) -> None:
        if isinstance(self.src, str):
            self.src = ImageSrc(self.src)

    def to_tree(self) -> Tree:
        """A ``div`` tree with the image class and background style."""
        return Tree(
            "div",
            {"class": "elvis-image", "style": self.src.ser()},
            [copy.copy(self.child)],
        )

    @classmethod
    def de(cls, s: str) -> Image:
        """Read an image from markup with a ``src`` attribute and one child."""
        tree = Tree.de(s)
        child = _only_child(tree, "Image")
        return cls(ImageSrc(tree.attrs.get("src", "")), child)

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


# layouts


@dataclass
class Container:
    """A single-child flex box with size, spacing, alignment and background."""

    child: Tree
    style: ContainerStyle = field(default_factory=ContainerStyle)

    def to_tree(self) -> Tree:
        """A flex ``div`` tree around the child."""
        return _single_child_tree(self.style.ser(), self.child)

    @classmethod
    def de(cls, s: str) -> Container:
        """Read a container from markup with one child."""
        tree = Tree.de(s)
        child = _only_child(tree, "Container")
        return cls(child, ContainerStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


@dataclass
class List:
    """Children with no style of their own."""

    children: list[Tree] = field(default_factory=list)

    def to_tree(self) -> Tree:
        """A bare ``div`` tree holding the children."""
        return Tree("div", {}, _copies(self.children))


@dataclass
class SizedBox:
    """A box of fixed height and width, mostly used for white space."""

    child: Tree
    style: SizedBoxStyle = field(default_factory=SizedBoxStyle)

    def to_tree(self) -> Tree:
        """A flex ``div`` tree around the child."""
        return _single_child_tree(self.style.ser(), self.child)

    @classmethod
    def de(cls, s: str) -> SizedBox:
        """Read a sized box from markup with one child."""
        tree = Tree.de(s)
        child = _only_child(tree, "SizedBox")
        return cls(child, SizedBoxStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


@dataclass
class Align:
    """Places its child according to an alignment."""

    child: Tree
    style: AlignStyle = field(default_factory=AlignStyle)

    def to_tree(self) -> Tree:
        """A flex ``div`` tree around the child."""
        return _single_child_tree(self.style.ser(), self.child)

    @classmethod
    def de(cls, s: str) -> Align:
        """Read an align widget from markup with one child."""
        tree = Tree.de(s)
        child = _only_child(tree, "Align")
        return cls(child, AlignStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


@dataclass
class Center:
    """Centres its child."""

    child: Tree

    def to_tree(self) -> Tree:
        """A centring flex ``div`` tree around the child."""
        return Tree(
            "div",
            {"class": "elvis-center elvis-flex"},
            [copy.copy(self.child)],
        )


@dataclass
class Col:
    """Children laid out top to bottom."""

    children: list[Tree] = field(default_factory=list)

    def to_tree(self) -> Tree:
        """A column flex ``div`` tree holding the children."""
        return _flex_children_tree("col", self.children)


@dataclass
class Flex:
    """A single-child flex box with full flex settings."""

    child: Tree
    style: FlexStyle = field(default_factory=FlexStyle)

    def to_tree(self) -> Tree:
        """A flex ``div`` tree around the child."""
        return _single_child_tree(self.style.ser(), self.child)


@dataclass
class Row:
    """Children laid out left to right."""

    children: list[Tree] = field(default_factory=list)

    def to_tree(self) -> Tree:
        """A row flex ``div`` tree holding the children."""
        return _flex_children_tree("row", self.children)


@dataclass
class Grid:
    """Children placed in a grid."""

    children: list[Tree] = field(default_factory=list)
    style: GridStyle = field(default_factory=GridStyle)

    def to_tree(self) -> Tree:
        """A styled ``div`` tree holding the children."""
        return _styled_children_tree(self.style.ser(), self.children)

    @classmethod
    def de(cls, s: str) -> Grid:
        """Read a grid from markup."""
        tree = Tree.de(s)
        return cls(_copies(tree.children), GridStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()


@dataclass
class MultiColumn:
    """Children flowed over several columns."""

    children: list[Tree] = field(default_factory=list)
    style: MultiColumnStyle = field(default_factory=MultiColumnStyle)

    def to_tree(self) -> Tree:
        """A styled ``div`` tree holding the children."""
        return _styled_children_tree(self.style.ser(), self.children)

    @classmethod
    def de(cls, s: str) -> MultiColumn:
        """Read a multi-column layout from markup."""
        tree = Tree.de(s)
        return cls(_copies(tree.children), MultiColumnStyle.de(_style_of(tree)))

    def ser(self) -> str:
        """Write the widget as markup."""
        return self.to_tree().ser()