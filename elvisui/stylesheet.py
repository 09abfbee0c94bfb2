"""Collect the CSS rules that a widget tree needs."""

from __future__ import annotations

from dataclasses import dataclass, field

from elvisui.tree import Tree

_CLASS_RULES: dict[str, str] = {
    "elvis-center": "\n".join(
        [
            "  align-items: center;",
            "  height: 100%;",
            "  justify-content: center;",
            "  width: 100%;",
        ]
    ),
    "elvis-col": "  flex-direction: column;",
    "elvis-flex": "\n".join(
        [
            "  display: flex;",
            "  height: 100%;",
            "  flex: 1;",
            "  width: 100%;",
        ]
    ),
    "elvis-image": "\n".join(
        [
            "  background-position: center;",
            "  background-repeat: no-repeat;",
            "  background-size: cover;",
            "  height: 100%;",
            "  width: 100%;",
        ]
    ),
    "elvis-row": "  flex-direction: row;",
}


def _split_each_whitespace(text: str) -> list[str]:
    """Split at every single whitespace character, keeping empty pieces."""
    pieces: list[str] = []
    current: list[str] = []
    for char in text:
        if char.isspace():
            pieces.append("".join(current))
            current = []
        else:
            current.append(char)
    pieces.append("".join(current))
    return pieces


@dataclass
class StyleSheet:
    """CSS rule bodies keyed by selector: ``.class`` or ``#id``."""

    table: dict[str, str] = field(default_factory=dict)

    def batch(self, tree: Tree) -> None:
        """Move inline styles of ``tree`` and its descendants into id rules.

        The ``style`` attribute is taken off each node; its classes are added
        as class rules where they are known.
        """
        style = tree.attrs.pop("style", None)
        if style is not None:
            self.add_id(tree.attrs.get("id", ""), style)

        for name in _split_each_whitespace(tree.attrs.get("class", "")):
            self.add_class(name.strip())

        for child in tree.children:
            self.batch(child)

    def add_class(self, name: str) -> None:
        """Add the rule of a known widget class; unknown names are ignored."""
        if self.table.get(name, "") != "":
            return
        style = _CLASS_RULES.get(name, "")
        if not style:
            return
        self.table[f".{name}"] = style

    def add_id(self, ti: str, s: str) -> None:
        """Store the declarations of ``s`` as the rule of id ``ti``, one per line."""
        style = "".join(f"  {piece.strip()};\n" for piece in s.split(";") if piece)
        key = f"#{ti}"
        current = self.table.setdefault(key, "")
        if current != style:
            if not style:
                raise ValueError(f"cannot replace the rule of {key!r} with an empty style")
            self.table[key] = style[:-1]