"""A virtual UI tree, with reading from and writing to markup."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from enum import Enum, auto

from elvisui.errors import DeserializeHtmlError, NoneError

_MASK64 = (1 << 64) - 1


def _rotl(x: int, bits: int) -> int:
    return ((x << bits) | (x >> (64 - bits))) & _MASK64


def _sipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """SipHash-1-3 of ``data``, zero keys by default."""
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    whole = len(data) - len(data) % 8
    for start in range(0, whole, 8):
        m = int.from_bytes(data[start:start + 8], "little")
        v3 ^= m
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= m

    last = ((len(data) & 0xFF) << 56) | int.from_bytes(data[whole:], "little")
    v3 ^= last
    v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    v0 ^= last
    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def _hash_id(tag: str, path: list[int]) -> str:
    digest = format(_siphash13(bytes(path)), "x")
    return f"{tag}-{digest[-6:]}"


class Tree:
    """A node of the virtual UI tree: a tag, attributes, children and a parent link.

    Trees compare by tag, attributes and, pairwise, the children of the left-hand
    tree; the parent link is not compared.
    """

    __slots__ = ("attrs", "children", "tag", "_pre", "__weakref__")

    def __init__(
        self,
        tag: str = "",
        attrs: dict[str, str] | None = None,
        children: list[Tree] | None = None,
        pre: Tree | None = None,
    ) -> None:
        self.tag = tag
        self.attrs: dict[str, str] = {} if attrs is None else attrs
        self.children: list[Tree] = [] if children is None else children
        self._pre: weakref.ReferenceType[Tree] | None = None
        self.pre = pre

    @property
    def pre(self) -> Tree | None:
        """The parent tree, or None for a root or a parent that is gone."""
        return None if self._pre is None else self._pre()

    @pre.setter
    def pre(self, parent: Tree | None) -> None:
        self._pre = None if parent is None else weakref.ref(parent)

    def drain(self) -> None:
        """Detach this tree from its parent; a root is left alone."""
        if self._pre is None:
            return
        parent = self._pre()
        if parent is None:
            raise NoneError("drain child failed")
        parent.remove(self)
        parent.update()

    def idx(self, path: list[int] | None = None) -> None:
        """Give this tree and its descendants an ``id`` attribute where missing.

        ``path`` is extended in place as the walk goes on.
        """
        if path is None:
            path = []
        self.attrs.setdefault("id", _hash_id(self.tag, path))

        path.append(0)
        for child in self.children:
            child.idx(path)
            path[-1] = (path[-1] + 1) & 0xFF

    def locate(self, path: list[int] | None = None) -> list[int]:
        """The child indexes leading up from this tree to the root, appended to ``path``."""
        path = [] if path is None else list(path)
        if self._pre is None:
            return path
        parent = self._pre()
        if parent is None:
            raise NoneError("locate widget failed")
        for index, child in enumerate(parent.children):
            if child == self:
                path.append(index)
                return parent.locate(path)
        return path

    def push(self, child: Tree) -> None:
        """Append ``child`` and make this tree its parent."""
        child.pre = self
        self.children.append(child)
        self.update()

    def remove(self, child: Tree) -> None:
        """Remove the first child equal to ``child``, if there is one."""
        for index, candidate in enumerate(self.children):
            if candidate == child:
                del self.children[index]
                break
        self.update()

    def replace(self, other: Tree) -> None:
        """Take over the tag, attributes and children of ``other``, keeping the parent."""
        self.tag = other.tag
        self.attrs = dict(other.attrs)
        self.children = list(other.children)
        self.update()

    def update(self) -> None:
        """Hook run after the tree changes; a plain tree has nothing to refresh."""
        return None

    @classmethod
    def de(cls, h: str) -> Tree:
        """Read a tree from markup."""
        tree, _ = _rde(h, None)
        return tree

    def ser(self) -> str:
        """Write the tree as markup."""
        if self.tag == "plain":
            return self.attrs.get("text", "")

        attrs = " " + "".join(f'{key}="{value}" ' for key, value in self.attrs.items())
        if not attrs.strip():
            attrs = ""
        children = "".join(child.ser() for child in self.children)
        return f"<{self.tag}{attrs.rstrip()}>{children}</{self.tag}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        if len(self.children) > len(other.children):
            return False
        if any(mine != theirs for mine, theirs in zip(self.children, other.children)):
            return False
        return self.attrs == other.attrs and self.tag == other.tag

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Tree:
        return Tree(self.tag, dict(self.attrs), list(self.children), self.pre)

    def __repr__(self) -> str:
        return f"Tree(tag={self.tag!r}, attrs={self.attrs!r}, children={self.children!r})"


def plain(h: str, pre: Tree | None = None) -> Tree:
    """A text node holding ``h``."""
    return Tree("plain", {"text": h}, [], pre)


@dataclass
class _Extra:
    end: bool
    pos: int
    tag: str


class _ChildState(Enum):
    NONE = auto()
    BEGIN_TAG = auto()
    CLOSE_TAG = auto()
    PLAIN = auto()


class _TagState(Enum):
    NONE = auto()
    TAG = auto()
    ATTRS = auto()
    QUOTE = auto()


def _rde(h: str, pre: Tree | None) -> tuple[Tree, _Extra | None]:
    if not h:
        return Tree(), None
    if "</" not in h:
        return plain(h, pre), None

    tree = Tree()
    tag, attrs, pos = _tag(h)

    children: list[Tree] = []
    ext = _children(h[pos:], tree, tag, children)
    pos += ext.pos
    while not ext.end:
        ext = _children(h[pos:], tree, tag, children)
        pos += ext.pos

    rest = _Extra(False, pos, ext.tag) if pos + 1 != len(h) else None

    tree.pre = pre
    tree.tag = tag
    tree.attrs = attrs
    tree.children = children
    return tree, rest


def _children(cht: str, pre: Tree, tag: str, children: list[Tree]) -> _Extra:
    itag = tag
    state = _ChildState.NONE
    t0 = t1 = c0 = c1 = 0
    for p, q in enumerate(cht):
        if q == "<":
            if state is _ChildState.PLAIN:
                c1 = p
            state = _ChildState.BEGIN_TAG
            t0 = t1 = p
        elif q == "/":
            if cht[t0:t0 + 1] == "<":
                state = _ChildState.CLOSE_TAG
            elif state is not _ChildState.PLAIN:
                raise DeserializeHtmlError(
                    f"children parse failed {tag}, cht: {cht}, process: {cht[t0:t0 + 1]}"
                )
        elif q == ">":
            t1 = p
            if state is _ChildState.BEGIN_TAG:
                child, ext = _rde(cht[t0:], pre)
                children.append(child)
                if ext is not None:
                    return _Extra(False, ext.pos + t0, ext.tag)
            elif state is _ChildState.CLOSE_TAG:
                itag = cht[t0 + 1:t1].strip()[1:].strip()
                if itag != tag:
                    raise DeserializeHtmlError(
                        f"children parse failed {tag}, cht: {cht}, close_tag: {itag}"
                    )
                if cht[c0:c1]:
                    children.append(plain(cht[c0:c1], pre))
                return _Extra(True, p, itag)
        elif not q.isspace():
            if state is _ChildState.NONE:
                state = _ChildState.PLAIN
                c0 = c1 = p
            elif state is _ChildState.PLAIN:
                c1 = p
    return _Extra(True, len(cht), itag)


def _tag(h: str) -> tuple[str, dict[str, str], int]:
    """Read an opening tag; return its name, attributes and the length consumed."""
    t0 = t1 = k0 = k1 = v0 = v1 = 0
    attrs: dict[str, str] = {}
    state = _TagState.NONE
    for p, q in enumerate(h):
        if q == "<":
            state = _TagState.TAG
            t0 = t1 = p + 1
        elif q == ">":
            if state is _TagState.TAG:
                t1 = p
            elif state is _TagState.ATTRS:
                key = h[k0:k1].strip()
                if key:
                    attrs[key] = h[v0:v1].strip()
            return h[t0:t1].strip(), attrs, p + 1
        elif q == '"':
            if state is _TagState.QUOTE:
                state = _TagState.ATTRS
                v1 = p
            else:
                v0 = v1 = p + 1
                state = _TagState.QUOTE
        elif q == "=":
            if state is _TagState.ATTRS:
                k1 = p
            else:
                raise DeserializeHtmlError(f"html tag parse failed: {h[t0:t1]}, html: {h}")
        elif q.isspace():
            if state is _TagState.TAG:
                if not h[t0:t1].strip():
                    t1 = p
                else:
                    state = _TagState.ATTRS
                    k0 = k1 = p + 1
            elif state is _TagState.QUOTE:
                v1 = p
            elif state is _TagState.ATTRS and k1 != k0 and v1 != v0:
                attrs[h[k0:k1].strip()] = h[v0:v1].strip()
                k0 = k1 = p
        elif state is _TagState.TAG:
            t1 = p + 1
        elif state is _TagState.QUOTE:
            v1 = p
        elif state is _TagState.ATTRS:
            if v0 == 0:
                k1 = p
            else:
                v1 = p
    raise DeserializeHtmlError(f"html tag parse failed: {h[t0:t1]}, html: {h}")