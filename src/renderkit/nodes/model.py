# topmark:header:start
#
#   project      : RenderKit
#   file         : model.py
#   file_relpath : src/renderkit/nodes/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable display nodes produced by renderers.

Nodes form a small tree: `TextNode` leaves, `LineBreak` separators and
`ElementNode` containers carrying a tag, optional identity and style tag, and
an ordered tuple of children. They are frozen so a rendered result can be
shared and compared safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for every finished display node."""

    @property
    def kind(self) -> str:
        """Stable, lower-case node kind used by the machine serializer."""
        return "node"


@dataclass(frozen=True, slots=True)
class TextNode(Node):
    """A leaf holding plain text."""

    text: str = ""

    @property
    def kind(self) -> str:
        """Return ``"text"``."""
        return "text"


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """A line separator between sibling nodes."""

    @property
    def kind(self) -> str:
        """Return ``"break"``."""
        return "break"


@dataclass(frozen=True, slots=True)
class ElementNode(Node):
    """A container node.

    Attributes:
        tag (str): Element name, e.g. ``"div"``, ``"table"``, ``"td"``.
        children (tuple[Node, ...]): Ordered child nodes.
        identity (str | None): Optional external-facing identifier.
        style_tag (str | None): Optional space-separated presentation hint.
    """

    tag: str = "div"
    children: tuple[Node, ...] = field(default_factory=tuple)
    identity: str | None = None
    style_tag: str | None = None

    @property
    def kind(self) -> str:
        """Return ``"element"``."""
        return "element"

    def texts(self) -> tuple[str, ...]:
        """Return the text of the direct `TextNode` children, in order."""
        return tuple(child.text for child in self.children if isinstance(child, TextNode))

    def find_all(self, tag: str) -> tuple[ElementNode, ...]:
        """Return all descendant elements with the given tag (depth-first, document order)."""
        found: list[ElementNode] = []
        for child in self.children:
            if isinstance(child, ElementNode):
                if child.tag == tag:
                    found.append(child)
                found.extend(child.find_all(tag))
        return tuple(found)
