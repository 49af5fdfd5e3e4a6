# topmark:header:start
#
#   project      : RenderKit
#   file         : host.py
#   file_relpath : src/renderkit/nodes/host.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node host protocol and the default implementation.

A node host is the only place that knows how to build display nodes and how
to recognize a value that is already a finished node. The default renderer set
is bound to a host at construction, so alternative UI trees can be plugged in
by passing a different host to
[`RenderingPipeline`][renderkit.pipeline.renderer.RenderingPipeline].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from renderkit.nodes.model import ElementNode, LineBreak, Node, TextNode

if TYPE_CHECKING:
    from collections.abc import Iterable


@runtime_checkable
class NodeHost(Protocol):
    """Structural protocol for node factories."""

    def is_renderable(self, value: object) -> bool:
        """Return True if ``value`` is already a finished display node."""
        ...

    def text(self, value: str) -> object:
        """Return a text leaf wrapping ``value``."""
        ...

    def line_break(self) -> object:
        """Return a line separator node."""
        ...

    def container(self, children: Iterable[object]) -> object:
        """Return a generic container wrapping ``children`` in order."""
        ...

    def element(
        self,
        tag: str,
        children: Iterable[object] = (),
        *,
        identity: str | None = None,
        style_tag: str | None = None,
    ) -> object:
        """Return a named element wrapping ``children`` in order."""
        ...


class DefaultNodeHost:
    """Node host producing [`renderkit.nodes.model`][renderkit.nodes.model] values."""

    container_tag: str = "div"

    def is_renderable(self, value: object) -> bool:
        """Return True for instances of `Node`."""
        return isinstance(value, Node)

    def text(self, value: str) -> TextNode:
        """Return a `TextNode` wrapping ``value``."""
        return TextNode(text=value)

    def line_break(self) -> LineBreak:
        """Return a `LineBreak`."""
        return LineBreak()

    def container(self, children: Iterable[object]) -> ElementNode:
        """Return a ``div`` `ElementNode` wrapping ``children``."""
        return self.element(self.container_tag, children)

    def element(
        self,
        tag: str,
        children: Iterable[object] = (),
        *,
        identity: str | None = None,
        style_tag: str | None = None,
    ) -> ElementNode:
        """Return an `ElementNode`.

        Raises:
            TypeError: If a child is not a `Node`.
        """
        kids: tuple[Node, ...] = tuple(children)  # type: ignore[arg-type]
        for kid in kids:
            if not isinstance(kid, Node):
                raise TypeError(f"Element child must be a Node, got {type(kid).__name__}")
        return ElementNode(tag=tag, children=kids, identity=identity, style_tag=style_tag)
