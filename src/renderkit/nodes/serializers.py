# topmark:header:start
#
#   project      : RenderKit
#   file         : serializers.py
#   file_relpath : src/renderkit/nodes/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize display nodes to text, HTML, or JSON.

Serializers are pure functions over the node tree. The `NO_MATCH` outcome is
accepted everywhere and serializes to an empty document (``""`` or ``null``),
so callers can pipe `render()` results straight into a serializer.

Machine output (JSON) is stable and colorless; node dictionaries carry a
``kind`` discriminator (``text``, ``break``, ``element``).
"""

from __future__ import annotations

import json
from enum import Enum
from html import escape
from typing import Any

from renderkit.nodes.model import ElementNode, LineBreak, Node, TextNode
from renderkit.pipeline.outcomes import NoMatch

# Elements serialized without a closing tag:
VOID_TAGS: frozenset[str] = frozenset({"br", "hr", "img", "input", "meta", "link"})


class OutputFormat(str, Enum):
    """Output format for serialized nodes.

    Attributes:
        TEXT: Plain text; line breaks become newlines, markup is dropped.
        HTML: An HTML fragment.
        JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    HTML = "html"
    JSON = "json"


def to_text(node: Node | NoMatch) -> str:
    """Return the plain-text projection of ``node``.

    Args:
        node (Node | NoMatch): Node to serialize.

    Returns:
        str: Concatenated text; `LineBreak` becomes ``"\\n"``.
    """
    if isinstance(node, NoMatch):
        return ""
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, LineBreak):
        return "\n"
    if isinstance(node, ElementNode):
        return "".join(to_text(child) for child in node.children)
    raise TypeError(f"Cannot serialize {type(node).__name__} as text")


def _html_attrs(node: ElementNode) -> str:
    parts: list[str] = []
    if node.identity is not None:
        parts.append(f' id="{escape(node.identity, quote=True)}"')
    if node.style_tag:
        parts.append(f' class="{escape(node.style_tag, quote=True)}"')
    return "".join(parts)


def to_html(node: Node | NoMatch) -> str:
    """Return an HTML fragment for ``node``.

    Text is escaped; identity and style tag map to ``id`` and ``class``.

    Args:
        node (Node | NoMatch): Node to serialize.

    Returns:
        str: The HTML fragment.
    """
    if isinstance(node, NoMatch):
        return ""
    if isinstance(node, TextNode):
        return escape(node.text, quote=False)
    if isinstance(node, LineBreak):
        return "<br>"
    if isinstance(node, ElementNode):
        attrs: str = _html_attrs(node)
        if node.tag in VOID_TAGS and not node.children:
            return f"<{node.tag}{attrs}>"
        inner: str = "".join(to_html(child) for child in node.children)
        return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
    raise TypeError(f"Cannot serialize {type(node).__name__} as HTML")


def to_dict(node: Node | NoMatch) -> dict[str, Any] | None:
    """Return a JSON-compatible dict for ``node`` (``None`` for `NO_MATCH`)."""
    if isinstance(node, NoMatch):
        return None
    if isinstance(node, TextNode):
        return {"kind": node.kind, "text": node.text}
    if isinstance(node, LineBreak):
        return {"kind": node.kind}
    if isinstance(node, ElementNode):
        payload: dict[str, Any] = {"kind": node.kind, "tag": node.tag}
        if node.identity is not None:
            payload["id"] = node.identity
        if node.style_tag is not None:
            payload["class"] = node.style_tag
        payload["children"] = [to_dict(child) for child in node.children]
        return payload
    raise TypeError(f"Cannot serialize {type(node).__name__} as JSON")


def to_json(node: Node | NoMatch, *, indent: int | None = 2) -> str:
    """Return ``node`` as a JSON document."""
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


def serialize(node: Node | NoMatch, fmt: OutputFormat) -> str:
    """Serialize ``node`` in the requested format.

    Args:
        node (Node | NoMatch): Rendered result.
        fmt (OutputFormat): Target format.

    Returns:
        str: The serialized document.
    """
    if fmt == OutputFormat.HTML:
        return to_html(node)
    if fmt == OutputFormat.JSON:
        return to_json(node)
    return to_text(node)
