# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/nodes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display node model, node host, and serializers.

This package stands in for the host UI tree. Renderers never create display
objects directly from a global document; they ask a
[`NodeHost`][renderkit.nodes.host.NodeHost] for nodes, and the host decides
what counts as "already renderable".

Public modules:
    - renderkit.nodes.model
    - renderkit.nodes.host
    - renderkit.nodes.serializers
"""

from __future__ import annotations

from .host import DefaultNodeHost, NodeHost
from .model import ElementNode, LineBreak, Node, TextNode

__all__ = [
    "DefaultNodeHost",
    "ElementNode",
    "LineBreak",
    "Node",
    "NodeHost",
    "TextNode",
]
