# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit rendering pipeline package.

This package contains the components of the renderer chain:

- the ordered registry and its execution policy
  ([`renderkit.pipeline.triggers`][renderkit.pipeline.triggers]),
- the return policy enum and the ``NO_MATCH`` outcome,
- the default renderer set
  ([`renderkit.pipeline.defaults`][renderkit.pipeline.defaults]),
- the entity-aware facade
  ([`renderkit.pipeline.renderer`][renderkit.pipeline.renderer]).
"""

from __future__ import annotations

from .outcomes import NO_MATCH, NoMatch
from .policy import ReturnPolicy
from .renderer import Renderer, RenderingPipeline
from .triggers import TriggerManager

__all__ = [
    "NO_MATCH",
    "NoMatch",
    "Renderer",
    "RenderingPipeline",
    "ReturnPolicy",
    "TriggerManager",
]
