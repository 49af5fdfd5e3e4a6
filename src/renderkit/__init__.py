# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit package.

RenderKit turns loosely typed content descriptors into display nodes through
an ordered, pluggable chain of renderers. Callers only say "render this
content"; the pipeline decides whether it is a string, a record, an object
that knows how to render itself, or an already finished node.

```python
from renderkit import RenderingPipeline

node = RenderingPipeline().render({"content": "hi"})
```
"""

from __future__ import annotations

from renderkit.core.errors import ArgumentError, ConfigError, RenderKitError, ValidationError
from renderkit.entity import Entity, normalize
from renderkit.pipeline import NO_MATCH, NoMatch, RenderingPipeline, ReturnPolicy, TriggerManager

__all__ = [
    "NO_MATCH",
    "ArgumentError",
    "ConfigError",
    "Entity",
    "NoMatch",
    "RenderKitError",
    "RenderingPipeline",
    "ReturnPolicy",
    "TriggerManager",
    "ValidationError",
    "normalize",
]
