# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit configuration layer.

Modules:
    - renderkit.config.logging: TRACE level, colored formatter, logger factory.
    - renderkit.config.keys: canonical TOML section and key names.
    - renderkit.config.io: TOML load/dump helpers (tomlkit).
    - renderkit.config.model: immutable `PipelineConfig` and its mutable builder.

This package intentionally does not re-export `renderkit.config.model`:
the pipeline imports `renderkit.config.logging`, and the model imports the
pipeline, so importing the model here would create a cycle.
"""

from __future__ import annotations
