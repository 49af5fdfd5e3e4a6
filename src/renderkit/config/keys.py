# topmark:header:start
#
#   project      : RenderKit
#   file         : keys.py
#   file_relpath : src/renderkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for RenderKit configuration.

Keys defined here are the external configuration API, as it appears in
``renderkit.toml`` and in ``[tool.renderkit]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by RenderKit configuration.

    Example ``renderkit.toml``:

    ```toml
    [pipeline]
    return_policy = "first"
    renderers = ["myapp.render:money"]
    use_defaults = true
    ```
    """

    # [pipeline]
    SECTION_PIPELINE: Final[str] = "pipeline"

    KEY_RETURN_POLICY: Final[str] = "return_policy"
    KEY_RENDERERS: Final[str] = "renderers"
    KEY_USE_DEFAULTS: Final[str] = "use_defaults"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_RENDERKIT: Final[str] = "renderkit"
