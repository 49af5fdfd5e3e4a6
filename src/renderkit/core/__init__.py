# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks shared by all RenderKit layers."""

from __future__ import annotations
