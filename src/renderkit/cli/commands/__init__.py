# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``renderkit`` CLI."""
