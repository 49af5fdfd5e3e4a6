# topmark:header:start
#
#   project      : RenderKit
#   file         : __init__.py
#   file_relpath : src/renderkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for RenderKit.

The entry point is [`renderkit.cli.main.cli`][renderkit.cli.main.cli], also
installed as the ``renderkit`` console script.
"""
