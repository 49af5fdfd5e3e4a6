# topmark:header:start
#
#   project      : RenderKit
#   file         : __main__.py
#   file_relpath : src/renderkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for ``python -m renderkit``."""

from __future__ import annotations

from renderkit.cli.main import cli

if __name__ == "__main__":
    cli()
