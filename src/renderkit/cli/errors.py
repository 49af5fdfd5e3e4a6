# topmark:header:start
#
#   project      : RenderKit
#   file         : errors.py
#   file_relpath : src/renderkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the RenderKit CLI.

Raise these in commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from renderkit.cli.exit_codes import ExitCode


class RenderKitCliError(click.ClickException):
    """Base class for all RenderKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class RenderKitUsageError(RenderKitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RenderKitInputError(RenderKitCliError):
    """Error for content that cannot be read."""

    exit_code = ExitCode.INPUT_ERROR


class RenderKitConfigError(RenderKitCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class RenderKitRenderError(RenderKitCliError):
    """Error raised when rendering fails (invalid entity, renderer exception)."""

    exit_code = ExitCode.FAILURE
