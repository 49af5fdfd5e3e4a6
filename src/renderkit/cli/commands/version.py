# topmark:header:start
#
#   project      : RenderKit
#   file         : version.py
#   file_relpath : src/renderkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit `version` command.

Prints the RenderKit version installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging

import click

from renderkit.cli.cli_types import EnumChoiceParam
from renderkit.cli.console import get_console
from renderkit.cli.options import CONTEXT_SETTINGS
from renderkit.constants import RENDERKIT_VERSION
from renderkit.nodes.serializers import OutputFormat


@click.command(
    name="version",
    context_settings=CONTEXT_SETTINGS,
    help="Show the current version of RenderKit.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format ('json' for machine output; anything else prints plain text).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of RenderKit."""
    console = get_console(ctx)
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": RENDERKIT_VERSION}))
    elif vlevel <= logging.INFO:
        console.print(console.styled("RenderKit version:", bold=True, underline=True))
        console.print(f"    {console.styled(RENDERKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(RENDERKIT_VERSION, bold=True))
