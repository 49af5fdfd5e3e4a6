# topmark:header:start
#
#   project      : RenderKit
#   file         : renderers.py
#   file_relpath : src/renderkit/cli/commands/renderers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit `renderers` command.

Lists the configured renderer chain in scan order, with the active return
policy. With ``-v`` the configuration sources are listed as well.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from renderkit.cli.config_resolver import build_pipeline_from_config, resolve_config_from_click
from renderkit.cli.console import get_console
from renderkit.cli.options import CONTEXT_SETTINGS, config_file_option
from renderkit.constants import VALUE_NOT_SET
from renderkit.pipeline.triggers import entry_label

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="renderers",
    context_settings=CONTEXT_SETTINGS,
    help="List the configured renderers in scan order.",
)
@config_file_option
@click.pass_context
def renderers_command(ctx: click.Context, *, config_file: Path | None) -> None:
    """List the renderer chain and the return policy."""
    console = get_console(ctx)
    vlevel: int = ctx.obj.get("verbosity_level", logging.WARNING)

    config = resolve_config_from_click(config_file=config_file)
    pipeline = build_pipeline_from_config(config)

    console.print(console.styled(f"Return policy: {pipeline.return_policy.value}", bold=True))
    for index, renderer in enumerate(pipeline.renderers):
        console.print(f"  {index:>2}. {entry_label(renderer)}")

    if vlevel <= logging.INFO:
        console.print()
        console.print(console.styled("Configuration sources:", underline=True))
        sources = [str(p) for p in config.config_files] or [VALUE_NOT_SET]
        for source in sources:
            console.print(f"  - {source}")
