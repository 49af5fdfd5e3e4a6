# topmark:header:start
#
#   project      : RenderKit
#   file         : config.py
#   file_relpath : src/renderkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit `config` command group.

  * ``renderkit config dump``: print the effective merged configuration as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from renderkit.cli.config_resolver import resolve_config_from_click
from renderkit.cli.console import get_console
from renderkit.cli.options import CONTEXT_SETTINGS, config_file_option

if TYPE_CHECKING:
    from pathlib import Path


@click.group(
    name="config",
    help="Inspect RenderKit configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Print the effective configuration (defaults, config file) as TOML.",
)
@config_file_option
@click.pass_context
def config_dump_command(ctx: click.Context, *, config_file: Path | None) -> None:
    """Print the merged configuration as a TOML document."""
    console = get_console(ctx)
    config = resolve_config_from_click(config_file=config_file)
    console.print(config.to_toml().rstrip("\n"))
