# topmark:header:start
#
#   project      : RenderKit
#   file         : main.py
#   file_relpath : src/renderkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit CLI entry point.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``verbosity_level``: program-output level from ``-v``/``-q``.
- ``log_level``: internal logging level from ``RENDERKIT_LOG_LEVEL``.
- ``console``: the [`ClickConsole`][renderkit.cli.console.ClickConsole] used by subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from renderkit.cli.commands.config import config_command
from renderkit.cli.commands.render import render_command
from renderkit.cli.commands.renderers import renderers_command
from renderkit.cli.commands.version import version_command
from renderkit.cli.console import ClickConsole
from renderkit.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from renderkit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from renderkit.cli.console import ConsoleLike
    from renderkit.config.logging import RenderKitLogger

logger: RenderKitLogger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``ctx.obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Disable ANSI colors in program output.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="RenderKit CLI: render content descriptors through a renderer pipeline.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the RenderKit CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'renderkit render CONTENT' to render a content descriptor.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(render_command)
cli.add_command(renderers_command)
cli.add_command(config_command)

if __name__ == "__main__":
    cli()
