# topmark:header:start
#
#   project      : RenderKit
#   file         : options.py
#   file_relpath : src/renderkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Commands and groups stay thin by pulling shared options (verbosity, config
file, output format) from here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from renderkit.cli.cli_types import EnumChoiceParam
from renderkit.cli.errors import RenderKitUsageError
from renderkit.config.logging import TRACE_LEVEL
from renderkit.nodes.serializers import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A `logging` level: TRACE for ``-vvv``, DEBUG for ``-vv``, INFO for ``-v``,
        ERROR for ``-q``, WARNING otherwise.

    Raises:
        RenderKitUsageError: If both ``-v`` and ``-q`` are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RenderKitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` (an explicit renderkit.toml or pyproject.toml)."""
    return click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (renderkit.toml or pyproject.toml). "
        "Without it, the nearest one is discovered from the working directory.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` taking an `OutputFormat` value."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
