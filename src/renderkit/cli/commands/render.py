# topmark:header:start
#
#   project      : RenderKit
#   file         : render.py
#   file_relpath : src/renderkit/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RenderKit `render` command.

Renders one content value through the configured pipeline and prints the
serialized node:

```bash
renderkit render '{"name": "Monet", "born": 1840}'
echo '"hello"' | renderkit render --stdin --format html
```

The content is parsed as JSON when possible and used as a raw string
otherwise. Exit codes: 0 when a renderer matched, 2 when none did, 1 (or a
more specific error code) on failure.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from renderkit.cli.cli_types import EnumChoiceParam
from renderkit.cli.config_resolver import build_pipeline_from_config, resolve_config_from_click
from renderkit.cli.console import get_console
from renderkit.cli.errors import RenderKitInputError, RenderKitRenderError, RenderKitUsageError
from renderkit.cli.exit_codes import ExitCode
from renderkit.cli.options import CONTEXT_SETTINGS, config_file_option, output_format_option
from renderkit.config.logging import get_logger
from renderkit.core.errors import RenderKitError
from renderkit.entity import Entity
from renderkit.nodes.serializers import serialize
from renderkit.pipeline.outcomes import NO_MATCH
from renderkit.pipeline.policy import ReturnPolicy

if TYPE_CHECKING:
    from pathlib import Path

    from renderkit.config.logging import RenderKitLogger
    from renderkit.nodes.serializers import OutputFormat

logger: RenderKitLogger = get_logger(__name__)


def parse_content(text: str) -> Any:
    """Return ``text`` decoded as JSON, or ``text`` itself if it is not valid JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Content is not JSON; rendering it as a raw string")
        return text


def read_content(content: str | None, read_stdin: bool) -> str:
    """Return the raw content text from the argument or from STDIN.

    Raises:
        RenderKitUsageError: If both or neither sources are given.
        RenderKitInputError: If STDIN cannot be decoded.
    """
    if read_stdin and content is not None:
        raise RenderKitUsageError("Pass CONTENT or --stdin, not both.")
    if not read_stdin:
        if content is None:
            raise RenderKitUsageError("Missing CONTENT (or use --stdin).")
        return content
    try:
        text = click.get_text_stream("stdin").read()
    except UnicodeDecodeError as exc:
        raise RenderKitInputError(f"Cannot decode standard input: {exc}") from exc
    return text.rstrip("\r\n")


@click.command(
    name="render",
    context_settings=CONTEXT_SETTINGS,
    help="Render CONTENT (JSON, or a raw string) through the renderer pipeline.",
)
@click.argument("content", required=False)
@click.option("--stdin", "read_stdin", is_flag=True, default=False, help="Read CONTENT from STDIN.")
@click.option("--id", "identity", default=None, help="Identity of the entity.")
@click.option(
    "--class",
    "style_tags",
    multiple=True,
    help="Style tag of the entity (repeatable; joined with spaces).",
)
@click.option(
    "--return-policy",
    "return_policy",
    type=EnumChoiceParam(ReturnPolicy),
    default=None,
    help="Scan policy: 'first' stops at the first match, 'last' keeps the last one.",
)
@config_file_option
@output_format_option
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    content: str | None,
    read_stdin: bool,
    identity: str | None,
    style_tags: tuple[str, ...],
    return_policy: ReturnPolicy | None,
    config_file: Path | None,
    output_format: OutputFormat,
) -> None:
    """Render one content value and print the serialized result.

    Identity and style tags are attached to the entity and are available to
    renderers; the default renderers only look at the content.
    """
    console = get_console(ctx)

    raw = read_content(content, read_stdin)
    try:
        entity = Entity(
            content=parse_content(raw),
            identity=identity,
            style_tag=list(style_tags) or None,
        )
    except RenderKitError as exc:
        raise RenderKitInputError(str(exc)) from exc

    config = resolve_config_from_click(config_file=config_file, return_policy=return_policy)
    pipeline = build_pipeline_from_config(config)

    try:
        result = pipeline.render(entity)
    except RenderKitError as exc:
        raise RenderKitRenderError(str(exc)) from exc

    if result is NO_MATCH:
        console.warn("No renderer produced a result.")
        ctx.exit(ExitCode.NO_MATCH)

    try:
        document = serialize(result, output_format)
    except TypeError as exc:
        raise RenderKitRenderError(
            f"Renderer returned a value that cannot be serialized: {exc}"
        ) from exc
    console.print(document)
