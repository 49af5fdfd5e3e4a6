# topmark:header:start
#
#   project      : RenderKit
#   file         : cli_types.py
#   file_relpath : src/renderkit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the RenderKit CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Matching is case-insensitive on the member *values*, which must be strings.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices = [str(member.value) for member in enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {str(member.value).lower(): member for member in self.enum_cls}
        key = str(value).strip().lower()
        if key in lookup:
            return lookup[key]
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_RENDERKIT_COMPLETE=bash_source renderkit)"`
        """
        from click.shell_completion import CompletionItem

        prefix = (incomplete or "").lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]
