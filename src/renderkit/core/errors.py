# topmark:header:start
#
#   project      : RenderKit
#   file         : errors.py
#   file_relpath : src/renderkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception taxonomy for the RenderKit library layer.

Usage:
    Raise these exceptions from the entity, pipeline and configuration layers.
    They carry no Click dependency; the CLI maps them onto its own
    `click.ClickException` subclasses (see `renderkit.cli.errors`).

Channels:
    - `ValidationError` and `ArgumentError` are programmer errors. They are
      raised synchronously and are never recovered internally.
    - "No match" is **not** an error; it is the `NO_MATCH` outcome defined in
      `renderkit.pipeline.outcomes`.
    - Exceptions raised by renderers are not wrapped and propagate verbatim.
"""

from __future__ import annotations


class RenderKitError(Exception):
    """Base class for all RenderKit library errors."""


class ValidationError(RenderKitError, TypeError):
    """An entity field has the wrong shape (identity or style tag)."""


class ArgumentError(RenderKitError, TypeError):
    """An invalid argument was passed to a pipeline operation.

    Raised when a non-invocable value is registered as a renderer, or when an
    unknown return policy or a non-integer position is supplied.
    """


class ConfigError(RenderKitError):
    """Configuration could not be read, parsed, or resolved."""
