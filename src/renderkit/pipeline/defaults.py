# topmark:header:start
#
#   project      : RenderKit
#   file         : defaults.py
#   file_relpath : src/renderkit/pipeline/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The default renderer set, installed by `RenderingPipeline.reset()`.

Scan order (first match wins under the ``first`` policy):

1. `SelfRenderer` - content exposes a zero-argument ``render()`` whose result
   is already a finished node.
2. `KeyValueRenderer` - content is a mapping, container, plain object or
   function; dumps each own key as ``"key:\\tvalue"`` followed by a break.
3. `PassthroughRenderer` - content is already a finished node.
4. `TextRenderer` - unconditional text leaf of ``str(content)``.

The order is part of the contract. Under ``first``, the key-value dump runs
before the passthrough check, so a node passed as content is dumped rather
than passed through; custom pipelines that want passthrough to win can
reorder or remove renderers.

Each renderer is a small callable class bound to a
[`NodeHost`][renderkit.nodes.host.NodeHost], so the same set works for any
host.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import inspect
import numbers
import uuid
from collections.abc import Mapping
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from renderkit.config.logging import get_logger
from renderkit.constants import KEY_VALUE_SEPARATOR, SELF_RENDER_METHOD

if TYPE_CHECKING:
    from collections.abc import Iterator

    from renderkit.config.logging import RenderKitLogger
    from renderkit.entity import Entity
    from renderkit.nodes.host import NodeHost

logger: RenderKitLogger = get_logger(__name__)

# Values treated as scalars by the key-value renderer (never dumped). Numbers,
# enum members and stdlib value objects fall through to the text leaf.
SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    numbers.Number,
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    PurePath,
    uuid.UUID,
)


def iter_own_items(value: object) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs for the own keys of ``value``, in enumeration order.

    Own keys are mapping keys, indices of lists/tuples, positions of sets (in
    iteration order), dataclass fields, instance ``__dict__`` entries, or
    declared ``__slots__``.
    """
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield str(key), item
    elif isinstance(value, (list, tuple, set, frozenset)):
        for index, item in enumerate(value):
            yield str(index), item
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        for f in dataclasses.fields(value):
            yield f.name, getattr(value, f.name)
    elif hasattr(value, "__dict__"):
        yield from ((str(k), v) for k, v in vars(value).items())
    else:
        for cls in type(value).__mro__:
            slots = cls.__dict__.get("__slots__", ())
            for name in (slots,) if isinstance(slots, str) else slots:
                if hasattr(value, name):
                    yield name, getattr(value, name)


def _zero_arg_method(content: object) -> Any:
    """Return the zero-argument render method of ``content``, or None."""
    method = getattr(content, SELF_RENDER_METHOD, None)
    if method is None or not callable(method):
        return None
    try:
        inspect.signature(method).bind()
    except TypeError:
        return None
    except ValueError:
        # No introspectable signature; assume it is callable without arguments.
        return method
    return method


class SelfRenderer:
    """Delegate to the content's own zero-argument ``render()`` method."""

    def __init__(self, host: NodeHost) -> None:
        self.host = host

    def __call__(self, entity: Entity) -> object | None:
        """Return ``content.render()`` if it yields a finished node, else None."""
        content = entity.content
        if content is None or isinstance(content, type):
            return None
        method = _zero_arg_method(content)
        if method is None:
            return None
        rendered = method()
        if self.host.is_renderable(rendered):
            return rendered
        logger.debug(
            "SelfRenderer: %s.%s() returned a non-renderable %s",
            type(content).__name__,
            SELF_RENDER_METHOD,
            type(rendered).__name__,
        )
        return None


class KeyValueRenderer:
    """Dump non-scalar content as one ``"key:\\tvalue"`` line per own key."""

    def __init__(self, host: NodeHost) -> None:
        self.host = host

    def __call__(self, entity: Entity) -> object | None:
        """Return a container of text/break pairs, or None for scalar content."""
        content = entity.content
        if content is None or isinstance(content, SCALAR_TYPES):
            return None
        children: list[object] = []
        for key, value in iter_own_items(content):
            children.append(self.host.text(f"{key}{KEY_VALUE_SEPARATOR}{value}"))
            children.append(self.host.line_break())
        return self.host.container(children)


class PassthroughRenderer:
    """Return content unchanged when it is already a finished node."""

    def __init__(self, host: NodeHost) -> None:
        self.host = host

    def __call__(self, entity: Entity) -> object | None:
        """Return the content itself if the host deems it renderable."""
        if self.host.is_renderable(entity.content):
            return entity.content
        return None


class TextRenderer:
    """Wrap any content as a text leaf. Never reports "no match"."""

    def __init__(self, host: NodeHost) -> None:
        self.host = host

    def __call__(self, entity: Entity) -> object:
        """Return a text node of ``str(entity.content)``."""
        return self.host.text(str(entity.content))


def default_renderers(host: NodeHost) -> tuple[Any, ...]:
    """Return a fresh default renderer set bound to ``host``, in canonical order.

    Args:
        host (NodeHost): Node factory shared by the renderers.

    Returns:
        tuple[Any, ...]: ``(SelfRenderer, KeyValueRenderer, PassthroughRenderer,
        TextRenderer)`` instances.
    """
    return (
        SelfRenderer(host),
        KeyValueRenderer(host),
        PassthroughRenderer(host),
        TextRenderer(host),
    )
