# topmark:header:start
#
#   project      : RenderKit
#   file         : entity.py
#   file_relpath : src/renderkit/entity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical input record for the rendering pipeline.

An [`Entity`][renderkit.entity.Entity] carries three optional fields:

- ``content``: the raw payload to render (default ``""``),
- ``identity``: an optional external-facing identifier (``str``),
- ``style_tag``: an optional presentation hint (``str``; a sequence of strings
  is joined with single spaces).

Entities are frozen. Validation happens once, at construction, and raises
[`ValidationError`][renderkit.core.errors.ValidationError] on a wrong shape.

[`normalize`][renderkit.entity.normalize] turns loosely typed records into
entities:

```python
from renderkit.entity import normalize

ent = normalize({"content": "hi", "id": "greeting", "className": ["a", "b"]})
assert ent.style_tag == "a b"
assert normalize(ent) is ent
```
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from renderkit.core.errors import ValidationError

# Accepted record keys, in lookup order, for each entity field:
CONTENT_KEYS: Final[tuple[str, ...]] = ("content",)
IDENTITY_KEYS: Final[tuple[str, ...]] = ("id", "identity")
STYLE_TAG_KEYS: Final[tuple[str, ...]] = ("className", "class_name", "style_tag")

_MISSING: Final[object] = object()


def _coerce_style_tag(value: object) -> str | None:
    """Return ``value`` as a single style tag string, or raise `ValidationError`."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        parts: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ValidationError(
                    "Entity style tag sequence must contain only strings, "
                    f"got {type(item).__name__}"
                )
            parts.append(item)
        return " ".join(parts)
    raise ValidationError(
        f"Entity style tag must be a string or a sequence of strings, got {type(value).__name__}"
    )


@dataclass(frozen=True, slots=True, init=False)
class Entity:
    """Normalized unit of work passed to renderers.

    Attributes:
        content (Any): The raw payload to render.
        identity (str | None): Optional identifier.
        style_tag (str | None): Optional space-separated presentation hint.
    """

    content: Any
    identity: str | None
    style_tag: str | None

    def __init__(
        self,
        content: Any = "",
        identity: str | None = None,
        style_tag: str | Sequence[str] | None = None,
    ) -> None:
        if identity is not None and not isinstance(identity, str):
            raise ValidationError(
                f"Entity identity must be a string, got {type(identity).__name__}"
            )
        object.__setattr__(self, "content", content)
        object.__setattr__(self, "identity", identity)
        object.__setattr__(self, "style_tag", _coerce_style_tag(style_tag))


def _lookup(raw: object, keys: tuple[str, ...]) -> object:
    """Return the first present value among ``keys`` on ``raw``, or `_MISSING`."""
    for key in keys:
        if isinstance(raw, Mapping):
            if key in raw:
                return raw[key]
        else:
            value = getattr(raw, key, _MISSING)
            if value is not _MISSING:
                return value
    return _MISSING


def normalize(raw: object | None = None) -> Entity:
    """Validate ``raw`` and freeze it into an `Entity`.

    Args:
        raw (object | None): ``None``, an `Entity` (returned unchanged), a mapping
            with optional ``content``/``id``/``className`` keys, or any object exposing
            those names as attributes.

    Returns:
        Entity: The normalized entity.

    Raises:
        ValidationError: If the identity is not a string, the style tag is neither a
            string nor a sequence of strings, or ``raw`` is a non-mapping object with
            none of the recognized attributes (e.g. a bare string or number).
    """
    if raw is None:
        return Entity()
    if isinstance(raw, Entity):
        return raw

    content = _lookup(raw, CONTENT_KEYS)
    identity = _lookup(raw, IDENTITY_KEYS)
    style_tag = _lookup(raw, STYLE_TAG_KEYS)

    found = (content, identity, style_tag)
    if not isinstance(raw, Mapping) and all(value is _MISSING for value in found):
        raise ValidationError(
            f"Cannot normalize {type(raw).__name__}: expected a mapping or an object "
            "with content, id or className attributes"
        )

    return Entity(
        content="" if content is _MISSING else content,
        identity=None if identity is _MISSING else identity,  # type: ignore[arg-type]
        style_tag=None if style_tag is _MISSING else style_tag,  # type: ignore[arg-type]
    )
