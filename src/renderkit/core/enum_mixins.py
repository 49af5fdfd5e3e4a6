# topmark:header:start
#
#   project      : RenderKit
#   file         : enum_mixins.py
#   file_relpath : src/renderkit/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for RenderKit (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_name(enum_cls, name, *, case_insensitive=False)``:
        Typed lookup by ``name`` from ``__members__``. Returns ``None`` on miss.
    - ``enum_from_value(enum_cls, value, *, case_insensitive=False)``:
        Typed lookup by string ``.value``. Returns ``None`` on miss.

Example:
    ```python
    from enum import Enum
    from renderkit.core.enum_mixins import enum_from_value

    class Mode(str, Enum):
        A = "alpha"

    assert enum_from_value(Mode, "ALPHA", case_insensitive=True) is Mode.A
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member for ``key_name`` from ``enum_cls.__members__``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g., ``'FIRST'``). If ``None``, returns ``None``.
        case_insensitive (bool): If True, lookup is performed with ``key_name.upper()``.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    target: str = key_name.upper() if case_insensitive else key_name
    member: Any | None = getattr(enum_cls, "__members__", {}).get(target)
    return cast("_E | None", member)


def enum_from_value(
    enum_cls: type[_E],
    value: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member whose string ``.value`` equals ``value``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        value (str | None): The candidate value (e.g., ``'first'``).
        case_insensitive (bool): If True, compare lower-cased values.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if value is None:
        return None
    needle: str = value.strip().lower() if case_insensitive else value
    for member in enum_cls:
        candidate = str(member.value)
        if (candidate.lower() if case_insensitive else candidate) == needle:
            return member
    return None

