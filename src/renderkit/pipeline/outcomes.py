# topmark:header:start
#
#   project      : RenderKit
#   file         : outcomes.py
#   file_relpath : src/renderkit/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Distinguished "no renderer matched" outcome.

`NO_MATCH` is the single instance of `NoMatch`. It is falsy, distinct from
``None`` (which renderers return to mean "does not apply") and from empty
content, and it is not an exception: the caller decides what to do with it.
"""

from __future__ import annotations

from typing import Final


class NoMatch:
    """Singleton type for the "no renderer produced output" outcome."""

    _instance: NoMatch | None = None

    __slots__ = ()

    def __new__(cls) -> NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __reduce__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final[NoMatch] = NoMatch()


def is_empty(result: object) -> bool:
    """Return True if a renderer result means "does not apply"."""
    return result is None or result is NO_MATCH
