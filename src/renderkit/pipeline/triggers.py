# topmark:header:start
#
#   project      : RenderKit
#   file         : triggers.py
#   file_relpath : src/renderkit/pipeline/triggers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered registry of callables with a short-circuit/collect execution policy.

`TriggerManager` is the storage and iteration substrate behind
[`RenderingPipeline`][renderkit.pipeline.renderer.RenderingPipeline]. It knows
nothing about entities or nodes: it keeps an ordered list of one-argument
callables ("entries") and runs them against a value.

Execution contract (`execute`):

1. The scan works on a snapshot of the entries taken when it starts, so an
   entry that mutates the manager cannot disturb the running scan.
2. Entries run in registration order. A ``None`` result means "does not
   apply" and the scan continues.
3. Under `ReturnPolicy.FIRST` the first non-empty result is returned
   immediately. Under `ReturnPolicy.LAST` later results override earlier ones.
4. If nothing matched, `NO_MATCH` is returned.
5. Exceptions raised by entries propagate unchanged.

Registration is atomic: a rejected entry leaves the list untouched.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable

from renderkit.config.logging import get_logger
from renderkit.core.errors import ArgumentError
from renderkit.pipeline.outcomes import NO_MATCH, is_empty
from renderkit.pipeline.policy import ReturnPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from renderkit.config.logging import RenderKitLogger

logger: RenderKitLogger = get_logger(__name__)

Entry = Callable[[Any], Any]

_SAMPLE_ARG: object = object()


def entry_label(fn: object) -> str:
    """Return a short, human-readable label for a registered entry."""
    qualname = getattr(fn, "__qualname__", None) or type(fn).__qualname__
    module = getattr(fn, "__module__", None)
    return f"{module}.{qualname}" if module else str(qualname)


def validate_entry(fn: object) -> Entry:
    """Return ``fn`` if it can be invoked with exactly one positional argument.

    Callables without an introspectable signature (some builtins) are accepted
    as long as they are callable.

    Raises:
        ArgumentError: If ``fn`` is not callable, or its signature cannot bind a
            single positional argument.
    """
    if not callable(fn):
        raise ArgumentError(f"Renderer must be callable, got {type(fn).__name__}")
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return fn
    try:
        signature.bind(_SAMPLE_ARG)
    except TypeError as exc:
        raise ArgumentError(
            f"Renderer {entry_label(fn)} cannot be called with one argument: {exc}"
        ) from exc
    return fn


class TriggerManager:
    """Ordered list of callables plus a return policy.

    Attributes:
        return_policy (ReturnPolicy): Current scan policy (default ``FIRST``).
    """

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        *,
        return_policy: ReturnPolicy | str = ReturnPolicy.FIRST,
    ) -> None:
        self._entries: list[Entry] = []
        self._return_policy: ReturnPolicy = ReturnPolicy.parse(return_policy)
        self.set_entries(entries)

    # --- Introspection ---

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of the registered entries, in scan order."""
        return tuple(self._entries)

    @property
    def return_policy(self) -> ReturnPolicy:
        """Current scan policy."""
        return self._return_policy

    @return_policy.setter
    def return_policy(self, value: ReturnPolicy | str) -> None:
        self._return_policy = ReturnPolicy.parse(value)
        logger.debug("TriggerManager: return policy set to %s", self._return_policy.value)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entries={len(self._entries)}, "
            f"return_policy={self._return_policy.value!r})"
        )

    # --- Mutation ---

    def add_entry(self, fn: Entry, position: int | None = None) -> bool:
        """Insert ``fn`` at ``position`` (0-based), or append when ``position`` is None.

        Out-of-range positions are clamped like `list.insert`.

        Args:
            fn (Entry): One-argument callable to register.
            position (int | None): Insertion index, or None to append.

        Returns:
            bool: Always ``True`` once the entry is registered.

        Raises:
            ArgumentError: If ``fn`` is not invocable with one argument, or
                ``position`` is not an integer.
        """
        validate_entry(fn)
        if position is None:
            self._entries.append(fn)
        else:
            if isinstance(position, bool) or not isinstance(position, int):
                raise ArgumentError(
                    f"Renderer position must be an integer, got {type(position).__name__}"
                )
            self._entries.insert(position, fn)
        logger.debug(
            "TriggerManager: added %s at %s (size=%d)",
            entry_label(fn),
            "end" if position is None else position,
            len(self._entries),
        )
        return True

    def remove_entry(self, fn: Entry) -> bool:
        """Remove the first entry that *is* ``fn`` (identity comparison).

        Returns:
            bool: ``True`` if an entry was removed, ``False`` if ``fn`` was not registered.
        """
        for index, candidate in enumerate(self._entries):
            if candidate is fn:
                del self._entries[index]
                logger.debug(
                    "TriggerManager: removed %s (size=%d)", entry_label(fn), len(self._entries)
                )
                return True
        logger.debug("TriggerManager: %s not registered; nothing removed", entry_label(fn))
        return False

    def clear_entries(self, confirm: bool = False) -> bool:
        """Remove every entry, but only when ``confirm`` is ``True``.

        Returns:
            bool: ``True`` if the entries were cleared.
        """
        if confirm is not True:
            logger.info("TriggerManager: clear requested without confirmation; ignored")
            return False
        self._entries.clear()
        logger.debug("TriggerManager: cleared all entries")
        return True

    def set_entries(self, fns: Iterable[Entry]) -> None:
        """Replace all entries with ``fns``, in the given order.

        The new list is validated as a whole before it replaces the current one.

        Raises:
            ArgumentError: If any of ``fns`` is not invocable with one argument.
        """
        candidates: list[Entry] = [validate_entry(fn) for fn in fns]
        self._entries = candidates
        logger.debug("TriggerManager: entries replaced (size=%d)", len(candidates))

    # --- Execution ---

    def execute(self, value: Any) -> Any:
        """Run the entries against ``value`` under the current return policy.

        Args:
            value (Any): The argument passed to every entry.

        Returns:
            Any: The first (``FIRST``) or last (``LAST``) non-empty result, or `NO_MATCH`.
        """
        policy: ReturnPolicy = self._return_policy
        snapshot: tuple[Entry, ...] = tuple(self._entries)
        result: Any = NO_MATCH

        for index, fn in enumerate(snapshot):
            out = fn(value)
            if is_empty(out):
                logger.trace("TriggerManager: [%d] %s -> no match", index, entry_label(fn))
                continue
            logger.trace("TriggerManager: [%d] %s -> match", index, entry_label(fn))
            result = out
            if policy is ReturnPolicy.FIRST:
                return result

        if result is NO_MATCH:
            logger.debug("TriggerManager: no entry matched (%d scanned)", len(snapshot))
        return result
