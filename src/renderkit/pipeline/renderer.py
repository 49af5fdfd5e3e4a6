# topmark:header:start
#
#   project      : RenderKit
#   file         : renderer.py
#   file_relpath : src/renderkit/pipeline/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering pipeline: an ordered chain of renderers over entities.

`RenderingPipeline` is a thin contract layer over
[`TriggerManager`][renderkit.pipeline.triggers.TriggerManager]. It owns the
default renderer set, the configuration entry point, and the entity-aware
`render()` call.

Typical usage:

```python
from renderkit.pipeline import RenderingPipeline

pipeline = RenderingPipeline()
node = pipeline.render({"content": {"a": 1, "b": 2}})

pipeline.configure({"return_policy": "last", "initial_renderers": [my_renderer]})
```

Configuration keys are matched case-insensitively with ``-``/``_`` ignored, so
``returnPolicy``, ``return_policy`` and ``return-policy`` are the same key.
The legacy spellings ``returnAt`` and ``pipeline`` are accepted as well.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable, Final

from renderkit.config.logging import get_logger
from renderkit.core.errors import ArgumentError
from renderkit.entity import Entity, normalize
from renderkit.nodes.host import DefaultNodeHost
from renderkit.pipeline.defaults import default_renderers
from renderkit.pipeline.policy import ReturnPolicy
from renderkit.pipeline.triggers import TriggerManager, validate_entry

if TYPE_CHECKING:
    from renderkit.config.logging import RenderKitLogger
    from renderkit.nodes.host import NodeHost
    from renderkit.pipeline.outcomes import NoMatch

logger: RenderKitLogger = get_logger(__name__)

Renderer = Callable[[Entity], Any]

OPTION_RETURN_POLICY: Final[str] = "return_policy"
OPTION_INITIAL_RENDERERS: Final[str] = "initial_renderers"

# Normalized option token -> canonical option name:
_OPTION_ALIASES: Final[dict[str, str]] = {
    "returnpolicy": OPTION_RETURN_POLICY,
    "returnat": OPTION_RETURN_POLICY,
    "initialrenderers": OPTION_INITIAL_RENDERERS,
    "renderers": OPTION_INITIAL_RENDERERS,
    "pipeline": OPTION_INITIAL_RENDERERS,
}


def _norm_option(key: str) -> str:
    """Normalize an option key for alias lookup."""
    return key.strip().lower().replace("-", "").replace("_", "")


def canonical_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return the recognized options of ``options`` under their canonical names.

    Unrecognized keys are dropped (and logged at DEBUG).
    """
    recognized: dict[str, Any] = {}
    for key, value in options.items():
        name = _OPTION_ALIASES.get(_norm_option(str(key)))
        if name is None:
            logger.debug("RenderingPipeline: ignoring unrecognized option %r", key)
            continue
        recognized[name] = value
    return recognized


class RenderingPipeline:
    """Ordered chain of renderers plus a return policy.

    Args:
        options (Mapping[str, Any] | None): Optional configuration applied after the
            default renderer set is installed (see `configure`).
        host (NodeHost | None): Node factory used by the default renderers.
            Defaults to [`DefaultNodeHost`][renderkit.nodes.host.DefaultNodeHost].
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        host: NodeHost | None = None,
    ) -> None:
        self.host: NodeHost = host if host is not None else DefaultNodeHost()
        self.tm: TriggerManager = TriggerManager()
        self.reset()
        if options:
            self.configure(options)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(renderers={self.size()}, "
            f"return_policy={self.return_policy.value!r})"
        )

    def __len__(self) -> int:
        return self.size()

    # --- Introspection ---

    @property
    def return_policy(self) -> ReturnPolicy:
        """Current return policy."""
        return self.tm.return_policy

    @return_policy.setter
    def return_policy(self, value: ReturnPolicy | str) -> None:
        self.tm.return_policy = value

    @property
    def renderers(self) -> tuple[Renderer, ...]:
        """Snapshot of the registered renderers, in scan order."""
        return self.tm.entries

    def size(self) -> int:
        """Return the number of registered renderers."""
        return len(self.tm)

    # --- Configuration ---

    def reset(self) -> None:
        """Replace all renderers with the default renderer set (canonical order)."""
        self.tm.set_entries(default_renderers(self.host))
        logger.debug("RenderingPipeline: reset to %d default renderers", self.size())

    def configure(self, options: Mapping[str, Any] | None = None) -> None:
        """Apply a configuration mapping.

        Recognized options:
            return_policy: ``"first"`` / ``"last"`` (or a `ReturnPolicy`); replaces the policy.
            initial_renderers: Ordered iterable of renderers; replaces the whole list
                (not merged with the defaults).

        Both options are validated before either is applied, so a rejected
        configuration leaves the pipeline unchanged.

        Args:
            options (Mapping[str, Any] | None): Configuration mapping. Unrecognized keys
                are ignored.

        Raises:
            ArgumentError: If ``options`` is not a mapping, the policy is unknown, or a
                renderer is not invocable with one argument.
        """
        if options is None:
            return
        if not isinstance(options, Mapping):
            raise ArgumentError(
                f"Pipeline options must be a mapping, got {type(options).__name__}"
            )
        recognized = canonical_options(options)

        policy: ReturnPolicy | None = None
        if recognized.get(OPTION_RETURN_POLICY) is not None:
            policy = ReturnPolicy.parse(recognized[OPTION_RETURN_POLICY])

        renderers: list[Any] | None = None
        if recognized.get(OPTION_INITIAL_RENDERERS) is not None:
            raw = recognized[OPTION_INITIAL_RENDERERS]
            if (
                callable(raw)
                or isinstance(raw, (str, bytes, Mapping))
                or not isinstance(raw, Iterable)
            ):
                raise ArgumentError(
                    f"{OPTION_INITIAL_RENDERERS} must be a sequence of renderers, "
                    f"got {type(raw).__name__}"
                )
            renderers = [validate_entry(fn) for fn in raw]

        if policy is not None:
            self.tm.return_policy = policy
        if renderers is not None:
            self.tm.set_entries(renderers)

    # --- Registration ---

    def add_renderer(
        self,
        renderer: Renderer,
        position: int | None = None,
    ) -> bool:
        """Register ``renderer`` at ``position`` (0-based), or append it.

        Returns:
            bool: ``True`` once registered.

        Raises:
            ArgumentError: If ``renderer`` is not invocable with one argument.
        """
        return self.tm.add_entry(renderer, position)

    def remove_renderer(self, renderer: Renderer) -> bool:
        """Remove the first occurrence of ``renderer`` (identity comparison).

        Returns:
            bool: Whether a renderer was removed.
        """
        return self.tm.remove_entry(renderer)

    def clear(self, confirm: bool = False) -> bool:
        """Remove all renderers when ``confirm`` is True.

        Returns:
            bool: Whether the pipeline was cleared.
        """
        return self.tm.clear_entries(confirm)

    def extend(self, renderers: Iterable[Renderer]) -> None:
        """Append several renderers; all are validated before any is added."""
        candidates = [validate_entry(fn) for fn in renderers]
        self.tm.set_entries(self.tm.entries + tuple(candidates))

    # --- Execution ---

    def render(self, entity: Entity | Mapping[str, Any] | object | None) -> object | NoMatch:
        """Run the renderer chain on ``entity``.

        Non-`Entity` input is normalized first (see
        [`normalize`][renderkit.entity.normalize]).

        Args:
            entity (Entity | Mapping[str, Any] | object | None): The entity to render.

        Returns:
            object | NoMatch: The selected renderer output, or `NO_MATCH`.

        Raises:
            ValidationError: If ``entity`` needs normalization and has a wrong shape, or
                is a bare value such as ``"hi"`` (wrap it as ``Entity("hi")``).
        """
        ent: Entity = normalize(entity)
        return self.tm.execute(ent)
