# topmark:header:start
#
#   project      : RenderKit
#   file         : model.py
#   file_relpath : src/renderkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline configuration: immutable runtime snapshot and mutable builder.

Configuration follows a thaw/edit/freeze split:

- `MutablePipelineConfig` collects values from defaults, TOML files and
  overrides (CLI flags, API dicts). Unset values stay ``None`` so layers can
  be merged with clear precedence.
- `PipelineConfig` is the frozen snapshot produced by
  `MutablePipelineConfig.freeze`. It can export itself to TOML and build a
  configured [`RenderingPipeline`][renderkit.pipeline.renderer.RenderingPipeline].

Renderers are referenced as import strings ``"package.module:attribute"``
(dotted attributes are allowed after the colon). With ``use_defaults = true``
the referenced renderers are scanned *before* the default renderer set; with
``use_defaults = false`` they replace it.

Layered loading (lowest to highest precedence):

1. built-in defaults,
2. the discovered or explicitly given TOML file
   (``renderkit.toml`` ``[pipeline]`` or ``pyproject.toml`` ``[tool.renderkit.pipeline]``),
3. overrides (e.g. CLI options).
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from renderkit.config.io import load_toml_dict, to_toml
from renderkit.config.keys import Toml
from renderkit.config.logging import get_logger
from renderkit.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from renderkit.core.errors import ArgumentError, ConfigError
from renderkit.pipeline.policy import ReturnPolicy
from renderkit.pipeline.renderer import OPTION_INITIAL_RENDERERS, OPTION_RETURN_POLICY
from renderkit.pipeline.renderer import RenderingPipeline
from renderkit.pipeline.triggers import validate_entry

if TYPE_CHECKING:
    from renderkit.config.io import TomlTable
    from renderkit.config.logging import RenderKitLogger
    from renderkit.nodes.host import NodeHost
    from renderkit.pipeline.renderer import Renderer

logger: RenderKitLogger = get_logger(__name__)


def resolve_reference(reference: str) -> Renderer:
    """Import the renderer named by ``reference`` (``"module:attr"``).

    Args:
        reference (str): Import string, e.g. ``"myapp.renderers:money"``.

    Returns:
        Renderer: The resolved callable.

    Raises:
        ConfigError: If the reference is malformed, cannot be imported, or does not
            resolve to a one-argument callable.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Renderer reference must look like 'module:attribute': {reference!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import module {module_name!r} for {reference!r}") from exc
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ConfigError(f"Cannot resolve {reference!r}: no attribute {part!r}") from exc
    try:
        return validate_entry(obj)
    except ArgumentError as exc:
        raise ConfigError(f"Invalid renderer {reference!r}: {exc}") from exc


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Immutable runtime configuration for a rendering pipeline.

    Attributes:
        return_policy (ReturnPolicy): Scan policy.
        renderers (tuple[str, ...]): Import references of custom renderers, in scan order.
        use_defaults (bool): Keep the default renderer set after the custom renderers.
        config_files (tuple[Path | str, ...]): Provenance of the merged values.
    """

    return_policy: ReturnPolicy
    renderers: tuple[str, ...]
    use_defaults: bool
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Return this config as a TOML-serializable dict."""
        return {
            Toml.SECTION_PIPELINE: {
                Toml.KEY_RETURN_POLICY: self.return_policy.value,
                Toml.KEY_RENDERERS: list(self.renderers),
                Toml.KEY_USE_DEFAULTS: self.use_defaults,
            }
        }

    def to_toml(self) -> str:
        """Return this config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutablePipelineConfig:
        """Return a mutable copy of this frozen config."""
        return MutablePipelineConfig(
            return_policy=self.return_policy,
            renderers=list(self.renderers),
            use_defaults=self.use_defaults,
            config_files=list(self.config_files),
        )

    def resolve_renderers(self) -> tuple[Renderer, ...]:
        """Import every configured renderer reference.

        Raises:
            ConfigError: If a reference cannot be resolved.
        """
        return tuple(resolve_reference(ref) for ref in self.renderers)

    def build_pipeline(self, host: NodeHost | None = None) -> RenderingPipeline:
        """Return a `RenderingPipeline` configured from this snapshot.

        Args:
            host (NodeHost | None): Node host for the default renderers.

        Returns:
            RenderingPipeline: A new, configured pipeline.

        Raises:
            ConfigError: If a renderer reference cannot be resolved.
        """
        pipeline = RenderingPipeline(host=host)
        options: dict[str, Any] = {OPTION_RETURN_POLICY: self.return_policy}
        custom = self.resolve_renderers()
        if custom or not self.use_defaults:
            defaults = pipeline.renderers if self.use_defaults else ()
            options[OPTION_INITIAL_RENDERERS] = custom + defaults
        pipeline.configure(options)
        logger.debug(
            "PipelineConfig: built pipeline with %d renderers (policy=%s)",
            pipeline.size(),
            self.return_policy.value,
        )
        return pipeline


# -------------------------- Mutable builder --------------------------


@dataclass
class MutablePipelineConfig:
    """Mutable configuration used during discovery and merging.

    Unset values are ``None`` (or empty) and are filled with defaults by `freeze`.
    """

    return_policy: ReturnPolicy | None = None
    renderers: list[str] | None = None
    use_defaults: bool | None = None
    config_files: list[Path | str] = field(default_factory=list)

    def freeze(self) -> PipelineConfig:
        """Return an immutable snapshot, applying defaults for unset values."""
        return PipelineConfig(
            return_policy=self.return_policy or ReturnPolicy.FIRST,
            renderers=tuple(self.renderers or ()),
            use_defaults=True if self.use_defaults is None else self.use_defaults,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutablePipelineConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            return_policy=ReturnPolicy.FIRST,
            renderers=[],
            use_defaults=True,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | str | None = None,
    ) -> MutablePipelineConfig:
        """Build a draft from a parsed TOML document (``[pipeline]`` table).

        Raises:
            ConfigError: If a key has the wrong type or an invalid value.
        """
        source = str(config_file) if config_file is not None else "<dict>"
        table: Any = data.get(Toml.SECTION_PIPELINE, {})
        if not isinstance(table, Mapping):
            raise ConfigError(f"[{Toml.SECTION_PIPELINE}] must be a table in {source}")

        draft = cls(config_files=[config_file] if config_file is not None else [])
        draft.apply_overrides(table, source=source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutablePipelineConfig | None:
        """Load configuration from a single TOML file.

        Supports ``renderkit.toml`` and ``pyproject.toml`` (``[tool.renderkit]``).

        Returns:
            MutablePipelineConfig | None: The draft, or None if a ``pyproject.toml``
                has no ``[tool.renderkit]`` section.

        Raises:
            ConfigError: If the file cannot be read or has invalid content.
        """
        logger.debug("Creating MutablePipelineConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            tool_section: Any = toml_data.get(Toml.SECTION_TOOL, {}).get(
                Toml.SECTION_TOOL_RENDERKIT
            )
            if not isinstance(tool_section, dict):
                logger.info("[tool.renderkit] section missing in %s", path)
                return None
            toml_data = tool_section
        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest config file walking upward from ``start``.

        In each directory ``renderkit.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts if it mentions ``[tool.renderkit``.
        """
        current = start if start.is_dir() else start.parent
        for directory in (current, *current.parents):
            candidate = directory / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
            pyproject = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file():
                try:
                    text = pyproject.read_text(encoding="utf-8")
                except OSError:
                    continue
                if "[tool.renderkit" in text:
                    return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        discover_from: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> MutablePipelineConfig:
        """Merge defaults, one TOML file and overrides (lowest to highest precedence).

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            discover_from (Path | None): Directory to start discovery from (no
                discovery when None and no explicit file is given).
            overrides (Mapping[str, Any] | None): Final overrides, e.g. from the CLI.

        Returns:
            MutablePipelineConfig: The merged draft.

        Raises:
            ConfigError: If the config file or an override is invalid.
        """
        draft = cls.from_defaults()
        path = config_file
        if path is None and discover_from is not None:
            path = cls.discover_config_file(discover_from)
        if path is not None:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        if overrides:
            draft.apply_overrides(overrides, source="<overrides>")
        return draft

    def merge_with(self, other: MutablePipelineConfig) -> MutablePipelineConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutablePipelineConfig(
            return_policy=(
                other.return_policy if other.return_policy is not None else self.return_policy
            ),
            renderers=list(other.renderers) if other.renderers is not None else self.renderers,
            use_defaults=(
                other.use_defaults if other.use_defaults is not None else self.use_defaults
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_overrides(self, values: Mapping[str, Any], *, source: str = "<overrides>") -> None:
        """Apply ``return_policy`` / ``renderers`` / ``use_defaults`` from ``values``.

        ``None`` values are skipped; unknown keys are logged and ignored.

        Raises:
            ConfigError: If a value has the wrong type or an invalid value.
        """
        for key, value in values.items():
            if value is None:
                continue
            if key == Toml.KEY_RETURN_POLICY:
                try:
                    self.return_policy = ReturnPolicy.parse(value)
                except ArgumentError as exc:
                    raise ConfigError(f"{source}: {exc}") from exc
            elif key == Toml.KEY_RENDERERS:
                if isinstance(value, str) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"{source}: '{key}' must be a list of strings")
                self.renderers = list(value)
            elif key == Toml.KEY_USE_DEFAULTS:
                if not isinstance(value, bool):
                    raise ConfigError(f"{source}: '{key}' must be a boolean")
                self.use_defaults = value
            else:
                logger.warning("%s: ignoring unknown configuration key '%s'", source, key)
