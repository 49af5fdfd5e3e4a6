# topmark:header:start
#
#   project      : RenderKit
#   file         : config_resolver.py
#   file_relpath : src/renderkit/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve RenderKit configuration from Click parameters.

Bridges CLI parsing and [`MutablePipelineConfig`][renderkit.config.model.MutablePipelineConfig]:
defaults, then the explicit ``--config`` file (or the nearest discovered one,
searching upward from the working directory), then CLI overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from renderkit.cli.errors import RenderKitConfigError
from renderkit.config.keys import Toml
from renderkit.config.logging import get_logger
from renderkit.config.model import MutablePipelineConfig
from renderkit.core.errors import ConfigError

if TYPE_CHECKING:
    from renderkit.config.logging import RenderKitLogger
    from renderkit.config.model import PipelineConfig
    from renderkit.nodes.host import NodeHost
    from renderkit.pipeline.policy import ReturnPolicy
    from renderkit.pipeline.renderer import RenderingPipeline

logger: RenderKitLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    config_file: Path | None,
    return_policy: ReturnPolicy | None = None,
) -> PipelineConfig:
    """Build a frozen [`PipelineConfig`][renderkit.config.model.PipelineConfig] for a command.

    Args:
        config_file (Path | None): Explicit ``--config`` path; None enables discovery
            from the current working directory.
        return_policy (ReturnPolicy | None): ``--return-policy`` override, if given.

    Returns:
        PipelineConfig: The merged, frozen configuration.

    Raises:
        RenderKitConfigError: If the configuration cannot be loaded.
    """
    overrides: dict[str, Any] = {Toml.KEY_RETURN_POLICY: return_policy}
    try:
        draft = MutablePipelineConfig.load_merged(
            config_file=config_file,
            discover_from=None if config_file is not None else Path.cwd(),
            overrides=overrides,
        )
    except ConfigError as exc:
        raise RenderKitConfigError(str(exc)) from exc
    config = draft.freeze()
    logger.debug("Resolved configuration from %s", [str(p) for p in config.config_files])
    return config


def build_pipeline_from_config(
    config: PipelineConfig,
    host: NodeHost | None = None,
) -> RenderingPipeline:
    """Return ``config.build_pipeline(host)``, mapping `ConfigError` to a CLI error."""
    try:
        return config.build_pipeline(host)
    except ConfigError as exc:
        raise RenderKitConfigError(str(exc)) from exc
