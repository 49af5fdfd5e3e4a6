# topmark:header:start
#
#   project      : RenderKit
#   file         : test_pipeline_config.py
#   file_relpath : tests/config/test_pipeline_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PipelineConfig` / `MutablePipelineConfig` loading, merging and export."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from renderkit.config.model import MutablePipelineConfig, PipelineConfig, resolve_reference
from renderkit.core.errors import ConfigError
from renderkit.nodes.model import TextNode
from renderkit.pipeline.defaults import TextRenderer
from renderkit.pipeline.policy import ReturnPolicy
from tests import sample_renderers
from tests.conftest import make_config, parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.config


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_first_policy_with_default_renderers() -> None:
    cfg = MutablePipelineConfig().freeze()
    assert cfg.return_policy is ReturnPolicy.FIRST
    assert cfg.renderers == ()
    assert cfg.use_defaults is True
    assert cfg.build_pipeline().size() == 4


def test_frozen_config_is_immutable_and_thaws() -> None:
    cfg = make_config(return_policy="last")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.use_defaults = False  # type: ignore[misc]
    draft = cfg.thaw()
    draft.use_defaults = False
    assert draft.freeze() == dataclasses.replace(cfg, use_defaults=False)


def test_from_toml_dict_reads_pipeline_table() -> None:
    draft = MutablePipelineConfig.from_toml_dict(
        {
            "pipeline": {
                "return_policy": "LAST",
                "renderers": ["tests.sample_renderers:shout"],
                "use_defaults": False,
            }
        }
    )
    cfg = draft.freeze()
    assert cfg.return_policy is ReturnPolicy.LAST
    assert cfg.renderers == ("tests.sample_renderers:shout",)
    assert cfg.use_defaults is False


@parametrize(
    "table",
    [
        {"return_policy": "all"},
        {"renderers": "tests.sample_renderers:shout"},
        {"renderers": [1, 2]},
        {"use_defaults": "yes"},
    ],
)
def test_from_toml_dict_rejects_bad_values(table: dict[str, Any]) -> None:
    with pytest.raises(ConfigError):
        MutablePipelineConfig.from_toml_dict({"pipeline": table})


def test_from_toml_dict_rejects_non_table_section() -> None:
    with pytest.raises(ConfigError):
        MutablePipelineConfig.from_toml_dict({"pipeline": "first"})


def test_unknown_keys_are_ignored() -> None:
    draft = MutablePipelineConfig.from_toml_dict({"pipeline": {"colour": "red"}})
    assert draft.freeze() == MutablePipelineConfig().freeze()


def test_from_toml_file_renderkit_toml(tmp_path: Path) -> None:
    path = write(tmp_path / "renderkit.toml", '[pipeline]\nreturn_policy = "last"\n')
    draft = MutablePipelineConfig.from_toml_file(path)
    assert draft is not None
    assert draft.return_policy is ReturnPolicy.LAST
    assert draft.config_files == [path]


def test_from_toml_file_pyproject_section(tmp_path: Path) -> None:
    path = write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.renderkit.pipeline]\nuse_defaults = false\n',
    )
    draft = MutablePipelineConfig.from_toml_file(path)
    assert draft is not None
    assert draft.use_defaults is False


def test_from_toml_file_pyproject_without_section(tmp_path: Path) -> None:
    path = write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutablePipelineConfig.from_toml_file(path) is None


def test_from_toml_file_invalid_toml(tmp_path: Path) -> None:
    path = write(tmp_path / "renderkit.toml", "[pipeline\n")
    with pytest.raises(ConfigError):
        MutablePipelineConfig.from_toml_file(path)


def test_from_toml_file_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        MutablePipelineConfig.from_toml_file(tmp_path / "renderkit.toml")


def test_discovery_walks_upward_and_prefers_renderkit_toml(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    write(tmp_path / "pyproject.toml", "[tool.renderkit.pipeline]\n")
    write(tmp_path / "renderkit.toml", "[pipeline]\n")
    assert MutablePipelineConfig.discover_config_file(nested) == tmp_path / "renderkit.toml"


def test_discovery_skips_unrelated_pyproject(tmp_path: Path) -> None:
    inner = tmp_path / "inner"
    inner.mkdir()
    write(inner / "pyproject.toml", '[project]\nname = "x"\n')
    write(tmp_path / "pyproject.toml", '[tool.renderkit.pipeline]\nreturn_policy = "last"\n')
    assert MutablePipelineConfig.discover_config_file(inner) == tmp_path / "pyproject.toml"


def test_merge_with_prefers_values_set_in_other() -> None:
    base = MutablePipelineConfig.from_defaults()
    layer = MutablePipelineConfig(renderers=["m:a"], config_files=["layer"])
    merged = base.merge_with(layer)
    assert merged.return_policy is ReturnPolicy.FIRST
    assert merged.renderers == ["m:a"]
    assert merged.use_defaults is True
    assert merged.config_files == ["<defaults>", "layer"]


def test_load_merged_applies_overrides_last(tmp_path: Path) -> None:
    path = write(tmp_path / "renderkit.toml", '[pipeline]\nreturn_policy = "last"\n')
    draft = MutablePipelineConfig.load_merged(
        config_file=path, overrides={"return_policy": ReturnPolicy.FIRST}
    )
    assert draft.return_policy is ReturnPolicy.FIRST
    assert draft.config_files == ["<defaults>", path]


def test_load_merged_skips_none_overrides(tmp_path: Path) -> None:
    path = write(tmp_path / "renderkit.toml", '[pipeline]\nreturn_policy = "last"\n')
    draft = MutablePipelineConfig.load_merged(config_file=path, overrides={"return_policy": None})
    assert draft.return_policy is ReturnPolicy.LAST


# --- Export ---


def test_to_toml_round_trips_through_tomlkit() -> None:
    cfg = make_config(return_policy="last", renderers=["tests.sample_renderers:shout"])
    parsed: Any = tomlkit.parse(cfg.to_toml()).unwrap()
    assert parsed == {
        "pipeline": {
            "return_policy": "last",
            "renderers": ["tests.sample_renderers:shout"],
            "use_defaults": True,
        }
    }
    again = MutablePipelineConfig.from_toml_dict(parsed).freeze()
    assert (again.return_policy, again.renderers, again.use_defaults) == (
        cfg.return_policy,
        cfg.renderers,
        cfg.use_defaults,
    )


# --- Renderer references ---


def test_resolve_reference_supports_dotted_attributes() -> None:
    assert resolve_reference("tests.sample_renderers:shout") is sample_renderers.shout
    assert (
        resolve_reference("tests.sample_renderers:Namespace.quoted")
        is sample_renderers.Namespace.quoted
    )


@parametrize(
    "reference",
    [
        "no-colon",
        ":shout",
        "tests.sample_renderers:",
        "tests.does_not_exist:shout",
        "tests.sample_renderers:missing",
        "tests.sample_renderers:NOT_CALLABLE",
        "tests.sample_renderers:needs_two",
    ],
)
def test_resolve_reference_errors(reference: str) -> None:
    with pytest.raises(ConfigError):
        resolve_reference(reference)


def test_build_pipeline_puts_custom_renderers_before_defaults() -> None:
    cfg = make_config(renderers=["tests.sample_renderers:shout"])
    pipeline = cfg.build_pipeline()
    assert pipeline.size() == 5
    assert pipeline.renderers[0] is sample_renderers.shout
    assert pipeline.render({"content": "hi"}) == TextNode("HI")


def test_build_pipeline_without_defaults() -> None:
    cfg = make_config(renderers=["tests.sample_renderers:never"], use_defaults=False)
    pipeline = cfg.build_pipeline()
    assert pipeline.renderers == (sample_renderers.never,)
    assert not pipeline.render({"content": "hi"})


def test_build_pipeline_use_defaults_false_and_no_renderers_is_empty() -> None:
    assert make_config(use_defaults=False).build_pipeline().size() == 0


def test_build_pipeline_applies_policy() -> None:
    cfg = make_config(return_policy="last")
    pipeline = cfg.build_pipeline()
    assert pipeline.return_policy is ReturnPolicy.LAST
    assert isinstance(pipeline.renderers[-1], TextRenderer)


def test_build_pipeline_unresolvable_reference() -> None:
    cfg = PipelineConfig(
        return_policy=ReturnPolicy.FIRST,
        renderers=("tests.sample_renderers:missing",),
        use_defaults=True,
        config_files=(),
    )
    with pytest.raises(ConfigError):
        cfg.build_pipeline()
