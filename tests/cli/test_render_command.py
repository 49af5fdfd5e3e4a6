# topmark:header:start
#
#   project      : RenderKit
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `renderkit render`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from renderkit.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_NO_MATCH,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_render_raw_string(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", "hello world"])
    assert_SUCCESS(result)
    assert result.output == "hello world\n"


def test_render_json_object_as_key_value_dump(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", '{"a": 1, "b": 2}'])
    assert_SUCCESS(result)
    assert result.output == "a:\t1\nb:\t2\n\n"


def test_render_json_string_is_decoded(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", '"quoted"'])
    assert_SUCCESS(result)
    assert result.output == "quoted\n"


def test_render_html_format(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", "--format", "html", "<x>"])
    assert_SUCCESS(result)
    assert result.output.strip() == "&lt;x&gt;"


def test_render_json_format(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", "--format", "JSON", "[1]"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload == {
        "kind": "element",
        "tag": "div",
        "children": [{"kind": "text", "text": "0:\t1"}, {"kind": "break"}],
    }


def test_render_from_stdin(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", "--stdin"], input_text="piped\n")
    assert_SUCCESS(result)
    assert result.output == "piped\n"


@parametrize("argv", [["render"], ["render", "--stdin", "also-arg"]])
def test_render_requires_exactly_one_source(isolation: Path, argv: list[str]) -> None:
    result = run_cli_in(isolation, argv, input_text="x")
    assert_USAGE_ERROR(result)


def test_render_accepts_identity_and_classes(isolation: Path) -> None:
    result = run_cli_in(
        isolation, ["--no-color", "render", "--id", "box", "--class", "a", "--class", "b", "x"]
    )
    assert_SUCCESS(result)
    assert result.output == "x\n"


def test_render_last_policy_uses_fallback(isolation: Path) -> None:
    result = run_cli_in(isolation, ["--no-color", "render", "--return-policy", "last", "[1]"])
    assert_SUCCESS(result)
    assert result.output == "[1]\n"


def test_render_invalid_policy_is_click_usage_error(isolation: Path) -> None:
    result = run_cli_in(isolation, ["render", "--return-policy", "all", "x"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_render_no_match_exit_code(isolation: Path) -> None:
    (isolation / "renderkit.toml").write_text(
        '[pipeline]\nrenderers = ["tests.sample_renderers:never"]\nuse_defaults = false\n',
        encoding="utf-8",
    )
    result = run_cli_in(isolation, ["--no-color", "render", "x"])
    assert_NO_MATCH(result)


def test_render_uses_discovered_config(isolation: Path) -> None:
    (isolation / "renderkit.toml").write_text(
        '[pipeline]\nrenderers = ["tests.sample_renderers:shout"]\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["--no-color", "render", "hi"])
    assert_SUCCESS(result)
    assert result.output == "HI\n"


def test_render_explicit_config_file(isolation: Path, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('[pipeline]\nrenderers = ["tests.sample_renderers:shout"]\n', "utf-8")
    result = run_cli_in(isolation, ["--no-color", "render", "--config", str(config), "hi"])
    assert_SUCCESS(result)
    assert result.output == "HI\n"


def test_render_bad_renderer_reference_is_config_error(isolation: Path) -> None:
    (isolation / "renderkit.toml").write_text(
        '[pipeline]\nrenderers = ["tests.sample_renderers:missing"]\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["--no-color", "render", "hi"])
    assert_CONFIG_ERROR(result)
    assert "missing" in result.output


def test_render_invalid_toml_is_config_error(isolation: Path) -> None:
    (isolation / "renderkit.toml").write_text("[pipeline\n", encoding="utf-8")
    result = run_cli_in(isolation, ["render", "hi"])
    assert_CONFIG_ERROR(result)


def test_render_renderer_returning_non_node_fails(isolation: Path) -> None:
    (isolation / "renderkit.toml").write_text(
        '[pipeline]\nrenderers = ["tests.sample_renderers:plain_string"]\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["--no-color", "render", "hi"])
    assert result.exit_code == ExitCode.FAILURE
    assert "cannot be serialized" in result.output
