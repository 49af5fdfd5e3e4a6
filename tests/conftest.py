# topmark:header:start
#
#   project      : RenderKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the RenderKit test suite.

Sets up TRACE-level logging for the session, keeps the developer's
``RENDERKIT_LOG_LEVEL`` from leaking into tests, and provides typed wrappers
around pytest marks plus a few shared builders.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `MutablePipelineConfig` and `freeze()` them; never mutate a
    frozen `PipelineConfig` (use `thaw()`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from renderkit.config import logging
from renderkit.config.model import MutablePipelineConfig
from renderkit.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from renderkit.config.model import PipelineConfig

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


# Long-running property tests; deselected by the nox "qa" session.
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_renderkit_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure RenderKit's runtime log level is not forced via env during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory (no config to discover).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> PipelineConfig:
    """Return a frozen `PipelineConfig` built from defaults and ``overrides``."""
    m: MutablePipelineConfig = MutablePipelineConfig.from_defaults()
    m.apply_overrides(overrides)
    return m.freeze()
