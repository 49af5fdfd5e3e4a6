# topmark:header:start
#
#   project      : RenderKit
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared fixtures for pipeline and registry tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from renderkit.pipeline.renderer import RenderingPipeline

if TYPE_CHECKING:
    from collections.abc import Callable

    from renderkit.entity import Entity


@pytest.fixture
def pipeline() -> RenderingPipeline:
    """A fresh pipeline with the default renderer set."""
    return RenderingPipeline()


@pytest.fixture
def empty_pipeline() -> RenderingPipeline:
    """A pipeline with every renderer removed."""
    p = RenderingPipeline()
    p.clear(confirm=True)
    return p


def constant(value: Any, calls: list[str] | None = None, name: str = "") -> Callable[[Entity], Any]:
    """Return a renderer that always returns ``value`` (and records its calls)."""

    def _renderer(entity: Entity) -> Any:  # pylint: disable=unused-argument
        if calls is not None:
            calls.append(name)
        return value

    _renderer.__qualname__ = f"constant[{name or value!r}]"
    return _renderer
