# topmark:header:start
#
#   project      : RenderKit
#   file         : test_table.py
#   file_relpath : tests/table/test_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Table` widget: pointers, filling, styling and rendering."""

from __future__ import annotations

from typing import Any

import pytest

from renderkit.core.errors import ArgumentError
from renderkit.entity import Entity
from renderkit.nodes.model import ElementNode, TextNode
from renderkit.nodes.serializers import to_html
from renderkit.pipeline.renderer import RenderingPipeline
from renderkit.table import NESTED_TABLE_POSITION, Cell, Table
from tests.conftest import parametrize

pytestmark: pytest.MarkDecorator = pytest.mark.table


def coords(table: Table) -> list[tuple[int, int]]:
    return [(c.x, c.y) for c in table.cells]


def test_cell_is_an_entity_with_coordinates() -> None:
    cell = Cell("x", 2, 3, style_tag=["a", "b"])
    assert isinstance(cell, Entity)
    assert (cell.content, cell.x, cell.y, cell.style_tag) == ("x", 2, 3, "a b")


def test_add_rows_then_column() -> None:
    table = Table()
    assert table.add_row(["a", "b"]) is True
    assert table.add_row(["c", "d"]) is True
    assert table.add_column(["e", "f"]) is True
    assert coords(table) == [(0, 0), (0, 1), (1, 0), (1, 1), (0, 2), (1, 2)]
    assert table.pointers == {"x": 1, "y": 2}


def test_single_adds_grow_along_rows() -> None:
    table = Table()
    table.add("a")
    table.add("b")
    table.add("c", dim="y")
    assert coords(table) == [(0, 0), (1, 0), (1, 1)]


def test_add_skips_none_and_copies_cells() -> None:
    table = Table()
    assert table.add(None) is None
    assert table.size() == 0
    cell = table.add(Cell("x", 9, 9, identity="keep"))
    assert cell is not None
    assert (cell.x, cell.y, cell.identity) == (0, 0, "keep")


@parametrize("data", [None, [], ()])
def test_add_row_and_column_reject_empty_data(data: Any) -> None:
    table = Table()
    assert table.add_row(data) is False
    assert table.add_column(data) is False
    assert table.size() == 0


def test_add_rejects_unknown_dimension() -> None:
    with pytest.raises(ArgumentError):
        Table().add("x", dim="z")  # type: ignore[arg-type]


def test_get_row_column_and_cell() -> None:
    table = Table()
    table.add_row(["a", "b"])
    table.add_row(["c", "d"])
    row = table.get(row=1)
    col = table.get(col=0)
    assert isinstance(row, list) and [c.content for c in row] == ["c", "d"]
    assert isinstance(col, list) and [c.content for c in col] == ["a", "c"]
    cell = table.get(0, 1)
    assert isinstance(cell, Cell) and cell.content == "b"
    assert table.get(5, 5) is None
    assert len(table.get()) == 4  # type: ignore[arg-type]
    with pytest.raises(ArgumentError):
        table.get(row="0")  # type: ignore[arg-type]


def test_add_and_remove_class() -> None:
    table = Table()
    table.add_row(["a", "b"])
    assert table.add_class("hot") is table
    table.add_class(["hot", "new"])
    assert {c.style_tag for c in table.cells} == {"hot new"}
    table.remove_class("hot")
    assert {c.style_tag for c in table.cells} == {"new"}
    table.remove_class(["new"])
    assert {c.style_tag for c in table.cells} == {None}


@parametrize("bad", [1, None, {"a": "b"}, ["ok", 2]])
def test_class_helpers_reject_bad_style_tags(bad: Any) -> None:
    table = Table()
    table.add("a")
    with pytest.raises(ArgumentError):
        table.add_class(bad)
    with pytest.raises(ArgumentError):
        table.remove_class(bad)


def test_clear_requires_confirmation() -> None:
    table = Table()
    table.add_row(["a"])
    assert table.clear() is False
    assert table.size() == 1
    assert table.clear(True) is True
    assert table.size() == 0
    assert table.pointers == {"x": None, "y": None}


def test_render_structure_with_header_footer_and_left() -> None:
    table = Table(identity="t", style_tag="grid")
    table.set_header(["h1", "h2"])
    table.set_left(["r0", "r1"])
    table.add_row(["a", "b"])
    table.add_row(["c", "d"])
    table.set_footer(["f1", "f2"])
    node = table.render()

    assert (node.tag, node.identity, node.style_tag) == ("table", "t", "grid")
    assert [s.tag for s in node.children if isinstance(s, ElementNode)] == [
        "thead",
        "tbody",
        "tfoot",
    ]
    assert len(node.find_all("th")) == 3
    body = node.find_all("tbody")[0]
    rows = body.find_all("tr")
    assert len(rows) == 2
    first_row = [td.children[0] for td in rows[0].find_all("td")]
    assert first_row == [TextNode("r0"), TextNode("a"), TextNode("b")]


def test_render_pads_gaps_with_missing_cells() -> None:
    table = Table(missing="gap")
    table.add("a", 0, 0)
    table.add("b", 0, 2)
    tds = table.render().find_all("td")
    assert [td.style_tag for td in tds] == [None, "gap", None]
    assert tds[1].children == ()


def test_render_nested_table_for_mapping_content() -> None:
    table = Table()
    table.add({"k": "v"})
    html = to_html(table.render())
    assert html == (
        "<table><tbody><tr><td>"
        "<table><tbody><tr><td>k</td><td>v</td></tr></tbody></table>"
        "</td></tr></tbody></table>"
    )


def test_nested_renderer_sits_before_key_value_dump() -> None:
    table = Table()
    assert table.pipeline.size() == 5
    assert table.pipeline.renderers[NESTED_TABLE_POSITION] == table._render_nested


def test_table_as_content_renders_through_self_renderer() -> None:
    table = Table()
    table.add_row(["x"])
    out = RenderingPipeline().render(Entity(table))
    assert out == table.render()


def test_empty_table_renders_bare_element() -> None:
    assert Table().render() == ElementNode("table")
