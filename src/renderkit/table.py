# topmark:header:start
#
#   project      : RenderKit
#   file         : table.py
#   file_relpath : src/renderkit/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Table widget: a grid of cells rendered through a rendering pipeline.

Every cell is an [`Entity`][renderkit.entity.Entity] with ``x`` (row) and
``y`` (column) coordinates. When the table is rendered, each cell goes through
the table's own [`RenderingPipeline`][renderkit.pipeline.renderer.RenderingPipeline],
which has one extra renderer right before the key-value dump: mapping content
becomes a nested two-column table (key, value).

Pointers track the furthest row and column written so far; `add_row` opens a
new row and `add_column` a new column:

```python
table = Table()
table.set_header(["name", "year"])
table.add_row(["Olympia", 1863])
table.add_row(["Water Lilies", 1906])
node = table.render()
```

A `Table` used as content in another pipeline is rendered through its
zero-argument `render()` method (the delegate-to-self default renderer).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal

from renderkit.config.logging import get_logger
from renderkit.constants import TABLE_MISSING_CLASS
from renderkit.core.errors import ArgumentError
from renderkit.entity import Entity
from renderkit.nodes.model import ElementNode, Node
from renderkit.pipeline.outcomes import NoMatch
from renderkit.pipeline.renderer import RenderingPipeline

if TYPE_CHECKING:
    from renderkit.config.logging import RenderKitLogger

logger: RenderKitLogger = get_logger(__name__)

Dim = Literal["x", "y"]

# Position of the nested-table renderer in a table's pipeline:
NESTED_TABLE_POSITION: Final[int] = 1


@dataclass(frozen=True, slots=True, init=False)
class Cell(Entity):
    """A table cell: an entity with row (``x``) and column (``y``) coordinates."""

    x: int
    y: int
    section: str

    def __init__(
        self,
        content: Any = "",
        x: int = 0,
        y: int = 0,
        *,
        identity: str | None = None,
        style_tag: str | Sequence[str] | None = None,
        section: str = "body",
    ) -> None:
        Entity.__init__(self, content=content, identity=identity, style_tag=style_tag)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "section", section)


def _check_dim(dim: object, where: str) -> Dim:
    if dim not in ("x", "y"):
        raise ArgumentError(f"Table.{where}: dim must be 'x' or 'y', got {dim!r}")
    return dim  # type: ignore[return-value]


def _class_list(style: object, where: str) -> list[str]:
    if isinstance(style, str):
        return style.split()
    if isinstance(style, Sequence) and all(isinstance(s, str) for s in style):
        return [token for s in style for token in s.split()]
    raise ArgumentError(f"Table.{where}: style tag must be a string or a sequence of strings")


class Table:
    """A grid of cells with optional header, footer and left column.

    Args:
        options (Mapping[str, Any] | None): Options for the table's rendering pipeline
            (see [`RenderingPipeline.configure`][renderkit.pipeline.renderer.RenderingPipeline.configure]).
        identity (str | None): Identifier of the rendered ``table`` element.
        style_tag (str | Sequence[str] | None): Style tag of the rendered ``table`` element.
        missing (str): Style tag of the empty cells padding gaps in the grid.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        identity: str | None = None,
        style_tag: str | Sequence[str] | None = None,
        missing: str = TABLE_MISSING_CLASS,
    ) -> None:
        self.identity: str | None = identity
        self.style_tag: str | None = (
            None if style_tag is None else " ".join(_class_list(style_tag, "__init__"))
        )
        self.missing: str = missing
        self.cells: list[Cell] = []
        self.header: list[Cell] = []
        self.footer: list[Cell] = []
        self.left: list[Cell] = []
        self.pointers: dict[str, int | None] = {"x": None, "y": None}
        self.pipeline: RenderingPipeline = RenderingPipeline(options)
        self.pipeline.add_renderer(self._render_nested, NESTED_TABLE_POSITION)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cells={len(self.cells)}, pointers={self.pointers})"

    # --- Pointers ---

    def _next_pointer(self, dim: Dim, value: int | None) -> int:
        if value is not None:
            return value
        current = self.pointers[dim]
        return 0 if current is None else current + 1

    def _curr_pointer(self, dim: Dim, value: int | None) -> int:
        if value is not None:
            return value
        current = self.pointers[dim]
        return 0 if current is None else current

    def update_pointer(self, dim: Dim, value: int) -> int:
        """Advance pointer ``dim`` to ``value`` if it is further than the current one.

        Returns:
            int: The (possibly unchanged) pointer value.
        """
        _check_dim(dim, "update_pointer")
        current = self.pointers[dim]
        if current is None or value > current:
            self.pointers[dim] = value
        return self.pointers[dim]  # type: ignore[return-value]

    def reset_pointers(self) -> None:
        """Reset both pointers to "nothing written yet"."""
        self.pointers = {"x": None, "y": None}

    # --- Filling ---

    def add(
        self,
        content: Any,
        x: int | None = None,
        y: int | None = None,
        dim: Dim = "x",
    ) -> Cell | None:
        """Add a single cell.

        With ``dim="x"`` the cell goes to the next row unless ``x`` is given; with
        ``dim="y"`` it goes to the next column of the current row.

        Returns:
            Cell | None: The new cell, or None when ``content`` is ``None``.
        """
        _check_dim(dim, "add")
        if content is None:
            return None
        if dim == "y":
            cx, cy = self._curr_pointer("x", x), self._next_pointer("y", y)
        else:
            cx, cy = self._next_pointer("x", x), self._curr_pointer("y", y)
        if isinstance(content, Cell):
            cell = Cell(
                content.content,
                cx,
                cy,
                identity=content.identity,
                style_tag=content.style_tag,
            )
        else:
            cell = Cell(content, cx, cy)
        self.cells.append(cell)
        self.update_pointer("x", cx)
        self.update_pointer("y", cy)
        logger.trace("Table: added cell at (%d, %d)", cx, cy)
        return cell

    def add_multiple(
        self,
        data: Any,
        dim: Dim = "x",
        x: int | None = None,
        y: int | None = None,
    ) -> None:
        """Add a run of cells (or a grid, for nested sequences) starting at ``(x, y)``.

        With ``dim="x"`` the items fill a row (``y`` increases); with ``dim="y"``
        they fill a column (``x`` increases).
        """
        _check_dim(dim, "add_multiple")
        x0 = self._curr_pointer("x", x)
        y0 = self._next_pointer("y", y)
        items = list(data) if isinstance(data, (list, tuple)) else [data]
        for i, item in enumerate(items):
            if isinstance(item, (list, tuple)):
                for j, sub in enumerate(item):
                    if dim == "x":
                        self.add(sub, x0 + i, y0 + j, "x")
                    else:
                        self.add(sub, x0 + j, y0 + i, "y")
            elif dim == "x":
                self.add(item, x0, y0 + i, "x")
            else:
                self.add(item, x0 + i, y0, "y")

    def add_row(self, data: Any, x: int | None = None, y: int | None = None) -> bool:
        """Append ``data`` as a new row.

        Returns:
            bool: False if ``data`` is empty, else True.
        """
        if data is None or (isinstance(data, (list, tuple)) and not data):
            return False
        self.add_multiple(data, "x", self._next_pointer("x", x), 0 if y is None else y)
        return True

    def add_column(self, data: Any, x: int | None = None, y: int | None = None) -> bool:
        """Append ``data`` as a new column.

        Returns:
            bool: False if ``data`` is empty, else True.
        """
        if data is None or (isinstance(data, (list, tuple)) and not data):
            return False
        self.add_multiple(data, "y", 0 if x is None else x, self._next_pointer("y", y))
        return True

    def _special(self, data: Any, section: str) -> list[Cell]:
        if data is None:
            return []
        items = list(data) if isinstance(data, (list, tuple)) else [data]
        return [Cell(item, 0, i, section=section) for i, item in enumerate(items)]

    def set_header(self, header: Any) -> None:
        """Set the header row (a single value or a sequence of values)."""
        self.header = self._special(header, "header")

    def set_footer(self, footer: Any) -> None:
        """Set the footer row (a single value or a sequence of values)."""
        self.footer = self._special(footer, "footer")

    def set_left(self, left: Any) -> None:
        """Set the left-hand column, one value per body row."""
        self.left = self._special(left, "left")

    # --- Queries ---

    def size(self) -> int:
        """Return the number of body cells."""
        return len(self.cells)

    def get(self, row: int | None = None, col: int | None = None) -> list[Cell] | Cell | None:
        """Return the cells of a row, of a column, or the cell at ``(row, col)``.

        Raises:
            ArgumentError: If ``row`` or ``col`` is given and is not an integer.
        """
        for name, value in (("row", row), ("col", col)):
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ArgumentError(f"Table.get: {name} must be an integer")
        if row is None and col is None:
            return list(self.cells)
        if row is None:
            return [c for c in self.cells if c.y == col]
        if col is None:
            return [c for c in self.cells if c.x == row]
        for cell in self.cells:
            if cell.x == row and cell.y == col:
                return cell
        return None

    # --- Styling ---

    def add_class(self, style_tag: str | Sequence[str]) -> Table:
        """Add style tokens to every body cell.

        Returns:
            Table: This instance, for chaining.

        Raises:
            ArgumentError: If ``style_tag`` is not a string or a sequence of strings.
        """
        tokens = _class_list(style_tag, "add_class")
        updated: list[Cell] = []
        for cell in self.cells:
            current = cell.style_tag.split() if cell.style_tag else []
            merged = current + [t for t in tokens if t not in current]
            updated.append(
                Cell(cell.content, cell.x, cell.y, identity=cell.identity, style_tag=merged)
            )
        self.cells = updated
        return self

    def remove_class(self, style_tag: str | Sequence[str]) -> Table:
        """Remove style tokens from every body cell.

        Returns:
            Table: This instance, for chaining.

        Raises:
            ArgumentError: If ``style_tag`` is not a string or a sequence of strings.
        """
        tokens = set(_class_list(style_tag, "remove_class"))
        updated: list[Cell] = []
        for cell in self.cells:
            remaining = [t for t in (cell.style_tag or "").split() if t not in tokens]
            updated.append(
                Cell(
                    cell.content,
                    cell.x,
                    cell.y,
                    identity=cell.identity,
                    style_tag=remaining or None,
                )
            )
        self.cells = updated
        return self

    def clear(self, confirm: bool = False) -> bool:
        """Remove all body cells and reset the pointers, when ``confirm`` is True.

        Returns:
            bool: Whether the table was cleared.
        """
        if confirm is not True:
            return False
        self.cells = []
        self.reset_pointers()
        return True

    # --- Rendering ---

    def _render_nested(self, entity: Entity) -> Node | None:
        """Render mapping content as a nested key/value table."""
        if not isinstance(entity.content, Mapping):
            return None
        nested = Table()
        for key, value in entity.content.items():
            nested.add_row([key, value])
        return nested.render()

    def _cell_node(self, cell: Cell, tag: str = "td") -> ElementNode:
        content = self.pipeline.render(cell)
        children: tuple[Node, ...] = () if isinstance(content, NoMatch) else (content,)  # type: ignore[assignment]
        return ElementNode(
            tag=tag,
            children=children,
            identity=cell.identity,
            style_tag=cell.style_tag,
        )

    def _missing_cell(self) -> ElementNode:
        return ElementNode(tag="td", style_tag=self.missing)

    def render(self) -> ElementNode:
        """Build the ``table`` element from header, body rows, left column and footer.

        Body rows are ordered by ``x`` then ``y``; gaps between cells of a row
        are padded with empty cells styled with `missing`.
        """
        sections: list[Node] = []

        if self.header:
            row: list[Node] = []
            if self.left:
                row.append(ElementNode(tag="th"))
            row.extend(self._cell_node(c, "th") for c in self.header)
            sections.append(ElementNode(tag="thead", children=(ElementNode("tr", tuple(row)),)))

        if self.cells:
            ordered = sorted(self.cells, key=lambda c: (c.x, c.y))
            first_y = min(c.y for c in ordered)
            rows: list[ElementNode] = []
            current_x: int | None = None
            row_cells: list[Node] = []
            last_y = first_y - 1
            left_index = 0
            for cell in ordered:
                if cell.x != current_x:
                    if current_x is not None:
                        rows.append(ElementNode("tr", tuple(row_cells)))
                    current_x = cell.x
                    row_cells = []
                    last_y = first_y - 1
                    if self.left:
                        if left_index < len(self.left):
                            row_cells.append(self._cell_node(self.left[left_index]))
                        else:
                            row_cells.append(self._missing_cell())
                        left_index += 1
                row_cells.extend(self._missing_cell() for _ in range(cell.y - last_y - 1))
                row_cells.append(self._cell_node(cell))
                last_y = cell.y
            rows.append(ElementNode("tr", tuple(row_cells)))
            sections.append(ElementNode(tag="tbody", children=tuple(rows)))

        if self.footer:
            row = []
            if self.left:
                row.append(self._missing_cell())
            row.extend(self._cell_node(c) for c in self.footer)
            sections.append(ElementNode(tag="tfoot", children=(ElementNode("tr", tuple(row)),)))

        return ElementNode(
            tag="table",
            children=tuple(sections),
            identity=self.identity,
            style_tag=self.style_tag,
        )
