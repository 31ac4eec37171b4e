# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TableBuilder - fluent builders for ``<table>`` markup.

Two flavours share the same styling methods:

- :class:`TableBuilder` takes rows supplied by hand.
- :class:`CollectionTableBuilder` projects a collection into rows, either
  through per-column selectors or through a whole-row selector.

Example:
    Manual rows::

        TableBuilder().header('Name', 'Email').row('John', 'john@x.com')

    From a collection::

        (CollectionTableBuilder(users)
            .column('Name', lambda u: u.name)
            .column('Status', lambda u: 'Active' if u.active else 'Inactive'))

Row cell counts are never checked against the header: a short row simply
renders fewer cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Mapping, NamedTuple, TypeVar

from .base import AttributeBuilder, is_blank, is_node

if TYPE_CHECKING:
    from ..sink import Sink

T = TypeVar('T')


def _emit_text_cell(sink: Sink, seq: int, tag: str, value: Any) -> int:
    sink.open_element(seq, tag)
    seq += 1
    if value is not None:
        sink.add_text_content(seq, value)
        seq += 1
    sink.close_element()
    return seq


def _emit_node_cell(sink: Sink, seq: int, node: Any) -> int:
    sink.open_element(seq, 'td')
    seq = node.build(sink, seq + 1)
    sink.close_element()
    return seq


def _require_node(value: Any, method: str) -> Any:
    if not is_node(value):
        raise TypeError(
            f"{method}() expects a builder or Fragment, not {type(value).__name__}"
        )
    return value


class _TableBase(AttributeBuilder):
    """Caption, header and footer handling shared by both table builders."""

    def __init__(self) -> None:
        super().__init__()
        self._caption: str | None = None
        self._header_cells: list[str] = []
        self._tfoot: Any = None

    def caption(self, text: str):
        """Set the ``<caption>``, emitted right after the table tag."""
        self._caption = text
        return self

    def header(self, *cells: str):
        """Append plain-text header cells, rendered as ``<thead><tr><th>``."""
        self._header_cells.extend(cells)
        return self

    def foot(self, element: Any):
        """Use ``element`` (usually a ``tfoot`` Element) as the footer."""
        self._tfoot = _require_node(element, 'foot')
        return self

    def _open_table(self, sink: Sink, seq: int) -> int:
        sink.open_element(seq, 'table')
        seq = self._emit_attributes(sink, seq + 1)
        if self._caption is not None:
            seq = _emit_text_cell(sink, seq, 'caption', self._caption)
        return seq

    def _emit_header_row(self, sink: Sink, seq: int, headers: list[str]) -> int:
        sink.open_element(seq, 'thead')
        sink.open_element(seq + 1, 'tr')
        seq += 2
        for cell in headers:
            seq = _emit_text_cell(sink, seq, 'th', cell)
        sink.close_element()  # tr
        sink.close_element()  # thead
        return seq

    def _close_table(self, sink: Sink, seq: int) -> int:
        if self._tfoot is not None:
            seq = self._tfoot.build(sink, seq)
        sink.close_element()  # table
        return seq


class TableBuilder(_TableBase):
    """Table built from rows supplied by hand.

    Custom ``head``/``body``/``foot`` elements replace the generated section
    entirely. Text rows are emitted before element rows.
    """

    def __init__(self) -> None:
        super().__init__()
        self._rows: list[tuple[Any, ...]] = []
        self._element_rows: list[tuple[Any, ...]] = []
        self._thead: Any = None
        self._tbody: Any = None

    def __repr__(self) -> str:
        return f"TableBuilder(rows={len(self._rows) + len(self._element_rows)})"

    def head(self, element: Any) -> TableBuilder:
        """Replace the generated ``<thead>`` with ``element``."""
        self._thead = _require_node(element, 'head')
        return self

    def body(self, element: Any) -> TableBuilder:
        """Replace the generated ``<tbody>`` with ``element``."""
        self._tbody = _require_node(element, 'body')
        return self

    def row(self, *cells: Any) -> TableBuilder:
        """Append a row.

        A row of plain values goes to the text rows; a row made only of
        builders goes to the element rows.

        Raises:
            TypeError: If the row mixes builders and plain values.
        """
        nodes = [is_node(cell) for cell in cells]
        if cells and all(nodes):
            self._element_rows.append(cells)
        elif any(nodes):
            raise TypeError("row() cells must be all text or all builders")
        else:
            self._rows.append(cells)
        return self

    def build(self, sink: Sink, seq: int) -> int:
        seq = self._open_table(sink, seq)

        if self._thead is not None:
            seq = self._thead.build(sink, seq)
        elif self._header_cells:
            seq = self._emit_header_row(sink, seq, self._header_cells)

        if self._tbody is not None:
            seq = self._tbody.build(sink, seq)
        elif self._rows or self._element_rows:
            sink.open_element(seq, 'tbody')
            seq += 1
            for cells in self._rows:
                sink.open_element(seq, 'tr')
                seq += 1
                for cell in cells:
                    seq = _emit_text_cell(sink, seq, 'td', cell)
                sink.close_element()
            for cells in self._element_rows:
                sink.open_element(seq, 'tr')
                seq += 1
                for cell in cells:
                    seq = _emit_node_cell(sink, seq, cell)
                sink.close_element()
            sink.close_element()  # tbody

        return self._close_table(sink, seq)


class Column(NamedTuple):
    """A column of a collection table: header label and per-item selector.

    The selector may return a builder, rendered inside the cell, or any
    other value, emitted as text (``None`` leaves the cell empty).
    """

    header: str
    selector: Callable[[Any], Any]


class CollectionTableBuilder(_TableBase, Generic[T]):
    """Table whose body is projected from a collection.

    The collection is iterated once per render, so pass a list (or another
    re-iterable) if the table is rendered more than once.

    Body cells come from the first configured source, in this order:

    1. column definitions (headers then come from the column labels)
    2. element row selector
    3. element row selector with index
    4. text row selector
    5. text row selector with index

    Lower-priority sources are ignored, not rejected.
    """

    # (elements, with_index) in priority order
    _ROW_PRIORITY = ((True, False), (True, True), (False, False), (False, True))

    def __init__(self, items: Iterable[T]) -> None:
        super().__init__()
        self._items = items
        self._columns: list[Column] = []
        self._row_selectors: dict[tuple[bool, bool], Callable[..., Iterable[Any]]] = {}
        self._row_class: Callable[[T], str | None] | None = None
        self._row_attrs: Callable[[T], Mapping[str, Any]] | None = None

    def __repr__(self) -> str:
        return f"CollectionTableBuilder(columns={[c.header for c in self._columns]})"

    def column(self, header: str, selector: Callable[[T], Any]) -> CollectionTableBuilder[T]:
        """Declare a column with its header label and cell selector."""
        self._columns.append(Column(header, selector))
        return self

    def row(
        self,
        selector: Callable[..., Iterable[Any]],
        *,
        elements: bool = False,
        with_index: bool = False,
    ) -> CollectionTableBuilder[T]:
        """Set a whole-row selector.

        Args:
            selector: ``item -> cells`` or, with ``with_index``,
                ``(item, index) -> cells``. The index is the zero-based
                position in the current render.
            elements: True if the selector returns builders rather than text.
            with_index: True if the selector takes the row index.
        """
        self._row_selectors[(elements, with_index)] = selector
        return self

    def row_class(self, selector: Callable[[T], str | None]) -> CollectionTableBuilder[T]:
        """Compute the ``<tr>`` class per item; blank results add nothing."""
        self._row_class = selector
        return self

    def row_attrs(self, selector: Callable[[T], Mapping[str, Any]]) -> CollectionTableBuilder[T]:
        """Compute extra ``<tr>`` attributes per item."""
        self._row_attrs = selector
        return self

    def _emit_cells(self, sink: Sink, seq: int, item: T, index: int) -> int:
        if self._columns:
            for column in self._columns:
                value = column.selector(item)
                if is_node(value):
                    seq = _emit_node_cell(sink, seq, value)
                else:
                    seq = _emit_text_cell(sink, seq, 'td', value)
            return seq

        for key in self._ROW_PRIORITY:
            selector = self._row_selectors.get(key)
            if selector is None:
                continue
            with_index = key[1]
            cells = selector(item, index) if with_index else selector(item)
            for cell in cells:
                if is_node(cell):
                    seq = _emit_node_cell(sink, seq, cell)
                else:
                    seq = _emit_text_cell(sink, seq, 'td', cell)
            break
        return seq

    def build(self, sink: Sink, seq: int) -> int:
        seq = self._open_table(sink, seq)

        headers = [column.header for column in self._columns] or self._header_cells
        if headers:
            seq = self._emit_header_row(sink, seq, headers)

        sink.open_element(seq, 'tbody')
        seq += 1
        for index, item in enumerate(self._items):
            sink.open_element(seq, 'tr')
            seq += 1

            if self._row_class is not None:
                row_class = self._row_class(item)
                if not is_blank(row_class):
                    sink.add_attribute(seq, 'class', row_class)
                    seq += 1

            if self._row_attrs is not None:
                for name, value in self._row_attrs(item).items():
                    sink.add_attribute(seq, name, value)
                    seq += 1

            seq = self._emit_cells(sink, seq, item, index)
            sink.close_element()  # tr
        sink.close_element()  # tbody

        return self._close_table(sink, seq)
