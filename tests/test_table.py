# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TableBuilder and CollectionTableBuilder."""

import pytest

from genro_fragments import (
    CollectionTableBuilder,
    Element,
    RecordingSink,
    TableBuilder,
    html,
)


USERS = [
    {'name': 'John', 'email': 'john@x.com', 'active': True},
    {'name': 'Jane', 'email': 'jane@x.com', 'active': False},
]


class TestTableBuilder:
    """Tests for manually populated tables."""

    def test_header_and_rows(self):
        """Test generated thead and tbody."""
        table = TableBuilder().header('Name', 'Email').row('John', 'john@example.com')
        assert table.to_html() == (
            '<table>'
            '<thead><tr><th>Name</th><th>Email</th></tr></thead>'
            '<tbody><tr><td>John</td><td>john@example.com</td></tr></tbody>'
            '</table>'
        )

    def test_styling_and_caption(self):
        """Test table attributes and caption placement."""
        table = (
            TableBuilder()
            .class_('table', 'striped')
            .id('users')
            .style('width', '100%')
            .caption('Users')
            .header('Name')
        )
        assert table.to_html() == (
            '<table id="users" class="table striped" style="width: 100%">'
            '<caption>Users</caption>'
            '<thead><tr><th>Name</th></tr></thead>'
            '</table>'
        )

    def test_empty_table_has_no_tbody(self):
        """Test a row-less table emits no tbody."""
        assert TableBuilder().to_html() == '<table></table>'

    def test_text_rows_before_element_rows(self):
        """Test text rows are emitted first regardless of call order."""
        table = TableBuilder().row(Element('b', 'e')).row('t')
        assert table.to_html() == (
            '<table><tbody>'
            '<tr><td>t</td></tr>'
            '<tr><td><b>e</b></td></tr>'
            '</tbody></table>'
        )

    def test_mixed_row_rejected(self):
        """Test a row mixing text and builders raises."""
        with pytest.raises(TypeError):
            TableBuilder().row('a', Element('b'))

    def test_non_string_cells(self):
        """Test plain values are converted to text."""
        assert TableBuilder().row(1, 2.5).to_html() == (
            '<table><tbody><tr><td>1</td><td>2.5</td></tr></tbody></table>'
        )

    def test_cell_count_not_checked(self):
        """Test rows shorter than the header are allowed."""
        table = TableBuilder().header('A', 'B', 'C').row('1', '2')
        assert '<tr><td>1</td><td>2</td></tr>' in table.to_html()

    def test_custom_sections_replace_generated(self):
        """Test head/body/foot override header and rows."""
        table = (
            TableBuilder()
            .header('ignored')
            .row('ignored')
            .head(Element('thead').child(Element('tr').child(Element('th', 'H'))))
            .body(Element('tbody'))
            .foot(Element('tfoot').child(Element('tr').child(Element('td', 'F'))))
        )
        assert table.to_html() == (
            '<table>'
            '<thead><tr><th>H</th></tr></thead>'
            '<tbody></tbody>'
            '<tfoot><tr><td>F</td></tr></tfoot>'
            '</table>'
        )

    def test_foot_rejects_plain_values(self):
        """Test foot() requires a builder."""
        with pytest.raises(TypeError):
            TableBuilder().foot('footer')

    def test_render_idempotent(self):
        """Test two renders give identical sequences."""
        table = TableBuilder().header('A').row('1').row(Element('i', '2'))
        first, second = RecordingSink(), RecordingSink()
        table.render()(first)
        table.render()(second)
        assert first.instructions == second.instructions


class TestCollectionTableColumns:
    """Tests for column-driven collection tables."""

    def test_columns(self):
        """Test headers and cells come from column definitions."""
        table = (
            CollectionTableBuilder(USERS)
            .column('Name', lambda u: u['name'])
            .column('Status', lambda u: 'Active' if u['active'] else 'Inactive')
        )
        assert table.to_html() == (
            '<table>'
            '<thead><tr><th>Name</th><th>Status</th></tr></thead>'
            '<tbody>'
            '<tr><td>John</td><td>Active</td></tr>'
            '<tr><td>Jane</td><td>Inactive</td></tr>'
            '</tbody>'
            '</table>'
        )

    def test_columns_take_precedence(self):
        """Test row selectors are ignored when columns exist."""
        table = (
            CollectionTableBuilder(USERS)
            .row(lambda u: ['ROW'])
            .column('Name', lambda u: u['name'])
            .header('Ignored')
        )
        result = table.to_html()
        assert 'ROW' not in result
        assert 'Ignored' not in result
        assert '<th>Name</th>' in result

    def test_column_with_element(self):
        """Test a column selector returning a builder."""
        table = CollectionTableBuilder(USERS[:1]).column(
            'Email', lambda u: html.a(f"mailto:{u['email']}", u['email'])
        )
        assert '<td><a href="mailto:john@x.com">john@x.com</a></td>' in table.to_html()

    def test_column_none_value(self):
        """Test a None value leaves the cell empty."""
        table = CollectionTableBuilder([1]).column('X', lambda _: None)
        assert '<tbody><tr><td></td></tr></tbody>' in table.to_html()


class TestCollectionTableRows:
    """Tests for row-selector collection tables."""

    def test_text_row(self):
        """Test a text row selector with explicit headers."""
        table = (
            CollectionTableBuilder(USERS)
            .header('Name', 'Email')
            .row(lambda u: [u['name'], u['email']])
        )
        assert table.to_html() == (
            '<table>'
            '<thead><tr><th>Name</th><th>Email</th></tr></thead>'
            '<tbody>'
            '<tr><td>John</td><td>john@x.com</td></tr>'
            '<tr><td>Jane</td><td>jane@x.com</td></tr>'
            '</tbody>'
            '</table>'
        )

    def test_text_row_with_index(self):
        """Test the index is the zero-based position."""
        table = CollectionTableBuilder(USERS).row(
            lambda u, i: [str(i + 1), u['name']], with_index=True
        )
        result = table.to_html()
        assert '<tr><td>1</td><td>John</td></tr>' in result
        assert '<tr><td>2</td><td>Jane</td></tr>' in result

    def test_index_restarts_each_render(self):
        """Test a second render starts counting from zero again."""
        table = CollectionTableBuilder(USERS).row(lambda u, i: [str(i)], with_index=True)
        assert table.to_html() == table.to_html()
        assert '<td>0</td>' in table.to_html()

    def test_element_row(self):
        """Test an element row selector."""
        table = CollectionTableBuilder(USERS).row(
            lambda u: [html.strong(u['name'])], elements=True
        )
        result = table.to_html()
        assert '<td><strong>John</strong></td>' in result
        assert '<td><strong>Jane</strong></td>' in result

    def test_element_row_beats_text_row(self):
        """Test element selectors take priority over text selectors."""
        table = (
            CollectionTableBuilder(USERS[:1])
            .row(lambda u: ['text'])
            .row(lambda u: [html.em('element')], elements=True)
        )
        assert table.to_html() == (
            '<table><tbody><tr><td><em>element</em></td></tr></tbody></table>'
        )

    def test_indexed_element_row_beats_text_row(self):
        """Test element-with-index outranks plain text rows."""
        table = (
            CollectionTableBuilder(USERS[:1])
            .row(lambda u: ['text'])
            .row(lambda u, i: [html.em(str(i))], elements=True, with_index=True)
        )
        assert '<td><em>0</em></td>' in table.to_html()
        assert 'text' not in table.to_html()

    def test_text_row_beats_indexed_text_row(self):
        """Test plain text rows outrank indexed text rows."""
        table = (
            CollectionTableBuilder(USERS[:1])
            .row(lambda u, i: ['indexed'], with_index=True)
            .row(lambda u: ['plain'])
        )
        assert '<td>plain</td>' in table.to_html()
        assert 'indexed' not in table.to_html()

    def test_row_class(self):
        """Test row classes; blank results add no attribute."""
        table = (
            CollectionTableBuilder(USERS)
            .row_class(lambda u: 'active' if u['active'] else '')
            .row(lambda u: [u['name']])
        )
        assert table.to_html() == (
            '<table><tbody>'
            '<tr class="active"><td>John</td></tr>'
            '<tr><td>Jane</td></tr>'
            '</tbody></table>'
        )

    def test_row_attrs(self):
        """Test per-row attributes."""
        table = (
            CollectionTableBuilder(USERS)
            .row_attrs(lambda u: {'data-name': u['name']})
            .row(lambda u: [u['email']])
        )
        result = table.to_html()
        assert '<tr data-name="John"><td>john@x.com</td></tr>' in result
        assert '<tr data-name="Jane"><td>jane@x.com</td></tr>' in result

    def test_no_selector(self):
        """Test a table without columns or selectors renders empty rows."""
        assert CollectionTableBuilder(USERS).to_html() == (
            '<table><tbody><tr></tr><tr></tr></tbody></table>'
        )

    def test_empty_collection(self):
        """Test static chrome renders with zero rows."""
        table = (
            CollectionTableBuilder([])
            .caption('C')
            .column('Name', lambda u: u['name'])
        )
        assert table.to_html() == (
            '<table><caption>C</caption>'
            '<thead><tr><th>Name</th></tr></thead>'
            '<tbody></tbody></table>'
        )

    def test_foot(self):
        """Test the footer follows the body."""
        table = (
            CollectionTableBuilder([])
            .foot(Element('tfoot').child(Element('tr').child(Element('td', 'Total'))))
        )
        assert table.to_html() == (
            '<table><tbody></tbody><tfoot><tr><td>Total</td></tr></tfoot></table>'
        )

    def test_nested_in_element(self):
        """Test a collection table as an element child."""
        section = Element('section').child(
            CollectionTableBuilder(USERS[:1]).column('Name', lambda u: u['name'])
        )
        assert section.to_html() == (
            '<section><table>'
            '<thead><tr><th>Name</th></tr></thead>'
            '<tbody><tr><td>John</td></tr></tbody>'
            '</table></section>'
        )
