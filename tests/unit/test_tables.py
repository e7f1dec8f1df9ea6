"""Unit tests for pipe-table rendering."""

import pytest

from tagdown.buffer import MarkdownBuffer
from tagdown.converter import HtmlToMarkdownConverter
from tagdown.tables import collect_rows, format_row, format_separator, render_table, update_column_widths


def _convert(html: str) -> str:
    return HtmlToMarkdownConverter().convert(html)


@pytest.mark.unit
class TestColumnWidths:
    """Tests for update_column_widths."""

    def test_grows_for_wider_rows(self):
        widths: list[int] = []
        update_column_widths(["ab"], widths)
        update_column_widths(["a", "abc", "x"], widths)
        assert widths == [2, 3, 1]

    def test_keeps_maximum(self):
        widths = [5, 1]
        update_column_widths(["ab", "abcd"], widths)
        assert widths == [5, 4]


@pytest.mark.unit
class TestFormatting:
    """Tests for row and separator formatting."""

    def test_format_row_pads(self):
        assert format_row(["a", "b"], [3, 1]) == "| a   | b | \n"

    def test_format_row_with_fewer_cells(self):
        assert format_row(["a"], [1, 4]) == "| a | \n"

    def test_format_separator(self):
        assert format_separator([1, 3]) == "| - | --- | \n"


@pytest.mark.unit
class TestCollectRows:
    """Tests for row collection."""

    def test_sections_and_direct_rows_in_document_order(self, first_element, context):
        html = (
            "<table><tr><td>first</td></tr>"
            "<thead><tr><th>head</th></tr></thead>"
            "<tbody><tr><td>body</td></tr></tbody>"
            "<tfoot><tr><td>foot</td></tr></tfoot></table>"
        )
        rows, widths = collect_rows(first_element(html), context)
        assert rows == [["first"], ["head"], ["body"], ["foot"]]
        assert widths == [5]

    def test_empty_rows_are_discarded(self, first_element, context):
        rows, _ = collect_rows(first_element("<table><tr></tr><tr><td>x</td></tr><tr> </tr></table>"), context)
        assert rows == [["x"]]

    def test_only_td_and_th_cells(self, first_element, context):
        rows, _ = collect_rows(first_element("<table><tr><td>a</td><span>b</span><th>c</th></tr></table>"), context)
        assert rows == [["a", "c"]]

    def test_caption_is_ignored(self, first_element, context):
        rows, _ = collect_rows(first_element("<table><caption>Cap</caption><tr><td>x</td></tr></table>"), context)
        assert rows == [["x"]]


@pytest.mark.unit
class TestRenderTable:
    """Tests for complete tables."""

    def test_simple_table(self):
        html = "<table><tr><td>A</td><td>B</td></tr><tr><td>C</td><td>D</td></tr></table>"
        assert _convert(html) == "| A | B | \n| - | - | \n| C | D | \n\n"

    def test_columns_padded_to_widest_cell(self):
        html = "<table><tr><th>Name</th><th>Qty</th></tr><tr><td>apple</td><td>3</td></tr></table>"
        assert _convert(html) == "| Name  | Qty | \n| ----- | --- | \n| apple | 3   | \n\n"

    def test_sections(self):
        html = (
            "<table><thead><tr><th>H</th></tr></thead>"
            "<tbody><tr><td>b1</td></tr></tbody>"
            "<tfoot><tr><td>f</td></tr></tfoot></table>"
        )
        assert _convert(html) == "| H  | \n| -- | \n| b1 | \n| f  | \n\n"

    def test_data_row_wider_than_header(self):
        """Test that the separator covers every column, the header only its own cells."""
        html = "<table><tr><td>a</td></tr><tr><td>bb</td><td>ccc</td></tr></table>"
        assert _convert(html) == "| a  | \n| -- | --- | \n| bb | ccc | \n\n"

    def test_data_row_shorter_than_header(self):
        """Test that missing trailing cells are not synthesized."""
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>c</td></tr></table>"
        assert _convert(html) == "| a | b | \n| - | - | \n| c | \n\n"

    def test_inline_formatting_counts_toward_width(self):
        html = "<table><tr><td><b>x</b></td></tr><tr><td>y</td></tr></table>"
        assert _convert(html) == "| **x** | \n| ----- | \n| y     | \n\n"

    def test_empty_table(self):
        """Test that a table without rows only yields the trailing newline."""
        assert _convert("<table></table>") == "\n"

    def test_header_only(self):
        assert _convert("<table><tr><th>only</th></tr></table>") == "| only | \n| ---- | \n\n"

    def test_render_table_leaves_trailing_line_to_caller(self, first_element, context):
        out = MarkdownBuffer()
        render_table(first_element("<table><tr><td>x</td></tr></table>"), out, context)
        assert out.getvalue() == "| x | \n| - | \n"
