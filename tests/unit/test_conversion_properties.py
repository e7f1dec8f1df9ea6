"""Property-based tests for the Markdown output.

Test Coverage:
- Heading levels map to the same number of hash marks
- Separator dash runs equal the widest cell of each column
- Table padding never truncates
- Ordered numbering restarts for every list
- Unordered bullets are constant, only indentation changes with depth
- Trailing whitespace of text never reaches the output, leading is kept
"""

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tagdown import convert

WORD = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=12)
CELL = st.text(alphabet=string.ascii_letters + string.digits, min_size=0, max_size=10)
ROWS = st.lists(st.lists(CELL, min_size=1, max_size=5), min_size=1, max_size=6)


def _table_html(rows: list[list[str]]) -> str:
    body = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
    return f"<table>{body}</table>"


def _expected_widths(rows: list[list[str]]) -> list[int]:
    widths = [0] * max(len(row) for row in rows)
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


@pytest.mark.unit
@pytest.mark.fuzzing
class TestConversionProperties:
    """Property-based tests using Hypothesis."""

    @given(st.integers(min_value=1, max_value=6), WORD)
    def test_heading_level(self, level, text):
        assert convert(f"<h{level}>{text}</h{level}>") == "#" * level + " " + text + "\n\n"

    @given(ROWS)
    def test_separator_matches_widest_cell(self, rows):
        lines = convert(_table_html(rows)).split("\n")
        widths = _expected_widths(rows)
        assert lines[1] == "| " + "".join("-" * width + " | " for width in widths)

    @given(ROWS)
    def test_padding_never_truncates(self, rows):
        lines = convert(_table_html(rows)).split("\n")
        widths = _expected_widths(rows)
        rendered_rows = [lines[0]] + lines[2 : 2 + len(rows) - 1]
        for row, line in zip(rows, rendered_rows):
            segments = line[2:].split(" | ")[: len(row)]
            for i, (cell, segment) in enumerate(zip(row, segments)):
                assert len(segment) == max(len(cell), widths[i])
                assert segment.rstrip(" ") == cell

    @given(st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=5))
    def test_ordered_numbering_restarts(self, nested_counts):
        items = []
        for count in nested_counts:
            nested = "".join(f"<li>n{j}</li>" for j in range(count))
            items.append(f"<li>top<ol>{nested}</ol></li>" if count else "<li>top</li>")
        lines = convert(f"<ol>{''.join(items)}</ol>").rstrip("\n").split("\n")

        top_numbers = [int(line.split(".")[0]) for line in lines if not line.startswith(" ")]
        assert top_numbers == list(range(1, len(nested_counts) + 1))

        position = 0
        for count in nested_counts:
            position += 1
            nested_lines = lines[position : position + count]
            assert [line.strip().split(".")[0] for line in nested_lines] == [str(j + 1) for j in range(count)]
            position += count

    @given(st.integers(min_value=0, max_value=6))
    def test_unordered_prefix_and_indentation(self, depth):
        html = "<ul><li>x" * (depth + 1) + "</li></ul>" * (depth + 1)
        lines = convert(html).rstrip("\n").split("\n")
        assert len(lines) == depth + 1
        for level, line in enumerate(lines):
            assert line == " " * (2 * level) + "- x"

    @given(
        st.text(alphabet=" \t", max_size=4),
        WORD,
        st.text(alphabet=" \t\r\n", max_size=6),
    )
    def test_whitespace_policy(self, leading, text, trailing):
        assert convert(f"<p>{leading}{text}{trailing}</p>") == leading + text + "\n\n"
