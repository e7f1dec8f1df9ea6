#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tagdown/tables.py
"""Pipe-table rendering.

Rows are collected from direct ``tr`` children of the table and from the
``tr`` children of ``thead``/``tbody``/``tfoot`` sections, in document order.
The first collected row is the header. Every cell is right-padded to the
widest cell in its column; nothing is ever truncated.

Example output::

    | Name  | Qty | 
    | ----- | --- | 
    | apple | 3   | 

"""

from __future__ import annotations

import logging

from bs4.element import PageElement

from tagdown.buffer import MarkdownBuffer
from tagdown.constants import (
    TABLE_CELL_END,
    TABLE_CELL_TAGS,
    TABLE_ROW_START,
    TABLE_ROW_TAG,
    TABLE_SECTION_TAGS,
    TABLE_SEPARATOR_CHAR,
)
from tagdown.context import RenderContext
from tagdown.inline import extract_text
from tagdown.tree import iter_element_children, tag_name
from tagdown.utils.text import pad_right

logger = logging.getLogger(__name__)


def extract_row(tr: PageElement, context: RenderContext) -> list[str]:
    """Return the extracted text of each direct ``td``/``th`` child of ``tr``."""
    return [extract_text(cell, context.descend()) for cell in iter_element_children(tr, TABLE_CELL_TAGS)]


def update_column_widths(row: list[str], column_widths: list[int]) -> None:
    """Grow ``column_widths`` in place so every cell of ``row`` fits."""
    if len(row) > len(column_widths):
        column_widths.extend([0] * (len(row) - len(column_widths)))
    for i, cell in enumerate(row):
        column_widths[i] = max(column_widths[i], len(cell))


def collect_rows(table_node: PageElement, context: RenderContext) -> tuple[list[list[str]], list[int]]:
    """Collect non-empty rows and their column widths from a table.

    Parameters
    ----------
    table_node : PageElement
        The ``table`` element
    context : RenderContext
        Render context at ``table_node``'s depth

    Returns
    -------
    tuple[list[list[str]], list[int]]
        Rows of cell strings and the width of each column

    """
    rows: list[list[str]] = []
    column_widths: list[int] = []

    def add_row(tr: PageElement, tr_context: RenderContext) -> None:
        row = extract_row(tr, tr_context)
        if row:
            rows.append(row)
            update_column_widths(row, column_widths)

    for child in iter_element_children(table_node):
        child_context = context.descend()
        name = tag_name(child)
        if name in TABLE_SECTION_TAGS:
            for tr in iter_element_children(child, TABLE_ROW_TAG):
                add_row(tr, child_context.descend())
        elif name == TABLE_ROW_TAG:
            add_row(child, child_context)

    return rows, column_widths


def format_row(cells: list[str], column_widths: list[int]) -> str:
    """Format one table row, padding each cell to its column width."""
    padded = "".join(pad_right(cell, column_widths[i]) + TABLE_CELL_END for i, cell in enumerate(cells))
    return f"{TABLE_ROW_START}{padded}\n"


def format_separator(column_widths: list[int]) -> str:
    """Format the separator row with one dash run per column."""
    dashes = "".join(TABLE_SEPARATOR_CHAR * width + TABLE_CELL_END for width in column_widths)
    return f"{TABLE_ROW_START}{dashes}\n"


def render_table(table_node: PageElement, out: MarkdownBuffer, context: RenderContext) -> None:
    """Append the pipe table for ``table_node`` to ``out``.

    Emits the header row, the separator row and the data rows. A table
    without any non-empty row emits nothing; the trailing blank line after
    the table is the caller's concern.
    """
    rows, column_widths = collect_rows(table_node, context)

    if not rows:
        logger.debug("Skipping table without rows")
        return

    header, *data_rows = rows

    out.append(format_row(header, column_widths))
    out.append(format_separator(column_widths))
    for row in data_rows:
        out.append(format_row(row, column_widths))
