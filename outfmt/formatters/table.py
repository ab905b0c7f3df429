"""
Table Formatters for outfmt
============================
Render RowsOfFields and AssociativeList data with Rich tables.

RowsOfFields render horizontally: a header row of field labels, then
one row per record. An AssociativeList renders vertically as two
columns: the field label, then its value.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from rich import box
from rich.box import Box
from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segments
from rich.table import Table
from rich.text import Text

from ..options import FormatterOptions
from ..transformations import TableTransformation
from .base import Capability, Formatter, TableDataMixin, cell_text

# Configure module logger
logger = logging.getLogger(__name__)

# Render width used to measure a table's natural size
MEASURE_WIDTH = 1_000_000

# table-style option values
TABLE_STYLES = {
    "default": box.ASCII2,
    "borderless": box.SIMPLE,
    "compact": None,
    "box": box.SQUARE,
    "box-double": box.DOUBLE,
}


def table_box(style: Any) -> Optional[Box]:
    """Rich box for a table-style name; unknown styles use the default"""
    if style not in TABLE_STYLES:
        logger.warning(f"Unknown table style '{style}', using 'default'")
        style = "default"
    return TABLE_STYLES[style]


def build_table(
    rows: Sequence[Sequence[Any]],
    headers: Optional[Sequence[str]] = None,
    style: Any = "default",
    title: Optional[str] = None
) -> Table:
    """
    Build a Rich table of plain text cells.

    Each column is as wide as its widest cell plus one space of padding
    on either side. Headers are shown only when given.
    """
    table = Table(
        title=title,
        box=table_box(style),
        show_header=bool(headers),
        padding=(0, 1),
        title_justify="left",
    )

    column_count = len(headers) if headers else max((len(row) for row in rows), default=0)
    for index in range(column_count):
        table.add_column(Text(headers[index]) if headers else "", no_wrap=True)

    for row in rows:
        cells = [Text(cell_text(cell)) for cell in row]
        # Pad short rows
        cells.extend(Text("") for _ in range(column_count - len(cells)))
        table.add_row(*cells)

    return table


def print_table(output: Console, table: Table) -> None:
    """
    Print `table` at its natural width.

    Console.print would shrink the columns to the console width, so the
    table is rendered at the wider of the two widths and printed uncropped.
    """
    natural = Measurement.get(output, output.options.update_width(MEASURE_WIDTH), table).maximum
    options = output.options.update_width(max(natural, output.width))
    lines = output.render_lines(table, options, pad=False, new_lines=True)
    output.print(Segments(segment for line in lines for segment in line), end="", crop=False)


class TableFormatter(TableDataMixin, Formatter):
    """
    Display a table of RowsOfFields or AssociativeList data.

    Field labels are shown as a header row for RowsOfFields and as the
    first column for an AssociativeList, unless `include-field-labels`
    is off. A `list-orientation` of 'vertical' turns RowsOfFields on
    their side: one row per field, one column per record.
    """

    name = "table"
    capabilities = Capability.VALIDATE | Capability.RENDER
    accepted_shapes = ("RowsOfFields", "AssociativeList")

    def validate(self, data: Any) -> Any:
        # RowsOfFields and AssociativeList arrive here already converted
        # into a TableTransformation by the restructure stage.
        if not isinstance(data, TableTransformation):
            raise self.incompatible(data)
        return data

    def write(self, output: Console, data: TableTransformation, options: FormatterOptions) -> None:
        defaults = {
            FormatterOptions.TABLE_STYLE: 'default',
            FormatterOptions.INCLUDE_FIELD_LABELS: True,
            FormatterOptions.LIST_ORIENTATION: False,
        }
        style = options.get(FormatterOptions.TABLE_STYLE, defaults)
        include_labels = bool(options.get(FormatterOptions.INCLUDE_FIELD_LABELS, defaults))
        vertical = options.get(FormatterOptions.LIST_ORIENTATION, defaults) in (True, 'vertical')

        if not data.is_list and vertical:
            rows = self.transposed(data, include_labels)
            headers = None
        else:
            rows = data.table_data(include_labels and data.is_list)
            headers = data.labels if include_labels and not data.is_list and data.headers else None

        print_table(output, build_table(rows, headers, style))

    @staticmethod
    def transposed(data: TableTransformation, include_labels: bool) -> List[List[Any]]:
        rows = []
        for index, label in enumerate(data.labels):
            values = [row[index] for row in data.rows]
            rows.append([label] + values if include_labels else values)
        return rows


class SectionsFormatter(TableDataMixin, Formatter):
    """
    Display each record of RowsOfFields as its own titled section.

    The section title is the row label configured in `row-labels` for
    the row id, or the row id itself.
    """

    name = "sections"
    capabilities = Capability.VALIDATE | Capability.RENDER
    accepted_shapes = ("RowsOfFields",)

    def validate(self, data: Any) -> Any:
        if not isinstance(data, TableTransformation) or data.is_list:
            raise self.incompatible(data)
        return data

    def write(self, output: Console, data: TableTransformation, options: FormatterOptions) -> None:
        defaults = {
            FormatterOptions.TABLE_STYLE: 'compact',
            FormatterOptions.INCLUDE_FIELD_LABELS: True,
        }
        style = options.get(FormatterOptions.TABLE_STYLE, defaults)
        include_labels = bool(options.get(FormatterOptions.INCLUDE_FIELD_LABELS, defaults))
        row_labels = options.get_row_labels()

        for row_key, row in zip(data.row_keys, data.rows):
            title = str(row_labels.get(str(row_key), row_key))
            section = TableTransformation(
                headers=data.headers,
                labels=data.labels,
                rows=[row],
                is_list=True,
            )
            output.print()
            output.print(Text(title))
            print_table(output, build_table(section.table_data(include_labels), style=style))
