"""
List Formatter for outfmt
==========================
One value per line, no labels.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from rich.console import Console

from ..options import FormatterOptions
from ..structured import RowsOfFields
from ..transformations import TableTransformation
from .base import Capability, Formatter, TableDataMixin, cell_text, render_cell_value, write_lines

_SCALARS = (str, int, float, bool)


class ListFormatter(TableDataMixin, Formatter):
    """
    Write a flat list.

    Keyed RowsOfFields are intercepted and listed by row id. An
    AssociativeList lists the value of each selected field; other rows
    list the first selected field of each row.
    """

    name = "list"
    capabilities = Capability.INTERCEPT | Capability.VALIDATE | Capability.RENDER
    accepted_shapes = ("RowsOfFields", "AssociativeList", "array", "mapping", "scalar")

    def intercept(self, data: Any, options: FormatterOptions) -> Any:
        if isinstance(data, RowsOfFields) and data.keyed:
            return [str(row_key) for row_key in data.list_data(options)]
        return None

    def validate(self, data: Any) -> Any:
        if data is None or isinstance(data, (TableTransformation, Mapping, list, tuple) + _SCALARS):
            return data
        raise self.incompatible(data)

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, self.lines(data))

    def lines(self, data: Any) -> List[str]:
        if data is None:
            return []
        if isinstance(data, TableTransformation):
            if data.is_list:
                values = data.rows[0] if data.rows else []
            else:
                values = [row[0] for row in data.rows if row]
        elif isinstance(data, Mapping):
            values = list(data.values())
        elif isinstance(data, (list, tuple)):
            values = list(data)
        else:
            values = [data]
        return [cell_text(render_cell_value(value)) for value in values]
