"""
Delimited Formatter for outfmt
===============================
RFC-4180 style CSV: a cell is quoted only when it contains the
delimiter, a double quote or a line break; embedded quotes are doubled.
"""

from __future__ import annotations

import csv
import io
from typing import Any, List, Mapping, Sequence

from rich.console import Console

from ..exceptions import InvalidOptionError
from ..options import FormatterOptions
from ..transformations import TableTransformation
from .base import Capability, Formatter, TableDataMixin, cell_text, write_lines


class CsvFormatter(TableDataMixin, Formatter):
    """
    Write rows of delimited values.

    Accepts a flat sequence of scalars (one line), a sequence of
    sequences (one line each), or tabular data, which is preceded by a
    line of field labels unless `include-field-labels` is off.
    """

    name = "csv"
    capabilities = Capability.VALIDATE | Capability.RENDER
    accepted_shapes = ("RowsOfFields", "AssociativeList", "array")

    def validate(self, data: Any) -> Any:
        if isinstance(data, TableTransformation):
            return data
        if isinstance(data, Mapping):
            return [list(data.values())]
        if not isinstance(data, (list, tuple)):
            raise self.incompatible(data)
        if data and not isinstance(data[0], (list, tuple, Mapping)):
            return [data]
        return data

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        defaults = {
            FormatterOptions.DELIMITER: ',',
            FormatterOptions.INCLUDE_FIELD_LABELS: True,
        }
        delimiter = options.get(FormatterOptions.DELIMITER, defaults)
        include_labels = options.get(FormatterOptions.INCLUDE_FIELD_LABELS, defaults)
        if not isinstance(delimiter, str) or len(delimiter) != 1 or delimiter in '"\r\n':
            raise InvalidOptionError(
                self.name, FormatterOptions.DELIMITER, delimiter, "a single character other than a quote or line break"
            )

        rows: List[Sequence[Any]] = []
        if isinstance(data, TableTransformation):
            if include_labels and data.labels:
                rows.append(data.labels)
            rows.extend(data.rows)
        else:
            rows.extend(list(row.values()) if isinstance(row, Mapping) else row for row in data)

        write_lines(output, [self.format_line(row, delimiter) for row in rows])

    @staticmethod
    def format_line(cells: Sequence[Any], delimiter: str = ',') -> str:
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=delimiter,
            quotechar='"',
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n"
        )
        writer.writerow([cell_text(cell) for cell in cells])
        return buffer.getvalue().rstrip("\n")
