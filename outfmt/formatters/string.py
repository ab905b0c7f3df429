"""
String Formatter for outfmt
============================
Plain output. Also registered as the empty format identifier.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from rich.console import Console

from ..options import FormatterOptions
from ..parsers import parse_field_list
from ..structured import StructuredData
from .base import Capability, Formatter, cell_text, render_cell_value, write_lines


class StringFormatter(Formatter):
    """
    Write data as plain text.

    Scalars are written as-is, sequences and mappings one value per
    line, and rows as tab-separated values. When structured data is
    given and a single field is selected (the `field` option, or the
    `default-string-field` configuration when no fields were requested),
    only that field is written.
    """

    name = "string"
    capabilities = Capability.INTERCEPT

    def intercept(self, data: Any, options: FormatterOptions) -> Any:
        if not isinstance(data, StructuredData):
            return None

        single_field = self.selected_field(options)
        if not single_field:
            return None

        # No input binding: a --fields flag must not replace the single field
        field_options = FormatterOptions(
            {**options.configuration_data, FormatterOptions.FIELD_LABELS: options.get_field_labels()},
            {**options.options, FormatterOptions.FIELDS: [single_field]}
        )
        table = data.restructure(field_options)
        if not table.headers:
            return None

        values = []
        for record in table.records():
            key = table.headers[0]
            value = data.render_cell(key, record[key], options, record)
            values.append(cell_text(render_cell_value(value)))
        return values

    @staticmethod
    def selected_field(options: FormatterOptions) -> str:
        field = options.get_field()
        if field:
            return str(field)
        if parse_field_list(options.get(FormatterOptions.FIELDS, {FormatterOptions.FIELDS: ''})):
            return ''
        return str(options.get_default_string_field() or '')

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, self.lines(data))

    def lines(self, data: Any) -> List[str]:
        if data is None:
            return []
        if isinstance(data, Mapping):
            if data and all(isinstance(value, Mapping) for value in data.values()):
                return [self.row_text(row) for row in data.values()]
            return [cell_text(render_cell_value(value)) for value in data.values()]
        if isinstance(data, (list, tuple)):
            return [self.row_text(item) for item in data]
        return [cell_text(data)]

    @staticmethod
    def row_text(row: Any) -> str:
        if isinstance(row, Mapping):
            row = list(row.values())
        if isinstance(row, (list, tuple)):
            return "\t".join(cell_text(render_cell_value(cell)) for cell in row)
        return cell_text(row)
