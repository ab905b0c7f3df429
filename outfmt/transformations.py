"""
Table Transformations for outfmt
=================================
Field selection, reordering, relabeling and orientation of tabular data.

The TableTransformer turns records (ordered mappings) into a
TableTransformation: the canonical shape consumed by the table,
sections, csv and list formatters.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Sequence

from .options import FormatterOptions
from .parsers import parse_field_list

# Configure module logger
logger = logging.getLogger(__name__)

_WORD_SEPARATORS = re.compile(r'[\s_\-]+')


def titleize(key: str) -> str:
    """
    Derive a display label from a field key.

    Separators (underscore, hyphen, whitespace) become single spaces and
    the first letter of each word is capitalised: "first_name" -> "First Name".
    """
    words = [word for word in _WORD_SEPARATORS.split(str(key)) if word]
    return ' '.join(word[:1].upper() + word[1:] for word in words)


@dataclass
class TableTransformation:
    """
    Canonical tabular shape.

    Attributes:
        headers: Selected field keys, in display order
        labels: Display label for each header
        rows: One list of cells per record, aligned to `headers`
        is_list: True for a single record rendered vertically
        row_keys: Identifier of each row (index, or row id for keyed input)
        keyed: Whether the rows came from a mapping of row id to record
    """
    headers: List[str]
    labels: List[str]
    rows: List[List[Any]]
    is_list: bool = False
    row_keys: List[Any] = field(default_factory=list)
    keyed: bool = False

    shape_name: ClassVar[str] = "TableTransformation"

    def table_data(self, include_labels: bool = True) -> List[List[Any]]:
        """
        Rows ready for rendering.

        Horizontal tables return the rows as-is. Vertical (list) tables
        return one row per field: [label, value], or [value] when labels
        are suppressed.
        """
        if not self.is_list:
            return [list(row) for row in self.rows]

        values = self.rows[0] if self.rows else [''] * len(self.headers)
        if include_labels:
            return [[label, value] for label, value in zip(self.labels, values)]
        return [[value] for value in values]

    def records(self) -> List["OrderedDict[str, Any]"]:
        """Selected fields of each row as ordered mappings"""
        return [OrderedDict(zip(self.headers, row)) for row in self.rows]

    def to_plain(self) -> Any:
        """
        The plain value behind this transformation: a mapping of row id to
        record for keyed rows, otherwise a list of records. A list (single
        record) unwraps to a one-element list.
        """
        records = self.records()
        if self.keyed:
            return OrderedDict(zip(self.row_keys, records))
        return records

    def map_cells(self, fn: Callable[[str, Any, Mapping[str, Any]], Any]) -> "TableTransformation":
        """Return a copy with `fn(key, value, record)` applied to every cell"""
        rows = []
        for record in self.records():
            rows.append([fn(key, value, record) for key, value in record.items()])
        return TableTransformation(
            headers=list(self.headers),
            labels=list(self.labels),
            rows=rows,
            is_list=self.is_list,
            row_keys=list(self.row_keys),
            keyed=self.keyed,
        )

    def __len__(self) -> int:
        return len(self.rows)


class TableTransformer:
    """
    Build a TableTransformation from records and formatter options.

    Usage:
        transformer = TableTransformer(options)
        table = transformer.transform(records, row_keys=[0, 1])
    """

    def __init__(self, options: FormatterOptions):
        self.options = options

    def transform(
        self,
        records: Sequence[Mapping[str, Any]],
        row_keys: Optional[Sequence[Any]] = None,
        is_list: bool = False,
        keyed: bool = False
    ) -> TableTransformation:
        """
        Select, reorder and label the fields of `records`.

        Args:
            records: Ordered mappings, one per row
            row_keys: Identifier of each row; defaults to the row index
            is_list: Render a single record vertically
            keyed: The rows came from a mapping of row id to record

        Returns:
            TableTransformation with cells aligned to the selected headers
        """
        available = list(records[0].keys()) if records else []
        field_labels = self.options.get_field_labels()
        headers = self.select_fields(available, field_labels)
        labels = [self.label_for(key, field_labels) for key in headers]

        rows = [[record.get(key, '') for key in headers] for record in records]

        return TableTransformation(
            headers=headers,
            labels=labels,
            rows=rows,
            is_list=is_list,
            row_keys=list(row_keys) if row_keys is not None else list(range(len(records))),
            keyed=keyed,
        )

    def select_fields(self, available: Sequence[str], field_labels: Mapping[str, Any]) -> List[str]:
        """
        Determine the field keys to display, in display order.

        Explicitly requested fields (by key or by label) win, then the
        configured default fields, then every available key in input order.
        """
        requested = parse_field_list(self.options.get_fields())
        if not requested:
            return list(available)

        labels_to_keys: Dict[str, str] = {}
        for key, label in field_labels.items():
            labels_to_keys.setdefault(str(label), key)

        selected: List[str] = []
        for name in requested:
            key = name if name in available else labels_to_keys.get(name)
            if key is None or key not in available:
                logger.debug(f"Dropping unknown field: {name}")
                continue
            if key not in selected:
                selected.append(key)
        return selected

    @staticmethod
    def label_for(key: str, field_labels: Mapping[str, Any]) -> str:
        """Configured label for `key`, else its titleized form"""
        if key in field_labels:
            return str(field_labels[key])
        return titleize(key)


__all__ = [
    'TableTransformation',
    'TableTransformer',
    'titleize',
]
