"""
Structured Data Types for outfmt
=================================
Wrappers that tell the formatter pipeline how a command result is
shaped, so it can be restructured into a table before rendering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .options import FormatterOptions
from .transformations import TableTransformation, TableTransformer

# Signature: (key, value, options, record) -> rendered value
CellRenderer = Callable[[str, Any, FormatterOptions, Mapping[str, Any]], Any]


class StructuredData(ABC):
    """
    Base class for data that can restructure itself for tabular output.

    Subclasses may carry a cell renderer that formatters apply to every
    cell after restructuring.
    """

    shape_name: str = "StructuredData"

    def __init__(self, cell_renderer: Optional[CellRenderer] = None):
        self.cell_renderer = cell_renderer

    @abstractmethod
    def restructure(self, options: FormatterOptions) -> TableTransformation:
        """Select and reorder fields per `options`"""

    @abstractmethod
    def to_plain(self) -> Any:
        """The underlying plain value"""

    def render_cell(self, key: str, value: Any, options: FormatterOptions, record: Mapping[str, Any]) -> Any:
        if self.cell_renderer is None:
            return value
        return self.cell_renderer(key, value, options, record)


class RowsOfFields(StructuredData):
    """
    Multiple records sharing one set of fields, rendered one row per record.

    Rows may be given as a sequence of mappings, or as a mapping of row id
    to record; row ids are kept for the sections and list formatters.
    """

    shape_name = "RowsOfFields"

    def __init__(
        self,
        rows: Union[Sequence[Mapping[str, Any]], Mapping[Any, Mapping[str, Any]]],
        cell_renderer: Optional[CellRenderer] = None
    ):
        super().__init__(cell_renderer)
        self.keyed = isinstance(rows, Mapping)
        items = rows.items() if isinstance(rows, Mapping) else enumerate(rows)
        self._rows: List[Tuple[Any, "OrderedDict[str, Any]"]] = [
            (row_key, OrderedDict(record)) for row_key, record in items
        ]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator["OrderedDict[str, Any]"]:
        return iter(self.records())

    def __repr__(self) -> str:
        return f"RowsOfFields({self.to_plain()!r})"

    def records(self) -> List["OrderedDict[str, Any]"]:
        return [record for _, record in self._rows]

    def row_keys(self) -> List[Any]:
        return [row_key for row_key, _ in self._rows]

    def restructure(self, options: FormatterOptions) -> TableTransformation:
        return TableTransformer(options).transform(
            self.records(),
            row_keys=self.row_keys(),
            is_list=False,
            keyed=self.keyed,
        )

    def list_data(self, options: FormatterOptions) -> List[Any]:
        """Row ids, for formatters that list rows rather than cells"""
        return self.row_keys()

    def to_plain(self) -> Any:
        if self.keyed:
            return OrderedDict((row_key, OrderedDict(record)) for row_key, record in self._rows)
        return [OrderedDict(record) for record in self.records()]


class AssociativeList(StructuredData):
    """
    A single record, rendered vertically: one row per field.
    """

    shape_name = "AssociativeList"

    def __init__(self, record: Mapping[str, Any], cell_renderer: Optional[CellRenderer] = None):
        super().__init__(cell_renderer)
        self._record: "OrderedDict[str, Any]" = OrderedDict(record)

    def __len__(self) -> int:
        return len(self._record)

    def __repr__(self) -> str:
        return f"AssociativeList({dict(self._record)!r})"

    def restructure(self, options: FormatterOptions) -> TableTransformation:
        return TableTransformer(options).transform([self._record], is_list=True)

    def to_plain(self) -> "OrderedDict[str, Any]":
        return OrderedDict(self._record)


def as_structured(data: Any, shape: str = "auto") -> Any:
    """
    Wrap plain data in the structured type its shape suggests.

    Args:
        data: Plain data (e.g. parsed JSON or YAML)
        shape: "rows", "list", "raw", or "auto" to detect: a sequence of
            mappings or a mapping of mappings becomes RowsOfFields, a flat
            mapping becomes an AssociativeList, anything else stays raw

    Raises:
        ValueError: If the data cannot take the requested shape
    """
    if shape == "raw":
        return data
    if shape == "rows":
        if _is_rows(data):
            return RowsOfFields(data)
        raise ValueError("rows shape needs a list of mappings or a mapping of mappings")
    if shape == "list":
        if isinstance(data, Mapping):
            return AssociativeList(data)
        raise ValueError("list shape needs a mapping")
    if shape != "auto":
        raise ValueError(f"Unknown shape: {shape}")

    if _is_rows(data):
        return RowsOfFields(data)
    if isinstance(data, Mapping) and data:
        return AssociativeList(data)
    return data


def _is_rows(data: Any) -> bool:
    if isinstance(data, Mapping):
        records = list(data.values())
    elif isinstance(data, (list, tuple)):
        records = list(data)
    else:
        return False
    return bool(records) and all(isinstance(record, Mapping) for record in records)


def unwrap(data: Any) -> Any:
    """Convert a boxed container to its plain underlying value"""
    if isinstance(data, (StructuredData, TableTransformation)):
        return data.to_plain()
    return data


__all__ = [
    'StructuredData',
    'RowsOfFields',
    'AssociativeList',
    'CellRenderer',
    'as_structured',
    'unwrap',
]
