"""
Formatter Base Module for outfmt
=================================
Base class and capability flags shared by every formatter.

A formatter declares which optional pipeline stages it takes part in
through its `capabilities` flags, and which input shapes it accepts
through `accepted_shapes`. The registry copies both into a
FormatterSpec at registration time, so the pipeline branches on the
descriptor rather than inspecting formatter types.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Flag, auto
from typing import Any, Mapping, Tuple

from rich.console import Console

from ..exceptions import IncompatibleDataError
from ..options import FormatterOptions
from ..structured import StructuredData
from ..transformations import TableTransformation


class Capability(Flag):
    """Optional pipeline stages a formatter participates in"""
    NONE = 0
    INTERCEPT = auto()
    VALIDATE = auto()
    RENDER = auto()


class Formatter(ABC):
    """
    Abstract renderer for one output format.

    Formatters are stateless; the registry creates a fresh instance per
    resolution.
    """

    name: str = ""
    capabilities: Capability = Capability.NONE
    accepted_shapes: Tuple[str, ...] = ()

    def intercept(self, data: Any, options: FormatterOptions) -> Any:
        """
        Offered the raw data before restructuring. A truthy result is
        rendered as-is and skips restructuring and validation.
        """
        return None

    def validate(self, data: Any) -> Any:
        """Check the restructured data; raise IncompatibleDataError if unusable"""
        return data

    def render_data(self, original: Any, restructured: Any, options: FormatterOptions) -> Any:
        """Derive the final value from the original and restructured data"""
        return restructured

    @abstractmethod
    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        """Write `data` to `output`"""

    def incompatible(self, data: Any) -> IncompatibleDataError:
        return IncompatibleDataError(self.name or type(self).__name__, data, self.accepted_shapes)


class TableDataMixin:
    """Cell rendering shared by the formatters that consume TableTransformation"""

    def render_data(self, original: Any, restructured: Any, options: FormatterOptions) -> Any:
        if not isinstance(restructured, TableTransformation):
            return restructured

        def render(key: str, value: Any, record: Mapping[str, Any]) -> Any:
            if isinstance(original, StructuredData):
                value = original.render_cell(key, value, options, record)
            return render_cell_value(value)

        return restructured.map_cells(render)


def render_cell_value(value: Any) -> Any:
    """Flatten nested cell values into text"""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(cell_text(item)) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(',', ':'), default=str)
    return value


def cell_text(value: Any) -> str:
    """Text for a scalar cell"""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def write_lines(output: Console, lines: Any) -> None:
    """
    Write each line verbatim to the console's file.

    Console.print would apply markup, wrapping and tab expansion, none of
    which may touch machine-readable output.
    """
    text = "".join(f"{line}\n" for line in lines)
    output.file.write(text)
    output.file.flush()


__all__ = [
    'Capability',
    'Formatter',
    'TableDataMixin',
    'render_cell_value',
    'cell_text',
    'write_lines',
]
