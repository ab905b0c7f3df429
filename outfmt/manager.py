"""
Formatter Manager for outfmt
=============================
Resolve a formatter and run data through the restructuring pipeline.

Each call to `write` runs four stages before anything is written:

1. Intercept   - the formatter may claim the raw data as-is
2. Restructure - structured data selects and reorders its fields
3. Validate    - the formatter checks the shape, or the data is unwrapped
4. Re-render   - the formatter derives the final value from the original
                 and the restructured data
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.console import Console

from .formatters.base import Capability, Formatter
from .options import FormatterOptions
from .registry import FormatterRegistry, FormatterSpec, default_registry
from .structured import StructuredData, unwrap

# Configure module logger
logger = logging.getLogger(__name__)


class FormatterManager:
    """
    Format and write command output.

    Usage:
        manager = FormatterManager(default_registry())
        manager.write(console, 'table', RowsOfFields(rows), FormatterOptions())
    """

    def __init__(self, registry: Optional[FormatterRegistry] = None):
        self.registry = registry or default_registry()

    def write(
        self,
        output: Console,
        format_id: str,
        data: Any,
        options: Optional[FormatterOptions] = None
    ) -> None:
        """
        Format `data` and write it to `output`.

        Args:
            output: Console to write to
            format_id: Identifier of the requested format
            data: Data to output
            options: Formatting options

        Raises:
            UnknownFormatError: If `format_id` is not registered
            IncompatibleDataError: If the formatter cannot accept the data
        """
        options = options or FormatterOptions()
        format_id = str(format_id or '')
        spec = self.registry.spec(format_id)
        formatter = spec.create()
        logger.debug(f"Writing {type(data).__name__} as '{spec.format_id}'")

        prepared = self.validate_and_restructure(spec, formatter, data, options)
        formatter.write(output, prepared, options)

    def get_formatter(self, format_id: str) -> Formatter:
        """Fetch a fresh instance of the requested formatter"""
        return self.registry.resolve(format_id)

    def has_formatter(self, format_id: str) -> bool:
        return self.registry.has(format_id)

    def validate_and_restructure(
        self,
        spec: FormatterSpec,
        formatter: Formatter,
        data: Any,
        options: FormatterOptions
    ) -> Any:
        """Run the pipeline stages and return the value to render"""
        intercepted = self.intercept(spec, formatter, data, options)
        if intercepted:
            logger.debug(f"'{spec.format_id}' intercepted the raw data")
            return intercepted

        restructured = self.restructure_data(data, options)
        restructured = self.validate_data(spec, formatter, restructured)
        return self.render_data(spec, formatter, data, restructured, options)

    def intercept(self, spec: FormatterSpec, formatter: Formatter, data: Any, options: FormatterOptions) -> Any:
        """
        Give the formatter access to the raw data before restructuring.
        For example, the list formatter shows row ids for keyed rows.
        """
        if spec.supports(Capability.INTERCEPT):
            return formatter.intercept(data, options)
        return None

    @staticmethod
    def restructure_data(data: Any, options: FormatterOptions) -> Any:
        """Select and reorder fields of structured data"""
        if isinstance(data, StructuredData):
            return data.restructure(options)
        return data

    @staticmethod
    def validate_data(spec: FormatterSpec, formatter: Formatter, data: Any) -> Any:
        """
        Let a validating formatter check the data. Formatters that do not
        validate are never handed a boxed container, only its plain value.
        """
        if spec.supports(Capability.VALIDATE):
            return formatter.validate(data)
        return unwrap(data)

    @staticmethod
    def render_data(
        spec: FormatterSpec,
        formatter: Formatter,
        original: Any,
        restructured: Any,
        options: FormatterOptions
    ) -> Any:
        """Let the formatter derive the final value from both forms of the data"""
        if spec.supports(Capability.RENDER):
            return formatter.render_data(original, restructured, options)
        return restructured


__all__ = [
    'FormatterManager',
]
