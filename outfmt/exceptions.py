"""
Formatter Exceptions for outfmt
================================
Errors raised while resolving a formatter or validating its input.
Both are raised before anything is written to the output stream.
"""

from __future__ import annotations

from typing import Any, Sequence


class FormatterError(Exception):
    """Base class for all formatter errors"""


class UnknownFormatError(FormatterError):
    """The requested format identifier is not registered"""

    def __init__(self, format_id: str):
        self.format_id = format_id
        super().__init__(f"The requested format, '{format_id}', is not available.")


class IncompatibleDataError(FormatterError):
    """
    Data does not match any shape the selected formatter accepts.

    Attributes:
        formatter_name: Name of the formatter that rejected the data
        accepted_shapes: Shape names the formatter accepts
        actual_shape: Shape name of the data that was provided
    """

    def __init__(self, formatter_name: str, data: Any, accepted_shapes: Sequence[str]):
        self.formatter_name = formatter_name
        self.accepted_shapes = tuple(accepted_shapes)
        self.actual_shape = describe_shape(data)
        super().__init__(
            f"Data provided to {formatter_name} must be "
            f"{_accepted_phrase(self.accepted_shapes)}. "
            f"Instead, {_with_article(self.actual_shape)} was provided."
        )


class InvalidOptionError(FormatterError):
    """An option value the selected formatter cannot use"""

    def __init__(self, formatter_name: str, key: str, value: Any, expected: str):
        self.formatter_name = formatter_name
        self.key = key
        self.value = value
        super().__init__(f"The {key} option for {formatter_name} must be {expected}, got {value!r}.")


def describe_shape(data: Any) -> str:
    """Return a short shape name for error messages"""
    shape_name = getattr(data, "shape_name", None)
    if isinstance(shape_name, str):
        return shape_name
    if data is None:
        return "null"
    if isinstance(data, (list, tuple)):
        return "array"
    if isinstance(data, dict):
        return "mapping"
    return type(data).__name__


def _with_article(shape: str) -> str:
    if shape == "null":
        return shape
    article = "an" if shape[:1].lower() in "aeiou" else "a"
    return f"{article} {shape}"


def _accepted_phrase(shapes: Sequence[str]) -> str:
    if not shapes:
        return "of a supported shape"
    parts = [f"an instance of {shape}" for shape in shapes]
    if len(parts) == 1:
        return parts[0]
    return "either " + " or ".join(parts)


__all__ = [
    'FormatterError',
    'UnknownFormatError',
    'IncompatibleDataError',
    'InvalidOptionError',
    'describe_shape',
]
