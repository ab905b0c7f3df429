"""
Debug Dump Formatters for outfmt
=================================
PHP-style notations for tools that consume them: print_r() nested-array
notation, serialize() notation and var_export() literal notation.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple

from rich.console import Console

from ..options import FormatterOptions
from .base import Formatter, write_lines


def _items(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_array(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def print_r(value: Any, indent: int = 0) -> str:
    """
    Render `value` the way PHP's print_r() does.

    Nested arrays are indented by eight spaces per level and followed
    by a blank line.
    """
    if not _is_array(value):
        return _print_r_scalar(value)

    pad = " " * indent
    lines = ["Array\n", f"{pad}(\n"]
    for key, item in _items(value):
        lines.append(f"{pad}    [{key}] => {print_r(item, indent + 8)}\n")
    lines.append(f"{pad})\n")
    return "".join(lines)


def _print_r_scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    return str(value)


def var_export(value: Any, indent: int = 0) -> str:
    """Render `value` the way PHP's var_export() does"""
    if not _is_array(value):
        return _export_scalar(value)

    pad = " " * indent
    inner = " " * (indent + 2)
    lines = ["array (\n"]
    for key, item in _items(value):
        if _is_array(item):
            lines.append(f"{inner}{_export_scalar(key)} =>\n{inner}{var_export(item, indent + 2)},\n")
        else:
            lines.append(f"{inner}{_export_scalar(key)} => {_export_scalar(item)},\n")
    lines.append(f"{pad})")
    return "".join(lines)


def _export_scalar(value: Any) -> str:
    if value is None:
        return "NULL"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"


def php_serialize(value: Any) -> str:
    """Render `value` in PHP's serialize() notation"""
    if value is None:
        return "N;"
    if isinstance(value, bool):
        return f"b:{int(value)};"
    if isinstance(value, int):
        return f"i:{value};"
    if isinstance(value, float):
        return f"d:{value!r};"
    if _is_array(value):
        items = list(_items(value))
        body = "".join(php_serialize(key) + php_serialize(item) for key, item in items)
        return f"a:{len(items)}:{{{body}}}"
    text = str(value)
    return f's:{len(text.encode("utf-8"))}:"{text}";'


class PrintRFormatter(Formatter):
    """Write data in print_r() notation"""

    name = "print-r"

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, [print_r(data).rstrip("\n")])


class SerializeFormatter(Formatter):
    """Write data in serialize() notation"""

    name = "php"

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, [php_serialize(data)])


class VarExportFormatter(Formatter):
    """Write data in var_export() notation"""

    name = "var_export"

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, [var_export(data)])
