"""
Markup Formatters for outfmt
=============================
JSON and YAML documents. Key order always follows the input (or the
selected field order after restructuring).
"""

from __future__ import annotations

import json
from collections import OrderedDict
from typing import Any

import yaml
from rich.console import Console

from ..options import FormatterOptions
from .base import Formatter, write_lines


class BlockDumper(yaml.SafeDumper):
    """SafeDumper that indents sequences nested in mappings"""

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


BlockDumper.add_representer(
    OrderedDict,
    lambda dumper, data: dumper.represent_dict(data.items())
)
BlockDumper.add_representer(
    tuple,
    lambda dumper, data: dumper.represent_list(data)
)


def dump_yaml(data: Any) -> str:
    """Block-style YAML, 2-space indent, input key order"""
    text = yaml.dump(
        data,
        Dumper=BlockDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2
    )
    # Scalars at the document root get an explicit end marker
    if text.endswith("\n...\n"):
        text = text[:-len("...\n")]
    return text.rstrip("\n")


def dump_json(data: Any) -> str:
    """JSON with 4-space indentation, input key order"""
    return json.dumps(data, indent=4, ensure_ascii=False, default=str)


class YamlFormatter(Formatter):
    """Write data as a YAML document"""

    name = "yaml"

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, [dump_yaml(data)])


class JsonFormatter(Formatter):
    """Write data as a JSON document"""

    name = "json"

    def write(self, output: Console, data: Any, options: FormatterOptions) -> None:
        write_lines(output, [dump_json(data)])
