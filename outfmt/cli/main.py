"""
CLI Main for outfmt
====================
Typer-based command line for rendering JSON or YAML data in any
registered output format.
"""

from __future__ import annotations

import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.console import Console
from rich.text import Text

from ..config import config_search_paths, find_configuration, load_configuration
from ..exceptions import FormatterError
from ..formatters import Capability
from ..manager import FormatterManager
from ..options import FormatterOptions
from ..registry import default_registry
from ..structured import AssociativeList, RowsOfFields, StructuredData, as_structured
from ..utils import setup_logging

# Console for formatted output; errors and logs go to stderr
console = Console()
err_console = Console(stderr=True)

# Create Typer app
app = typer.Typer(
    name="outfmt",
    help="outfmt - Render structured data as tables, lists, CSV, JSON or YAML",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich"
)

logger = logging.getLogger(__name__)


class ContextInputSource:
    """
    Expose parsed command-line parameters to FormatterOptions.

    Option keys use hyphens ("field-labels"); parameters use underscores.
    """

    def __init__(self, ctx: typer.Context):
        self.params = dict(ctx.params)

    @staticmethod
    def _param_name(key: str) -> str:
        return key.replace('-', '_')

    def has_option(self, key: str) -> bool:
        return self._param_name(key) in self.params

    def get_option(self, key: str) -> Any:
        return self.params.get(self._param_name(key))


def version_callback(value: bool):
    """Print version and exit"""
    if value:
        from .. import __version__
        console.print(f"outfmt v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
):
    """
    outfmt - format command output.

    [dim]Examples:[/dim]
        outfmt render users.json                       # Table
        outfmt render users.json -f csv --fields name  # One CSV column
        cat data.yaml | outfmt render -f json          # Read stdin
    """


def read_data(file: Optional[Path]) -> Any:
    """Parse JSON or YAML from `file`, or YAML (a superset of JSON) from stdin"""
    if file is None:
        return yaml.safe_load(sys.stdin.read())
    with open(file, encoding='utf-8') as f:
        if file.suffix.lower() == '.json':
            return json.load(f)
        return yaml.safe_load(f)


def fail(message: str) -> typer.Exit:
    """Report an error on stderr and return the exit to raise"""
    err_console.print(Text(f"Error: {message}", style="red"))
    return typer.Exit(1)


@app.command()
def render(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(
        None,
        help="JSON or YAML file to render (default: stdin)"
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format", "-f",
        help="Output format"
    ),
    fields: Optional[str] = typer.Option(
        None,
        "--fields",
        help="Fields to show, by key or label, e.g. 'name,status'"
    ),
    field: Optional[str] = typer.Option(
        None,
        "--field",
        help="Show a single field as plain text"
    ),
    default_fields: Optional[str] = typer.Option(
        None,
        "--default-fields",
        help="Fields to show when --fields is not given"
    ),
    field_labels: Optional[str] = typer.Option(
        None,
        "--field-labels",
        help="Field labels, e.g. 'name:Name,status:State'"
    ),
    row_labels: Optional[str] = typer.Option(
        None,
        "--row-labels",
        help="Section titles by row id, e.g. 'web:Web Server'"
    ),
    table_style: Optional[str] = typer.Option(
        None,
        "--table-style",
        help="default, borderless, compact, box or box-double"
    ),
    include_field_labels: Optional[bool] = typer.Option(
        None,
        "--include-field-labels/--no-field-labels",
        help="Show field labels"
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        help="CSV delimiter"
    ),
    shape: str = typer.Option(
        "auto",
        "--shape",
        help="Treat input as rows, list, raw or auto-detect"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Formatter configuration file (YAML)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output"
    ),
):
    """Render a data file in the requested format"""
    setup_logging(verbose=verbose)

    try:
        configuration = load_configuration(config) if config else find_configuration()
        data = as_structured(read_data(file), shape)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise fail(str(e))

    options = FormatterOptions(configuration).set_input(ContextInputSource(ctx))

    # --field selects one field and forces plain output
    if field:
        format_id = 'string'
    else:
        default_format = 'table' if isinstance(data, StructuredData) else 'yaml'
        format_id = options.get_format({FormatterOptions.FORMAT: default_format})

    manager = FormatterManager(default_registry())
    try:
        manager.write(console, format_id, data, options)
    except FormatterError as e:
        raise fail(str(e))


@app.command()
def formats(
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format"
    ),
):
    """List the available output formats"""
    registry = default_registry()
    rows = []
    for format_id in registry.formats():
        spec = registry.spec(format_id)
        rows.append({
            "format": format_id,
            "formatter": spec.factory.__name__,
            "capabilities": [flag.name.lower() for flag in Capability if flag & spec.capabilities],
            "accepts": list(spec.accepted_shapes) or "any",
        })

    try:
        FormatterManager(registry).write(console, format, RowsOfFields(rows), FormatterOptions())
    except FormatterError as e:
        raise fail(str(e))


@app.command()
def version(
    format: str = typer.Option(
        "table",
        "--format", "-f",
        help="Output format"
    ),
):
    """Show version and configuration search paths"""
    from .. import __version__

    info = {
        "version": __version__,
        "python": platform.python_version(),
        "platform": platform.system(),
        "config": [str(path) for path in config_search_paths()],
    }

    try:
        FormatterManager(default_registry()).write(console, format, AssociativeList(info), FormatterOptions())
    except FormatterError as e:
        raise fail(str(e))


def main_entry():
    """Entry point for the CLI"""
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main_entry()
