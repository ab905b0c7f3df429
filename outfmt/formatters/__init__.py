"""
Formatter Modules for outfmt
=============================
Built-in renderers, one per output format.
"""

from .base import Capability, Formatter, TableDataMixin
from .string import StringFormatter
from .markup import YamlFormatter, JsonFormatter, dump_json, dump_yaml
from .dump import PrintRFormatter, SerializeFormatter, VarExportFormatter, print_r, php_serialize, var_export
from .listing import ListFormatter
from .delimited import CsvFormatter
from .table import TableFormatter, SectionsFormatter, TABLE_STYLES

# Format identifier -> formatter class, in registration order
BUILTIN_FORMATTERS = {
    'string': StringFormatter,
    'yaml': YamlFormatter,
    'json': JsonFormatter,
    'print-r': PrintRFormatter,
    'php': SerializeFormatter,
    'var_export': VarExportFormatter,
    'list': ListFormatter,
    'csv': CsvFormatter,
    'table': TableFormatter,
    'sections': SectionsFormatter,
}

__all__ = [
    # Base
    'Capability',
    'Formatter',
    'TableDataMixin',

    # Formatters
    'StringFormatter',
    'YamlFormatter',
    'JsonFormatter',
    'PrintRFormatter',
    'SerializeFormatter',
    'VarExportFormatter',
    'ListFormatter',
    'CsvFormatter',
    'TableFormatter',
    'SectionsFormatter',

    # Encoders
    'dump_json',
    'dump_yaml',
    'print_r',
    'php_serialize',
    'var_export',

    'BUILTIN_FORMATTERS',
    'TABLE_STYLES',
]
