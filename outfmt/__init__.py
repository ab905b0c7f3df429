"""outfmt - Render structured command output as tables, lists, CSV, JSON or YAML"""

__version__ = "1.0.0"

from .exceptions import FormatterError, UnknownFormatError, IncompatibleDataError, InvalidOptionError
from .options import FormatterOptions, InputSource
from .structured import RowsOfFields, AssociativeList, StructuredData, as_structured
from .transformations import TableTransformation, TableTransformer
from .registry import FormatterRegistry, FormatterSpec, default_registry
from .manager import FormatterManager

__all__ = [
    # Pipeline
    'FormatterManager',
    'FormatterRegistry',
    'FormatterSpec',
    'default_registry',

    # Options
    'FormatterOptions',
    'InputSource',

    # Data
    'RowsOfFields',
    'AssociativeList',
    'StructuredData',
    'TableTransformation',
    'TableTransformer',
    'as_structured',

    # Errors
    'FormatterError',
    'UnknownFormatError',
    'IncompatibleDataError',
    'InvalidOptionError',
]
