"""
Formatter Options for outfmt
=============================
Layered option lookup for formatters.

A formatter can get an option value from four places, lowest precedence
first:

1. Per-call defaults supplied with each lookup (usually by the formatter
   itself).
2. Configuration data bound to the options object, e.g. field labels or
   default fields declared by the command that produced the output.
3. Options explicitly requested by the user for this request.
4. Values read live from a bound input source (command-line parameters).
   Only keys present in the lookup's defaults map are consulted.

Some keys are coerced after lookup: the label keys accept a property
list string ("key:Label,key2:Label2") and always resolve to an ordered
mapping.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .parsers import parse_property_list

# Configure module logger
logger = logging.getLogger(__name__)


@runtime_checkable
class InputSource(Protocol):
    """Protocol for a live source of user options (e.g. parsed CLI flags)"""
    def has_option(self, key: str) -> bool: ...
    def get_option(self, key: str) -> Any: ...


class FormatterOptions:
    """
    Holds the information that affects the way a formatter renders output.

    Configuration data and user options are cached on the object; the
    defaults are provided by the caller on every lookup.
    """

    FORMAT = 'format'
    DEFAULT_FORMAT = 'default-format'
    TABLE_STYLE = 'table-style'
    LIST_ORIENTATION = 'list-orientation'
    FIELDS = 'fields'
    FIELD = 'field'
    INCLUDE_FIELD_LABELS = 'include-field-labels'
    ROW_LABELS = 'row-labels'
    FIELD_LABELS = 'field-labels'
    DEFAULT_FIELDS = 'default-fields'
    DEFAULT_STRING_FIELD = 'default-string-field'
    DELIMITER = 'delimiter'

    # Per-key coercion applied after the layers are merged
    COERCIONS: Dict[str, Callable[[Any], Any]] = {
        ROW_LABELS: parse_property_list,
        FIELD_LABELS: parse_property_list,
    }

    def __init__(
        self,
        configuration_data: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None
    ):
        """
        Create options with the configuration data and the user-specified
        options for this request.

        Args:
            configuration_data: Configuration associated with the command
            options: Options specified by the user
        """
        self._configuration_data: Dict[str, Any] = dict(configuration_data or {})
        self._options: Dict[str, Any] = dict(options or {})
        self._input: Optional[InputSource] = None

    def __repr__(self) -> str:
        return (
            f"FormatterOptions(configuration_data={self._configuration_data!r}, "
            f"options={self._options!r})"
        )

    def override(self, configuration_data: Mapping[str, Any]) -> "FormatterOptions":
        """
        Create a new options object whose configuration is the current
        configuration updated with `configuration_data`.

        Keys in `configuration_data` win; other configured keys are kept.
        User options and the input binding carry over unchanged.
        """
        merged = dict(self._configuration_data)
        merged.update(configuration_data)
        override = FormatterOptions(merged, self._options)
        override._input = self._input
        return override

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: str, defaults: Optional[Mapping[str, Any]] = None, default: Any = False) -> Any:
        """
        Get a formatter option.

        Args:
            key: Option key
            defaults: Per-call defaults; only `key` is taken from it
            default: Value used when `defaults` has no entry for `key`

        Returns:
            The coerced value of the highest-precedence layer defining `key`
        """
        value = self._fetch(key, defaults, default)
        return self._coerce(key, value)

    def get_with_fallback(
        self,
        key: str,
        fallback_key: str,
        defaults: Optional[Mapping[str, Any]] = None,
        default: Any = False
    ) -> Any:
        """
        Get a formatter option, or the fallback option if it is unset.

        A per-call default for `key` ranks below a configured value for
        `fallback_key`.
        """
        value = self.get(key, {key: None})
        if _is_unset(value):
            defaults = defaults or {}
            return self.get(fallback_key, defaults, defaults.get(key, default))
        return value

    def _fetch(self, key: str, defaults: Optional[Mapping[str, Any]], default: Any) -> Any:
        defaults_for_key = {key: (defaults or {}).get(key, default)}
        value = None
        for layer in self._layers(defaults_for_key):
            if key in layer:
                value = layer[key]
        return value

    def _layers(self, defaults_for_key: Mapping[str, Any]) -> List[Mapping[str, Any]]:
        """Layers in ascending precedence"""
        return [
            defaults_for_key,
            self._configuration_data,
            self._options,
            self.input_options(defaults_for_key),
        ]

    def _coerce(self, key: str, value: Any) -> Any:
        coerce = self.COERCIONS.get(key)
        if coerce is None:
            return value
        return coerce(value)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get_format(self, defaults: Optional[Mapping[str, Any]] = None) -> str:
        """Determine the format that was requested by the caller"""
        return self.get_with_fallback(self.FORMAT, self.DEFAULT_FORMAT, defaults, '')

    def get_table_style(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return self.get(self.TABLE_STYLE, defaults)

    def set_table_style(self, style: str) -> "FormatterOptions":
        return self._set_configuration_value(self.TABLE_STYLE, style)

    def get_include_field_labels(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return self.get(self.INCLUDE_FIELD_LABELS, defaults)

    def set_include_field_labels(self, include: bool) -> "FormatterOptions":
        return self._set_configuration_value(self.INCLUDE_FIELD_LABELS, include)

    def get_list_orientation(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        """
        'horizontal' puts the headers in the first row (RowsOfFields);
        'vertical' puts them in the first column (AssociativeList).
        """
        return self.get(self.LIST_ORIENTATION, defaults)

    def set_list_orientation(self, orientation: str) -> "FormatterOptions":
        return self._set_configuration_value(self.LIST_ORIENTATION, orientation)

    def get_row_labels(self, defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self.get(self.ROW_LABELS, defaults)

    def set_row_labels(self, row_labels: Any) -> "FormatterOptions":
        return self._set_configuration_value(self.ROW_LABELS, row_labels)

    def get_fields(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        """User-requested fields, falling back to the configured default fields"""
        return self.get_with_fallback(self.FIELDS, self.DEFAULT_FIELDS, defaults, '')

    def get_default_fields(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return self.get(self.DEFAULT_FIELDS, defaults, '')

    def set_default_fields(self, fields: Any) -> "FormatterOptions":
        return self._set_configuration_value(self.DEFAULT_FIELDS, fields)

    def get_field(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        """Single-field selection; like `fields` but forces the string format"""
        return self.get(self.FIELD, defaults)

    def get_field_labels(self, defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self.get(self.FIELD_LABELS, defaults)

    def set_field_labels(self, field_labels: Any) -> "FormatterOptions":
        return self._set_configuration_value(self.FIELD_LABELS, field_labels)

    def get_default_string_field(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return self.get(self.DEFAULT_STRING_FIELD, defaults, '')

    def set_default_string_field(self, field: str) -> "FormatterOptions":
        return self._set_configuration_value(self.DEFAULT_STRING_FIELD, field)

    def get_delimiter(self, defaults: Optional[Mapping[str, Any]] = None) -> Any:
        return self.get(self.DELIMITER, defaults)

    def set_delimiter(self, delimiter: str) -> "FormatterOptions":
        return self._set_configuration_value(self.DELIMITER, delimiter)

    # ------------------------------------------------------------------
    # Configuration layer
    # ------------------------------------------------------------------

    @property
    def configuration_data(self) -> Dict[str, Any]:
        return dict(self._configuration_data)

    def set_configuration_data(self, configuration_data: Mapping[str, Any]) -> "FormatterOptions":
        self._configuration_data = dict(configuration_data)
        return self

    def _set_configuration_value(self, key: str, value: Any) -> "FormatterOptions":
        self._configuration_data[key] = value
        return self

    def set_configuration_default(self, key: str, value: Any) -> "FormatterOptions":
        """Set a configuration value only if it is not already set"""
        if key not in self._configuration_data:
            self._set_configuration_value(key, value)
        return self

    # ------------------------------------------------------------------
    # User options layer
    # ------------------------------------------------------------------

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def set_options(self, options: Mapping[str, Any]) -> "FormatterOptions":
        self._options = dict(options)
        return self

    def set_option(self, key: str, value: Any) -> "FormatterOptions":
        self._options[key] = value
        return self

    # ------------------------------------------------------------------
    # Input binding layer
    # ------------------------------------------------------------------

    def set_input(self, source: Optional[InputSource]) -> "FormatterOptions":
        """Bind a live input source (e.g. parsed command-line parameters)"""
        self._input = source
        return self

    def input_options(self, defaults: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Return the values of the bound input source for each key in
        `defaults` that the source recognises and has a value for.
        """
        if self._input is None:
            return {}
        values: Dict[str, Any] = {}
        for key in defaults:
            if self._input.has_option(key):
                value = self._input.get_option(key)
                if value is not None:
                    values[key] = value
        return values


def _is_unset(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return True
    return False


__all__ = [
    'FormatterOptions',
    'InputSource',
]
