"""
Property List Parser for outfmt
================================
Convert textual option values into ordered structures.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, List, Mapping


def parse_property_list(value: Any) -> "OrderedDict[str, Any]":
    """
    Parse a property list such as "key:Label,key2:Label2".

    Whitespace around separators is trimmed. An entry without a colon
    maps to itself. Mappings are copied in order; empty or false values
    produce an empty mapping.

    Args:
        value: Raw option value (string, mapping, or falsy)

    Returns:
        Ordered mapping of key to label
    """
    if isinstance(value, Mapping):
        return OrderedDict((str(k), v) for k, v in value.items())

    result: "OrderedDict[str, Any]" = OrderedDict()
    if not value or not isinstance(value, str):
        return result

    for item in value.split(','):
        item = item.strip()
        if not item:
            continue
        key, sep, label = item.partition(':')
        key = key.strip()
        result[key] = label.strip() if sep else key

    return result


def parse_field_list(value: Any) -> List[str]:
    """
    Normalise a field list given either as a sequence or as "a,b,c".
    """
    if not value:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return [str(item) for item in value]


__all__ = [
    'parse_property_list',
    'parse_field_list',
]
