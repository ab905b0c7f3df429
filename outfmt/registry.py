"""
Formatter Registry for outfmt
==============================
Maps format identifiers to formatter descriptors.

The registry is built once (see `default_registry`), frozen, and then
passed to whatever resolves formatters. The empty identifier is an
alias for the plain string formatter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Type

from .exceptions import UnknownFormatError
from .formatters import BUILTIN_FORMATTERS
from .formatters.base import Capability, Formatter

# Configure module logger
logger = logging.getLogger(__name__)

# Identifier of the formatter the empty format resolves to
STRING_FORMAT = 'string'


@dataclass(frozen=True)
class FormatterSpec:
    """
    Immutable descriptor of a registered formatter.

    Attributes:
        format_id: Identifier the formatter is registered under
        factory: Formatter class; instantiated on every resolution
        capabilities: Optional pipeline stages the formatter takes part in
        accepted_shapes: Shape names accepted by its validation stage
    """
    format_id: str
    factory: Type[Formatter]
    capabilities: Capability = Capability.NONE
    accepted_shapes: Sequence[str] = ()

    def supports(self, capability: Capability) -> bool:
        return bool(self.capabilities & capability)

    def create(self) -> Formatter:
        return self.factory()


class FormatterRegistry:
    """
    Registry of available formatters.

    Usage:
        registry = FormatterRegistry()
        registry.register('json', JsonFormatter)
        registry.freeze()
        formatter = registry.resolve('json')
    """

    def __init__(self, alias_format: str = STRING_FORMAT):
        self._specs: Dict[str, FormatterSpec] = {}
        self._alias_format = alias_format
        self._frozen = False

    def register(
        self,
        format_id: str,
        formatter_cls: Type[Formatter],
        capabilities: Optional[Capability] = None,
        accepted_shapes: Optional[Sequence[str]] = None
    ) -> "FormatterRegistry":
        """
        Register a formatter class under `format_id`.

        Capabilities and accepted shapes default to those declared on the
        class.
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{format_id}': registry is frozen")
        if format_id == '':
            raise ValueError("The empty format is reserved as an alias")

        spec = FormatterSpec(
            format_id=format_id,
            factory=formatter_cls,
            capabilities=formatter_cls.capabilities if capabilities is None else capabilities,
            accepted_shapes=tuple(
                formatter_cls.accepted_shapes if accepted_shapes is None else accepted_shapes
            ),
        )
        self._specs[format_id] = spec
        logger.debug(f"Registered formatter: {format_id}")
        return self

    def freeze(self) -> "FormatterRegistry":
        """Make the registry read-only"""
        self._specs = MappingProxyType(dict(self._specs))
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _canonical(self, format_id: str) -> str:
        return self._alias_format if format_id == '' else format_id

    def has(self, format_id: str) -> bool:
        return self._canonical(format_id) in self._specs

    def spec(self, format_id: str) -> FormatterSpec:
        """Descriptor for `format_id`; raises UnknownFormatError if absent"""
        canonical = self._canonical(format_id)
        if canonical not in self._specs:
            raise UnknownFormatError(format_id)
        return self._specs[canonical]

    def resolve(self, format_id: str) -> Formatter:
        """Fresh formatter instance for `format_id`"""
        return self.spec(format_id).create()

    def formats(self) -> List[str]:
        """Registered identifiers, sorted"""
        return sorted(self._specs)

    @property
    def specs(self) -> Mapping[str, FormatterSpec]:
        return MappingProxyType(dict(self._specs))

    def __contains__(self, format_id: str) -> bool:
        return self.has(format_id)

    def __len__(self) -> int:
        return len(self._specs)


def default_registry() -> FormatterRegistry:
    """Build and freeze a registry holding every built-in formatter"""
    registry = FormatterRegistry()
    for format_id, formatter_cls in BUILTIN_FORMATTERS.items():
        registry.register(format_id, formatter_cls)
    registry.freeze()
    logger.debug(f"Formatter registry initialized with {len(registry)} formats")
    return registry


__all__ = [
    'FormatterSpec',
    'FormatterRegistry',
    'default_registry',
    'STRING_FORMAT',
]
