# blocks/conversion/registry.py
"""
Registry of custom element handlers.

The registry is built once at startup and never changes afterwards, so any
number of conversions can read it concurrently without locking. It offers
two lookups:
- by markup tag name, case-insensitive (HTML tag names are)
- by block type, exact and case-sensitive

Registering the same tag name or block type twice is a configuration error
and stops startup.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Optional, Tuple

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .config import get_conversion_config
from .elements import CustomElementHandler

logger = logging.getLogger(__name__)


class HandlerRegistry:
    def __init__(self, handlers: Iterable[CustomElementHandler] = ()):
        self._by_tag = {}
        self._by_block_type = {}
        self._handlers = []
        self._frozen = False

        for handler in handlers:
            self.register(handler)

        self._by_tag = MappingProxyType(self._by_tag)
        self._by_block_type = MappingProxyType(self._by_block_type)
        self._handlers = tuple(self._handlers)
        self._frozen = True

    def register(self, handler: CustomElementHandler) -> None:
        """Add a handler. Only valid while the registry is being built."""
        if self._frozen:
            raise ImproperlyConfigured(
                f"Cannot register {handler!r}: the handler registry is read-only once built"
            )
        if not handler.tag_name or not handler.block_type:
            raise ImproperlyConfigured(
                f"{handler.__class__.__name__} must declare both tag_name and block_type"
            )

        tag = handler.tag_name.lower()
        if tag in self._by_tag:
            raise ImproperlyConfigured(
                f"Duplicate custom element tag '{handler.tag_name}': "
                f"already handled by {self._by_tag[tag]!r}"
            )
        if handler.block_type in self._by_block_type:
            raise ImproperlyConfigured(
                f"Duplicate block type '{handler.block_type}': "
                f"already handled by {self._by_block_type[handler.block_type]!r}"
            )

        self._by_tag[tag] = handler
        self._by_block_type[handler.block_type] = handler
        self._handlers.append(handler)

    def lookup_by_tag(self, name: Optional[str]) -> Optional[CustomElementHandler]:
        if not name:
            return None
        return self._by_tag.get(name.lower())

    def lookup_by_block_type(self, name: Optional[str]) -> Optional[CustomElementHandler]:
        if not name:
            return None
        return self._by_block_type.get(name)

    @property
    def handlers(self) -> Tuple[CustomElementHandler, ...]:
        return tuple(self._handlers)

    def __len__(self):
        return len(self._handlers)


def build_registry(paths: Iterable[str]) -> HandlerRegistry:
    """Instantiate handler classes from dotted paths and register them."""
    handlers = []
    for path in paths:
        try:
            handler_class = import_string(path)
        except ImportError as e:
            raise ImproperlyConfigured(
                f"Cannot import custom element handler '{path}': {e}"
            ) from e
        handlers.append(handler_class())

    registry = HandlerRegistry(handlers)
    logger.debug(
        f"Registered {len(registry)} custom element handlers: "
        f"{', '.join(h.tag_name for h in registry.handlers)}"
    )
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> HandlerRegistry:
    """The process-wide registry built from settings.BLOCKS_CUSTOM_ELEMENTS."""
    return build_registry(get_conversion_config()["custom_elements"])
