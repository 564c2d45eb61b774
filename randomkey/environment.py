#!/usr/bin/env python3
"""
Configuration Environment
=========================
A minimal host for property sources: an ordered chain that is searched
front to back, first hit wins.

Usage:
    from randomkey.environment import Environment
    from randomkey.sources import MapPropertySource

    env = Environment()
    env.property_sources.add_last(MapPropertySource("defaults", {"app.name": "demo"}))
    env.get_property("app.name")  # 'demo'
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .errors import MissingPropertyError
from .sources.base import PropertySource

logger = logging.getLogger(__name__)


class PropertySources:
    """Ordered, name-unique chain of property sources."""

    def __init__(self, sources: Optional[Iterable[PropertySource]] = None):
        self._sources: List[PropertySource] = []
        for source in sources or ():
            self.add_last(source)

    def __iter__(self) -> Iterator[PropertySource]:
        return iter(list(self._sources))

    def __len__(self) -> int:
        return len(self._sources)

    def names(self) -> List[str]:
        return [s.name for s in self._sources]

    def contains(self, name: str) -> bool:
        return any(s.name == name for s in self._sources)

    def get(self, name: str) -> Optional[PropertySource]:
        for source in self._sources:
            if source.name == name:
                return source
        return None

    def add_first(self, source: PropertySource) -> None:
        self._discard(source.name)
        self._sources.insert(0, source)
        logger.debug("Added property source '%s' with highest precedence", source.name)

    def add_last(self, source: PropertySource) -> None:
        self._discard(source.name)
        self._sources.append(source)
        logger.debug("Added property source '%s' with lowest precedence", source.name)

    def add_before(self, relative_name: str, source: PropertySource) -> None:
        self._check_relative(relative_name, source)
        self._discard(source.name)
        self._sources.insert(self._index_of(relative_name), source)
        logger.debug("Added property source '%s' before '%s'", source.name, relative_name)

    def add_after(self, relative_name: str, source: PropertySource) -> None:
        self._check_relative(relative_name, source)
        self._discard(source.name)
        self._sources.insert(self._index_of(relative_name) + 1, source)
        logger.debug("Added property source '%s' after '%s'", source.name, relative_name)

    def remove(self, name: str) -> Optional[PropertySource]:
        source = self._discard(name)
        if source is not None:
            logger.debug("Removed property source '%s'", name)
        return source

    def _index_of(self, name: str) -> int:
        for i, source in enumerate(self._sources):
            if source.name == name:
                return i
        raise KeyError(f"Property source '{name}' does not exist")

    def _check_relative(self, relative_name: str, source: PropertySource) -> None:
        if relative_name == source.name:
            raise ValueError(f"Property source '{source.name}' cannot be added relative to itself")
        self._index_of(relative_name)

    def _discard(self, name: str) -> Optional[PropertySource]:
        for i, source in enumerate(self._sources):
            if source.name == name:
                return self._sources.pop(i)
        return None


class Environment:
    """Resolves property names against a PropertySources chain."""

    def __init__(self, property_sources: Optional[PropertySources] = None):
        self.property_sources = property_sources if property_sources is not None else PropertySources()

    def get_property(self, name: str, default: Any = None) -> Any:
        """
        Return the first value any source has for ``name``.

        Errors raised by a source (e.g. a malformed random key name)
        propagate to the caller.
        """
        for source in self.property_sources:
            value = source.get_property(name)
            if value is not None:
                logger.debug("Found property '%s' in source '%s'", name, source.name)
                return value
        return default

    def require_property(self, name: str) -> Any:
        value = self.get_property(name)
        if value is None:
            raise MissingPropertyError(name)
        return value

    def contains_property(self, name: str) -> bool:
        return any(source.contains_property(name) for source in self.property_sources)

    def snapshot(self, names: Iterable[str]) -> Dict[str, Any]:
        """Resolve each name once; missing names are omitted."""
        resolved = {}
        for name in names:
            value = self.get_property(name)
            if value is not None:
                resolved[name] = value
        return resolved


__all__ = ['PropertySources', 'Environment']
