#!/usr/bin/env python3
"""
Property Source Base
====================
A property source is a named provider that either has a value for a
property name or reports a miss. Environments consult their sources in order
and the first hit wins.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class _NotFound:
    """Sentinel returned by ``lookup`` when a source does not own a name."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NOT_FOUND'

    def __reduce__(self):
        return (_NotFound, ())


NOT_FOUND = _NotFound()


class PropertySource(ABC):
    """
    Base class for property sources.

    Subclasses implement ``lookup``; ``get_property`` maps a miss to None,
    which is what ``Environment`` consumes.
    """

    def __init__(self, name: str):
        if not name:
            raise ValueError("property source name must not be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def lookup(self, property_name: str) -> Any:
        """Return the value for ``property_name`` or ``NOT_FOUND``."""

    def get_property(self, property_name: str) -> Optional[Any]:
        value = self.lookup(property_name)
        if value is NOT_FOUND:
            return None
        return value

    def contains_property(self, property_name: str) -> bool:
        return self.lookup(property_name) is not NOT_FOUND

    def __repr__(self):
        return f"{type(self).__name__}(name={self._name!r})"


__all__ = ['NOT_FOUND', 'PropertySource']
