#!/usr/bin/env python3
"""
Static Property Sources
=======================
Peer sources that sit behind the random key source in an environment:

- MapPropertySource: values from an in-memory mapping
- YamlPropertySource: a YAML file flattened to dotted keys
- SystemEnvironmentPropertySource: ``os.environ``
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .base import NOT_FOUND, PropertySource

SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME = 'systemEnvironment'


def flatten_mapping(data: Mapping, parent: str = '') -> Dict[str, Any]:
    """
    Flatten nested mappings into dotted keys.

        {'db': {'host': 'x', 'port': 5}} -> {'db.host': 'x', 'db.port': 5}

    Lists are kept as values and also exposed as ``key[i]`` entries.
    """
    flat = {}
    for key, value in data.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_mapping(value, full_key))
            continue
        flat[full_key] = value
        if isinstance(value, list):
            for i, item in enumerate(value):
                item_key = f"{full_key}[{i}]"
                if isinstance(item, Mapping):
                    flat.update(flatten_mapping(item, item_key))
                else:
                    flat[item_key] = item
    return flat


class MapPropertySource(PropertySource):
    """Serves properties from a plain mapping."""

    def __init__(self, name: str, properties: Optional[Mapping[str, Any]] = None):
        super().__init__(name)
        self._properties = dict(properties or {})

    @property
    def properties(self) -> Dict[str, Any]:
        return dict(self._properties)

    def lookup(self, property_name: str) -> Any:
        return self._properties.get(property_name, NOT_FOUND)


class YamlPropertySource(MapPropertySource):
    """Serves properties from a YAML file, flattened to dotted names."""

    def __init__(self, name: str, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Missing properties file: {self.path}")
        data = yaml.safe_load(self.path.read_text(encoding='utf-8')) or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Properties file must be a mapping: {self.path}")
        super().__init__(name, flatten_mapping(data))


class SystemEnvironmentPropertySource(PropertySource):
    """
    Serves properties from environment variables.

    A name that is not set verbatim is retried in upper snake case, so
    ``app.db-host`` also matches ``APP_DB_HOST``.
    """

    def __init__(self, name: str = SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME,
                 environ: Optional[Mapping[str, str]] = None):
        super().__init__(name)
        self._environ = environ if environ is not None else os.environ

    def lookup(self, property_name: str) -> Any:
        if property_name in self._environ:
            return self._environ[property_name]
        candidate = re.sub(r'[^A-Za-z0-9]', '_', property_name).upper()
        if candidate in self._environ:
            return self._environ[candidate]
        return NOT_FOUND


__all__ = [
    'SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME',
    'flatten_mapping',
    'MapPropertySource',
    'YamlPropertySource',
    'SystemEnvironmentPropertySource',
]
