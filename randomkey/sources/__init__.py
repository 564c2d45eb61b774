#!/usr/bin/env python3
"""
Property Sources
================
The random key source plus the static sources it is chained with.
"""

from .base import NOT_FOUND, PropertySource
from .basic import (
    SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME,
    flatten_mapping,
    MapPropertySource,
    YamlPropertySource,
    SystemEnvironmentPropertySource,
)
from .random_key import (
    RANDOM_PROPERTY_SOURCE_NAME,
    TRACE,
    RandomKeyPropertySource,
    add_to_environment,
)

__all__ = [
    'NOT_FOUND',
    'PropertySource',
    'SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME',
    'flatten_mapping',
    'MapPropertySource',
    'YamlPropertySource',
    'SystemEnvironmentPropertySource',
    'RANDOM_PROPERTY_SOURCE_NAME',
    'TRACE',
    'RandomKeyPropertySource',
    'add_to_environment',
]
