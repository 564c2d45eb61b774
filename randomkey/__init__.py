#!/usr/bin/env python3
"""
RandomKey - Random Values for Configuration Properties
======================================================

A property source that materializes random strings when configuration asks
for a reserved property name. The requested length is part of the name.

Quick Start
-----------
    from randomkey import Environment, add_to_environment

    env = Environment()
    add_to_environment(env)

    env.get_property("randomKey.key")      # 64 characters
    env.get_property("randomKey.key[16]")  # 16 characters
    env.get_property("other.prop")         # None, not ours

Modules
-------
    randomkey.names       - Property name grammar
    randomkey.generators  - Random sources and string generator
    randomkey.sources     - Property sources (random key, mapping, YAML, OS env)
    randomkey.environment - Ordered source chain and resolution
    randomkey.config      - Construction options from app.yaml

CLI Usage
---------
    python -m randomkey get "randomKey.key[16]"
    python -m randomkey --seed 42 demo
"""

__version__ = "0.1.0"

from . import generators
from . import sources
from . import config

from .errors import (
    RandomKeyError,
    BadPropertyNameError,
    MissingPropertyError,
)
from .names import (
    DEFAULT_PREFIX,
    KeyRequestKind,
    KeyRequest,
    NameGrammar,
    parse_name,
)
from .generators import (
    RandomSource,
    SeededRandom,
    ScriptedRandom,
    RandomStringGenerator,
    REFERENCE_ALPHABET,
    BALANCED_ALPHABET,
    DEFAULT_KEY_LENGTH,
)
from .sources import (
    NOT_FOUND,
    PropertySource,
    MapPropertySource,
    YamlPropertySource,
    SystemEnvironmentPropertySource,
    RANDOM_PROPERTY_SOURCE_NAME,
    RandomKeyPropertySource,
    add_to_environment,
)
from .environment import Environment, PropertySources
from .config import RandomKeyConfig
from .settings import get_setting, load_app_config, use_config

__all__ = [
    '__version__',
    # Errors
    'RandomKeyError',
    'BadPropertyNameError',
    'MissingPropertyError',
    # Grammar
    'DEFAULT_PREFIX',
    'KeyRequestKind',
    'KeyRequest',
    'NameGrammar',
    'parse_name',
    # Generation
    'RandomSource',
    'SeededRandom',
    'ScriptedRandom',
    'RandomStringGenerator',
    'REFERENCE_ALPHABET',
    'BALANCED_ALPHABET',
    'DEFAULT_KEY_LENGTH',
    # Sources
    'NOT_FOUND',
    'PropertySource',
    'MapPropertySource',
    'YamlPropertySource',
    'SystemEnvironmentPropertySource',
    'RANDOM_PROPERTY_SOURCE_NAME',
    'RandomKeyPropertySource',
    'add_to_environment',
    # Host
    'Environment',
    'PropertySources',
    # Settings
    'RandomKeyConfig',
    'get_setting',
    'load_app_config',
    'use_config',
]
