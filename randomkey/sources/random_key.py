#!/usr/bin/env python3
"""
Random Key Property Source
==========================
Answers ``randomKey.*`` property lookups with freshly generated strings.

Usage:
    from randomkey import Environment, add_to_environment

    env = Environment()
    add_to_environment(env)
    env.get_property("randomKey.key")      # 64 random characters
    env.get_property("randomKey.key[16]")  # 16 random characters

Every lookup draws a new value; nothing is cached here. By default the
source is not synchronized and expects the host to serialize lookups. Pass
``thread_safe=True`` to hold a lock across the draws of each lookup.
"""

import logging
import threading
from contextlib import nullcontext
from typing import Any, Optional

from ..config import RandomKeyConfig
from ..generators import (
    DEFAULT_KEY_LENGTH,
    REFERENCE_ALPHABET,
    RandomSource,
    RandomStringGenerator,
    SeededRandom,
)
from ..names import DEFAULT_PREFIX, KeyRequestKind, NameGrammar
from .base import NOT_FOUND, PropertySource

logger = logging.getLogger(__name__)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

RANDOM_PROPERTY_SOURCE_NAME = 'randomKey'


class RandomKeyPropertySource(PropertySource):
    """
    Property source that generates random keys on demand.

    Args:
        name: Source name used in the environment
        alphabet: Characters to sample ('reference', 'balanced' or literal)
        seed: Fixed seed for reproducible output
        source: Injected random source; overrides ``seed``
        prefix: Reserved property-name prefix
        default_length: Length produced for the bare ``key`` request
        strict: Only accept ``key[N]`` for sized requests
        thread_safe: Serialize lookups on an instance lock
    """

    def __init__(self, name: str = RANDOM_PROPERTY_SOURCE_NAME,
                 alphabet: str = REFERENCE_ALPHABET,
                 seed: Optional[int] = None,
                 source: Optional[RandomSource] = None,
                 prefix: str = DEFAULT_PREFIX,
                 default_length: int = DEFAULT_KEY_LENGTH,
                 strict: bool = False,
                 thread_safe: bool = False):
        super().__init__(name)
        if default_length < 0:
            raise ValueError(f"default_length must be non-negative, got {default_length}")
        if source is None:
            source = SeededRandom(seed)
        self._grammar = NameGrammar(prefix, strict=strict)
        self._generator = RandomStringGenerator(alphabet, source)
        self._default_length = default_length
        self._lock = threading.Lock() if thread_safe else nullcontext()

    @classmethod
    def from_config(cls, config: Optional[RandomKeyConfig] = None,
                    source: Optional[RandomSource] = None) -> 'RandomKeyPropertySource':
        """Build a source from settings (app.yaml unless ``config`` is given)."""
        config = config or RandomKeyConfig()
        return cls(
            name=config.name,
            alphabet=config.alphabet,
            seed=config.seed,
            source=source,
            prefix=config.prefix,
            default_length=config.default_length,
            strict=config.strict,
            thread_safe=config.thread_safe,
        )

    @property
    def prefix(self) -> str:
        return self._grammar.prefix

    @property
    def alphabet(self) -> str:
        return self._generator.alphabet

    @property
    def default_length(self) -> int:
        return self._default_length

    def lookup(self, property_name: str) -> Any:
        request = self._grammar.parse(property_name)
        if request.kind is KeyRequestKind.DISOWN:
            return NOT_FOUND
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "Generating random property for '%s'", property_name)
        if request.kind is KeyRequestKind.KEY_DEFAULT:
            length = self._default_length
        else:
            length = request.length
        with self._lock:
            return self._generator.generate(length)

    def contains_property(self, property_name: str) -> bool:
        # Parse only; do not advance the random source.
        return self._grammar.parse(property_name).is_key


def add_to_environment(environment, config: Optional[RandomKeyConfig] = None,
                       source: Optional[RandomSource] = None) -> RandomKeyPropertySource:
    """
    Register a random key source at the head of ``environment``'s chain.

    Returns:
        The registered source
    """
    random_source = RandomKeyPropertySource.from_config(config, source=source)
    environment.property_sources.add_first(random_source)
    logger.debug("%s added to environment", random_source)
    return random_source


__all__ = [
    'RANDOM_PROPERTY_SOURCE_NAME',
    'TRACE',
    'RandomKeyPropertySource',
    'add_to_environment',
]
