#!/usr/bin/env python3
"""
Key Generators
==============
Random sources and the string generator that samples from them.
"""

from .entropy import (
    RandomSource,
    SeededRandom,
    ScriptedRandom,
)
from .key_generator import (
    REFERENCE_ALPHABET,
    BALANCED_ALPHABET,
    NAMED_ALPHABETS,
    DEFAULT_KEY_LENGTH,
    resolve_alphabet,
    RandomStringGenerator,
)

__all__ = [
    'RandomSource',
    'SeededRandom',
    'ScriptedRandom',
    'REFERENCE_ALPHABET',
    'BALANCED_ALPHABET',
    'NAMED_ALPHABETS',
    'DEFAULT_KEY_LENGTH',
    'resolve_alphabet',
    'RandomStringGenerator',
]
