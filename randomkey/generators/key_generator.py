#!/usr/bin/env python3
"""
Random String Generator
=======================
Builds random strings by sampling an alphabet with replacement.

Usage:
    from randomkey.generators import RandomStringGenerator, SeededRandom

    gen = RandomStringGenerator(source=SeededRandom(7))
    gen.generate(16)   # 16 characters from REFERENCE_ALPHABET
"""

import string
from typing import Optional

from .entropy import RandomSource, SeededRandom


# =============================================================================
# Alphabets
# =============================================================================

# Digits appear three times and letters once, so digits are drawn more often.
REFERENCE_ALPHABET = (
    string.digits + string.ascii_lowercase
    + string.digits + string.ascii_uppercase
    + string.digits
)

BALANCED_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

NAMED_ALPHABETS = {
    'reference': REFERENCE_ALPHABET,
    'balanced': BALANCED_ALPHABET,
}

DEFAULT_KEY_LENGTH = 64


def resolve_alphabet(value: Optional[str]) -> str:
    """
    Turn an alphabet setting into the characters to sample.

    Args:
        value: 'reference', 'balanced', a literal string of characters,
            or None for the reference alphabet

    Raises:
        ValueError: If the resulting alphabet is empty
    """
    if value is None:
        return REFERENCE_ALPHABET
    if not isinstance(value, str):
        raise ValueError(f"alphabet must be a string, got {type(value).__name__}")
    alphabet = NAMED_ALPHABETS.get(value, value)
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return alphabet


# =============================================================================
# Generator
# =============================================================================

class RandomStringGenerator:
    """Produces strings of a requested length over a fixed alphabet."""

    def __init__(self, alphabet: str = REFERENCE_ALPHABET,
                 source: Optional[RandomSource] = None):
        self._alphabet = resolve_alphabet(alphabet)
        self._source = source if source is not None else SeededRandom()

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def source(self) -> RandomSource:
        return self._source

    def generate(self, length: int) -> str:
        """Return ``length`` characters, advancing the source by ``length`` draws."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        bound = len(self._alphabet)
        chars = []
        for _ in range(length):
            chars.append(self._alphabet[self._source.next_int(bound)])
        return ''.join(chars)


__all__ = [
    'REFERENCE_ALPHABET',
    'BALANCED_ALPHABET',
    'NAMED_ALPHABETS',
    'DEFAULT_KEY_LENGTH',
    'resolve_alphabet',
    'RandomStringGenerator',
]
