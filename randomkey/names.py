#!/usr/bin/env python3
"""
Property Name Grammar
=====================
Classifies a requested property name for the random key source.

    randomKey.key          -> KEY_DEFAULT
    randomKey.key[N]       -> KEY_SIZED(N)
    randomKey.key[N,M,...] -> DISOWN
    anything else          -> DISOWN

In lax mode (the default) the character right after ``key`` and the final
character of the name are dropped without being checked, so ``key(8)`` and
``key_8_`` read the same as ``key[8]``. Strict mode only accepts brackets.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import BadPropertyNameError

DEFAULT_PREFIX = 'randomKey.'
KEY_MARKER = 'key'
PREFIX_SEPARATORS = '.:/_-'

_DECIMAL = re.compile(r'[0-9]+')
MAX_KEY_LENGTH = 2**31 - 1
_MAX_LENGTH_DIGITS = len(str(MAX_KEY_LENGTH))
_STRICT_SIZED = re.compile(r'\[(.*)\]', re.DOTALL)


class KeyRequestKind(Enum):
    """Outcome of parsing a property name."""
    DISOWN = "disown"
    KEY_DEFAULT = "key_default"
    KEY_SIZED = "key_sized"


@dataclass(frozen=True)
class KeyRequest:
    """Parsed property name; ``length`` is set only for KEY_SIZED."""
    kind: KeyRequestKind
    length: Optional[int] = None

    @property
    def is_key(self) -> bool:
        return self.kind is not KeyRequestKind.DISOWN

    @classmethod
    def sized(cls, length: int) -> 'KeyRequest':
        return cls(KeyRequestKind.KEY_SIZED, length)


DISOWN = KeyRequest(KeyRequestKind.DISOWN)
KEY_DEFAULT = KeyRequest(KeyRequestKind.KEY_DEFAULT)


def validate_prefix(prefix: str) -> str:
    if not prefix:
        raise ValueError("prefix must not be empty")
    if prefix[-1] not in PREFIX_SEPARATORS:
        raise ValueError(
            f"prefix '{prefix}' must end with one of {PREFIX_SEPARATORS!r}"
        )
    return prefix


class NameGrammar:
    """
    Parser for the property names a random key source claims.

    Args:
        prefix: Reserved leading substring of claimed names
        strict: Require the ``key[...]`` form for sized requests
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, strict: bool = False):
        self.prefix = validate_prefix(prefix)
        self.strict = strict

    def claims(self, name: str) -> bool:
        """True if ``name`` lies inside the reserved prefix."""
        return name.startswith(self.prefix)

    def parse(self, name: str) -> KeyRequest:
        """
        Classify ``name``.

        Raises:
            BadPropertyNameError: If a sized request has a length token that
                is not a decimal integer in [0, MAX_KEY_LENGTH]
        """
        if not self.claims(name):
            return DISOWN

        remainder = name[len(self.prefix):]
        if remainder == KEY_MARKER:
            return KEY_DEFAULT

        payload = self._range_payload(remainder)
        if payload is None:
            return DISOWN

        tokens = payload.split(',')
        if len(tokens) > 1:
            # Multi-value ranges are reserved; not ours.
            return DISOWN

        token = tokens[0]
        if not _DECIMAL.fullmatch(token):
            raise BadPropertyNameError(name, token)
        digits = token.lstrip('0') or '0'
        if len(digits) > _MAX_LENGTH_DIGITS:
            raise BadPropertyNameError(name, token)
        length = int(digits)
        if length > MAX_KEY_LENGTH:
            raise BadPropertyNameError(name, token)
        return KeyRequest.sized(length)

    def _range_payload(self, remainder: str) -> Optional[str]:
        if not remainder.startswith(KEY_MARKER):
            return None
        rest = remainder[len(KEY_MARKER):]
        if self.strict:
            match = _STRICT_SIZED.fullmatch(rest)
            return match.group(1) if match else None
        if len(rest) <= 1:
            return None
        return rest[1:-1]


def parse_name(name: str, prefix: str = DEFAULT_PREFIX, strict: bool = False) -> KeyRequest:
    """Convenience wrapper around ``NameGrammar(prefix, strict).parse(name)``."""
    return NameGrammar(prefix, strict=strict).parse(name)


__all__ = [
    'DEFAULT_PREFIX',
    'KEY_MARKER',
    'MAX_KEY_LENGTH',
    'KeyRequestKind',
    'KeyRequest',
    'DISOWN',
    'KEY_DEFAULT',
    'NameGrammar',
    'parse_name',
    'validate_prefix',
]
