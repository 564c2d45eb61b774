#!/usr/bin/env python3
"""Exception types raised by randomkey."""

from typing import Optional


class RandomKeyError(Exception):
    """Base class for all randomkey errors."""


class BadPropertyNameError(RandomKeyError, ValueError):
    """
    A property name has the sized-key shape but its length token is not a
    non-negative decimal integer.

    Attributes:
        property_name: The full property name that was looked up
        token: The length token that failed to parse
    """

    def __init__(self, property_name: str, token: Optional[str] = None):
        self.property_name = property_name
        self.token = token
        if token is None:
            message = f"Invalid random key property name '{property_name}'"
        else:
            message = (
                f"Invalid random key property name '{property_name}': "
                f"length '{token}' is not a non-negative integer"
            )
        super().__init__(message)


class MissingPropertyError(RandomKeyError, KeyError):
    """No property source in the environment resolved the requested name."""

    def __init__(self, property_name: str):
        self.property_name = property_name
        super().__init__(property_name)

    def __str__(self):
        return f"Property '{self.property_name}' could not be resolved"
