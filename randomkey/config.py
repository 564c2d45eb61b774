#!/usr/bin/env python3
"""
Configuration Management
========================
Construction options for the random key source, filled from the
``random_key`` section of app.yaml for anything not passed explicitly.
"""

from dataclasses import dataclass
from typing import Optional

from .settings import get_setting


@dataclass
class RandomKeyConfig:
    """Options for building a RandomKeyPropertySource."""
    name: Optional[str] = None            # Source name in the environment
    prefix: Optional[str] = None          # Reserved property-name prefix
    default_length: Optional[int] = None  # Length for the bare key request
    alphabet: Optional[str] = None        # 'reference', 'balanced' or literal chars
    seed: Optional[int] = None            # Fixed seed; None seeds from the OS
    strict: Optional[bool] = None         # Only accept key[N]
    thread_safe: Optional[bool] = None    # Lock the source per lookup

    def __post_init__(self):
        cfg = get_setting("random_key", {}) or {}
        if self.name is None:
            self.name = cfg.get("name")
        if self.prefix is None:
            self.prefix = cfg.get("prefix")
        if self.default_length is None:
            self.default_length = cfg.get("default_length")
        if self.alphabet is None:
            self.alphabet = cfg.get("alphabet")
        if self.seed is None:
            self.seed = cfg.get("seed")
        if self.strict is None:
            self.strict = cfg.get("strict", False)
        if self.thread_safe is None:
            self.thread_safe = cfg.get("thread_safe", False)

        missing = [
            name for name, value in (
                ("name", self.name),
                ("prefix", self.prefix),
                ("default_length", self.default_length),
                ("alphabet", self.alphabet),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"random_key settings missing in app.yaml: {', '.join(missing)}")

        if isinstance(self.default_length, bool) or not isinstance(self.default_length, int):
            raise ValueError(f"random_key.default_length must be an integer, got {self.default_length!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"random_key.seed must be an integer or null, got {self.seed!r}")


__all__ = ['RandomKeyConfig']
