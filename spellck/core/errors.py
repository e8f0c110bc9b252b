# spellck/core/errors.py
"""
Error taxonomy.

- ConfigError: no usable dictionary (default disabled and nothing supplied,
  required environment configuration missing, malformed settings).
- SourceReadError: a named dictionary or source file cannot be read. It is a
  ConfigError too, because a dictionary that cannot be loaded leaves the run
  without a valid configuration.

Misspellings are not errors; they are Diagnostics.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class SpellckError(Exception):
    """Base class for fatal spellck failures."""


class ConfigError(SpellckError):
    pass


class SourceReadError(ConfigError):
    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"error reading {self.path}: {reason}")
