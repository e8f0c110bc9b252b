# spellck/core/registry.py
"""
Lightweight plugin registry for file processors.

Usage pattern:
- Each concrete processor module creates an instance and calls
  register_processor(...) at import time.
- The orchestrator asks this registry for all processors and routes files
  to them by extension.
"""

from __future__ import annotations

from typing import List

from .interfaces import FileProcessor

# Module-private store of stateless processor instances.
_PROCESSORS: List[FileProcessor] = []


def register_processor(p: FileProcessor) -> None:
    """
    Register a processor instance if not already present.
    Processors are unique by concrete class, so re-importing a module does
    not register it twice.
    """
    if not any(isinstance(existing, type(p)) for existing in _PROCESSORS):
        _PROCESSORS.append(p)


def processors() -> List[FileProcessor]:
    """Return a shallow copy so callers cannot mutate the internal list."""
    return list(_PROCESSORS)


def clear_registry() -> None:
    """
    Testing helper: wipe current registrations.
    Not intended for use in a normal run.
    """
    _PROCESSORS.clear()
