# spellck/utils/path_utils.py
"""
Source discovery for a run.

A directory is walked recursively for files with a target extension, pruning
ignored folders (.git, venv, ...) in place. A path that names a file is
yielded as-is, whatever its extension; the orchestrator decides how to read it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional

DEFAULT_EXTENSIONS = (".py", ".pyi")
DEFAULT_IGNORED_DIRS = (".git", "__pycache__", "venv", ".venv", "build", "dist")


def iter_target_files(
    root: Path | str,
    exts: Optional[Iterable[str]] = None,
    ignore_dirs: Optional[Iterable[str]] = None,
) -> Iterator[Path]:
    """Yield matching files under `root` in sorted order; symlinks are not followed."""
    root_path = Path(root)
    if root_path.is_file():
        yield root_path
        return

    wanted = _dotted_lower(exts or DEFAULT_EXTENSIONS)
    skipped = frozenset(d.strip().lower() for d in (ignore_dirs or DEFAULT_IGNORED_DIRS) if d.strip())

    for dirpath, dirnames, filenames in os.walk(root_path, topdown=True, followlinks=False):
        dirnames[:] = sorted(d for d in dirnames if d.lower() not in skipped)
        for fname in sorted(filenames):
            if os.path.splitext(fname)[1].lower() in wanted:
                yield Path(dirpath) / fname


def _dotted_lower(exts: Iterable[str]) -> FrozenSet[str]:
    """`py`, `.PY` -> `.py`"""
    out = set()
    for e in exts:
        s = str(e).strip().lower()
        if s:
            out.add(s if s.startswith(".") else "." + s)
    return frozenset(out)
