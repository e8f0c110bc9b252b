# spellck/infra/logging_config.py
"""
Centralized logging setup: console on stderr, optional rotating log file.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


def configure_logging(level_name: str = "WARNING", log_dir: Optional[Union[str, Path]] = None) -> None:
    """
    Configure console (+ rotating file) logging.

    Args:
        level_name: "DEBUG" | "INFO" | "WARNING" | "ERROR"
        log_dir: optional directory for `spellck.log`; no file log when None
    """
    level = getattr(logging, level_name.upper(), logging.WARNING)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = logging.getLogger()
    # Avoid duplicate handlers when main() runs more than once in a process
    if root.handlers:
        root.setLevel(level)
        for h in root.handlers:
            h.setLevel(level)
        return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.setLevel(level)
    root.addHandler(console)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        # Rotating file (5 MB x 3 files)
        file_handler = RotatingFileHandler(
            log_path / "spellck.log", maxBytes=5_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
