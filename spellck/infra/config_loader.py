# spellck/infra/config_loader.py
"""
Central configuration loader for spellck.

Responsibilities:
- Provide a single place to define default configuration values.
- Allow environment variable overrides (no code changes, no config files).

Environment variables:
- SPELLCK_LOG_LEVEL          (DEBUG/INFO/WARNING/ERROR)
- SPELLCK_LOG_DIR            (enables a rotating log file in that folder)
- SPELLCK_LANGUAGE_CODE      (language of the built-in word list, e.g. "en")
- SPELLCK_DEFAULT_DICT       (word list file used as the built-in default instead)
- SPELLCK_SEVERITY           (INFO/WARNING/ERROR tag for diagnostics)
- SPELLCK_TARGET_EXTS        (comma-separated, e.g. ".py,.pyi")
- SPELLCK_IGNORE_DIRS        (comma-separated)
- SPELLCK_LINT_DICT          (dictionary files for the flake8 plugin, os.pathsep-separated)
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from spellck.core.errors import ConfigError
from spellck.core.models import Severity

LINT_DICT_ENV = "SPELLCK_LINT_DICT"

_DEFAULT: Dict[str, Any] = {
    "log_level": "WARNING",
    "log_dir": None,
    "language_code": "en",
    "default_dict_path": None,
    "severity": "WARNING",
    "target_extensions": [".py", ".pyi"],
    "ignore_dirs": [".git", "__pycache__", "venv", ".venv", "build", "dist"],
    "lint_dicts": None,   # None = variable not set (a ConfigError in plugin mode)
}


def load_config() -> Dict[str, Any]:
    """
    Return a config dict. Environment variables override the defaults.
    A fresh dict is returned on each call; callers may keep or mutate it.
    """
    cfg = dict(_DEFAULT)

    _str_upper_env(cfg, "log_level", "SPELLCK_LOG_LEVEL")
    _str_upper_env(cfg, "severity", "SPELLCK_SEVERITY")
    _str_env(cfg, "language_code", "SPELLCK_LANGUAGE_CODE")
    _optional_str_env(cfg, "log_dir", "SPELLCK_LOG_DIR")
    _optional_str_env(cfg, "default_dict_path", "SPELLCK_DEFAULT_DICT")

    ig = os.getenv("SPELLCK_IGNORE_DIRS")
    if ig:
        cfg["ignore_dirs"] = _split_list(ig)

    ex = os.getenv("SPELLCK_TARGET_EXTS")
    if ex:
        # ensure dot-prefixed, lowercase extensions
        cfg["target_extensions"] = [
            e if e.startswith(".") else f".{e}"
            for e in (s.lower() for s in _split_list(ex))
        ]

    lint = os.getenv(LINT_DICT_ENV)
    if lint is not None:
        cfg["lint_dicts"] = split_path_list(lint)

    return cfg


def severity_from_config(cfg: Dict[str, Any]) -> Severity:
    """Map the `severity` config value to a Severity, rejecting unknown names."""
    raw = str(cfg.get("severity") or "WARNING").upper()
    try:
        return Severity[raw]
    except KeyError:
        raise ConfigError(
            f"unknown severity {raw!r}; expected one of: "
            + ", ".join(s.name for s in Severity)
        ) from None


def split_path_list(value: str) -> List[str]:
    """Split a PATH-style list on the platform delimiter, dropping empty entries."""
    return [p for p in value.split(os.pathsep) if p.strip()]


# ----------------- helpers -----------------

def _split_list(s: str) -> List[str]:
    return [part.strip() for part in s.split(",") if part.strip()]


def _str_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val = os.getenv(env_key)
    if val is not None and val.strip():
        cfg[key] = val.strip()


def _optional_str_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val: Optional[str] = os.getenv(env_key)
    if val is not None:
        cfg[key] = val.strip() or None


def _str_upper_env(cfg: Dict[str, Any], key: str, env_key: str) -> None:
    val = os.getenv(env_key)
    if val is not None and val.strip():
        cfg[key] = val.strip().upper()
