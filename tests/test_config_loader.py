# tests/test_config_loader.py
import os

import pytest

from spellck.core.errors import ConfigError
from spellck.core.models import Severity
from spellck.infra.config_loader import load_config, severity_from_config, split_path_list

ENV_KEYS = [
    "SPELLCK_LOG_LEVEL", "SPELLCK_LOG_DIR", "SPELLCK_LANGUAGE_CODE", "SPELLCK_DEFAULT_DICT",
    "SPELLCK_SEVERITY", "SPELLCK_TARGET_EXTS", "SPELLCK_IGNORE_DIRS", "SPELLCK_LINT_DICT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    cfg = load_config()

    assert cfg["log_level"] == "WARNING"
    assert cfg["language_code"] == "en"
    assert cfg["target_extensions"] == [".py", ".pyi"]
    assert cfg["default_dict_path"] is None
    assert cfg["lint_dicts"] is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPELLCK_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPELLCK_TARGET_EXTS", "py, PYX")
    monkeypatch.setenv("SPELLCK_IGNORE_DIRS", "node_modules,.tox")
    monkeypatch.setenv("SPELLCK_DEFAULT_DICT", "/usr/share/dict/words")
    monkeypatch.setenv("SPELLCK_SEVERITY", "error")

    cfg = load_config()

    assert cfg["log_level"] == "DEBUG"
    assert cfg["target_extensions"] == [".py", ".pyx"]
    assert cfg["ignore_dirs"] == ["node_modules", ".tox"]
    assert cfg["default_dict_path"] == "/usr/share/dict/words"
    assert severity_from_config(cfg) is Severity.ERROR


def test_lint_dict_uses_platform_path_separator(monkeypatch):
    monkeypatch.setenv("SPELLCK_LINT_DICT", os.pathsep.join(["a.txt", "", "b.txt"]))

    assert load_config()["lint_dicts"] == ["a.txt", "b.txt"]


def test_split_path_list_empty():
    assert split_path_list("") == []


def test_unknown_severity_is_config_error():
    with pytest.raises(ConfigError):
        severity_from_config({"severity": "LOUD"})
