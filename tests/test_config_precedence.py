from __future__ import annotations

from pathlib import Path

import pytest

from spayd.config import ConfigError, SpaydSettings

_ENV_KEYS = [
    "SPAYD_REQUIRE_CHECKSUM",
    "SPAYD_VALIDATE_REQUIRED",
    "SPAYD_SIGN_OUTPUT",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write(tmp: Path, name: str, content: str) -> Path:
    p = tmp / name
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    _write(
        tmp_path,
        "spayd.toml",
        """
        [spayd]
        require_checksum = false
        validate_required = false
        sign_output = true
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPAYD_REQUIRE_CHECKSUM", "yes")
    monkeypatch.setenv("SPAYD_VALIDATE_REQUIRED", "on")

    s = SpaydSettings.load()

    assert s.require_checksum is True  # env override
    assert s.validate_required is True  # env override
    assert s.sign_output is True  # from TOML


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    _write(
        tmp_path,
        "pyproject.toml",
        """
        [tool.spayd]
        validate_required = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    s = SpaydSettings.load()

    assert s.validate_required is False
    assert s.require_checksum is False


def test_settings_top_level_keys_and_explicit_path(tmp_path: Path) -> None:
    p = _write(tmp_path, "custom.toml", 'require_checksum = true\n')
    assert SpaydSettings.load(p).require_checksum is True


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    s = SpaydSettings.load()

    assert s == SpaydSettings()
    assert s.validate_required is True


@pytest.mark.parametrize(
    "key,value",
    [("SPAYD_REQUIRE_CHECKSUM", "maybe"), ("SPAYD_SIGN_OUTPUT", "2.0")],
)
def test_settings_reject_invalid_env(tmp_path: Path, monkeypatch, key: str, value: str) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError):
        SpaydSettings.load()


def test_settings_reject_invalid_toml(tmp_path: Path, monkeypatch) -> None:
    _write(tmp_path, "spayd.toml", "require_checksum = [")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigError):
        SpaydSettings.load()


def test_settings_ignore_unknown_keys(tmp_path: Path) -> None:
    p = _write(tmp_path, "spayd.toml", '[spayd]\ndefault_version = "2.0"\n')
    s = SpaydSettings.load(p)
    assert s == SpaydSettings()
    assert not hasattr(s, "default_version")
