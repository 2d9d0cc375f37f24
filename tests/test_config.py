from __future__ import annotations

from pathlib import Path

import pytest

from sonosctl.core.config import CACHE_FILE_ENV, DEFAULT_DISCOVERY_TIMEOUT_S, load_settings
from sonosctl.core.errors import ConfigError


@pytest.fixture(autouse=True)
def _isolated_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.delenv(CACHE_FILE_ENV, raising=False)


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config" / "sonosctl" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_config_file(tmp_path: Path) -> None:
    settings = load_settings()
    assert settings.cache_file == tmp_path / "cache" / "sonosctl" / "speakers.json"
    assert settings.discovery_timeout == DEFAULT_DISCOVERY_TIMEOUT_S
    assert settings.interface_addr is None


def test_values_from_config_file(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        f"cache_file: {tmp_path / 'custom.json'}\ndiscovery_timeout: 2.5\ninterface_addr: 192.168.1.5\n",
    )
    settings = load_settings()
    assert settings.cache_file == tmp_path / "custom.json"
    assert settings.discovery_timeout == 2.5
    assert settings.interface_addr == "192.168.1.5"


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")
    assert load_settings().discovery_timeout == DEFAULT_DISCOVERY_TIMEOUT_S


def test_env_overrides_cache_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_config(tmp_path, "cache_file: /somewhere/else.json\n")
    monkeypatch.setenv(CACHE_FILE_ENV, str(tmp_path / "env.json"))
    assert load_settings().cache_file == tmp_path / "env.json"


def test_explicit_path_is_used(tmp_path: Path) -> None:
    path = tmp_path / "other.yaml"
    path.write_text("discovery_timeout: 1\n", encoding="utf-8")
    assert load_settings(path).discovery_timeout == 1.0


@pytest.mark.parametrize(
    "content",
    [
        "discovery_timeout: -1\n",
        "unknown_key: 1\n",
        "cache_file: 12\n",
        "- just\n- a list\n",
        "discovery_timeout: 1\ndiscovery_timeout: 2\n",
        "cache_file: [unclosed\n",
        "interface_addr: eth0\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    _write_config(tmp_path, content)
    with pytest.raises(ConfigError):
        load_settings()


def test_config_with_invalid_utf8_raises(tmp_path: Path) -> None:
    path = tmp_path / "config" / "sonosctl" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"cache_file: \xff\xfe\n")
    with pytest.raises(ConfigError):
        load_settings()
