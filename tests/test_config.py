"""Tests for httpeek.config -- settings precedence and the data directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from httpeek.config import get_data_dir, resolve_config
from httpeek.exceptions import ConfigError
from httpeek.models import DEFAULT_POWERED_BY, DEFAULT_USER_AGENT, ClientConfig


# ---------------------------------------------------------------------------
# Data directory
# ---------------------------------------------------------------------------


class TestDataDir:
    def test_xdg_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("httpeek.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        result = get_data_dir()
        assert result == tmp_path / ".local" / "share" / "httpeek"
        assert result.is_dir()

    def test_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom_data"
        monkeypatch.setattr("httpeek.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_DATA_HOME", str(custom))

        result = get_data_dir()
        assert result == custom / "httpeek"
        assert result.is_dir()

    def test_non_xdg_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("httpeek.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        result = get_data_dir()
        assert result == tmp_path / ".httpeek"
        assert result.is_dir()


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_defaults(self) -> None:
        config = resolve_config()
        assert config == ClientConfig()
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.powered_by == DEFAULT_POWERED_BY
        assert config.verify_ssl is True
        assert config.follow_redirects is True

    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_USER_AGENT", "env-agent/1")
        monkeypatch.setenv("HTTPEEK_POWERED_BY", "RUST")
        monkeypatch.setenv("HTTPEEK_VERIFY_SSL", "false")

        config = resolve_config()
        assert config.user_agent == "env-agent/1"
        assert config.powered_by == "RUST"
        assert config.verify_ssl is False

    def test_cli_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_USER_AGENT", "env-agent/1")
        monkeypatch.setenv("HTTPEEK_VERIFY_SSL", "yes")

        config = resolve_config(cli_user_agent="cli-agent/2", cli_insecure=True)
        assert config.user_agent == "cli-agent/2"
        assert config.verify_ssl is False

    def test_empty_env_values_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_USER_AGENT", "")
        monkeypatch.setenv("HTTPEEK_VERIFY_SSL", "")
        assert resolve_config() == ClientConfig()

    @pytest.mark.parametrize("raw", ["0", "False", "NO", "off"])
    def test_verify_ssl_false_values(self, raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_VERIFY_SSL", raw)
        assert resolve_config().verify_ssl is False

    def test_invalid_bool_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTPEEK_VERIFY_SSL", "maybe")
        with pytest.raises(ConfigError, match="HTTPEEK_VERIFY_SSL"):
            resolve_config()


class TestClientConfig:
    def test_default_headers(self) -> None:
        config = ClientConfig(user_agent="ua/1", powered_by="me")
        assert config.default_headers == {"X-Powered-By": "me", "User-Agent": "ua/1"}

    def test_default_user_agent_carries_version(self) -> None:
        from httpeek import __version__

        assert ClientConfig().user_agent == f"httpeek/{__version__}"
