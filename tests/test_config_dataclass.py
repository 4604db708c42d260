"""Tests for CONFIG parsing and the typed AppConfig dataclass."""

import pytest

from channelkit.config import CONFIG, AppConfig, _env_flag, _env_page_size


class TestEnvParsing:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_flag_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("CHANNELKIT_TEST_FLAG", raw)
        assert _env_flag("CHANNELKIT_TEST_FLAG", "false") is True

    def test_flag_default(self, monkeypatch):
        monkeypatch.delenv("CHANNELKIT_TEST_FLAG", raising=False)
        assert _env_flag("CHANNELKIT_TEST_FLAG", "false") is False

    def test_page_size(self, monkeypatch):
        monkeypatch.setenv("CHANNELKIT_TEST_LIMIT", "30")
        assert _env_page_size("CHANNELKIT_TEST_LIMIT", 50) == 30

    def test_page_size_garbage_falls_back(self, monkeypatch, capsys):
        monkeypatch.setenv("CHANNELKIT_TEST_LIMIT", "lots")
        assert _env_page_size("CHANNELKIT_TEST_LIMIT", 50) == 50
        assert "falling back" in capsys.readouterr().err

    @pytest.mark.parametrize("raw, expected", [("0", 1), ("250", 100)])
    def test_page_size_clamped(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CHANNELKIT_TEST_LIMIT", raw)
        assert _env_page_size("CHANNELKIT_TEST_LIMIT", 50) == expected


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.strict_capabilities is False
        assert c.history_limit == 50
        assert c.reaction_limit == 100
        assert c.log_drops is True
        assert c.discord_token == ""

    def test_from_env_mirrors_config(self):
        c = AppConfig.from_env()
        assert c.strict_capabilities == CONFIG["strict_capabilities"]
        assert c.history_limit == CONFIG["history_limit"]
        assert 1 <= c.reaction_limit <= 100

    def test_custom(self):
        c = AppConfig(strict_capabilities=True, history_limit=10)
        assert c.strict_capabilities is True
        assert c.history_limit == 10
