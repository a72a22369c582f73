"""Tests for RelayConfig loading."""

import dataclasses

import pytest

from mention_relay.config import WEBHOOK_TIMEOUT_SECONDS, ConfigError, RelayConfig

FULL_ENV = {
    "DISCORD_TOKEN": "tok-secret",
    "BOT_ID": "123456789012345678",
    "N8N_WEBHOOK": "https://n8n.example/webhook/discord-trigger",
}


class TestFromEnv:
    def test_all_present(self):
        c = RelayConfig.from_env(FULL_ENV)
        assert c.discord_token == "tok-secret"
        assert c.bot_id == "123456789012345678"
        assert c.webhook_url == "https://n8n.example/webhook/discord-trigger"
        assert c.timeout_seconds == WEBHOOK_TIMEOUT_SECONDS == 10
        assert c.debug is False

    def test_values_stripped(self):
        env = {k: f"  {v}\n" for k, v in FULL_ENV.items()}
        c = RelayConfig.from_env(env)
        assert c.bot_id == "123456789012345678"

    @pytest.mark.parametrize("name", ["DISCORD_TOKEN", "BOT_ID", "N8N_WEBHOOK"])
    def test_missing_one(self, name):
        env = {k: v for k, v in FULL_ENV.items() if k != name}
        with pytest.raises(ConfigError) as exc:
            RelayConfig.from_env(env)
        assert exc.value.missing == (name,)
        assert name in str(exc.value)

    def test_blank_counts_as_missing(self):
        env = dict(FULL_ENV, BOT_ID="   ")
        with pytest.raises(ConfigError) as exc:
            RelayConfig.from_env(env)
        assert exc.value.missing == ("BOT_ID",)

    def test_missing_all(self):
        with pytest.raises(ConfigError) as exc:
            RelayConfig.from_env({})
        assert exc.value.missing == ("DISCORD_TOKEN", "BOT_ID", "N8N_WEBHOOK")

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)

    @pytest.mark.parametrize("raw,expected", [
        ("1", True), ("true", True), ("YES", True), ("on", True),
        ("0", False), ("", False), ("nope", False),
    ])
    def test_debug_flag(self, raw, expected):
        c = RelayConfig.from_env(dict(FULL_ENV, RELAY_DEBUG=raw))
        assert c.debug is expected

    def test_reads_process_env(self, monkeypatch):
        for k, v in FULL_ENV.items():
            monkeypatch.setenv(k, v)
        c = RelayConfig.from_env(dotenv=False)
        assert c.webhook_url == FULL_ENV["N8N_WEBHOOK"]


class TestRelayConfig:
    def test_frozen(self):
        c = RelayConfig.from_env(FULL_ENV)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.bot_id = "other"

    def test_repr_hides_token(self):
        c = RelayConfig.from_env(FULL_ENV)
        assert "tok-secret" not in repr(c)
        assert "123456789012345678" in repr(c)
