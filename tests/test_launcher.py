"""Tests for startup wiring."""

from unittest.mock import MagicMock, patch

from mention_relay.adapters.discord.adapter import MentionRelayBot
from mention_relay.adapters.webhook.client import WebhookClient
from mention_relay.config import RelayConfig
from mention_relay.launcher import build_bot, main

FULL_ENV = {
    "DISCORD_TOKEN": "tok-secret",
    "BOT_ID": "123456789012345678",
    "N8N_WEBHOOK": "https://n8n.example/webhook/discord-trigger",
}


class TestMain:
    def test_missing_config_exits_before_connecting(self, capsys):
        with patch("mention_relay.launcher.build_bot") as build:
            code = main({"DISCORD_TOKEN": "tok"})

        assert code == 1
        build.assert_not_called()
        err = capsys.readouterr().err
        assert "BOT_ID" in err
        assert "N8N_WEBHOOK" in err

    def test_runs_bot_with_token(self):
        fake_bot = MagicMock()
        with patch("mention_relay.launcher.build_bot", return_value=fake_bot) as build:
            code = main(FULL_ENV)

        assert code == 0
        config = build.call_args[0][0]
        assert config.bot_id == "123456789012345678"
        fake_bot.run.assert_called_once_with("tok-secret", log_handler=None)


class TestBuildBot:
    def test_wiring(self):
        config = RelayConfig.from_env(FULL_ENV)
        bot = build_bot(config)

        assert isinstance(bot, MentionRelayBot)
        forwarder = bot._forwarder
        assert forwarder.target_bot_id == "123456789012345678"
        webhook = forwarder._webhook
        assert isinstance(webhook, WebhookClient)
        assert webhook.url == FULL_ENV["N8N_WEBHOOK"]
        assert webhook.timeout_seconds == 10
