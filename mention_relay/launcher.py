"""Launcher for the mention relay bot."""

import sys
from typing import Mapping, Optional

from mention_relay.adapters.discord.adapter import MentionRelayBot
from mention_relay.adapters.webhook.client import WebhookClient
from mention_relay.config import ConfigError, RelayConfig
from mention_relay.domain.forwarder import MentionForwarder


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_bot(config: RelayConfig) -> MentionRelayBot:
    """Wire webhook client, forwarder and Discord client from config."""
    webhook = WebhookClient(config.webhook_url, timeout_seconds=config.timeout_seconds)
    forwarder = MentionForwarder(config, webhook)
    return MentionRelayBot(forwarder)


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """Load config, then connect. Exits 1 before connecting if config is incomplete."""
    try:
        config = RelayConfig.from_env(environ)
    except ConfigError as e:
        _log(str(e))
        return 1

    bot = build_bot(config)
    _log("Connecting to Discord gateway...")
    # discord.py's own log handler stays off; this process logs through _log.
    bot.run(config.discord_token, log_handler=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
