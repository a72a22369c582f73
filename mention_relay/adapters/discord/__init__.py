from mention_relay.adapters.discord.adapter import MentionRelayBot, relay_intents, to_inbound

__all__ = ["MentionRelayBot", "relay_intents", "to_inbound"]
