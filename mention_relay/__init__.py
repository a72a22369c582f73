"""Mention Relay — forwards Discord @-mentions of a bot to an automation webhook."""

from mention_relay.config import __version__, ConfigError, RelayConfig
from mention_relay.domain.forwarder import ForwardResult, MentionForwarder
from mention_relay.ports.inbound import InboundMessage
from mention_relay.ports.outbound import DeliveryResult, OutboundPayload

__all__ = [
    "__version__",
    "ConfigError",
    "RelayConfig",
    "ForwardResult",
    "MentionForwarder",
    "InboundMessage",
    "DeliveryResult",
    "OutboundPayload",
]
