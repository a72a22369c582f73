"""Port interfaces (Hexagonal Architecture)."""

from mention_relay.ports.inbound import AttachmentRef, AuthorInfo, InboundMessage, MentionRef
from mention_relay.ports.outbound import (
    DeliveryResult,
    OutboundPayload,
    PayloadAttachment,
    PayloadAuthor,
    PayloadMention,
    WebhookPort,
)

__all__ = [
    "AttachmentRef",
    "AuthorInfo",
    "InboundMessage",
    "MentionRef",
    "DeliveryResult",
    "OutboundPayload",
    "PayloadAttachment",
    "PayloadAuthor",
    "PayloadMention",
    "WebhookPort",
]
