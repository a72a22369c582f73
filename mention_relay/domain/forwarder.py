"""MentionForwarder — filters mentions of the target bot and forwards them.

Pure domain logic: takes an InboundMessage, decides eligibility, shapes the
OutboundPayload and hands it to a WebhookPort. Stateless between calls.
"""

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from mention_relay.config import RelayConfig
from mention_relay.ports.inbound import InboundMessage
from mention_relay.ports.outbound import (
    ERROR_CONSTRUCTION,
    DeliveryResult,
    OutboundPayload,
    PayloadAttachment,
    PayloadAuthor,
    PayloadMention,
    WebhookPort,
)

STATUS_IGNORED = "ignored"
STATUS_FORWARDED = "forwarded"
STATUS_FAILED = "failed"

REASON_DIRECT_MESSAGE = "direct_message"
REASON_BOT_AUTHOR = "bot_author"
REASON_NOT_MENTIONED = "not_mentioned"


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class ForwardResult:
    """Outcome of handling one inbound message."""

    status: str
    reason: Optional[str] = None
    delivery: Optional[DeliveryResult] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None

    @property
    def forwarded(self) -> bool:
        return self.status == STATUS_FORWARDED


def ineligibility_reason(message: InboundMessage, target_bot_id: str) -> Optional[str]:
    """Return why a message must not be forwarded, or None if it should be."""
    if message.guild_id is None:
        return REASON_DIRECT_MESSAGE
    if message.author.bot:
        return REASON_BOT_AUTHOR
    # Only the gateway's mention set counts; "<@id>" in raw text is not scanned.
    if not message.mentions_user(target_bot_id):
        return REASON_NOT_MENTIONED
    return None


def is_eligible(message: InboundMessage, target_bot_id: str) -> bool:
    return ineligibility_reason(message, target_bot_id) is None


def format_timestamp(created_at: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T12:30:45.123Z."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    utc = created_at.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_payload(message: InboundMessage) -> OutboundPayload:
    if message.guild_id is None:
        raise ValueError(f"message {message.message_id} has no guild context")

    author = message.author
    return OutboundPayload(
        content=message.content,
        author=PayloadAuthor(
            id=author.id,
            username=author.username,
            discriminator=author.discriminator,
            global_name=author.global_name,
        ),
        channel_id=message.channel_id,
        guild_id=message.guild_id,
        message_id=message.message_id,
        mentions=[PayloadMention(id=m.id, username=m.username) for m in message.mentions],
        attachments=[
            PayloadAttachment(id=a.id, name=a.name, url=a.url) for a in message.attachments
        ],
        timestamp=format_timestamp(message.created_at),
    )


class MentionForwarder:
    """Forwards guild messages that @-mention the target bot to a webhook."""

    def __init__(self, config: RelayConfig, webhook: WebhookPort):
        self._config = config
        self._webhook = webhook

    @property
    def target_bot_id(self) -> str:
        return self._config.bot_id

    async def handle(self, message: InboundMessage) -> ForwardResult:
        """Filter, build and deliver. Never raises; single delivery attempt."""
        try:
            reason = ineligibility_reason(message, self._config.bot_id)
            if self._config.debug and reason in (None, REASON_NOT_MENTIONED):
                _log(f"Debug: mentioned={message.mentions_user(self._config.bot_id)}")
            if reason:
                return ForwardResult(status=STATUS_IGNORED, reason=reason)

            try:
                payload = build_payload(message)
            except Exception as e:
                _log(f"Error handling message: could not build payload: {e}")
                return ForwardResult(
                    status=STATUS_FAILED, error_kind=ERROR_CONSTRUCTION, error=str(e),
                )

            delivery = await self._webhook.post(payload)
            if not delivery.success:
                _log(f"Error handling message: {delivery.error}")
                return ForwardResult(
                    status=STATUS_FAILED,
                    delivery=delivery,
                    error_kind=delivery.error_kind,
                    error=delivery.error,
                )

            _log(f"Forwarded mention from @{message.author.username} in #{message.channel_id}")
            return ForwardResult(status=STATUS_FORWARDED, delivery=delivery)
        except Exception as e:
            _log(f"Error handling message: {e}")
            return ForwardResult(status=STATUS_FAILED, error=str(e))
