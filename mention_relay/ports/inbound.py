"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class AuthorInfo:
    id: str
    username: str
    discriminator: str = ""
    global_name: Optional[str] = None
    bot: bool = False


@dataclass(frozen=True)
class MentionRef:
    id: str
    username: str


@dataclass(frozen=True)
class AttachmentRef:
    id: str
    name: str
    url: str


@dataclass(frozen=True)
class InboundMessage:
    """A "message created" event as delivered by the gateway.

    ``guild_id`` is None for direct messages.
    """

    message_id: str
    channel_id: str
    guild_id: Optional[str]
    author: AuthorInfo
    content: str
    created_at: datetime
    mentions: Tuple[MentionRef, ...] = ()
    attachments: Tuple[AttachmentRef, ...] = ()

    def mentions_user(self, user_id: str) -> bool:
        return any(m.id == user_id for m in self.mentions)
