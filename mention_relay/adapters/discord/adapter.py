"""Discord adapter — bridges discord.Client to MentionForwarder.

MentionRelayBot is a thin discord.Client subclass that converts each
discord.Message to an InboundMessage and delegates to the forwarder.
"""

import sys

import discord

from mention_relay.domain.forwarder import STATUS_FAILED, ForwardResult, MentionForwarder
from mention_relay.ports.inbound import AttachmentRef, AuthorInfo, InboundMessage, MentionRef


def _log(msg: str):
    print(msg, file=sys.stderr)


def relay_intents() -> discord.Intents:
    """Guild + guild message + message content only."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


def to_inbound(message: discord.Message) -> InboundMessage:
    """Convert a Discord message to platform-agnostic InboundMessage."""
    author = message.author
    return InboundMessage(
        message_id=str(message.id),
        channel_id=str(message.channel.id),
        guild_id=str(message.guild.id) if message.guild else None,
        author=AuthorInfo(
            id=str(author.id),
            username=author.name,
            discriminator=author.discriminator or "",
            global_name=getattr(author, "global_name", None),
            bot=bool(author.bot),
        ),
        content=message.content,
        created_at=message.created_at,
        mentions=tuple(MentionRef(id=str(u.id), username=u.name) for u in message.mentions),
        attachments=tuple(
            AttachmentRef(id=str(a.id), name=a.filename, url=a.url) for a in message.attachments
        ),
    )


class MentionRelayBot(discord.Client):
    """Listens for guild messages and hands each one to MentionForwarder."""

    def __init__(self, forwarder: MentionForwarder, **discord_kwargs):
        super().__init__(intents=relay_intents(), **discord_kwargs)
        self._forwarder = forwarder

    async def on_ready(self):
        _log(f"Logged in as {self.user} (id: {self.user.id if self.user else '?'})")
        _log(f"Watching mentions of BOT_ID={self._forwarder.target_bot_id}")

    async def on_message(self, message: discord.Message):
        await self.relay(message)

    async def relay(self, message: discord.Message) -> ForwardResult:
        """Convert and forward; the gateway never sees an exception from here."""
        try:
            return await self._forwarder.handle(to_inbound(message))
        except Exception as e:
            _log(f"Error handling message: {e}")
            return ForwardResult(status=STATUS_FAILED, error=str(e))
