"""Outbound ports — webhook wire model and delivery interface."""

from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

# DeliveryResult.error_kind values
ERROR_TIMEOUT = "timeout"
ERROR_NETWORK = "network"
ERROR_HTTP_STATUS = "http_status"
ERROR_CONSTRUCTION = "construction"
ERROR_UNEXPECTED = "unexpected"


class PayloadAuthor(BaseModel):
    id: str
    username: str
    discriminator: str
    global_name: Optional[str] = None


class PayloadMention(BaseModel):
    id: str
    username: str


class PayloadAttachment(BaseModel):
    id: str
    name: str
    url: str


class OutboundPayload(BaseModel):
    """JSON body posted to the automation webhook."""

    content: str
    author: PayloadAuthor
    channel_id: str
    guild_id: str
    message_id: str
    mentions: List[PayloadMention] = []
    attachments: List[PayloadAttachment] = []
    timestamp: str

    model_config = ConfigDict(frozen=True)


@dataclass
class DeliveryResult:
    """Outcome of a single webhook POST."""

    success: bool
    status: Optional[int] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for webhook delivery backends. Must not raise."""

    async def post(self, payload: OutboundPayload) -> DeliveryResult: ...
