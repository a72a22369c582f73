"""Webhook client using aiohttp (single JSON POST, no retry)."""

import asyncio

import aiohttp

from mention_relay.config import WEBHOOK_TIMEOUT_SECONDS
from mention_relay.ports.outbound import (
    ERROR_HTTP_STATUS,
    ERROR_NETWORK,
    ERROR_TIMEOUT,
    ERROR_UNEXPECTED,
    DeliveryResult,
    OutboundPayload,
)

_MAX_ERROR_BODY = 500


class WebhookClient:
    """Async client posting OutboundPayload to an automation webhook."""

    def __init__(self, url: str, timeout_seconds: float = WEBHOOK_TIMEOUT_SECONDS):
        self.url = url
        self.timeout_seconds = timeout_seconds

    async def post(self, payload: OutboundPayload) -> DeliveryResult:
        """POST the payload once. Failures come back classified, never raised."""
        headers = {"Content-Type": "application/json"}
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.url,
                    headers=headers,
                    json=payload.model_dump(),
                ) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text(errors="replace")
                        return DeliveryResult(
                            success=False,
                            status=resp.status,
                            error_kind=ERROR_HTTP_STATUS,
                            error=f"HTTP {resp.status}: {body[:_MAX_ERROR_BODY]}",
                        )
                    return DeliveryResult(success=True, status=resp.status)
        except asyncio.TimeoutError:
            return DeliveryResult(
                success=False,
                error_kind=ERROR_TIMEOUT,
                error=f"Timed out after {self.timeout_seconds}s",
            )
        except aiohttp.ClientError as e:
            return DeliveryResult(
                success=False, error_kind=ERROR_NETWORK, error=str(e) or type(e).__name__,
            )
        except Exception as e:
            return DeliveryResult(
                success=False, error_kind=ERROR_UNEXPECTED, error=f"{type(e).__name__}: {e}",
            )
