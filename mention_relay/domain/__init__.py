"""Domain layer — pure Python, no framework dependencies."""

from mention_relay.domain.forwarder import (
    ForwardResult,
    MentionForwarder,
    build_payload,
    format_timestamp,
    ineligibility_reason,
    is_eligible,
)

__all__ = [
    "ForwardResult",
    "MentionForwarder",
    "build_payload",
    "format_timestamp",
    "ineligibility_reason",
    "is_eligible",
]
