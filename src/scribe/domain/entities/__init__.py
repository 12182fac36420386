"""Domain entities."""

from scribe.domain.entities.buffer_stats import BufferStats
from scribe.domain.entities.event import Event, EventType
from scribe.domain.entities.message import BufferedMessage, InboundMessage

__all__ = [
    "BufferStats",
    "BufferedMessage",
    "Event",
    "EventType",
    "InboundMessage",
]
