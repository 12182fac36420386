"""Buffered message entities."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BufferedMessage:
    """A chat message accepted into a room buffer.

    Attributes:
        id: Platform-specific message ID (opaque, unique).
        timestamp: When the message was sent (source clock).
        sender: Display name of the author.
        content: Message text (never blank).
        room_topic: Name of the room, used as the buffer partition key.
    """

    id: str
    timestamp: datetime
    sender: str
    content: str
    room_topic: str


@dataclass(frozen=True)
class InboundMessage:
    """A normalized inbound message plus its keyword-trigger flag.

    Attributes:
        message: The record to buffer.
        triggered_by_keyword: Whether the raw text contains the summary keyword.
    """

    message: BufferedMessage
    triggered_by_keyword: bool = False
