"""Event entity for event-driven architecture."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class EventType(Enum):
    """Event types for the event-driven system."""

    MESSAGE = "message"
    TRIGGER_CHECK = "trigger_check"


@dataclass(frozen=True)
class Event:
    """Domain event.

    Attributes:
        type: Event type.
        payload: Event-specific data.
        created_at: Event creation time.
    """

    type: EventType
    payload: dict[str, Any]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def get_identity_key(self) -> str:
        """Get identity key for duplicate detection.

        Every message gets its own key so that no message is ever replaced;
        trigger checks share one key so pending ticks coalesce.

        Returns:
            Unique key based on event type and payload.
        """
        if self.type == EventType.MESSAGE:
            room_topic = self.payload.get("room_topic", "")
            message_id = self.payload.get("message_id", "")
            return f"message:{room_topic}:{message_id}"
        elif self.type == EventType.TRIGGER_CHECK:
            return "trigger_check:workspace"
        return f"{self.type.value}:unknown"
