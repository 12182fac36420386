"""Buffer statistics entity."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class BufferStats:
    """Snapshot statistics of a room buffer.

    Attributes:
        count: Number of buffered messages.
        first_message_time: Timestamp of the oldest buffered message.
        last_message_time: Timestamp of the newest buffered message.
        participants: Distinct sender names.
    """

    count: int = 0
    first_message_time: datetime | None = None
    last_message_time: datetime | None = None
    participants: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self.count == 0
