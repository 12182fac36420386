"""Per-room message buffer store."""

import logging
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone

from scribe.config import Config
from scribe.domain.entities import BufferedMessage, BufferStats
from scribe.domain.services.message_formatter import format_message_for_llm
from scribe.domain.services.trigger_policy import evaluate_trigger

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RoomBufferState:
    """Buffered messages of one room.

    Attributes:
        messages: Messages in arrival order, oldest first.
        last_summary_time: When the room was last cleared, None until then.
    """

    messages: deque[BufferedMessage] = field(default_factory=deque)
    last_summary_time: datetime | None = None


class FormattedMessages:
    """Lazy, restartable view of a buffer snapshot as transcript lines.

    Each iteration formats the snapshot again, one line per message.
    """

    def __init__(self, messages: tuple[BufferedMessage, ...]) -> None:
        self._messages = messages

    def __iter__(self) -> Iterator[str]:
        return (format_message_for_llm(message) for message in self._messages)

    def __len__(self) -> int:
        return len(self._messages)


class RoomBufferStore:
    """In-memory message buffers partitioned by room topic.

    Rooms are created lazily on their first message and live for the
    lifetime of the process. Every mutation happens on the event loop,
    one event at a time, so no locking is needed.
    """

    def __init__(self, config: Config, clock: Clock = _utc_now) -> None:
        """Initialize the store.

        Args:
            config: Application configuration (buffer size and triggers).
            clock: Returns the current time; stamped on clear().
        """
        self._max_buffer_size = config.max_buffer_size
        self._trigger_config = config.summary_trigger
        self._clock = clock
        self._rooms: dict[str, RoomBufferState] = {}

    def add(self, message: BufferedMessage) -> None:
        """Append a message to its room, evicting the oldest on overflow.

        Args:
            message: The message to buffer.
        """
        room = self._rooms.get(message.room_topic)
        if room is None:
            room = RoomBufferState()
            self._rooms[message.room_topic] = room

        room.messages.append(message)

        overflow = len(room.messages) - self._max_buffer_size
        if overflow > 0:
            for _ in range(overflow):
                room.messages.popleft()
            logger.info(
                "Removed %d old messages from room '%s' (max size: %d)",
                overflow,
                message.room_topic,
                self._max_buffer_size,
            )

        logger.debug(
            "Message added to room '%s'. Total: %d",
            message.room_topic,
            len(room.messages),
        )

    def get_messages(self, room_topic: str) -> list[BufferedMessage]:
        """Get a snapshot of a room's messages in arrival order.

        Returns:
            Independent copy; empty for unknown rooms.
        """
        room = self._rooms.get(room_topic)
        if room is None:
            return []
        return list(room.messages)

    def get_room_topics(self) -> set[str]:
        """Get the rooms that currently hold at least one message."""
        return {topic for topic, room in self._rooms.items() if room.messages}

    def get_last_summary_time(self, room_topic: str) -> datetime | None:
        room = self._rooms.get(room_topic)
        return room.last_summary_time if room is not None else None

    def clear(self, room_topic: str) -> None:
        """Empty a room's buffer and stamp its last summary time.

        Does nothing for a room that has no state yet.

        Args:
            room_topic: The room to clear.
        """
        room = self._rooms.get(room_topic)
        if room is None:
            return

        count = len(room.messages)
        room.messages.clear()
        room.last_summary_time = self._clock()
        logger.info("Cleared %d messages from room '%s'", count, room_topic)

    def should_summarize(
        self, room_topic: str, triggered_by_keyword: bool = False
    ) -> bool:
        """Evaluate the trigger policy for a room.

        Args:
            room_topic: The room to evaluate.
            triggered_by_keyword: Whether the latest message carried the keyword.

        Returns:
            True if a summary should be generated now.
        """
        room = self._rooms.get(room_topic)
        if room is None:
            return False

        count = len(room.messages)
        reason = evaluate_trigger(
            count,
            self._trigger_config,
            self._clock(),
            last_summary_time=room.last_summary_time,
            triggered_by_keyword=triggered_by_keyword,
        )
        if reason is None:
            if count < self._trigger_config.min_messages_for_summary:
                logger.debug(
                    "Not enough messages in room '%s' for summary (%d/%d)",
                    room_topic,
                    count,
                    self._trigger_config.min_messages_for_summary,
                )
            return False

        logger.info(
            "Summary triggered by %s in room '%s' (%d messages)",
            reason.value,
            room_topic,
            count,
        )
        return True

    def format_messages_for_llm(self, room_topic: str) -> FormattedMessages:
        """Format a room's messages as transcript lines.

        The snapshot is taken now; later add() calls do not affect it.

        Returns:
            Lazy iterable of "[HH:MM] sender: content" lines.
        """
        room = self._rooms.get(room_topic)
        messages = tuple(room.messages) if room is not None else ()
        return FormattedMessages(messages)

    def get_stats(self, room_topic: str) -> BufferStats:
        """Compute statistics over a room's current messages."""
        messages = self.get_messages(room_topic)
        if not messages:
            return BufferStats()

        return BufferStats(
            count=len(messages),
            first_message_time=messages[0].timestamp,
            last_message_time=messages[-1].timestamp,
            participants=frozenset(message.sender for message in messages),
        )
