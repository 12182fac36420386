"""Handler for MESSAGE events."""

import logging

from scribe.application.services.room_buffer import RoomBufferStore
from scribe.application.use_cases.summarize_room import SummarizeRoomUseCase
from scribe.domain.entities import BufferedMessage, Event
from scribe.domain.entities.event import EventType
from scribe.infrastructure.events.dispatcher import event_handler

logger = logging.getLogger(__name__)


class MessageEventHandler:
    """Handler for MESSAGE events.

    Buffers the message and summarizes its room when a trigger fires.
    """

    def __init__(
        self,
        buffer: RoomBufferStore,
        summarize_room_use_case: SummarizeRoomUseCase,
    ) -> None:
        """Initialize the handler.

        Args:
            buffer: Room buffer store.
            summarize_room_use_case: Use case run when a trigger fires.
        """
        self._buffer = buffer
        self._summarize_room_use_case = summarize_room_use_case

    @event_handler(EventType.MESSAGE)
    async def handle(self, event: Event) -> None:
        """Handle MESSAGE event.

        Args:
            event: The MESSAGE event. Payload carries "message"
                (BufferedMessage) and "triggered_by_keyword" (bool).
        """
        message: BufferedMessage = event.payload["message"]
        triggered_by_keyword = bool(event.payload.get("triggered_by_keyword", False))

        self._buffer.add(message)

        if not self._buffer.should_summarize(message.room_topic, triggered_by_keyword):
            return

        logger.info(
            "Summarizing room '%s' after message %s", message.room_topic, message.id
        )
        await self._summarize_room_use_case.execute(message.room_topic)
