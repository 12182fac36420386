"""Handler for TRIGGER_CHECK events."""

import logging

from scribe.application.services.room_buffer import RoomBufferStore
from scribe.application.use_cases.summarize_room import SummarizeRoomUseCase
from scribe.domain.entities import Event
from scribe.domain.entities.event import EventType
from scribe.infrastructure.events.dispatcher import event_handler

logger = logging.getLogger(__name__)


class TriggerCheckEventHandler:
    """Handler for TRIGGER_CHECK events.

    Re-evaluates the time-based trigger for every known room.
    """

    def __init__(
        self,
        buffer: RoomBufferStore,
        summarize_room_use_case: SummarizeRoomUseCase,
    ) -> None:
        """Initialize the handler.

        Args:
            buffer: Room buffer store.
            summarize_room_use_case: Use case run for each due room.
        """
        self._buffer = buffer
        self._summarize_room_use_case = summarize_room_use_case

    @event_handler(EventType.TRIGGER_CHECK)
    async def handle(self, event: Event) -> None:
        """Handle TRIGGER_CHECK event.

        Args:
            event: The TRIGGER_CHECK event.
        """
        room_topics = sorted(self._buffer.get_room_topics())
        logger.debug("Checking time triggers for %d rooms", len(room_topics))

        for room_topic in room_topics:
            if not self._buffer.should_summarize(room_topic):
                continue

            logger.info("Processing scheduled summary for room '%s'", room_topic)
            try:
                await self._summarize_room_use_case.execute(room_topic)
            except Exception:
                logger.exception("Error in scheduled summary for room '%s'", room_topic)
