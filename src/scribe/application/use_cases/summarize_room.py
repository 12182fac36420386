"""Summarize-and-deliver use case."""

import logging

from scribe.application.services.room_buffer import RoomBufferStore
from scribe.application.use_cases.generate_summary import SummaryGenerator
from scribe.domain.services import MessagingService

logger = logging.getLogger(__name__)

DELIVERY_ERROR_NOTICE = (
    "Failed to deliver meeting minutes for '{room}', will retry later. Error: {error}"
)


class SummarizeRoomUseCase:
    """Generate a room's summary, deliver it, and clear the buffer.

    The buffer is cleared only when generation succeeded and the send call
    returned without error. Otherwise the messages stay for the next trigger.
    """

    def __init__(
        self,
        buffer: RoomBufferStore,
        generator: SummaryGenerator,
        messaging_service: MessagingService,
        destination: str | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            buffer: Room buffer store.
            generator: Summary generator.
            messaging_service: Delivery service.
            destination: Fixed delivery target; None sends to the originating room.
        """
        self._buffer = buffer
        self._generator = generator
        self._messaging_service = messaging_service
        self._destination = destination

    async def execute(self, room_topic: str) -> bool:
        """Summarize a room and deliver the report.

        Args:
            room_topic: The room to summarize.

        Returns:
            True if the report was delivered and the buffer cleared.
        """
        result = await self._generator.generate(room_topic)
        destination = self._destination or room_topic

        try:
            await self._messaging_service.send_message(destination, result.text)
        except Exception as e:
            logger.exception(
                "Error sending summary for room '%s' to '%s'", room_topic, destination
            )
            await self._send_error_notice(destination, room_topic, e)
            return False

        if not result.succeeded:
            logger.info(
                "Summary for room '%s' not completed (%s); buffer kept",
                room_topic,
                result.status.value,
            )
            return False

        self._buffer.clear(room_topic)
        logger.info("Summary sent successfully for room '%s'", room_topic)
        return True

    async def _send_error_notice(
        self, destination: str, room_topic: str, error: Exception
    ) -> None:
        try:
            await self._messaging_service.send_message(
                destination,
                DELIVERY_ERROR_NOTICE.format(room=room_topic, error=error),
            )
        except Exception:
            logger.exception("Failed to send error notice to '%s'", destination)
