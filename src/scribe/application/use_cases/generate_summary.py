"""Summary generation use case."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from scribe.application.services.room_buffer import RoomBufferStore
from scribe.domain.entities import BufferStats
from scribe.domain.exceptions import SummarizationError
from scribe.domain.services import Summarizer
from scribe.domain.services.message_formatter import format_time_range

logger = logging.getLogger(__name__)

NOTHING_TO_SUMMARIZE = "No messages to summarize yet."
NO_CONTENT_NOTICE = (
    "The summarizer returned no content for {count} messages in '{room}'. "
    "The messages are kept for the next summary."
)
ERROR_REPORT = "Failed to generate meeting minutes for '{room}': {reason}"


class SummaryStatus(Enum):
    """Outcome of a summary generation."""

    SUCCESS = "success"
    EMPTY_BUFFER = "empty_buffer"
    NO_CONTENT = "no_content"
    FAILED = "failed"


@dataclass(frozen=True)
class SummaryResult:
    """Report text plus the outcome that produced it.

    Attributes:
        text: Message to deliver to the room (report, notice or error).
        status: Outcome of the generation.
        message_count: Number of messages that fed the summary.
    """

    text: str
    status: SummaryStatus
    message_count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status is SummaryStatus.SUCCESS


class SummaryGenerator:
    """Builds meeting-minute reports from a room's buffer.

    Never clears the buffer and never raises for summarizer failures;
    the caller decides what to do with the result.
    """

    def __init__(
        self,
        buffer: RoomBufferStore,
        summarizer: Summarizer,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            buffer: Room buffer store to read from.
            summarizer: External summarization capability.
            clock: Returns the current time for the report date.
        """
        self._buffer = buffer
        self._summarizer = summarizer
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def generate(self, room_topic: str) -> SummaryResult:
        """Generate a report for a room.

        Args:
            room_topic: The room to summarize.

        Returns:
            SummaryResult with the report or a user-facing notice.
        """
        stats = self._buffer.get_stats(room_topic)
        if stats.is_empty:
            return SummaryResult(
                text=NOTHING_TO_SUMMARIZE, status=SummaryStatus.EMPTY_BUFFER
            )

        logger.info(
            "Generating summary for room '%s': %d messages, %d participants, %s",
            room_topic,
            stats.count,
            len(stats.participants),
            format_time_range(stats.first_message_time, stats.last_message_time),
        )

        # Materialize before awaiting so messages added meanwhile stay out.
        lines = list(self._buffer.format_messages_for_llm(room_topic))

        try:
            summary = await self._summarizer.summarize(lines)
        except SummarizationError as e:
            logger.error("Error generating summary for room '%s': %s", room_topic, e)
            return SummaryResult(
                text=ERROR_REPORT.format(room=room_topic, reason=e.reason),
                status=SummaryStatus.FAILED,
                message_count=stats.count,
            )

        if not summary.strip():
            logger.warning("Summarizer returned no content for room '%s'", room_topic)
            return SummaryResult(
                text=NO_CONTENT_NOTICE.format(count=stats.count, room=room_topic),
                status=SummaryStatus.NO_CONTENT,
                message_count=stats.count,
            )

        report = "\n\n".join(
            [
                self._build_header(room_topic, stats),
                summary.strip(),
                self._build_footer(stats),
            ]
        )
        logger.info(
            "Summary generated for room '%s' (%d chars)", room_topic, len(report)
        )
        return SummaryResult(
            text=report, status=SummaryStatus.SUCCESS, message_count=stats.count
        )

    def _build_header(self, room_topic: str, stats: BufferStats) -> str:
        date = self._clock().astimezone().strftime("%A, %B %d, %Y")
        time_range = format_time_range(
            stats.first_message_time, stats.last_message_time
        )
        return (
            f"# Meeting Minutes: {room_topic}\n"
            f"Date: {date}\n"
            f"Time: {time_range}"
        )

    def _build_footer(self, stats: BufferStats) -> str:
        return (
            f"---\nStats: {stats.count} messages, "
            f"{len(stats.participants)} participants"
        )
