"""Domain service protocols."""

from collections.abc import Sequence
from typing import Protocol


class Summarizer(Protocol):
    """Summarization capability abstraction (provider-independent).

    Concrete backends are interchangeable and selected by configuration.
    """

    async def summarize(self, lines: Sequence[str]) -> str:
        """Condense a transcript into a summary.

        Args:
            lines: Transcript lines in chronological order.

        Returns:
            Summary text. An empty string means the service was reachable
            but produced no content.

        Raises:
            SummarizationError: If the service failed (network, timeout,
                malformed response, rate limiting).
        """
        ...


class MessagingService(Protocol):
    """Messaging abstraction (platform-independent).

    This protocol defines the interface for sending messages
    to any messaging platform (Slack, Discord, etc.).
    """

    async def send_message(self, room: str, text: str) -> None:
        """Send a message to a room.

        Args:
            room: Target room topic or platform channel ID.
            text: Message content.

        Raises:
            ChannelNotAccessibleError: If the room cannot be delivered to.
        """
        ...
