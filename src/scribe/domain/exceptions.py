"""Domain exceptions."""


class SummarizationError(Exception):
    """Raised when the summarization capability cannot produce a summary.

    Covers network failures, timeouts, malformed responses and rate limiting.
    A reachable service that returns no content is not an error.
    """

    def __init__(self, reason: str) -> None:
        """Initialize.

        Args:
            reason: Human-readable failure reason.
        """
        self.reason = reason
        super().__init__(reason)


class ChannelNotAccessibleError(Exception):
    """Raised when a room cannot be delivered to.

    Happens when the bot left the channel, the channel was archived,
    or the room name cannot be resolved.
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """Initialize.

        Args:
            channel_id: The channel (or room topic) that is not accessible.
            message: Optional error message.
        """
        self.channel_id = channel_id
        super().__init__(message or f"Channel {channel_id} is not accessible")
