"""Message formatting utilities for summarization prompts and reports."""

from datetime import datetime

from scribe.domain.entities.message import BufferedMessage


def format_clock(timestamp: datetime) -> str:
    """Format a timestamp as local wall-clock HH:MM.

    Aware timestamps are converted to the local timezone; naive ones are
    taken as already local.
    """
    return timestamp.astimezone().strftime("%H:%M")


def format_message_for_llm(message: BufferedMessage) -> str:
    """Format a buffered message as one transcript line.

    Args:
        message: The message to format.

    Returns:
        Formatted string like "[12:00] alice: message text"
    """
    return f"[{format_clock(message.timestamp)}] {message.sender}: {message.content}"


def format_time_range(start: datetime | None, end: datetime | None) -> str:
    """Format the covered time range of a buffer.

    Returns:
        "HH:MM - HH:MM", or an empty string if either end is unknown.
    """
    if start is None or end is None:
        return ""
    return f"{format_clock(start)} - {format_clock(end)}"
