"""Summary trigger policy.

Decides whether a room's buffer should be summarized. The minimum message
floor is checked first and overrides every trigger, including the keyword.
Triggers are then tried in order: keyword, message volume, elapsed time
since the last summary.
"""

from datetime import datetime
from enum import Enum

from scribe.config import SummaryTriggerConfig


class TriggerReason(Enum):
    """Why a summary was triggered."""

    KEYWORD = "keyword"
    VOLUME = "volume"
    INTERVAL = "interval"


def evaluate_trigger(
    message_count: int,
    config: SummaryTriggerConfig,
    now: datetime,
    last_summary_time: datetime | None = None,
    triggered_by_keyword: bool = False,
) -> TriggerReason | None:
    """Evaluate the trigger policy.

    Args:
        message_count: Number of messages currently buffered for the room.
        config: Trigger configuration.
        now: Current time, comparable with last_summary_time.
        last_summary_time: When the room was last cleared, None if never.
        triggered_by_keyword: Whether the latest message carried the keyword.

    Returns:
        The reason of the first trigger that fired, or None.
    """
    if message_count < config.min_messages_for_summary:
        return None

    if triggered_by_keyword:
        return TriggerReason.KEYWORD

    if config.message_count > 0 and message_count >= config.message_count:
        return TriggerReason.VOLUME

    # No baseline until the first summary, so the interval measures the
    # time between summaries rather than time since the first message.
    if config.interval_minutes > 0 and last_summary_time is not None:
        if minutes_between(last_summary_time, now) >= config.interval_minutes:
            return TriggerReason.INTERVAL

    return None


def should_summarize(
    message_count: int,
    config: SummaryTriggerConfig,
    now: datetime,
    last_summary_time: datetime | None = None,
    triggered_by_keyword: bool = False,
) -> bool:
    """Boolean form of evaluate_trigger."""
    reason = evaluate_trigger(
        message_count,
        config,
        now,
        last_summary_time=last_summary_time,
        triggered_by_keyword=triggered_by_keyword,
    )
    return reason is not None


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60
