"""Domain services."""

from scribe.domain.services.intake_filter import (
    contains_keyword,
    is_blank,
    is_target_room,
)
from scribe.domain.services.message_formatter import (
    format_clock,
    format_message_for_llm,
    format_time_range,
)
from scribe.domain.services.protocols import MessagingService, Summarizer
from scribe.domain.services.trigger_policy import (
    TriggerReason,
    evaluate_trigger,
    should_summarize,
)

__all__ = [
    "MessagingService",
    "Summarizer",
    "TriggerReason",
    "contains_keyword",
    "evaluate_trigger",
    "format_clock",
    "format_message_for_llm",
    "format_time_range",
    "is_blank",
    "is_target_room",
    "should_summarize",
]
