"""Use cases."""

from scribe.application.use_cases.generate_summary import (
    SummaryGenerator,
    SummaryResult,
    SummaryStatus,
)
from scribe.application.use_cases.summarize_room import SummarizeRoomUseCase

__all__ = [
    "SummarizeRoomUseCase",
    "SummaryGenerator",
    "SummaryResult",
    "SummaryStatus",
]
