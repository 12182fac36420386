"""Event handlers package."""

from scribe.application.handlers.message_handler import MessageEventHandler
from scribe.application.handlers.trigger_check_handler import (
    TriggerCheckEventHandler,
)

__all__ = [
    "MessageEventHandler",
    "TriggerCheckEventHandler",
]
