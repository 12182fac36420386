"""Event system infrastructure."""

from scribe.infrastructure.events.dispatcher import EventDispatcher, event_handler
from scribe.infrastructure.events.loop import EventLoop
from scribe.infrastructure.events.queue import EventQueue
from scribe.infrastructure.events.scheduler import EventScheduler

__all__ = [
    "EventDispatcher",
    "EventLoop",
    "EventQueue",
    "EventScheduler",
    "event_handler",
]
