"""Event dispatcher routing queued events to their handlers."""

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable

from scribe.domain.entities.event import Event, EventType

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], Awaitable[None]]


def event_handler(event_type: EventType) -> Callable[[EventHandler], EventHandler]:
    """Mark a coroutine (or coroutine method) as the handler of an event type.

    Usage:
        class MessageEventHandler:
            @event_handler(EventType.MESSAGE)
            async def handle(self, event: Event) -> None:
                ...

    Args:
        event_type: The event type this handler processes.

    Returns:
        Decorator function.
    """

    def decorator(func: EventHandler) -> EventHandler:
        func._event_type = event_type  # type: ignore[attr-defined]
        return func

    return decorator


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class EventDispatcher:
    """Dispatches events to the handlers registered for their type.

    Handlers of one type run in registration order. A failing handler is
    logged and does not prevent the remaining handlers from running.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[EventType, list[EventHandler]] = defaultdict(list)

    def register(self, event_type: EventType, handler: EventHandler) -> None:
        """Register a handler for an event type.

        Args:
            event_type: The event type to handle.
            handler: The handler coroutine function.
        """
        self._handlers[event_type].append(handler)
        logger.debug("Registered handler for %s: %s", event_type.value, _handler_name(handler))

    def register_handler(self, handler: EventHandler) -> None:
        """Register a handler decorated with @event_handler.

        Args:
            handler: The decorated handler (usually a bound method).

        Raises:
            ValueError: If the handler was not decorated.
        """
        event_type = getattr(handler, "_event_type", None)
        if not isinstance(event_type, EventType):
            raise ValueError(
                f"Handler {_handler_name(handler)} has no _event_type attribute. "
                "Use the @event_handler decorator."
            )
        self.register(event_type, handler)

    def has_handlers(self, event_type: EventType) -> bool:
        return bool(self._handlers.get(event_type))

    async def dispatch(self, event: Event) -> None:
        """Run every handler registered for the event's type.

        Args:
            event: The event to dispatch.
        """
        handlers = self._handlers.get(event.type)
        if not handlers:
            logger.warning("No handler registered for event type: %s", event.type.value)
            return

        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler %s for event %s",
                    _handler_name(handler),
                    event.type.value,
                )
