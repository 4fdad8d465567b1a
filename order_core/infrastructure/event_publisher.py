"""
In-memory Domain Event Publisher (Infrastructure Layer).

Keeps published events and notifies subscribers. Stands in for a message
broker publisher in tests and local runs.
"""
import logging
from collections.abc import Callable
from typing import Dict, List, Optional

from order_core.domain.event_publisher import DomainEventPublisher
from order_core.domain.events.base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryDomainEventPublisher(DomainEventPublisher):
    """
    In-memory publisher implementation.

    Subscribers register for an event type name (``"OrderPaidEvent"``) or for
    every event (``event_type=None``). A failing subscriber is logged and
    does not stop delivery to the others.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Optional[str], List[EventHandler]] = {}
        self._published: List[DomainEvent] = []

    @property
    def published_events(self) -> List[DomainEvent]:
        """Copy of every event published so far, in publish order."""
        return list(self._published)

    def subscribe(self, handler: EventHandler, event_type: Optional[str] = None) -> None:
        """Subscribe a handler to an event type name, or to all events.

        Args:
            handler: Callable receiving the event
            event_type: Event class name, or None for every event
        """
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered event subscriber: {getattr(handler, '__name__', handler)}")

    def publish(self, event: DomainEvent) -> None:
        """Record an event and notify its subscribers.

        Args:
            event: Domain event to publish
        """
        self._published.append(event)
        logger.info(
            f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})"
        )
        self._notify_subscribers(event)

    def publish_all(self, events: List[DomainEvent]) -> None:
        if not events:
            return
        logger.info(f"Publishing {len(events)} events")
        for event in events:
            self.publish(event)

    def clear(self) -> None:
        """Forget published events (subscribers stay registered)."""
        self._published.clear()

    def _notify_subscribers(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(event.event_type, []) + self._handlers.get(None, [])
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                logger.error(
                    f"Event subscriber failed for {event.event_type}: {exc}",
                    exc_info=True,
                )
