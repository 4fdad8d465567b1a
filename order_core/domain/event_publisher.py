"""
Domain Event Publisher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import List

from .events.base import DomainEvent


class DomainEventPublisher(ABC):
    """
    Receives the events produced by OrderDomainService.

    Implemented in the infrastructure layer; how events are serialized and
    dispatched is up to the implementation.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """

    @abstractmethod
    def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
