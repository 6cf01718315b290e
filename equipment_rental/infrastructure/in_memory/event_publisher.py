"""Publicador de eventos en memoria."""

import logging
from typing import Sequence

from equipment_rental.application.interfaces.event_publisher import (
    EventHandler,
    EventPublisher,
    Unsubscribe,
)
from equipment_rental.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """
    Despacha eventos a los handlers registrados en el mismo proceso.

    Conserva los eventos publicados para inspección en tests. Un handler
    que falla se registra en el log y no impide que los demás se ejecuten.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = {}
        self._global_handlers: list[EventHandler] = []
        self._published: list[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self._published.append(event)
        handlers = [*self._handlers.get(type(event), []), *self._global_handlers]
        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    extra={"event_type": event.event_type, "event_id": event.event_id},
                )

    async def publish_many(self, events: Sequence[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> Unsubscribe:
        self._handlers.setdefault(event_type, []).append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def subscribe_to_all(self, handler: EventHandler) -> Unsubscribe:
        self._global_handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return _unsubscribe

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return
        handlers.remove(handler)
        if not handlers:
            del self._handlers[event_type]

    def clear(self) -> None:
        """Elimina todos los handlers; los eventos publicados se conservan."""
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        return len(self._handlers.get(event_type, []))

    def has_handlers(self, event_type: type[DomainEvent]) -> bool:
        return self.handler_count(event_type) > 0

    # === Inspección (testing) ===

    @property
    def published_events(self) -> list[DomainEvent]:
        return list(self._published)

    def published_of_type(self, event_type: type[DomainEvent]) -> list[DomainEvent]:
        return [e for e in self._published if isinstance(e, event_type)]

    def clear_published_events(self) -> None:
        self._published.clear()
