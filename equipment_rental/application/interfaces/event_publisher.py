"""Interface EventPublisher - Puerto para publicar eventos de dominio."""

from typing import Awaitable, Callable, Sequence

from equipment_rental.domain.events import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
Unsubscribe = Callable[[], None]


class EventPublisher:
    """
    Puerto de publicación de eventos.

    Los casos de uso publican después de guardar los agregados. Los
    handlers se registran por tipo de evento o para todos los eventos.
    """

    async def publish(self, event: DomainEvent) -> None:
        raise NotImplementedError

    async def publish_many(self, events: Sequence[DomainEvent]) -> None:
        raise NotImplementedError

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> Unsubscribe:
        """
        Registra un handler para un tipo de evento.

        Returns:
            Callable que elimina la suscripción.
        """
        raise NotImplementedError

    def subscribe_to_all(self, handler: EventHandler) -> Unsubscribe:
        raise NotImplementedError

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        raise NotImplementedError

    def has_handlers(self, event_type: type[DomainEvent]) -> bool:
        raise NotImplementedError
