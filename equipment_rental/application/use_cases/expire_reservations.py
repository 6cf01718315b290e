import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import BatchResult
from equipment_rental.domain.events import DomainEvent, ReservationExpired


class ExpireReservationsUseCase:
    """Marca como EXPIRED las reservaciones abiertas cuyo periodo terminó."""

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> BatchResult:
        batch = BatchResult()
        events: list[DomainEvent] = []

        async with self._transaction_manager.start():
            now = self._clock.now()
            for reservation in await self._reservation_repo.list_expired(now):
                result = reservation.mark_as_expired(now)
                if result.is_failure:
                    batch.failed[str(reservation.id)] = result.error.code
                    continue
                await self._reservation_repo.save(reservation)
                events.append(
                    ReservationExpired.create(self._id_generator.generate_uuid, now, reservation)
                )
                batch.processed.append(str(reservation.id))

            await self._event_publisher.publish_many(events)

        self._logger.info(
            "Reservations expired",
            extra={"processed": len(batch.processed), "failed": len(batch.failed)},
        )
        return batch
