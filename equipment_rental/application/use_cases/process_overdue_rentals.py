import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import BatchResult
from equipment_rental.config import Settings, get_settings
from equipment_rental.domain.events import DomainEvent, RentalOverdue


class ProcessOverdueRentalsUseCase:
    """Marca como OVERDUE toda renta activa cuyo periodo ya terminó."""

    def __init__(
        self,
        rental_repo: RentalRepo,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
        settings: Settings | None = None,
    ) -> None:
        self._rental_repo = rental_repo
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._settings = settings or get_settings()
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> BatchResult:
        batch = BatchResult()
        events: list[DomainEvent] = []

        async with self._transaction_manager.start():
            now = self._clock.now()
            rate = self._settings.daily_late_fee_rate

            for rental in await self._rental_repo.list_overdue(now):
                result = rental.mark_as_overdue(rate, now)
                if result.is_failure:
                    batch.failed[str(rental.id)] = result.error.code
                    continue
                await self._rental_repo.save(rental)
                events.append(RentalOverdue.create(self._id_generator.generate_uuid, now, rental))
                batch.processed.append(str(rental.id))

            await self._event_publisher.publish_many(events)

        self._logger.info(
            "Overdue rentals processed",
            extra={"processed": len(batch.processed), "failed": len(batch.failed)},
        )
        return batch
