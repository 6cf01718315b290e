import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import CancelReservationCommand
from equipment_rental.domain.entities.reservation import Reservation
from equipment_rental.domain.errors import ReservationNotFoundError
from equipment_rental.domain.events import ReservationCancelled
from equipment_rental.domain.value_objects.identifiers import reservation_id


class CancelReservationUseCase:
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

    async def execute(self, command: CancelReservationCommand) -> Reservation:
        target = reservation_id(command.reservation_id)

        async with self._transaction_manager.start():
            now = self._clock.now()
            reservation = await self._reservation_repo.get_by_id(target)
            if reservation is None:
                raise ReservationNotFoundError(str(target))

            result = reservation.cancel(now)
            if result.is_failure:
                self._logger.warning(
                    "Reservation cancellation rejected",
                    extra={"reservation_id": str(target), "error_code": result.error.code},
                )
                raise result.error

            await self._reservation_repo.save(reservation)
            await self._event_publisher.publish(
                ReservationCancelled.create(
                    self._id_generator.generate_uuid, now, reservation, command.reason
                )
            )
            self._logger.info(
                "Reservation cancelled",
                extra={"reservation_id": str(target), "reason": command.reason},
            )
            return reservation
