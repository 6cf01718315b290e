import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import FulfillReservationCommand
from equipment_rental.application.use_cases.create_rental import CreateRentalUseCase
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.errors import ReservationNotFoundError
from equipment_rental.domain.events import ReservationFulfilled
from equipment_rental.domain.value_objects.identifiers import reservation_id


class FulfillReservationUseCase:
    """
    Convierte una reservación confirmada en renta.

    La renta cubre el periodo reservado; si no se puede crear, la
    reservación queda sin cambios.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        create_rental: CreateRentalUseCase,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._create_rental = create_rental
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: FulfillReservationCommand) -> Rental:
        target = reservation_id(command.reservation_id)

        async with self._transaction_manager.start():
            now = self._clock.now()
            reservation = await self._reservation_repo.get_by_id(target)
            if reservation is None:
                raise ReservationNotFoundError(str(target))

            result = reservation.fulfill(now)
            if result.is_failure:
                self._logger.warning(
                    "Reservation fulfillment rejected",
                    extra={"reservation_id": str(target), "error_code": result.error.code},
                )
                raise result.error

            rental = await self._create_rental.create(
                reservation.equipment_id,
                reservation.member_id,
                reservation.period,
                from_reservation=reservation.id,
            )

            await self._reservation_repo.save(reservation)
            await self._event_publisher.publish(
                ReservationFulfilled.create(
                    self._id_generator.generate_uuid, now, reservation, rental.id
                )
            )
            self._logger.info(
                "Reservation fulfilled",
                extra={"reservation_id": str(target), "rental_id": str(rental.id)},
            )
            return rental
