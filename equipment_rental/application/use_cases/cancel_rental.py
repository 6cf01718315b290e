import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import CancelRentalCommand
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.errors import MemberNotFoundError, RentalNotFoundError
from equipment_rental.domain.events import RentalCancelled
from equipment_rental.domain.value_objects.identifiers import rental_id


class CancelRentalUseCase:
    def __init__(
        self,
        equipment_repo: EquipmentRepo,
        rental_repo: RentalRepo,
        member_repo: MemberRepo,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._rental_repo = rental_repo
        self._member_repo = member_repo
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: CancelRentalCommand) -> Rental:
        target = rental_id(command.rental_id)

        async with self._transaction_manager.start():
            rental = await self._rental_repo.get_by_id(target)
            if rental is None:
                raise RentalNotFoundError(str(target))
            renter = await self._member_repo.get_by_id(rental.member_id)
            if renter is None:
                raise MemberNotFoundError(str(rental.member_id))

            result = rental.cancel()
            if result.is_failure:
                self._logger.warning(
                    "Rental cancellation rejected",
                    extra={"rental_id": str(target), "error_code": result.error.code},
                )
                raise result.error

            counted = renter.decrement_active_rentals()
            if counted.is_failure:
                raise counted.error

            # El equipo vuelve sin cambio de condición
            equipment = await self._equipment_repo.get_by_id(rental.equipment_id)
            if equipment is not None and equipment.current_rental_id == rental.id:
                equipment.mark_as_returned(equipment.condition).unwrap()
                await self._equipment_repo.save(equipment)

            await self._member_repo.save(renter)
            await self._rental_repo.save(rental)
            await self._event_publisher.publish(
                RentalCancelled.create(self._id_generator.generate_uuid, self._clock.now(), rental)
            )

            self._logger.info("Rental cancelled", extra={"rental_id": str(rental.id)})
            return rental
