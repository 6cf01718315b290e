import logging
from datetime import timedelta

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import ExtendRentalCommand
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.errors import (
    EquipmentNotFoundError,
    MemberNotFoundError,
    RentalNotFoundError,
    RentalPeriodTooLongError,
    ReservationConflictError,
)
from equipment_rental.domain.events import RentalExtended
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import rental_id


class ExtendRentalUseCase:
    def __init__(
        self,
        equipment_repo: EquipmentRepo,
        rental_repo: RentalRepo,
        reservation_repo: ReservationRepo,
        member_repo: MemberRepo,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._rental_repo = rental_repo
        self._reservation_repo = reservation_repo
        self._member_repo = member_repo
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: ExtendRentalCommand) -> Rental:
        target = rental_id(command.rental_id)

        async with self._transaction_manager.start():
            now = self._clock.now()

            rental = await self._rental_repo.get_by_id(target)
            if rental is None:
                raise RentalNotFoundError(str(target))
            equipment = await self._equipment_repo.get_by_id(rental.equipment_id)
            if equipment is None:
                raise EquipmentNotFoundError(str(rental.equipment_id))
            renter = await self._member_repo.get_by_id(rental.member_id)
            if renter is None:
                raise MemberNotFoundError(str(rental.member_id))

            # Tramo agregado: [fin actual, fin + días)
            extension = DateRange(
                rental.period.end,
                rental.period.end + timedelta(days=command.additional_days),
            )
            conflicts = await self._reservation_repo.list_conflicting(
                rental.equipment_id, extension
            )
            if conflicts:
                self._logger.warning(
                    "Rental extension rejected: overlapping reservation",
                    extra={"rental_id": str(target), "conflicts": len(conflicts)},
                )
                raise ReservationConflictError(
                    str(rental.equipment_id), [str(r.id) for r in conflicts]
                )

            total_days = rental.get_duration_days() + command.additional_days
            if total_days > renter.get_max_rental_days():
                self._logger.warning(
                    "Rental extension rejected: tier limit",
                    extra={"rental_id": str(target), "total_days": total_days},
                )
                raise RentalPeriodTooLongError(
                    str(rental.member_id), total_days, renter.get_max_rental_days()
                )

            additional_cost = renter.apply_discount(
                equipment.calculate_rental_cost(command.additional_days)
            )
            result = rental.extend_period(command.additional_days, additional_cost)
            if result.is_failure:
                self._logger.warning(
                    "Rental extension rejected",
                    extra={"rental_id": str(target), "error_code": result.error.code},
                )
                raise result.error

            await self._rental_repo.save(rental)
            await self._event_publisher.publish(
                RentalExtended.create(
                    self._id_generator.generate_uuid,
                    now,
                    rental,
                    command.additional_days,
                    additional_cost,
                )
            )

            self._logger.info(
                "Rental extended",
                extra={
                    "rental_id": str(rental.id),
                    "additional_days": command.additional_days,
                    "new_end": rental.period.end.isoformat(),
                    "total_cost": str(rental.total_cost),
                },
            )
            return rental
