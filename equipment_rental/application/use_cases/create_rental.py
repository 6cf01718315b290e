import logging
from datetime import datetime

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import CreateRentalCommand
from equipment_rental.domain.entities.member import Member
from equipment_rental.domain.entities.rental import Rental, RentalStatus
from equipment_rental.domain.errors import (
    DomainError,
    EquipmentNotFoundError,
    MemberHasOverdueRentalsError,
    MemberInactiveError,
    MemberNotFoundError,
    RentalLimitExceededError,
    RentalPeriodTooLongError,
    ReservationConflictError,
)
from equipment_rental.domain.events import RentalCreated
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    MemberId,
    ReservationId,
    equipment_id,
    member_id,
    reservation_id,
)


class CreateRentalUseCase:
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

    async def execute(self, command: CreateRentalCommand) -> Rental:
        period = DateRange(command.start_date, command.end_date)
        from_reservation = (
            reservation_id(command.reservation_id) if command.reservation_id else None
        )
        async with self._transaction_manager.start():
            return await self.create(
                equipment_id(command.equipment_id),
                member_id(command.member_id),
                period,
                from_reservation=from_reservation,
            )

    async def create(
        self,
        equipment: EquipmentId,
        member: MemberId,
        period: DateRange,
        from_reservation: ReservationId | None = None,
    ) -> Rental:
        """
        Crea la renta sin abrir transacción propia.

        `from_reservation` excluye esa reservación del chequeo de conflictos
        (la renta nace de cumplirla).
        """
        now = self._clock.now()

        item = await self._equipment_repo.get_by_id(equipment)
        if item is None:
            raise EquipmentNotFoundError(str(equipment))

        renter = await self._member_repo.get_by_id(member)
        if renter is None:
            raise MemberNotFoundError(str(member))
        rejection = await self._check_member(renter, period, now)
        if rejection is not None:
            self._logger.warning(
                "Rental rejected: member cannot rent",
                extra={"member_id": str(member), "error_code": rejection.code},
            )
            raise rejection

        conflicts = [
            r
            for r in await self._reservation_repo.list_conflicting(equipment, period)
            if r.id != from_reservation
        ]
        if conflicts:
            self._logger.warning(
                "Rental rejected: overlapping reservation",
                extra={"equipment_id": str(equipment), "conflicts": len(conflicts)},
            )
            raise ReservationConflictError(str(equipment), [str(r.id) for r in conflicts])

        base_cost = renter.apply_discount(item.calculate_rental_cost(period.day_count()))
        rental = Rental.create(
            generate_id=self._id_generator.generate_uuid,
            equipment_id=equipment,
            member_id=member,
            period=period,
            base_cost=base_cost,
            condition_at_start=item.condition,
            now=now,
        )

        result = item.mark_as_rented(rental.id)
        if result.is_failure:
            self._logger.warning(
                "Rental rejected: equipment not available",
                extra={"equipment_id": str(equipment), "error_code": result.error.code},
            )
            raise result.error

        counted = renter.increment_active_rentals()
        if counted.is_failure:
            raise counted.error

        await self._equipment_repo.save(item)
        await self._member_repo.save(renter)
        await self._rental_repo.save(rental)
        await self._event_publisher.publish(
            RentalCreated.create(self._id_generator.generate_uuid, now, rental, item.daily_rate)
        )

        self._logger.info(
            "Rental created",
            extra={
                "rental_id": str(rental.id),
                "equipment_id": str(equipment),
                "member_id": str(member),
                "base_cost": str(base_cost),
            },
        )
        return rental

    async def _check_member(
        self, renter: Member, period: DateRange, now: datetime
    ) -> DomainError | None:
        """Reglas del miembro, en orden: activo, sin vencidas, cupo y duración."""
        if not renter.is_active:
            return MemberInactiveError(str(renter.id))

        overdue = [
            r
            for r in await self._rental_repo.list_by_member(renter.id)
            if r.status == RentalStatus.OVERDUE or r.is_overdue(now)
        ]
        if overdue:
            return MemberHasOverdueRentalsError(str(renter.id), len(overdue))

        if not renter.can_rent():
            return RentalLimitExceededError(
                str(renter.id),
                renter.active_rental_count,
                renter.tier.max_concurrent_rentals,
            )

        if period.day_count() > renter.get_max_rental_days():
            return RentalPeriodTooLongError(
                str(renter.id), period.day_count(), renter.get_max_rental_days()
            )
        return None
