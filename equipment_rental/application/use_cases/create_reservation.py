import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import CreateReservationCommand
from equipment_rental.domain.entities.rental import RentalStatus
from equipment_rental.domain.entities.reservation import Reservation
from equipment_rental.domain.errors import (
    EquipmentNotAvailableError,
    EquipmentNotFoundError,
    MemberInactiveError,
    MemberNotFoundError,
    RentalPeriodTooLongError,
    ReservationConflictError,
)
from equipment_rental.domain.events import ReservationCreated
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import equipment_id, member_id


class CreateReservationUseCase:
    """
    Reserva un equipo para un periodo futuro.

    Rechaza el periodo si ya hay una reservación abierta que se traslape o
    si una renta en curso del mismo equipo lo cubre. El miembro debe estar
    activo y el periodo no puede exceder los días de su nivel.
    """

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

    async def execute(self, command: CreateReservationCommand) -> Reservation:
        equipment = equipment_id(command.equipment_id)
        member = member_id(command.member_id)
        period = DateRange(command.start_date, command.end_date)

        async with self._transaction_manager.start():
            now = self._clock.now()

            if not await self._equipment_repo.exists(equipment):
                raise EquipmentNotFoundError(str(equipment))

            renter = await self._member_repo.get_by_id(member)
            if renter is None:
                raise MemberNotFoundError(str(member))
            if not renter.is_active:
                raise MemberInactiveError(str(member))
            if period.day_count() > renter.get_max_rental_days():
                raise RentalPeriodTooLongError(
                    str(member), period.day_count(), renter.get_max_rental_days()
                )

            conflicts = await self._reservation_repo.list_conflicting(equipment, period)
            if conflicts:
                self._logger.warning(
                    "Reservation rejected: overlapping reservation",
                    extra={"equipment_id": str(equipment), "conflicts": len(conflicts)},
                )
                raise ReservationConflictError(str(equipment), [str(r.id) for r in conflicts])

            active_rental = await self._rental_repo.get_active_by_equipment(equipment)
            if active_rental is not None and (
                active_rental.status == RentalStatus.OVERDUE
                or active_rental.period.overlaps(period)
            ):
                # Una renta vencida retiene el equipo hasta que se devuelva
                raise EquipmentNotAvailableError(
                    str(equipment),
                    active_rental.status.value,
                    f"rentado durante el periodo solicitado (renta {active_rental.id})",
                )

            result = Reservation.create(
                generate_id=self._id_generator.generate_uuid,
                equipment_id=equipment,
                member_id=member,
                period=period,
                now=now,
            )
            if result.is_failure:
                self._logger.warning(
                    "Reservation rejected",
                    extra={"equipment_id": str(equipment), "error_code": result.error.code},
                )
                raise result.error
            reservation = result.unwrap()

            await self._reservation_repo.save(reservation)
            await self._event_publisher.publish(
                ReservationCreated.create(self._id_generator.generate_uuid, now, reservation)
            )

            self._logger.info(
                "Reservation created",
                extra={
                    "reservation_id": str(reservation.id),
                    "equipment_id": str(equipment),
                    "member_id": str(member),
                    "period": str(period),
                },
            )
            return reservation
