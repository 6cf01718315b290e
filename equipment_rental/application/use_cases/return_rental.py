import logging

from equipment_rental.application.interfaces.clock import Clock
from equipment_rental.application.interfaces.damage_assessment_repo import DamageAssessmentRepo
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import EventPublisher
from equipment_rental.application.interfaces.id_generator import IdGenerator
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager
from equipment_rental.application.schemas import ReturnRentalCommand
from equipment_rental.config import Settings, get_settings
from equipment_rental.domain.entities.damage_assessment import DamageAssessment
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.errors import (
    EquipmentNotFoundError,
    MemberNotFoundError,
    RentalNotFoundError,
)
from equipment_rental.domain.events import DomainEvent, EquipmentDamaged, RentalReturned
from equipment_rental.domain.value_objects.identifiers import rental_id


class ReturnRentalUseCase:
    """
    Cierra una renta: calcula cargos, libera el equipo y, si la condición
    empeoró, registra un DamageAssessment.
    """

    def __init__(
        self,
        equipment_repo: EquipmentRepo,
        rental_repo: RentalRepo,
        member_repo: MemberRepo,
        damage_assessment_repo: DamageAssessmentRepo,
        event_publisher: EventPublisher,
        clock: Clock,
        id_generator: IdGenerator,
        transaction_manager: TransactionManager,
        settings: Settings | None = None,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._rental_repo = rental_repo
        self._member_repo = member_repo
        self._damage_assessment_repo = damage_assessment_repo
        self._event_publisher = event_publisher
        self._clock = clock
        self._id_generator = id_generator
        self._transaction_manager = transaction_manager
        self._settings = settings or get_settings()
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: ReturnRentalCommand) -> Rental:
        target = rental_id(command.rental_id)
        condition = command.condition_at_return

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

            damage_fee = rental.calculate_damage_fee(
                condition, self._settings.damage_fee_per_level_rate
            )
            result = rental.return_rental(
                condition,
                now,
                damage_fee=damage_fee,
                daily_late_fee_rate=self._settings.daily_late_fee_rate,
            )
            if result.is_failure:
                self._logger.warning(
                    "Rental return rejected",
                    extra={"rental_id": str(target), "error_code": result.error.code},
                )
                raise result.error

            released = equipment.mark_as_returned(condition)
            if released.is_failure:
                raise released.error
            counted = renter.decrement_active_rentals()
            if counted.is_failure:
                raise counted.error

            await self._rental_repo.save(rental)
            await self._equipment_repo.save(equipment)
            await self._member_repo.save(renter)

            events: list[DomainEvent] = [
                RentalReturned.create(self._id_generator.generate_uuid, now, rental, damage_fee)
            ]
            if condition.rank > rental.condition_at_start.rank:
                assessment = DamageAssessment.create(
                    generate_id=self._id_generator.generate_uuid,
                    rental_id=rental.id,
                    equipment_id=rental.equipment_id,
                    condition_before=rental.condition_at_start,
                    condition_after=condition,
                    notes=command.notes,
                    assessed_by=command.assessed_by,
                    now=now,
                ).unwrap()
                await self._damage_assessment_repo.save(assessment)
                events.append(
                    EquipmentDamaged.create(self._id_generator.generate_uuid, now, assessment)
                )
                self._logger.info(
                    "Damage assessed",
                    extra={
                        "rental_id": str(rental.id),
                        "equipment_id": str(rental.equipment_id),
                        "condition_before": rental.condition_at_start.value,
                        "condition_after": condition.value,
                        "repair_cost": str(assessment.repair_cost),
                    },
                )

            await self._event_publisher.publish_many(events)

            self._logger.info(
                "Rental returned",
                extra={
                    "rental_id": str(rental.id),
                    "late_fee": str(rental.late_fee),
                    "damage_fee": str(damage_fee),
                    "total_cost": str(rental.total_cost),
                },
            )
            return rental
