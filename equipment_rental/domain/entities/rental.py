"""Entidad Rental - Agregado raíz del préstamo en curso."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from equipment_rental.domain.constants import (
    ACCEPTABLE_WEAR_LEVELS,
    DAMAGE_FEE_PER_LEVEL_CENTS,
    DEFAULT_DAILY_LATE_FEE_CENTS,
)
from equipment_rental.domain.entities.equipment import EquipmentCondition
from equipment_rental.domain.errors import (
    InvalidRentalExtensionError,
    InvalidStateTransitionError,
    TemporalPreconditionError,
)
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    IdFactory,
    Identifier,
    MemberId,
    RentalId,
    RentalKind,
)
from equipment_rental.domain.value_objects.money import Money


class RentalStatus(str, Enum):
    """Estados posibles de una renta."""

    RESERVED = "RESERVED"
    ACTIVE = "ACTIVE"
    OVERDUE = "OVERDUE"
    RETURNED = "RETURNED"
    CANCELLED = "CANCELLED"

    @property
    def is_in_possession(self) -> bool:
        """El miembro tiene el equipo en su poder."""
        return self in (RentalStatus.ACTIVE, RentalStatus.OVERDUE)

    @property
    def is_completed(self) -> bool:
        return self in (RentalStatus.RETURNED, RentalStatus.CANCELLED)


DEFAULT_DAILY_LATE_FEE = Money(DEFAULT_DAILY_LATE_FEE_CENTS)
DAMAGE_FEE_PER_LEVEL = Money(DAMAGE_FEE_PER_LEVEL_CENTS)


@dataclass
class Rental:
    """
    Entidad principal del dominio - Agregado Raíz.

    Representa el préstamo de un equipo a un miembro: acumula cargos por
    retraso, admite extensiones y se cierra con la devolución o la
    cancelación.

    Invariante: total_cost = base_cost + late_fee (+ cargo por daño al
    devolver), salvo en CANCELLED donde total_cost es cero.
    """

    # Identificadores
    id: RentalId
    equipment_id: EquipmentId
    member_id: MemberId

    # Periodo y estado
    period: DateRange
    status: RentalStatus

    # Financieros
    base_cost: Money
    late_fee: Money
    total_cost: Money

    # Condición del equipo
    condition_at_start: EquipmentCondition
    condition_at_return: EquipmentCondition | None = None

    # Timestamps
    created_at: datetime | None = None
    returned_at: datetime | None = None

    # === Consultas ===

    def is_overdue(self, now: datetime) -> bool:
        """Activa y con el periodo ya terminado."""
        return self.status == RentalStatus.ACTIVE and self.period.has_ended(now)

    def days_overdue(self, now: datetime) -> int:
        return self.period.days_past_end(now)

    def get_duration_days(self) -> int:
        return self.period.day_count()

    def calculate_damage_fee(
        self,
        observed_condition: EquipmentCondition,
        fee_per_level: Money = DAMAGE_FEE_PER_LEVEL,
    ) -> Money:
        """
        Calcula el cargo por daño según la degradación de condición.

        Un nivel de degradación se considera desgaste normal y no se cobra;
        cada nivel adicional cuesta `fee_per_level`. No modifica la renta.

        Ejemplo desde EXCELLENT: GOOD -> $0, FAIR -> $50, DAMAGED -> $150.
        """
        degradation = observed_condition.rank - self.condition_at_start.rank
        if degradation <= ACCEPTABLE_WEAR_LEVELS:
            return Money.zero()
        return fee_per_level.multiply(degradation - ACCEPTABLE_WEAR_LEVELS)

    # === Métodos de negocio ===

    def mark_as_overdue(self, daily_late_fee_rate: Money, now: datetime) -> Result[None]:
        """Marca la renta como vencida y calcula el cargo por retraso."""
        if self.status != RentalStatus.ACTIVE:
            return Result.fail(
                self._transition_error(
                    "mark_as_overdue", "solo las rentas activas pueden marcarse como vencidas"
                )
            )
        if not self.period.has_ended(now):
            return Result.fail(
                self._transition_error(
                    "mark_as_overdue",
                    "el periodo de la renta aún no termina",
                    error_cls=TemporalPreconditionError,
                )
            )

        self.late_fee = daily_late_fee_rate.multiply(self.days_overdue(now))
        self.total_cost = self.base_cost.add(self.late_fee)
        self.status = RentalStatus.OVERDUE
        return Result.ok()

    def return_rental(
        self,
        condition_at_return: EquipmentCondition,
        now: datetime,
        damage_fee: Money | None = None,
        daily_late_fee_rate: Money = DEFAULT_DAILY_LATE_FEE,
    ) -> Result[None]:
        """Cierra la renta con la condición observada y los cargos finales."""
        if self.status.is_completed:
            return Result.fail(
                self._transition_error(
                    "return", "solo las rentas activas o vencidas pueden devolverse"
                )
            )

        if damage_fee is None:
            damage_fee = Money.zero()
        if self.period.has_ended(now):
            self.late_fee = daily_late_fee_rate.multiply(self.days_overdue(now))
        else:
            self.late_fee = Money.zero()

        self.total_cost = self.base_cost.add(self.late_fee).add(damage_fee)
        self.condition_at_return = condition_at_return
        self.returned_at = now
        self.status = RentalStatus.RETURNED
        return Result.ok()

    def extend_period(self, additional_days: int, additional_cost: Money) -> Result[None]:
        """
        Extiende el periodo de la renta.

        Extender una renta vencida la regresa a ACTIVE y condona el cargo
        por retraso acumulado.
        """
        if not self.status.is_in_possession:
            return Result.fail(
                self._transition_error(
                    "extend", "solo las rentas activas o vencidas pueden extenderse"
                )
            )
        if additional_days <= 0:
            return Result.fail(
                InvalidRentalExtensionError(
                    str(self.id),
                    f"los días de extensión deben ser positivos, se recibió {additional_days}",
                )
            )

        self.period = self.period.extend(additional_days)
        self.base_cost = self.base_cost.add(additional_cost)
        self.late_fee = Money.zero()
        self.total_cost = self.base_cost
        self.status = RentalStatus.ACTIVE
        return Result.ok()

    def cancel(self) -> Result[None]:
        """Cancela la renta; el costo acumulado se condona."""
        if self.status.is_completed:
            return Result.fail(
                self._transition_error("cancel", "no se puede cancelar una renta terminada")
            )

        self.status = RentalStatus.CANCELLED
        self.total_cost = Money.zero()
        return Result.ok()

    def _transition_error(
        self,
        operation: str,
        reason: str,
        error_cls: type[InvalidStateTransitionError] = InvalidStateTransitionError,
    ) -> InvalidStateTransitionError:
        return error_cls(
            aggregate="Rental",
            aggregate_id=str(self.id),
            operation=operation,
            current_status=self.status.value,
            reason=reason,
        )

    # === Persistencia ===

    def to_snapshot(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def reconstitute(cls, snapshot: Mapping[str, Any]) -> "Rental":
        return cls(**snapshot)

    # === Factory ===

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        equipment_id: EquipmentId,
        member_id: MemberId,
        period: DateRange,
        base_cost: Money,
        condition_at_start: EquipmentCondition,
        now: datetime,
    ) -> "Rental":
        """Factory para crear una renta activa."""
        return cls(
            id=Identifier.generate(RentalKind, generate_id),
            equipment_id=equipment_id,
            member_id=member_id,
            period=period,
            status=RentalStatus.ACTIVE,
            base_cost=base_cost,
            late_fee=Money.zero(),
            total_cost=base_cost,
            condition_at_start=condition_at_start,
            created_at=now,
        )
