"""Entidad Equipment - condición y disponibilidad del equipo rentable."""

from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Mapping

from equipment_rental.domain.constants import MAINTENANCE_INTERVAL_DAYS
from equipment_rental.domain.errors import (
    EquipmentAlreadyRentedError,
    EquipmentConditionUnacceptableError,
    EquipmentNotAvailableError,
    InvalidStateTransitionError,
    ValidationError,
)
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    EquipmentKind,
    IdFactory,
    Identifier,
    RentalId,
)
from equipment_rental.domain.value_objects.money import Money


class EquipmentCondition(str, Enum):
    """Condición física del equipo, ordenada de mejor a peor."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    DAMAGED = "DAMAGED"
    UNDER_REPAIR = "UNDER_REPAIR"

    @property
    def rank(self) -> int:
        """Posición en la escala: EXCELLENT=0 … UNDER_REPAIR=5."""
        return _CONDITION_ORDER.index(self)

    @property
    def is_rentable(self) -> bool:
        return self in (
            EquipmentCondition.EXCELLENT,
            EquipmentCondition.GOOD,
            EquipmentCondition.FAIR,
        )

    @property
    def needs_repair(self) -> bool:
        return self in (EquipmentCondition.DAMAGED, EquipmentCondition.UNDER_REPAIR)


_CONDITION_ORDER = list(EquipmentCondition)


@dataclass
class Equipment:
    """
    Agregado que representa un equipo rentable.

    Invariante: `is_available` es False cuando la condición no es rentable
    o cuando hay una renta en curso (`current_rental_id`).
    """

    # Identificadores
    id: EquipmentId

    # Descripción
    name: str
    description: str
    category: str

    # Tarifa
    daily_rate: Money

    # Estado
    condition: EquipmentCondition
    is_available: bool

    # Fechas
    purchase_date: datetime
    last_maintenance_date: datetime | None = None

    # Referencia a la renta en curso
    current_rental_id: RentalId | None = None

    # === Propiedades calculadas ===

    @property
    def is_rented(self) -> bool:
        return self.current_rental_id is not None

    # === Métodos de negocio ===

    def mark_as_rented(self, rental_id: RentalId) -> Result[None]:
        """Marca el equipo como rentado por `rental_id`."""
        if self.current_rental_id is not None:
            return Result.fail(
                EquipmentAlreadyRentedError(str(self.id), str(self.current_rental_id))
            )
        if not self.condition.is_rentable:
            return Result.fail(
                EquipmentConditionUnacceptableError(str(self.id), self.condition.value)
            )
        if not self.is_available:
            return Result.fail(
                EquipmentNotAvailableError(
                    str(self.id), "unavailable", "el equipo no está disponible para renta"
                )
            )

        self.is_available = False
        self.current_rental_id = rental_id
        return Result.ok()

    def mark_as_returned(self, new_condition: EquipmentCondition) -> Result[None]:
        """Libera el equipo y registra la condición con la que regresó."""
        if self.current_rental_id is None:
            return Result.fail(
                InvalidStateTransitionError(
                    aggregate="Equipment",
                    aggregate_id=str(self.id),
                    operation="mark_as_returned",
                    current_status="available" if self.is_available else "unavailable",
                    reason="el equipo no está rentado actualmente",
                )
            )

        self.current_rental_id = None
        self.condition = new_condition
        self.is_available = new_condition.is_rentable
        return Result.ok()

    def update_condition(self, new_condition: EquipmentCondition) -> None:
        """Actualiza la condición; la disponibilidad solo cambia si no está rentado."""
        self.condition = new_condition
        if self.current_rental_id is None:
            self.is_available = new_condition.is_rentable

    def record_maintenance(self, date: datetime) -> None:
        self.last_maintenance_date = date

    def needs_maintenance(
        self, now: datetime, interval_days: int = MAINTENANCE_INTERVAL_DAYS
    ) -> bool:
        """True si pasaron `interval_days` o más desde el último mantenimiento (o la compra)."""
        reference = self.last_maintenance_date or self.purchase_date
        return now - reference >= timedelta(days=interval_days)

    def update_daily_rate(self, new_rate: Money) -> None:
        """Cambia la tarifa diaria; cero es válido para promociones."""
        self.daily_rate = new_rate

    def calculate_rental_cost(self, days: int) -> Money:
        """Costo de rentar el equipo `days` días."""
        if days <= 0:
            raise ValidationError(
                "days", f"el número de días debe ser positivo, se recibió {days}"
            )
        return self.daily_rate.multiply(days)

    # === Persistencia ===

    def to_snapshot(self) -> dict[str, Any]:
        """Exporta los campos del agregado para persistencia."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def reconstitute(cls, snapshot: Mapping[str, Any]) -> "Equipment":
        """Reconstruye el agregado desde un snapshot sin revalidar."""
        return cls(**snapshot)

    # === Factory ===

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        name: str,
        description: str,
        category: str,
        daily_rate: Money,
        condition: EquipmentCondition,
        purchase_date: datetime,
    ) -> Result["Equipment"]:
        """Factory que valida los datos y deriva la disponibilidad inicial."""
        if not name or not name.strip():
            return Result.fail(
                ValidationError("name", "el nombre del equipo no puede estar vacío")
            )
        if not category or not category.strip():
            return Result.fail(
                ValidationError("category", "la categoría del equipo no puede estar vacía")
            )
        if not isinstance(daily_rate, Money):
            return Result.fail(
                ValidationError("daily_rate", "la tarifa diaria debe ser un monto Money")
            )

        return Result.ok(
            cls(
                id=Identifier.generate(EquipmentKind, generate_id),
                name=name,
                description=description,
                category=category,
                daily_rate=daily_rate,
                condition=condition,
                is_available=condition.is_rentable,
                purchase_date=purchase_date,
            )
        )
