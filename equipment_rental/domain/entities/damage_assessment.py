"""Entidad DamageAssessment - evaluación de la condición del equipo al devolverse."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Mapping

from equipment_rental.domain.constants import MAX_REPAIR_COST_CENTS, REPAIR_COST_TIERS_CENTS
from equipment_rental.domain.entities.equipment import EquipmentCondition
from equipment_rental.domain.errors import ValidationError
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects.identifiers import (
    DamageAssessmentId,
    DamageAssessmentKind,
    EquipmentId,
    IdFactory,
    Identifier,
    RentalId,
)
from equipment_rental.domain.value_objects.money import Money


def estimate_repair_cost(before: EquipmentCondition, after: EquipmentCondition) -> Money:
    """
    Costo estimado de reparación por niveles de degradación.

    1 nivel: $50, 2: $150, 3: $300, 4 o más: $500. Sin degradación: $0.
    """
    levels = after.rank - before.rank
    if levels <= 0:
        return Money.zero()
    return Money(REPAIR_COST_TIERS_CENTS.get(levels, MAX_REPAIR_COST_CENTS))


@dataclass
class DamageAssessment:
    """Registro de la inspección hecha al devolver un equipo."""

    id: DamageAssessmentId
    rental_id: RentalId
    equipment_id: EquipmentId
    condition_before: EquipmentCondition
    condition_after: EquipmentCondition
    notes: str
    repair_cost: Money
    assessed_at: datetime
    assessed_by: str

    @property
    def degradation_levels(self) -> int:
        return max(0, self.condition_after.rank - self.condition_before.rank)

    def has_damage(self) -> bool:
        return not self.repair_cost.is_zero()

    def has_condition_degraded(self) -> bool:
        return self.degradation_levels > 0

    def update_notes(self, notes: str) -> None:
        self.notes = notes

    def to_snapshot(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def reconstitute(cls, snapshot: Mapping[str, Any]) -> "DamageAssessment":
        return cls(**snapshot)

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        rental_id: RentalId,
        equipment_id: EquipmentId,
        condition_before: EquipmentCondition,
        condition_after: EquipmentCondition,
        notes: str,
        assessed_by: str,
        now: datetime,
    ) -> Result["DamageAssessment"]:
        """Factory que calcula el costo de reparación estimado."""
        if not assessed_by or not assessed_by.strip():
            return Result.fail(
                ValidationError("assessed_by", "el nombre del evaluador no puede estar vacío")
            )

        return Result.ok(
            cls(
                id=Identifier.generate(DamageAssessmentKind, generate_id),
                rental_id=rental_id,
                equipment_id=equipment_id,
                condition_before=condition_before,
                condition_after=condition_after,
                notes=notes,
                repair_cost=estimate_repair_cost(condition_before, condition_after),
                assessed_at=now,
                assessed_by=assessed_by,
            )
        )
