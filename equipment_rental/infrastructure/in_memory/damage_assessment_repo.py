from typing import Any, Sequence

from equipment_rental.application.interfaces.damage_assessment_repo import DamageAssessmentRepo
from equipment_rental.domain.entities.damage_assessment import DamageAssessment
from equipment_rental.domain.value_objects.identifiers import DamageAssessmentId, RentalId


class InMemoryDamageAssessmentRepo(DamageAssessmentRepo):
    def __init__(self) -> None:
        self._assessments: dict[DamageAssessmentId, dict[str, Any]] = {}

    async def get_by_id(self, assessment_id: DamageAssessmentId) -> DamageAssessment | None:
        snapshot = self._assessments.get(assessment_id)
        if snapshot is None:
            return None
        return DamageAssessment.reconstitute(dict(snapshot))

    async def list_by_rental(self, rental_id: RentalId) -> Sequence[DamageAssessment]:
        return [
            DamageAssessment.reconstitute(dict(s))
            for s in self._assessments.values()
            if s["rental_id"] == rental_id
        ]

    async def save(self, assessment: DamageAssessment) -> None:
        self._assessments[assessment.id] = assessment.to_snapshot()

    def clear(self) -> None:
        self._assessments.clear()
