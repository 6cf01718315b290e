from typing import Sequence

from equipment_rental.domain.entities.damage_assessment import DamageAssessment
from equipment_rental.domain.value_objects.identifiers import DamageAssessmentId, RentalId


class DamageAssessmentRepo:
    async def get_by_id(self, assessment_id: DamageAssessmentId) -> DamageAssessment | None:
        raise NotImplementedError

    async def list_by_rental(self, rental_id: RentalId) -> Sequence[DamageAssessment]:
        raise NotImplementedError

    async def save(self, assessment: DamageAssessment) -> None:
        raise NotImplementedError
