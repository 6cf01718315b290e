"""Value Objects del dominio de renta."""

from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    DamageAssessmentId,
    DamageAssessmentKind,
    EquipmentId,
    EquipmentKind,
    Identifier,
    IdFactory,
    MemberId,
    MemberKind,
    RentalId,
    RentalKind,
    ReservationId,
    ReservationKind,
    damage_assessment_id,
    equipment_id,
    member_id,
    rental_id,
    reservation_id,
)
from equipment_rental.domain.value_objects.money import Money

__all__ = [
    "DateRange",
    "Money",
    # Identificadores
    "Identifier",
    "IdFactory",
    "EquipmentId",
    "EquipmentKind",
    "RentalId",
    "RentalKind",
    "MemberId",
    "MemberKind",
    "ReservationId",
    "ReservationKind",
    "DamageAssessmentId",
    "DamageAssessmentKind",
    "equipment_id",
    "rental_id",
    "member_id",
    "reservation_id",
    "damage_assessment_id",
]
