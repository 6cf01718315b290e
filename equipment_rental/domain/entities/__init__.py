"""Entidades del dominio de renta de equipo."""

from equipment_rental.domain.entities.damage_assessment import (
    DamageAssessment,
    estimate_repair_cost,
)
from equipment_rental.domain.entities.equipment import Equipment, EquipmentCondition
from equipment_rental.domain.entities.member import Member, MembershipTier
from equipment_rental.domain.entities.rental import (
    DAMAGE_FEE_PER_LEVEL,
    DEFAULT_DAILY_LATE_FEE,
    Rental,
    RentalStatus,
)
from equipment_rental.domain.entities.reservation import Reservation, ReservationStatus

__all__ = [
    # Equipment
    "Equipment",
    "EquipmentCondition",
    # Member
    "Member",
    "MembershipTier",
    # Rental
    "Rental",
    "RentalStatus",
    "DEFAULT_DAILY_LATE_FEE",
    "DAMAGE_FEE_PER_LEVEL",
    # Reservation
    "Reservation",
    "ReservationStatus",
    # DamageAssessment
    "DamageAssessment",
    "estimate_repair_cost",
]
