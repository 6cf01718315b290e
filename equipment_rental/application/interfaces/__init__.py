"""Interfaces (Puertos) de la capa de aplicación."""

from equipment_rental.application.interfaces.clock import Clock, FakeClock, SystemClock
from equipment_rental.application.interfaces.damage_assessment_repo import DamageAssessmentRepo
from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.event_publisher import (
    EventHandler,
    EventPublisher,
    Unsubscribe,
)
from equipment_rental.application.interfaces.id_generator import (
    FakeIdGenerator,
    IdGenerator,
    UUIDIdGenerator,
)
from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "EquipmentRepo",
    "RentalRepo",
    "ReservationRepo",
    "DamageAssessmentRepo",
    "MemberRepo",
    # Events
    "EventPublisher",
    "EventHandler",
    "Unsubscribe",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "IdGenerator",
    "UUIDIdGenerator",
    "FakeIdGenerator",
]
