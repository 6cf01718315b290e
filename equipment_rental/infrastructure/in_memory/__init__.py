"""Implementaciones in-memory para testing."""

from equipment_rental.infrastructure.in_memory.damage_assessment_repo import (
    InMemoryDamageAssessmentRepo,
)
from equipment_rental.infrastructure.in_memory.equipment_repo import InMemoryEquipmentRepo
from equipment_rental.infrastructure.in_memory.event_publisher import InMemoryEventPublisher
from equipment_rental.infrastructure.in_memory.member_repo import InMemoryMemberRepo
from equipment_rental.infrastructure.in_memory.rental_repo import InMemoryRentalRepo
from equipment_rental.infrastructure.in_memory.reservation_repo import InMemoryReservationRepo
from equipment_rental.infrastructure.in_memory.transaction_manager import (
    NoopTransactionManager as InMemoryTransactionManager,
)

__all__ = [
    # Repositories
    "InMemoryEquipmentRepo",
    "InMemoryRentalRepo",
    "InMemoryReservationRepo",
    "InMemoryDamageAssessmentRepo",
    "InMemoryMemberRepo",
    # Events
    "InMemoryEventPublisher",
    # Infrastructure
    "InMemoryTransactionManager",
]
