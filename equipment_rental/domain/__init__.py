"""
Capa de Dominio - Renta de Equipo.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects, eventos y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Equipment, Member, Rental, Reservation, DamageAssessment)
- value_objects/: Objetos de valor inmutables (Money, DateRange, identificadores)
- events.py: Eventos de dominio
- errors.py: Excepciones específicas del dominio
- result.py: Resultado explícito de las transiciones
- constants.py: Constantes de política
"""

from equipment_rental.domain.entities import (
    DAMAGE_FEE_PER_LEVEL,
    DEFAULT_DAILY_LATE_FEE,
    DamageAssessment,
    Equipment,
    EquipmentCondition,
    Member,
    MembershipTier,
    Rental,
    RentalStatus,
    Reservation,
    ReservationStatus,
    estimate_repair_cost,
)
from equipment_rental.domain.errors import (
    DomainError,
    EquipmentAlreadyRentedError,
    EquipmentConditionUnacceptableError,
    EquipmentNotAvailableError,
    EquipmentNotFoundError,
    InvalidDateRangeError,
    InvalidIdentifierError,
    InvalidMoneyError,
    InvalidRentalExtensionError,
    InvalidStateTransitionError,
    MemberHasOverdueRentalsError,
    MemberInactiveError,
    MemberNotFoundError,
    RentalLimitExceededError,
    RentalNotFoundError,
    RentalPeriodTooLongError,
    ReservationConflictError,
    ReservationNotFoundError,
    TemporalPreconditionError,
    ValidationError,
)
from equipment_rental.domain.events import (
    DomainEvent,
    EquipmentDamaged,
    RentalCancelled,
    RentalCreated,
    RentalExtended,
    RentalOverdue,
    RentalReturned,
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
    ReservationExpired,
    ReservationFulfilled,
)
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects import (
    DateRange,
    EquipmentId,
    Identifier,
    MemberId,
    Money,
    RentalId,
    ReservationId,
    equipment_id,
    member_id,
    rental_id,
    reservation_id,
)

__all__ = [
    # Entities
    "Equipment",
    "EquipmentCondition",
    "Member",
    "MembershipTier",
    "Rental",
    "RentalStatus",
    "Reservation",
    "ReservationStatus",
    "DamageAssessment",
    "estimate_repair_cost",
    "DEFAULT_DAILY_LATE_FEE",
    "DAMAGE_FEE_PER_LEVEL",
    # Value Objects
    "Money",
    "DateRange",
    "Identifier",
    "EquipmentId",
    "RentalId",
    "MemberId",
    "ReservationId",
    "equipment_id",
    "rental_id",
    "member_id",
    "reservation_id",
    # Events
    "DomainEvent",
    "RentalCreated",
    "RentalOverdue",
    "RentalExtended",
    "RentalReturned",
    "RentalCancelled",
    "ReservationCreated",
    "ReservationConfirmed",
    "ReservationCancelled",
    "ReservationFulfilled",
    "ReservationExpired",
    "EquipmentDamaged",
    # Result
    "Result",
    # Errors
    "DomainError",
    "ValidationError",
    "InvalidMoneyError",
    "InvalidDateRangeError",
    "InvalidIdentifierError",
    "InvalidStateTransitionError",
    "TemporalPreconditionError",
    "EquipmentNotAvailableError",
    "EquipmentAlreadyRentedError",
    "EquipmentConditionUnacceptableError",
    "InvalidRentalExtensionError",
    "EquipmentNotFoundError",
    "RentalNotFoundError",
    "ReservationNotFoundError",
    "ReservationConflictError",
    "MemberNotFoundError",
    "MemberInactiveError",
    "MemberHasOverdueRentalsError",
    "RentalLimitExceededError",
    "RentalPeriodTooLongError",
]
