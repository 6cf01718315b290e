"""Eventos de dominio emitidos en las transiciones de estado."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from equipment_rental.domain.entities.damage_assessment import DamageAssessment
from equipment_rental.domain.entities.equipment import EquipmentCondition
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.entities.reservation import Reservation
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    DamageAssessmentId,
    EquipmentId,
    IdFactory,
    Identifier,
    MemberId,
    RentalId,
    ReservationId,
)
from equipment_rental.domain.value_objects.money import Money


def _serialize(value: Any) -> Any:
    if isinstance(value, Identifier):
        return value.value
    if isinstance(value, Money):
        return str(value.amount)
    if isinstance(value, DateRange):
        return {"start": value.start.isoformat(), "end": value.end.isoformat()}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class DomainEvent:
    """
    Hecho inmutable ocurrido en un agregado.

    Attributes:
        event_id: Identificador único de esta instancia del evento.
        occurred_at: Momento en que ocurrió.
        aggregate_id: Identificador del agregado que lo emitió.
    """

    event_type: ClassVar[str] = "DomainEvent"

    event_id: str
    occurred_at: datetime
    aggregate_id: str

    def to_payload(self) -> dict[str, Any]:
        """Serializa el evento a un dict apto para JSON."""
        payload: dict[str, Any] = {"event_type": self.event_type}
        for f in fields(self):
            payload[f.name] = _serialize(getattr(self, f.name))
        return payload


# === Eventos de renta ===


@dataclass(frozen=True)
class RentalCreated(DomainEvent):
    event_type: ClassVar[str] = "RentalCreated"

    rental_id: RentalId
    member_id: MemberId
    equipment_id: EquipmentId
    period: DateRange
    daily_rate: Money

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, rental: Rental, daily_rate: Money
    ) -> "RentalCreated":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(rental.id),
            rental_id=rental.id,
            member_id=rental.member_id,
            equipment_id=rental.equipment_id,
            period=rental.period,
            daily_rate=daily_rate,
        )


@dataclass(frozen=True)
class RentalOverdue(DomainEvent):
    event_type: ClassVar[str] = "RentalOverdue"

    rental_id: RentalId
    member_id: MemberId
    equipment_id: EquipmentId
    days_overdue: int
    accrued_late_fee: Money

    @classmethod
    def create(cls, generate_id: IdFactory, occurred_at: datetime, rental: Rental) -> "RentalOverdue":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(rental.id),
            rental_id=rental.id,
            member_id=rental.member_id,
            equipment_id=rental.equipment_id,
            days_overdue=rental.days_overdue(occurred_at),
            accrued_late_fee=rental.late_fee,
        )


@dataclass(frozen=True)
class RentalExtended(DomainEvent):
    event_type: ClassVar[str] = "RentalExtended"

    rental_id: RentalId
    additional_days: int
    additional_cost: Money
    new_period: DateRange

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        occurred_at: datetime,
        rental: Rental,
        additional_days: int,
        additional_cost: Money,
    ) -> "RentalExtended":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(rental.id),
            rental_id=rental.id,
            additional_days=additional_days,
            additional_cost=additional_cost,
            new_period=rental.period,
        )


@dataclass(frozen=True)
class RentalReturned(DomainEvent):
    event_type: ClassVar[str] = "RentalReturned"

    rental_id: RentalId
    returned_at: datetime
    late_fee: Money
    damage_fee: Money
    total_cost: Money

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, rental: Rental, damage_fee: Money
    ) -> "RentalReturned":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(rental.id),
            rental_id=rental.id,
            returned_at=rental.returned_at or occurred_at,
            late_fee=rental.late_fee,
            damage_fee=damage_fee,
            total_cost=rental.total_cost,
        )


@dataclass(frozen=True)
class RentalCancelled(DomainEvent):
    event_type: ClassVar[str] = "RentalCancelled"

    rental_id: RentalId
    member_id: MemberId

    @classmethod
    def create(cls, generate_id: IdFactory, occurred_at: datetime, rental: Rental) -> "RentalCancelled":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(rental.id),
            rental_id=rental.id,
            member_id=rental.member_id,
        )


# === Eventos de reservación ===


@dataclass(frozen=True)
class ReservationCreated(DomainEvent):
    event_type: ClassVar[str] = "ReservationCreated"

    reservation_id: ReservationId
    member_id: MemberId
    equipment_id: EquipmentId
    period: DateRange

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, reservation: Reservation
    ) -> "ReservationCreated":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(reservation.id),
            reservation_id=reservation.id,
            member_id=reservation.member_id,
            equipment_id=reservation.equipment_id,
            period=reservation.period,
        )


@dataclass(frozen=True)
class ReservationConfirmed(DomainEvent):
    event_type: ClassVar[str] = "ReservationConfirmed"

    reservation_id: ReservationId
    member_id: MemberId

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, reservation: Reservation
    ) -> "ReservationConfirmed":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(reservation.id),
            reservation_id=reservation.id,
            member_id=reservation.member_id,
        )


@dataclass(frozen=True)
class ReservationCancelled(DomainEvent):
    event_type: ClassVar[str] = "ReservationCancelled"

    reservation_id: ReservationId
    member_id: MemberId
    reason: str | None = None

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        occurred_at: datetime,
        reservation: Reservation,
        reason: str | None = None,
    ) -> "ReservationCancelled":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(reservation.id),
            reservation_id=reservation.id,
            member_id=reservation.member_id,
            reason=reason,
        )


@dataclass(frozen=True)
class ReservationFulfilled(DomainEvent):
    event_type: ClassVar[str] = "ReservationFulfilled"

    reservation_id: ReservationId
    rental_id: RentalId

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        occurred_at: datetime,
        reservation: Reservation,
        rental_id: RentalId,
    ) -> "ReservationFulfilled":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(reservation.id),
            reservation_id=reservation.id,
            rental_id=rental_id,
        )


@dataclass(frozen=True)
class ReservationExpired(DomainEvent):
    event_type: ClassVar[str] = "ReservationExpired"

    reservation_id: ReservationId
    member_id: MemberId

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, reservation: Reservation
    ) -> "ReservationExpired":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(reservation.id),
            reservation_id=reservation.id,
            member_id=reservation.member_id,
        )


# === Eventos de equipo ===


@dataclass(frozen=True)
class EquipmentDamaged(DomainEvent):
    event_type: ClassVar[str] = "EquipmentDamaged"

    equipment_id: EquipmentId
    damage_assessment_id: DamageAssessmentId
    rental_id: RentalId
    previous_condition: EquipmentCondition
    new_condition: EquipmentCondition
    damage_description: str
    repair_cost: Money

    @classmethod
    def create(
        cls, generate_id: IdFactory, occurred_at: datetime, assessment: DamageAssessment
    ) -> "EquipmentDamaged":
        return cls(
            event_id=generate_id(),
            occurred_at=occurred_at,
            aggregate_id=str(assessment.equipment_id),
            equipment_id=assessment.equipment_id,
            damage_assessment_id=assessment.id,
            rental_id=assessment.rental_id,
            previous_condition=assessment.condition_before,
            new_condition=assessment.condition_after,
            damage_description=assessment.notes,
            repair_cost=assessment.repair_cost,
        )
