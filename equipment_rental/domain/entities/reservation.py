"""Entidad Reservation - reservación futura de un equipo."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from equipment_rental.domain.errors import (
    InvalidStateTransitionError,
    TemporalPreconditionError,
)
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    IdFactory,
    Identifier,
    MemberId,
    ReservationId,
    ReservationKind,
)


class ReservationStatus(str, Enum):
    """Estados posibles de una reservación."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    FULFILLED = "FULFILLED"
    EXPIRED = "EXPIRED"

    @property
    def is_open(self) -> bool:
        """PENDING o CONFIRMED: la reservación aún puede cambiar de estado."""
        return self in (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)


@dataclass
class Reservation:
    """
    Reservación de un equipo para un periodo futuro.

    Al cumplirse (`fulfill`) la capa de aplicación crea la renta
    correspondiente.
    """

    # Identificadores
    id: ReservationId
    equipment_id: EquipmentId
    member_id: MemberId

    # Periodo y estado
    period: DateRange
    status: ReservationStatus

    # Timestamps
    created_at: datetime
    confirmed_at: datetime | None = None
    cancelled_at: datetime | None = None
    fulfilled_at: datetime | None = None

    # === Consultas ===

    def is_active(self, now: datetime) -> bool:
        """Pendiente o confirmada y con el periodo aún vigente."""
        return self.status.is_open and not self.period.has_ended(now)

    def is_ready_to_fulfill(self, now: datetime) -> bool:
        return self.status == ReservationStatus.CONFIRMED and self.period.has_started(now)

    def overlaps(self, other: DateRange) -> bool:
        return self.period.overlaps(other)

    # === Métodos de negocio ===

    def confirm(self, now: datetime) -> Result[None]:
        if self.status != ReservationStatus.PENDING:
            return Result.fail(
                self._error("confirm", "solo las reservaciones pendientes pueden confirmarse")
            )
        if self.period.has_started(now):
            return Result.fail(
                self._error(
                    "confirm",
                    "no se puede confirmar una reservación que ya inició",
                    TemporalPreconditionError,
                )
            )

        self.status = ReservationStatus.CONFIRMED
        self.confirmed_at = now
        return Result.ok()

    def cancel(self, now: datetime) -> Result[None]:
        if not self.status.is_open:
            return Result.fail(
                self._error(
                    "cancel", "solo las reservaciones pendientes o confirmadas pueden cancelarse"
                )
            )
        if self.period.has_ended(now):
            return Result.fail(
                self._error(
                    "cancel",
                    "no se puede cancelar una reservación vencida",
                    TemporalPreconditionError,
                )
            )

        self.status = ReservationStatus.CANCELLED
        self.cancelled_at = now
        return Result.ok()

    def fulfill(self, now: datetime) -> Result[None]:
        """Marca la reservación como cumplida (se convierte en renta)."""
        if self.status != ReservationStatus.CONFIRMED:
            return Result.fail(
                self._error("fulfill", "solo las reservaciones confirmadas pueden cumplirse")
            )
        if not self.period.has_started(now):
            return Result.fail(
                self._error(
                    "fulfill",
                    "no se puede cumplir la reservación antes de su inicio",
                    TemporalPreconditionError,
                )
            )

        self.status = ReservationStatus.FULFILLED
        self.fulfilled_at = now
        return Result.ok()

    def mark_as_expired(self, now: datetime) -> Result[None]:
        if not self.status.is_open:
            return Result.fail(
                self._error(
                    "expire", "solo las reservaciones pendientes o confirmadas pueden expirar"
                )
            )
        if not self.period.has_ended(now):
            return Result.fail(
                self._error(
                    "expire",
                    "el periodo de la reservación aún no termina",
                    TemporalPreconditionError,
                )
            )

        self.status = ReservationStatus.EXPIRED
        return Result.ok()

    def _error(
        self,
        operation: str,
        reason: str,
        error_cls: type[InvalidStateTransitionError] = InvalidStateTransitionError,
    ) -> InvalidStateTransitionError:
        return error_cls(
            aggregate="Reservation",
            aggregate_id=str(self.id),
            operation=operation,
            current_status=self.status.value,
            reason=reason,
        )

    # === Persistencia ===

    def to_snapshot(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def reconstitute(cls, snapshot: Mapping[str, Any]) -> "Reservation":
        return cls(**snapshot)

    # === Factory ===

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        equipment_id: EquipmentId,
        member_id: MemberId,
        period: DateRange,
        now: datetime,
    ) -> Result["Reservation"]:
        """Factory para crear una reservación pendiente; el periodo debe ser futuro."""
        if period.has_started(now):
            return Result.fail(
                TemporalPreconditionError(
                    aggregate="Reservation",
                    aggregate_id="(nueva)",
                    operation="create",
                    current_status="new",
                    reason="el periodo de la reservación debe estar en el futuro",
                )
            )

        return Result.ok(
            cls(
                id=Identifier.generate(ReservationKind, generate_id),
                equipment_id=equipment_id,
                member_id=member_id,
                period=period,
                status=ReservationStatus.PENDING,
                created_at=now,
            )
        )
