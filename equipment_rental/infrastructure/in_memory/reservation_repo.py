"""Implementación in-memory del repositorio de reservaciones."""

from datetime import datetime
from typing import Any, Sequence

from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.domain.entities.reservation import Reservation, ReservationStatus
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    MemberId,
    ReservationId,
)


class InMemoryReservationRepo(ReservationRepo):
    """Repositorio de reservaciones en memoria para testing."""

    def __init__(self) -> None:
        self._reservations: dict[ReservationId, dict[str, Any]] = {}

    def _all(self) -> list[Reservation]:
        return [Reservation.reconstitute(dict(s)) for s in self._reservations.values()]

    async def get_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        snapshot = self._reservations.get(reservation_id)
        if snapshot is None:
            return None
        return Reservation.reconstitute(dict(snapshot))

    async def list_all(self) -> Sequence[Reservation]:
        return self._all()

    async def list_by_member(self, member_id: MemberId) -> Sequence[Reservation]:
        return [r for r in self._all() if r.member_id == member_id]

    async def list_by_equipment(self, equipment_id: EquipmentId) -> Sequence[Reservation]:
        return [r for r in self._all() if r.equipment_id == equipment_id]

    async def list_by_status(self, status: ReservationStatus) -> Sequence[Reservation]:
        return [r for r in self._all() if r.status == status]

    async def list_active(self, now: datetime) -> Sequence[Reservation]:
        return [r for r in self._all() if r.is_active(now)]

    async def list_active_by_member(
        self, member_id: MemberId, now: datetime
    ) -> Sequence[Reservation]:
        return [r for r in await self.list_active(now) if r.member_id == member_id]

    async def list_active_by_equipment(
        self, equipment_id: EquipmentId, now: datetime
    ) -> Sequence[Reservation]:
        return [r for r in await self.list_active(now) if r.equipment_id == equipment_id]

    async def list_conflicting(
        self, equipment_id: EquipmentId, period: DateRange
    ) -> Sequence[Reservation]:
        return [
            r
            for r in self._all()
            if r.equipment_id == equipment_id and r.status.is_open and r.overlaps(period)
        ]

    async def list_ready_to_fulfill(self, now: datetime) -> Sequence[Reservation]:
        return [r for r in self._all() if r.is_ready_to_fulfill(now)]

    async def list_expired(self, now: datetime) -> Sequence[Reservation]:
        return [r for r in self._all() if r.status.is_open and r.period.has_ended(now)]

    async def list_starting_in(self, period: DateRange) -> Sequence[Reservation]:
        return [
            r
            for r in self._all()
            if r.status.is_open and period.start <= r.period.start <= period.end
        ]

    async def list_created_between(
        self, start: datetime, end: datetime
    ) -> Sequence[Reservation]:
        return [r for r in self._all() if start <= r.created_at <= end]

    async def save(self, reservation: Reservation) -> None:
        self._reservations[reservation.id] = reservation.to_snapshot()

    async def delete(self, reservation_id: ReservationId) -> None:
        self._reservations.pop(reservation_id, None)

    async def exists(self, reservation_id: ReservationId) -> bool:
        return reservation_id in self._reservations

    async def count(self) -> int:
        return len(self._reservations)

    async def count_by_status(self, status: ReservationStatus) -> int:
        return len(await self.list_by_status(status))

    async def count_active_by_member(self, member_id: MemberId, now: datetime) -> int:
        return len(await self.list_active_by_member(member_id, now))

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._reservations.clear()
