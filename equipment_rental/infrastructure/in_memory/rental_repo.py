"""Implementación in-memory del repositorio de rentas."""

from datetime import datetime
from typing import Any, Sequence

from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.domain.entities.rental import Rental, RentalStatus
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import EquipmentId, MemberId, RentalId


class InMemoryRentalRepo(RentalRepo):
    """Repositorio de rentas en memoria para testing."""

    def __init__(self) -> None:
        self._rentals: dict[RentalId, dict[str, Any]] = {}

    def _all(self) -> list[Rental]:
        return [Rental.reconstitute(dict(s)) for s in self._rentals.values()]

    async def get_by_id(self, rental_id: RentalId) -> Rental | None:
        snapshot = self._rentals.get(rental_id)
        if snapshot is None:
            return None
        return Rental.reconstitute(dict(snapshot))

    async def list_all(self) -> Sequence[Rental]:
        return self._all()

    async def list_by_member(self, member_id: MemberId) -> Sequence[Rental]:
        return [r for r in self._all() if r.member_id == member_id]

    async def list_by_equipment(self, equipment_id: EquipmentId) -> Sequence[Rental]:
        return [r for r in self._all() if r.equipment_id == equipment_id]

    async def list_by_status(self, status: RentalStatus) -> Sequence[Rental]:
        return [r for r in self._all() if r.status == status]

    async def list_active(self) -> Sequence[Rental]:
        return [r for r in self._all() if r.status.is_in_possession]

    async def list_active_by_member(self, member_id: MemberId) -> Sequence[Rental]:
        return [r for r in await self.list_active() if r.member_id == member_id]

    async def get_active_by_equipment(self, equipment_id: EquipmentId) -> Rental | None:
        for rental in await self.list_active():
            if rental.equipment_id == equipment_id:
                return rental
        return None

    async def list_overdue(self, now: datetime) -> Sequence[Rental]:
        return [r for r in self._all() if r.is_overdue(now)]

    async def list_ending_in(self, period: DateRange) -> Sequence[Rental]:
        return [
            r
            for r in await self.list_active()
            if period.start <= r.period.end <= period.end
        ]

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Rental]:
        return [
            r for r in self._all() if r.created_at is not None and start <= r.created_at <= end
        ]

    async def list_returned_between(self, start: datetime, end: datetime) -> Sequence[Rental]:
        return [
            r for r in self._all() if r.returned_at is not None and start <= r.returned_at <= end
        ]

    async def save(self, rental: Rental) -> None:
        self._rentals[rental.id] = rental.to_snapshot()

    async def delete(self, rental_id: RentalId) -> None:
        self._rentals.pop(rental_id, None)

    async def exists(self, rental_id: RentalId) -> bool:
        return rental_id in self._rentals

    async def count(self) -> int:
        return len(self._rentals)

    async def count_by_status(self, status: RentalStatus) -> int:
        return len(await self.list_by_status(status))

    async def count_active_by_member(self, member_id: MemberId) -> int:
        return len(await self.list_active_by_member(member_id))

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._rentals.clear()
