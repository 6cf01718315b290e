from datetime import datetime
from typing import Sequence

from equipment_rental.domain.entities.reservation import Reservation, ReservationStatus
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import (
    EquipmentId,
    MemberId,
    ReservationId,
)


class ReservationRepo:
    async def get_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_by_member(self, member_id: MemberId) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_by_equipment(self, equipment_id: EquipmentId) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_by_status(self, status: ReservationStatus) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_active(self, now: datetime) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_active_by_member(
        self, member_id: MemberId, now: datetime
    ) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_active_by_equipment(
        self, equipment_id: EquipmentId, now: datetime
    ) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_conflicting(
        self, equipment_id: EquipmentId, period: DateRange
    ) -> Sequence[Reservation]:
        """PENDING o CONFIRMED del mismo equipo cuyo periodo se traslapa."""
        raise NotImplementedError

    async def list_ready_to_fulfill(self, now: datetime) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_expired(self, now: datetime) -> Sequence[Reservation]:
        """PENDING o CONFIRMED cuyo periodo ya terminó (pendientes de marcar)."""
        raise NotImplementedError

    async def list_starting_in(self, period: DateRange) -> Sequence[Reservation]:
        raise NotImplementedError

    async def list_created_between(
        self, start: datetime, end: datetime
    ) -> Sequence[Reservation]:
        raise NotImplementedError

    async def save(self, reservation: Reservation) -> None:
        raise NotImplementedError

    async def delete(self, reservation_id: ReservationId) -> None:
        raise NotImplementedError

    async def exists(self, reservation_id: ReservationId) -> bool:
        raise NotImplementedError

    async def count(self) -> int:
        raise NotImplementedError

    async def count_by_status(self, status: ReservationStatus) -> int:
        raise NotImplementedError

    async def count_active_by_member(self, member_id: MemberId, now: datetime) -> int:
        raise NotImplementedError
