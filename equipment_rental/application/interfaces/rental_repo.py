from datetime import datetime
from typing import Sequence

from equipment_rental.domain.entities.rental import Rental, RentalStatus
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import EquipmentId, MemberId, RentalId


class RentalRepo:
    async def get_by_id(self, rental_id: RentalId) -> Rental | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_by_member(self, member_id: MemberId) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_by_equipment(self, equipment_id: EquipmentId) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_by_status(self, status: RentalStatus) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_active(self) -> Sequence[Rental]:
        """ACTIVE u OVERDUE: el equipo sigue en poder del miembro."""
        raise NotImplementedError

    async def list_active_by_member(self, member_id: MemberId) -> Sequence[Rental]:
        raise NotImplementedError

    async def get_active_by_equipment(self, equipment_id: EquipmentId) -> Rental | None:
        raise NotImplementedError

    async def list_overdue(self, now: datetime) -> Sequence[Rental]:
        """Rentas ACTIVE cuyo periodo ya terminó."""
        raise NotImplementedError

    async def list_ending_in(self, period: DateRange) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Rental]:
        raise NotImplementedError

    async def list_returned_between(self, start: datetime, end: datetime) -> Sequence[Rental]:
        raise NotImplementedError

    async def save(self, rental: Rental) -> None:
        raise NotImplementedError

    async def delete(self, rental_id: RentalId) -> None:
        raise NotImplementedError

    async def exists(self, rental_id: RentalId) -> bool:
        raise NotImplementedError

    async def count(self) -> int:
        raise NotImplementedError

    async def count_by_status(self, status: RentalStatus) -> int:
        raise NotImplementedError

    async def count_active_by_member(self, member_id: MemberId) -> int:
        raise NotImplementedError
