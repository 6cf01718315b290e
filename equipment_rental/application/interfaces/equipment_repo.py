from datetime import datetime
from typing import Sequence

from equipment_rental.domain.entities.equipment import Equipment
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import EquipmentId


class EquipmentRepo:
    async def get_by_id(self, equipment_id: EquipmentId) -> Equipment | None:
        raise NotImplementedError

    async def list_all(self) -> Sequence[Equipment]:
        raise NotImplementedError

    async def list_by_category(self, category: str) -> Sequence[Equipment]:
        raise NotImplementedError

    async def list_available(self, category: str | None = None) -> Sequence[Equipment]:
        raise NotImplementedError

    async def list_available_during(self, period: DateRange) -> Sequence[Equipment]:
        raise NotImplementedError

    async def list_needing_maintenance(self, now: datetime) -> Sequence[Equipment]:
        raise NotImplementedError

    async def save(self, equipment: Equipment) -> None:
        raise NotImplementedError

    async def delete(self, equipment_id: EquipmentId) -> None:
        raise NotImplementedError

    async def exists(self, equipment_id: EquipmentId) -> bool:
        raise NotImplementedError

    async def count(self) -> int:
        raise NotImplementedError

    async def count_by_category(self, category: str) -> int:
        raise NotImplementedError
