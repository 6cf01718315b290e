"""Implementación in-memory del repositorio de equipos."""

from datetime import datetime
from typing import Any, Sequence

from equipment_rental.application.interfaces.equipment_repo import EquipmentRepo
from equipment_rental.application.interfaces.rental_repo import RentalRepo
from equipment_rental.application.interfaces.reservation_repo import ReservationRepo
from equipment_rental.domain.constants import MAINTENANCE_INTERVAL_DAYS
from equipment_rental.domain.entities.equipment import Equipment
from equipment_rental.domain.entities.rental import RentalStatus
from equipment_rental.domain.value_objects.date_range import DateRange
from equipment_rental.domain.value_objects.identifiers import EquipmentId


class InMemoryEquipmentRepo(EquipmentRepo):
    """
    Repositorio de equipos en memoria para testing.

    Guarda snapshots: cada lectura devuelve una instancia nueva, así que
    modificar una entidad no afecta lo almacenado hasta llamar `save`.

    `list_available_during` consulta rentas y reservaciones cuando se
    inyectan sus repos; sin ellos solo considera la renta en curso.
    `list_needing_maintenance` usa el intervalo recibido al construirlo.
    """

    def __init__(
        self,
        rental_repo: RentalRepo | None = None,
        reservation_repo: ReservationRepo | None = None,
        maintenance_interval_days: int = MAINTENANCE_INTERVAL_DAYS,
    ) -> None:
        self._items: dict[EquipmentId, dict[str, Any]] = {}
        self._rental_repo = rental_repo
        self._reservation_repo = reservation_repo
        self._maintenance_interval_days = maintenance_interval_days

    def _all(self) -> list[Equipment]:
        return [Equipment.reconstitute(dict(s)) for s in self._items.values()]

    async def get_by_id(self, equipment_id: EquipmentId) -> Equipment | None:
        snapshot = self._items.get(equipment_id)
        if snapshot is None:
            return None
        return Equipment.reconstitute(dict(snapshot))

    async def list_all(self) -> Sequence[Equipment]:
        return self._all()

    async def list_by_category(self, category: str) -> Sequence[Equipment]:
        return [e for e in self._all() if e.category == category]

    async def list_available(self, category: str | None = None) -> Sequence[Equipment]:
        return [
            e
            for e in self._all()
            if e.is_available
            and e.condition.is_rentable
            and (category is None or e.category == category)
        ]

    async def list_available_during(self, period: DateRange) -> Sequence[Equipment]:
        available = []
        for item in self._all():
            if not item.condition.is_rentable:
                continue
            if await self._is_rented_during(item, period):
                continue
            if self._reservation_repo is not None and await self._reservation_repo.list_conflicting(
                item.id, period
            ):
                continue
            available.append(item)
        return available

    async def _is_rented_during(self, item: Equipment, period: DateRange) -> bool:
        if self._rental_repo is None:
            return item.is_rented
        rental = await self._rental_repo.get_active_by_equipment(item.id)
        if rental is None:
            return False
        # Una renta vencida retiene el equipo hasta que se devuelva
        return rental.status == RentalStatus.OVERDUE or rental.period.overlaps(period)

    async def list_needing_maintenance(self, now: datetime) -> Sequence[Equipment]:
        interval = self._maintenance_interval_days
        return [e for e in self._all() if e.needs_maintenance(now, interval)]

    async def save(self, equipment: Equipment) -> None:
        self._items[equipment.id] = equipment.to_snapshot()

    async def delete(self, equipment_id: EquipmentId) -> None:
        self._items.pop(equipment_id, None)

    async def exists(self, equipment_id: EquipmentId) -> bool:
        return equipment_id in self._items

    async def count(self) -> int:
        return len(self._items)

    async def count_by_category(self, category: str) -> int:
        return len(await self.list_by_category(category))

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._items.clear()
