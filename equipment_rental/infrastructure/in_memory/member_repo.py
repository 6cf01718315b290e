"""Implementación in-memory del repositorio de miembros."""

from datetime import datetime
from typing import Any, Sequence

from equipment_rental.application.interfaces.member_repo import MemberRepo
from equipment_rental.domain.entities.member import Member, MembershipTier
from equipment_rental.domain.value_objects.identifiers import MemberId


class InMemoryMemberRepo(MemberRepo):
    """Repositorio de miembros en memoria para testing."""

    def __init__(self) -> None:
        self._members: dict[MemberId, dict[str, Any]] = {}

    def _all(self) -> list[Member]:
        return [Member.reconstitute(dict(s)) for s in self._members.values()]

    async def get_by_id(self, member_id: MemberId) -> Member | None:
        snapshot = self._members.get(member_id)
        if snapshot is None:
            return None
        return Member.reconstitute(dict(snapshot))

    async def get_by_email(self, email: str) -> Member | None:
        wanted = email.lower()
        for member in self._all():
            if member.email.lower() == wanted:
                return member
        return None

    async def list_all(self) -> Sequence[Member]:
        return self._all()

    async def list_by_tier(self, tier: MembershipTier) -> Sequence[Member]:
        return [m for m in self._all() if m.tier == tier]

    async def list_active(self) -> Sequence[Member]:
        return [m for m in self._all() if m.is_active]

    async def list_with_active_rentals(self) -> Sequence[Member]:
        return [m for m in self._all() if m.active_rental_count > 0]

    async def list_joined_between(self, start: datetime, end: datetime) -> Sequence[Member]:
        return [m for m in self._all() if start <= m.join_date <= end]

    async def save(self, member: Member) -> None:
        self._members[member.id] = member.to_snapshot()

    async def delete(self, member_id: MemberId) -> None:
        self._members.pop(member_id, None)

    async def exists(self, member_id: MemberId) -> bool:
        return member_id in self._members

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def count(self) -> int:
        return len(self._members)

    async def count_active(self) -> int:
        return len(await self.list_active())

    async def count_by_tier(self, tier: MembershipTier) -> int:
        return len(await self.list_by_tier(tier))

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._members.clear()
