from datetime import datetime
from typing import Sequence

from equipment_rental.domain.entities.member import Member, MembershipTier
from equipment_rental.domain.value_objects.identifiers import MemberId


class MemberRepo:
    async def get_by_id(self, member_id: MemberId) -> Member | None:
        raise NotImplementedError

    async def get_by_email(self, email: str) -> Member | None:
        """El correo es único entre miembros."""
        raise NotImplementedError

    async def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    async def list_by_tier(self, tier: MembershipTier) -> Sequence[Member]:
        raise NotImplementedError

    async def list_active(self) -> Sequence[Member]:
        raise NotImplementedError

    async def list_with_active_rentals(self) -> Sequence[Member]:
        raise NotImplementedError

    async def list_joined_between(self, start: datetime, end: datetime) -> Sequence[Member]:
        raise NotImplementedError

    async def save(self, member: Member) -> None:
        raise NotImplementedError

    async def delete(self, member_id: MemberId) -> None:
        raise NotImplementedError

    async def exists(self, member_id: MemberId) -> bool:
        raise NotImplementedError

    async def email_exists(self, email: str) -> bool:
        raise NotImplementedError

    async def count(self) -> int:
        raise NotImplementedError

    async def count_active(self) -> int:
        raise NotImplementedError

    async def count_by_tier(self, tier: MembershipTier) -> int:
        raise NotImplementedError
