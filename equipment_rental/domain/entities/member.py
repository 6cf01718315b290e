"""Entidad Member - cliente con reglas por nivel de membresía."""

import re
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, NamedTuple

from equipment_rental.domain.errors import (
    InvalidStateTransitionError,
    MemberInactiveError,
    RentalLimitExceededError,
    ValidationError,
)
from equipment_rental.domain.result import Result
from equipment_rental.domain.value_objects.identifiers import (
    IdFactory,
    Identifier,
    MemberId,
    MemberKind,
)
from equipment_rental.domain.value_objects.money import Money

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class _TierPolicy(NamedTuple):
    discount_percentage: int
    max_concurrent_rentals: int
    max_rental_days: int


class MembershipTier(str, Enum):
    """Niveles de membresía, de menor a mayor beneficio."""

    BASIC = "BASIC"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"

    @property
    def discount_percentage(self) -> int:
        return _TIER_POLICIES[self].discount_percentage

    @property
    def max_concurrent_rentals(self) -> int:
        return _TIER_POLICIES[self].max_concurrent_rentals

    @property
    def max_rental_days(self) -> int:
        return _TIER_POLICIES[self].max_rental_days

    @property
    def allows_early_reservations(self) -> bool:
        return self in (MembershipTier.GOLD, MembershipTier.PLATINUM)


_TIER_POLICIES = {
    MembershipTier.BASIC: _TierPolicy(0, 2, 7),
    MembershipTier.SILVER: _TierPolicy(5, 3, 14),
    MembershipTier.GOLD: _TierPolicy(10, 5, 30),
    MembershipTier.PLATINUM: _TierPolicy(15, 10, 60),
}


def _validate_name(name: str) -> ValidationError | None:
    if not name or not name.strip():
        return ValidationError("name", "el nombre del miembro no puede estar vacío")
    return None


def _validate_email(email: str) -> ValidationError | None:
    if not email or not _EMAIL_PATTERN.match(email):
        return ValidationError("email", f"correo electrónico inválido: {email!r}")
    return None


@dataclass
class Member:
    """
    Agregado que representa a un miembro (cliente).

    El nivel (`tier`) determina el descuento, el número de rentas
    simultáneas y la duración máxima de cada renta.

    Invariante: `active_rental_count` nunca es negativo y nunca supera
    el máximo del nivel al momento de incrementarse.
    """

    # Identificadores
    id: MemberId

    # Datos de contacto
    name: str
    email: str

    # Membresía
    tier: MembershipTier
    join_date: datetime

    # Contadores
    active_rental_count: int = 0
    total_rentals: int = 0

    is_active: bool = True

    # === Consultas ===

    def can_rent(self) -> bool:
        """Activo y por debajo del máximo de rentas simultáneas de su nivel."""
        if not self.is_active:
            return False
        return self.active_rental_count < self.tier.max_concurrent_rentals

    def get_max_rental_days(self) -> int:
        return self.tier.max_rental_days

    def apply_discount(self, cost: Money) -> Money:
        """Aplica el descuento del nivel, redondeando al centavo."""
        percentage = self.tier.discount_percentage
        if percentage == 0:
            return cost
        return cost.multiply((Decimal(100) - percentage) / Decimal(100))

    # === Métodos de negocio ===

    def increment_active_rentals(self) -> Result[None]:
        """Registra una renta nueva; falla si el miembro no puede rentar."""
        if not self.is_active:
            return Result.fail(MemberInactiveError(str(self.id)))
        if not self.can_rent():
            return Result.fail(
                RentalLimitExceededError(
                    str(self.id), self.active_rental_count, self.tier.max_concurrent_rentals
                )
            )

        self.active_rental_count += 1
        self.total_rentals += 1
        return Result.ok()

    def decrement_active_rentals(self) -> Result[None]:
        """Registra que una renta terminó (devuelta o cancelada)."""
        if self.active_rental_count == 0:
            return Result.fail(
                self._error("decrement_active_rentals", "el miembro no tiene rentas activas")
            )

        self.active_rental_count -= 1
        return Result.ok()

    def upgrade_tier(self, new_tier: MembershipTier) -> None:
        self.tier = new_tier

    def deactivate(self) -> Result[None]:
        if self.active_rental_count > 0:
            return Result.fail(
                self._error(
                    "deactivate", "no se puede desactivar a un miembro con rentas activas"
                )
            )

        self.is_active = False
        return Result.ok()

    def reactivate(self) -> None:
        self.is_active = True

    def update_email(self, new_email: str) -> Result[None]:
        error = _validate_email(new_email)
        if error is not None:
            return Result.fail(error)
        self.email = new_email
        return Result.ok()

    def update_name(self, new_name: str) -> Result[None]:
        error = _validate_name(new_name)
        if error is not None:
            return Result.fail(error)
        self.name = new_name
        return Result.ok()

    def _error(self, operation: str, reason: str) -> InvalidStateTransitionError:
        return InvalidStateTransitionError(
            aggregate="Member",
            aggregate_id=str(self.id),
            operation=operation,
            current_status="active" if self.is_active else "inactive",
            reason=reason,
        )

    # === Persistencia ===

    def to_snapshot(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def reconstitute(cls, snapshot: Mapping[str, Any]) -> "Member":
        return cls(**snapshot)

    # === Factory ===

    @classmethod
    def create(
        cls,
        generate_id: IdFactory,
        name: str,
        email: str,
        tier: MembershipTier,
        join_date: datetime,
    ) -> Result["Member"]:
        """Factory para un miembro activo y sin rentas."""
        error = _validate_name(name) or _validate_email(email)
        if error is not None:
            return Result.fail(error)

        return Result.ok(
            cls(
                id=Identifier.generate(MemberKind, generate_id),
                name=name,
                email=email,
                tier=tier,
                join_date=join_date,
            )
        )
