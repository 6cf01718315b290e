"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Reloj y generador de IDs deterministas
- Repositorios y publicador de eventos en memoria
- Datos de prueba (equipos, miembros, periodos)
"""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from equipment_rental.application.interfaces.clock import FakeClock
from equipment_rental.application.interfaces.id_generator import FakeIdGenerator
from equipment_rental.config import Settings
from equipment_rental.domain.entities.equipment import Equipment, EquipmentCondition
from equipment_rental.domain.entities.member import Member, MembershipTier
from equipment_rental.domain.value_objects.money import Money
from equipment_rental.infrastructure.in_memory import (
    InMemoryDamageAssessmentRepo,
    InMemoryEquipmentRepo,
    InMemoryEventPublisher,
    InMemoryMemberRepo,
    InMemoryRentalRepo,
    InMemoryReservationRepo,
    InMemoryTransactionManager,
)
from tests.factories import NOW


# ============================================================================
# UTILIDADES
# ============================================================================


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def id_generator() -> FakeIdGenerator:
    return FakeIdGenerator()


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


# ============================================================================
# ADAPTADORES EN MEMORIA
# ============================================================================


@pytest.fixture()
def rental_repo() -> InMemoryRentalRepo:
    return InMemoryRentalRepo()


@pytest.fixture()
def reservation_repo() -> InMemoryReservationRepo:
    return InMemoryReservationRepo()


@pytest.fixture()
def equipment_repo(rental_repo, reservation_repo, settings) -> InMemoryEquipmentRepo:
    return InMemoryEquipmentRepo(
        rental_repo=rental_repo,
        reservation_repo=reservation_repo,
        maintenance_interval_days=settings.maintenance_interval_days,
    )


@pytest.fixture()
def member_repo() -> InMemoryMemberRepo:
    return InMemoryMemberRepo()


@pytest.fixture()
def damage_assessment_repo() -> InMemoryDamageAssessmentRepo:
    return InMemoryDamageAssessmentRepo()


@pytest.fixture()
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture()
def transaction_manager() -> InMemoryTransactionManager:
    return InMemoryTransactionManager()


# ============================================================================
# DATOS DE PRUEBA
# ============================================================================


@pytest.fixture()
def make_equipment(id_generator):
    def _make(
        name: str = "Hammer Drill",
        category: str = "power-tools",
        daily_rate: Money = Money.dollars(25),
        condition: EquipmentCondition = EquipmentCondition.EXCELLENT,
        purchase_date: datetime = NOW - timedelta(days=30),
    ) -> Equipment:
        return Equipment.create(
            generate_id=id_generator.generate_uuid,
            name=name,
            description=f"{name} for rent",
            category=category,
            daily_rate=daily_rate,
            condition=condition,
            purchase_date=purchase_date,
        ).unwrap()

    return _make


@pytest_asyncio.fixture()
async def stored_equipment(make_equipment, equipment_repo) -> Equipment:
    equipment = make_equipment()
    await equipment_repo.save(equipment)
    return equipment


@pytest.fixture()
def make_member():
    def _make(
        value: str = "m-1",
        tier: MembershipTier = MembershipTier.BASIC,
        name: str = "Ana Torres",
    ) -> Member:
        return Member.create(
            generate_id=lambda: value,
            name=name,
            email=f"{value}@example.com",
            tier=tier,
            join_date=NOW - timedelta(days=365),
        ).unwrap()

    return _make


@pytest_asyncio.fixture()
async def stored_members(make_member, member_repo) -> dict[str, Member]:
    """Miembros BASIC usados por los comandos de prueba."""
    members = {value: make_member(value) for value in ("m-1", "m-2", "m-9")}
    for member in members.values():
        await member_repo.save(member)
    return members
