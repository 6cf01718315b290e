import json

import pytest

from equipment_rental.domain.entities.damage_assessment import DamageAssessment
from equipment_rental.domain.entities.equipment import EquipmentCondition
from equipment_rental.domain.entities.rental import Rental
from equipment_rental.domain.entities.reservation import Reservation
from equipment_rental.domain.events import (
    EquipmentDamaged,
    RentalCreated,
    RentalOverdue,
    ReservationCancelled,
    ReservationFulfilled,
)
from equipment_rental.domain.value_objects.identifiers import equipment_id, member_id
from equipment_rental.domain.value_objects.money import Money
from tests.factories import NOW, days_from_now, period


@pytest.fixture()
def rental(id_generator) -> Rental:
    return Rental.create(
        generate_id=id_generator.generate_uuid,
        equipment_id=equipment_id("eq-1"),
        member_id=member_id("m-1"),
        period=period(-3, 0),
        base_cost=Money.dollars(75),
        condition_at_start=EquipmentCondition.GOOD,
        now=days_from_now(-3),
    )


def test_rental_created_payload_is_json_ready(id_generator, rental):
    event = RentalCreated.create(id_generator.generate_uuid, NOW, rental, Money.dollars(25))
    payload = event.to_payload()

    assert event.event_type == "RentalCreated"
    assert event.aggregate_id == str(rental.id)
    assert payload["rental_id"] == str(rental.id)
    assert payload["equipment_id"] == "eq-1"
    assert payload["daily_rate"] == "25.00"
    assert payload["period"] == {
        "start": days_from_now(-3).isoformat(),
        "end": NOW.isoformat(),
    }
    assert payload["occurred_at"] == NOW.isoformat()
    json.dumps(payload)


def test_event_ids_come_from_generator(id_generator, rental):
    first = RentalCreated.create(id_generator.generate_uuid, NOW, rental, Money.dollars(25))
    second = RentalCreated.create(id_generator.generate_uuid, NOW, rental, Money.dollars(25))
    assert first.event_id != second.event_id


def test_rental_overdue_carries_accrued_fee(id_generator, rental):
    now = days_from_now(2)
    rental.mark_as_overdue(Money.dollars(10), now).unwrap()

    event = RentalOverdue.create(id_generator.generate_uuid, now, rental)
    assert event.days_overdue == 2
    assert event.accrued_late_fee == Money.dollars(20)


def test_reservation_events(id_generator, rental):
    reservation = Reservation.create(
        id_generator.generate_uuid, equipment_id("eq-1"), member_id("m-1"), period(1, 2), NOW
    ).unwrap()

    cancelled = ReservationCancelled.create(id_generator.generate_uuid, NOW, reservation)
    assert cancelled.reason is None
    assert cancelled.to_payload()["reason"] is None

    fulfilled = ReservationFulfilled.create(id_generator.generate_uuid, NOW, reservation, rental.id)
    assert fulfilled.to_payload()["rental_id"] == str(rental.id)


def test_equipment_damaged_from_assessment(id_generator, rental):
    assessment = DamageAssessment.create(
        generate_id=id_generator.generate_uuid,
        rental_id=rental.id,
        equipment_id=rental.equipment_id,
        condition_before=EquipmentCondition.GOOD,
        condition_after=EquipmentCondition.POOR,
        notes="bent handle",
        assessed_by="inspector",
        now=NOW,
    ).unwrap()

    event = EquipmentDamaged.create(id_generator.generate_uuid, NOW, assessment)
    payload = event.to_payload()

    assert event.aggregate_id == "eq-1"
    assert payload["previous_condition"] == "GOOD"
    assert payload["new_condition"] == "POOR"
    assert payload["repair_cost"] == "150.00"
    assert payload["damage_description"] == "bent handle"


def test_events_are_immutable(id_generator, rental):
    event = RentalCreated.create(id_generator.generate_uuid, NOW, rental, Money.dollars(25))
    with pytest.raises(AttributeError):
        event.aggregate_id = "other"  # type: ignore[misc]
