from datetime import timedelta

import pytest

from equipment_rental.domain.entities.equipment import Equipment, EquipmentCondition
from equipment_rental.domain.errors import (
    EquipmentAlreadyRentedError,
    EquipmentConditionUnacceptableError,
    EquipmentNotAvailableError,
    InvalidStateTransitionError,
    ValidationError,
)
from equipment_rental.domain.value_objects.identifiers import rental_id
from equipment_rental.domain.value_objects.money import Money
from tests.factories import NOW


class TestEquipmentCondition:
    def test_ordering(self):
        ranks = [c.rank for c in EquipmentCondition]
        assert ranks == [0, 1, 2, 3, 4, 5]
        assert EquipmentCondition.EXCELLENT.rank < EquipmentCondition.UNDER_REPAIR.rank

    @pytest.mark.parametrize(
        "condition, rentable",
        [
            (EquipmentCondition.EXCELLENT, True),
            (EquipmentCondition.GOOD, True),
            (EquipmentCondition.FAIR, True),
            (EquipmentCondition.POOR, False),
            (EquipmentCondition.DAMAGED, False),
            (EquipmentCondition.UNDER_REPAIR, False),
        ],
    )
    def test_rentable(self, condition, rentable):
        assert condition.is_rentable is rentable

    def test_needs_repair(self):
        assert EquipmentCondition.DAMAGED.needs_repair
        assert EquipmentCondition.UNDER_REPAIR.needs_repair
        assert not EquipmentCondition.POOR.needs_repair


class TestCreate:
    def test_availability_follows_condition(self, make_equipment):
        assert make_equipment(condition=EquipmentCondition.GOOD).is_available
        assert not make_equipment(condition=EquipmentCondition.POOR).is_available

    @pytest.mark.parametrize("field", ["name", "category"])
    def test_blank_fields_fail(self, id_generator, field):
        data = {
            "name": "Saw",
            "description": "",
            "category": "tools",
            "daily_rate": Money.dollars(10),
            "condition": EquipmentCondition.GOOD,
            "purchase_date": NOW,
        }
        data[field] = "  "
        result = Equipment.create(id_generator.generate_uuid, **data)

        assert result.is_failure
        assert isinstance(result.error, ValidationError)
        assert result.error.field == field

    def test_zero_rate_allowed(self, make_equipment):
        assert make_equipment(daily_rate=Money.zero()).daily_rate.is_zero()


class TestRentReturn:
    def test_mark_as_rented(self, make_equipment):
        equipment = make_equipment()
        result = equipment.mark_as_rented(rental_id("r-1"))

        assert result.is_success
        assert equipment.is_rented
        assert not equipment.is_available
        assert equipment.current_rental_id == rental_id("r-1")

    def test_already_rented_fails(self, make_equipment):
        equipment = make_equipment()
        equipment.mark_as_rented(rental_id("r-1")).unwrap()

        result = equipment.mark_as_rented(rental_id("r-2"))
        assert isinstance(result.error, EquipmentAlreadyRentedError)

    def test_damaged_fails_regardless_of_flag(self, make_equipment):
        equipment = make_equipment(condition=EquipmentCondition.DAMAGED)
        equipment.is_available = True

        result = equipment.mark_as_rented(rental_id("r-1"))
        assert result.is_failure
        assert isinstance(result.error, EquipmentConditionUnacceptableError)
        assert equipment.current_rental_id is None

    def test_unavailable_flag_fails(self, make_equipment):
        equipment = make_equipment()
        equipment.is_available = False

        result = equipment.mark_as_rented(rental_id("r-1"))
        assert isinstance(result.error, EquipmentNotAvailableError)
        assert result.error.code == "EQUIPMENT_NOT_AVAILABLE"

    def test_returned_damaged_stays_unavailable(self, make_equipment):
        equipment = make_equipment()
        equipment.mark_as_rented(rental_id("r-1")).unwrap()

        assert equipment.mark_as_returned(EquipmentCondition.DAMAGED).is_success
        assert equipment.current_rental_id is None
        assert equipment.condition == EquipmentCondition.DAMAGED
        assert equipment.is_available is False

    def test_returned_good_is_available(self, make_equipment):
        equipment = make_equipment()
        equipment.mark_as_rented(rental_id("r-1")).unwrap()
        equipment.mark_as_returned(EquipmentCondition.GOOD).unwrap()

        assert equipment.is_available

    def test_return_when_not_rented_fails(self, make_equipment):
        result = make_equipment().mark_as_returned(EquipmentCondition.GOOD)
        assert isinstance(result.error, InvalidStateTransitionError)


class TestConditionAndMaintenance:
    def test_update_condition_while_rented_keeps_unavailable(self, make_equipment):
        equipment = make_equipment()
        equipment.mark_as_rented(rental_id("r-1")).unwrap()
        equipment.update_condition(EquipmentCondition.GOOD)

        assert equipment.condition == EquipmentCondition.GOOD
        assert not equipment.is_available

    def test_update_condition_recomputes_availability(self, make_equipment):
        equipment = make_equipment()
        equipment.update_condition(EquipmentCondition.UNDER_REPAIR)
        assert not equipment.is_available
        equipment.update_condition(EquipmentCondition.FAIR)
        assert equipment.is_available

    def test_needs_maintenance_from_purchase_date(self, make_equipment):
        equipment = make_equipment(purchase_date=NOW - timedelta(days=90))
        assert equipment.needs_maintenance(NOW)
        assert not equipment.needs_maintenance(NOW - timedelta(seconds=1))

    def test_record_maintenance_resets_reference(self, make_equipment):
        equipment = make_equipment(purchase_date=NOW - timedelta(days=400))
        equipment.record_maintenance(NOW - timedelta(days=10))

        assert equipment.last_maintenance_date == NOW - timedelta(days=10)
        assert not equipment.needs_maintenance(NOW)
        assert equipment.needs_maintenance(NOW, interval_days=5)


class TestPricing:
    def test_rental_cost(self, make_equipment):
        equipment = make_equipment(daily_rate=Money.dollars(25))
        assert equipment.calculate_rental_cost(7) == Money.dollars(175)

    @pytest.mark.parametrize("days", [0, -3])
    def test_rental_cost_requires_positive_days(self, make_equipment, days):
        with pytest.raises(ValidationError):
            make_equipment().calculate_rental_cost(days)

    def test_update_daily_rate(self, make_equipment):
        equipment = make_equipment()
        equipment.update_daily_rate(Money.dollars(40))
        assert equipment.calculate_rental_cost(2) == Money.dollars(80)


def test_snapshot_round_trip(make_equipment):
    equipment = make_equipment()
    equipment.mark_as_rented(rental_id("r-1")).unwrap()
    equipment.record_maintenance(NOW)

    clone = Equipment.reconstitute(equipment.to_snapshot())
    assert clone == equipment
    assert clone is not equipment
