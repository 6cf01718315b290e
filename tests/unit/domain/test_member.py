import pytest

from equipment_rental.domain.entities.member import Member, MembershipTier
from equipment_rental.domain.errors import (
    InvalidStateTransitionError,
    MemberInactiveError,
    RentalLimitExceededError,
    ValidationError,
)
from equipment_rental.domain.value_objects.money import Money
from tests.factories import NOW


class TestMembershipTier:
    @pytest.mark.parametrize(
        "tier, discount, concurrent, days",
        [
            (MembershipTier.BASIC, 0, 2, 7),
            (MembershipTier.SILVER, 5, 3, 14),
            (MembershipTier.GOLD, 10, 5, 30),
            (MembershipTier.PLATINUM, 15, 10, 60),
        ],
    )
    def test_policies(self, tier, discount, concurrent, days):
        assert tier.discount_percentage == discount
        assert tier.max_concurrent_rentals == concurrent
        assert tier.max_rental_days == days

    def test_early_reservations(self):
        allowed = [t for t in MembershipTier if t.allows_early_reservations]
        assert allowed == [MembershipTier.GOLD, MembershipTier.PLATINUM]


class TestCreate:
    def test_new_member_starts_active_without_rentals(self, make_member):
        member = make_member("m-7", MembershipTier.SILVER)

        assert str(member.id) == "m-7"
        assert member.is_active
        assert member.active_rental_count == 0
        assert member.total_rentals == 0
        assert member.can_rent()

    @pytest.mark.parametrize(
        "name, email, field",
        [
            ("  ", "ana@example.com", "name"),
            ("Ana", "not-an-email", "email"),
            ("Ana", "", "email"),
        ],
    )
    def test_invalid_data_fails(self, id_generator, name, email, field):
        result = Member.create(id_generator.generate_uuid, name, email, MembershipTier.BASIC, NOW)

        assert result.is_failure
        assert isinstance(result.error, ValidationError)
        assert result.error.field == field


class TestDiscount:
    @pytest.mark.parametrize(
        "tier, expected",
        [
            (MembershipTier.BASIC, "175.00"),
            (MembershipTier.SILVER, "166.25"),
            (MembershipTier.GOLD, "157.50"),
            (MembershipTier.PLATINUM, "148.75"),
        ],
    )
    def test_apply_discount(self, make_member, tier, expected):
        member = make_member(tier=tier)
        assert member.apply_discount(Money.dollars(175)) == Money.dollars(expected)

    def test_discount_rounds_to_cent(self, make_member):
        member = make_member(tier=MembershipTier.SILVER)
        # 0.95 * 0.33 = 0.3135
        assert member.apply_discount(Money.dollars("0.33")) == Money.from_cents(31)


class TestActiveRentals:
    def test_increment_up_to_tier_limit(self, make_member):
        member = make_member(tier=MembershipTier.BASIC)
        member.increment_active_rentals().unwrap()
        member.increment_active_rentals().unwrap()

        result = member.increment_active_rentals()

        assert isinstance(result.error, RentalLimitExceededError)
        assert not member.can_rent()
        assert member.active_rental_count == 2
        assert member.total_rentals == 2

    def test_decrement_keeps_total(self, make_member):
        member = make_member()
        member.increment_active_rentals().unwrap()

        member.decrement_active_rentals().unwrap()

        assert member.active_rental_count == 0
        assert member.total_rentals == 1
        assert member.can_rent()

    def test_decrement_below_zero_fails(self, make_member):
        result = make_member().decrement_active_rentals()

        assert isinstance(result.error, InvalidStateTransitionError)
        assert result.error.aggregate == "Member"

    def test_inactive_member_cannot_rent(self, make_member):
        member = make_member()
        member.deactivate().unwrap()

        assert not member.can_rent()
        assert isinstance(member.increment_active_rentals().error, MemberInactiveError)

        member.reactivate()
        assert member.can_rent()

    def test_upgrade_raises_limits(self, make_member):
        member = make_member()
        member.increment_active_rentals().unwrap()
        member.increment_active_rentals().unwrap()

        member.upgrade_tier(MembershipTier.SILVER)

        assert member.can_rent()
        assert member.get_max_rental_days() == 14


class TestAccount:
    def test_cannot_deactivate_with_active_rentals(self, make_member):
        member = make_member()
        member.increment_active_rentals().unwrap()

        result = member.deactivate()

        assert isinstance(result.error, InvalidStateTransitionError)
        assert "rentas activas" in result.error.message
        assert member.is_active

    def test_update_contact_data(self, make_member):
        member = make_member()

        assert member.update_name("Ana María").is_success
        assert member.update_email("ana.maria@example.com").is_success
        assert member.update_email("broken").is_failure
        assert member.update_name("").is_failure

        assert member.name == "Ana María"
        assert member.email == "ana.maria@example.com"

    def test_snapshot_roundtrip(self, make_member):
        member = make_member(tier=MembershipTier.GOLD)
        member.increment_active_rentals().unwrap()

        assert Member.reconstitute(member.to_snapshot()) == member
