"""Unit tests for the order state and role enumerations."""

from bakery_shop.core.models.domain.enums import OrderState, Role


class TestOrderState:
    def test_display_name(self):
        assert OrderState.DELIVERED.display_name == "Delivered"
        assert OrderState.NEW.display_name == "New"

    def test_not_available_states(self):
        assert OrderState.not_available_states() == {
            OrderState.NEW,
            OrderState.CONFIRMED,
            OrderState.PROBLEM,
        }

    def test_values_round_trip_from_json(self):
        assert OrderState("CANCELLED") is OrderState.CANCELLED


def test_role_values():
    assert {role.value for role in Role} == {"admin", "baker", "barista"}
