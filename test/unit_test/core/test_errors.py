"""Unit tests for the domain error types."""

import pytest

from bakery_shop.core.errors import AccessDeniedError, BakeryError, EntityNotFoundError, UserFriendlyDataError


class TestEntityNotFoundError:
    def test_message_with_id(self):
        error = EntityNotFoundError("Order", 42)

        assert str(error) == "Order 42 not found"
        assert error.entity_name == "Order"
        assert error.entity_id == 42

    def test_message_without_id(self):
        assert str(EntityNotFoundError("PickupLocation")) == "PickupLocation not found"

    def test_default_entity_name(self):
        assert str(EntityNotFoundError()) == "Entity not found"


@pytest.mark.parametrize("error_type", [EntityNotFoundError, UserFriendlyDataError, AccessDeniedError])
def test_errors_share_base_class(error_type):
    assert issubclass(error_type, BakeryError)


def test_user_friendly_message_is_kept_verbatim():
    message = "There is already a product with that name. Please select a unique name for the product."

    assert str(UserFriendlyDataError(message)) == message


def test_access_denied_default_message():
    assert str(AccessDeniedError()) == "Operation not permitted for the current user"
