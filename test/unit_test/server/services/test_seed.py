from bakery_shop.core.database.repositories.pickup_locations import PickupLocationRepository
from bakery_shop.core.database.repositories.users import UserRepository
from bakery_shop.core.models.domain.enums import Role
from bakery_shop.core.models.domain.paging import PageRequest
from bakery_shop.server.services.passwords import verify_password
from bakery_shop.server.services.seed import (
    DEFAULT_PICKUP_LOCATIONS,
    seed_admin,
    seed_data,
    seed_pickup_locations,
)


class TestSeedPickupLocations:
    async def test_creates_defaults_on_empty_table(self, in_memory_session):
        assert await seed_pickup_locations(in_memory_session) == 2

        locations = await PickupLocationRepository(in_memory_session).find_all(PageRequest())
        assert [location.name for location in locations] == list(DEFAULT_PICKUP_LOCATIONS)

    async def test_leaves_existing_locations_alone(self, in_memory_session, make_location):
        await make_location("Market Stall")

        assert await seed_pickup_locations(in_memory_session) == 0
        assert await PickupLocationRepository(in_memory_session).count() == 1


class TestSeedAdmin:
    async def test_creates_locked_admin(self, in_memory_session):
        admin = await seed_admin(in_memory_session, "admin@bakery.local", "admin")

        assert admin is not None
        assert admin.role == Role.ADMIN
        assert admin.locked is True
        assert verify_password("admin", admin.password_hash)

    async def test_skipped_when_users_exist(self, in_memory_session, baker):
        assert await seed_admin(in_memory_session, "admin@bakery.local", "admin") is None
        assert await UserRepository(in_memory_session).count() == 1


async def test_seed_data_is_idempotent(in_memory_engine, in_memory_session):
    from bakery_shop.core.database import create_sessionmaker

    session_maker = create_sessionmaker(in_memory_engine)
    await seed_data(session_maker)
    await seed_data(session_maker)

    assert await PickupLocationRepository(in_memory_session).count() == 2
    assert await UserRepository(in_memory_session).count() == 1
