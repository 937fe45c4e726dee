"""
Startup data seeding.

Makes a fresh installation usable: creates the standard pickup locations and
a locked administrator account when the respective tables are empty.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bakery_shop.core.database import async_session_maker
from bakery_shop.core.database.entities.pickup_locations import PickupLocation
from bakery_shop.core.database.entities.users import User
from bakery_shop.core.database.repositories.pickup_locations import PickupLocationRepository
from bakery_shop.core.database.repositories.users import UserRepository
from bakery_shop.core.logging_config import get_logger
from bakery_shop.core.models.domain.enums import Role
from bakery_shop.server.core.config import settings

from .passwords import hash_password

logger = get_logger(__name__)

DEFAULT_PICKUP_LOCATIONS = ("Store", "Bakery")


async def seed_pickup_locations(session: AsyncSession) -> int:
    """Create the default pickup locations if there are none; returns how many were created."""
    repository = PickupLocationRepository(session)
    if await repository.count() > 0:
        return 0
    for name in DEFAULT_PICKUP_LOCATIONS:
        session.add(PickupLocation(name=name))
    await session.commit()
    logger.info(f"Seeded pickup locations: {', '.join(DEFAULT_PICKUP_LOCATIONS)}")
    return len(DEFAULT_PICKUP_LOCATIONS)


async def seed_admin(session: AsyncSession, email: str, password: str) -> Optional[User]:
    """Create a locked administrator if no account exists yet."""
    repository = UserRepository(session)
    if await repository.count() > 0:
        return None
    admin = User(
        email=email,
        password_hash=hash_password(password),
        first_name="Admin",
        last_name="User",
        role=Role.ADMIN,
        locked=True,
    )
    session.add(admin)
    await session.commit()
    logger.info(f"Seeded administrator account {email}")
    return admin


async def seed_data(session_maker: Optional[async_sessionmaker[AsyncSession]] = None) -> None:
    """Run every seeding step in its own session."""
    async with (session_maker or async_session_maker)() as session:
        await seed_pickup_locations(session)
        await seed_admin(session, settings.admin_email, settings.admin_password)
