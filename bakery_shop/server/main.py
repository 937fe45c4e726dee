"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), exception handlers and monitoring, and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bakery_shop.core.database import init_db
from bakery_shop.core.logging_config import get_logger, setup_logging
from bakery_shop.core.monitoring import initialize_logfire

from .api.v1 import dashboard, health, orders, pickup_locations, products, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.seed import seed_data

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and, when ``BAKERY_SEED_DATA`` is set,
    seeds the default pickup locations and the administrator account.
    """
    # Startup
    try:
        logger.info("Starting up Bakery Shop Server...")
        await init_db()
        logger.info("Database initialized successfully")
        if settings.seed_data:
            await seed_data()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Bakery Shop Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Bakery Shop Server API

    Backend for a bakery's storefront: customer orders with their status history,
    products, pickup locations, staff accounts and a sales dashboard.
    Authenticate with HTTP Basic using a staff account's email and password.
    """,
    version=constant.API_VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, prefix=constant.API_V1_STR, tags=["health"])
app.include_router(products.router, prefix=f"{constant.API_V1_STR}/products")
app.include_router(pickup_locations.router, prefix=f"{constant.API_V1_STR}/pickup-locations")
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")
app.include_router(orders.router, prefix=f"{constant.API_V1_STR}/orders")
app.include_router(dashboard.router, prefix=f"{constant.API_V1_STR}/dashboard")


def run() -> None:
    """Serve the API with uvicorn on ``BAKERY_SERVER_HOST``:``BAKERY_SERVER_PORT``."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    run()
