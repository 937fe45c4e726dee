"""
Unit tests for FastAPI application lifespan management.

Startup creates missing tables and, when enabled, seeds the default data;
failures are logged without stopping the server.
"""

from unittest.mock import AsyncMock, patch

from fastapi import FastAPI

from bakery_shop.server import main
from bakery_shop.server.main import lifespan


async def test_startup_initializes_database_without_seeding():
    with patch.object(main, "init_db", new_callable=AsyncMock) as mock_init_db, patch.object(
        main, "seed_data", new_callable=AsyncMock
    ) as mock_seed, patch.object(main.settings, "seed_data", False):
        async with lifespan(FastAPI()):
            mock_init_db.assert_awaited_once()

    mock_seed.assert_not_awaited()


async def test_startup_seeds_when_enabled():
    with patch.object(main, "init_db", new_callable=AsyncMock), patch.object(
        main, "seed_data", new_callable=AsyncMock
    ) as mock_seed, patch.object(main.settings, "seed_data", True):
        async with lifespan(FastAPI()):
            mock_seed.assert_awaited_once()


async def test_startup_failure_is_logged():
    with patch.object(
        main, "init_db", new_callable=AsyncMock, side_effect=RuntimeError("no database")
    ), patch.object(main, "seed_data", new_callable=AsyncMock) as mock_seed, patch.object(
        main, "logger"
    ) as mock_logger:
        async with lifespan(FastAPI()):
            pass

    mock_seed.assert_not_awaited()
    mock_logger.error.assert_called_once()
    assert "Database initialization failed" in mock_logger.error.call_args[0][0]


async def test_app_metadata():
    assert main.app.title == "Bakery Shop"
    assert main.app.openapi_url == "/api/v1/openapi.json"
    paths = {route.path for route in main.app.routes}
    assert {"/api/v1/health", "/api/v1/products", "/api/v1/orders/{order_id}", "/api/v1/dashboard"} <= paths


def test_run_serves_app_on_configured_address():
    with patch("uvicorn.run") as mock_run:
        main.run()

    mock_run.assert_called_once()
    assert mock_run.call_args[0][0] is main.app
    assert mock_run.call_args[1]["host"] == main.settings.server_host
    assert mock_run.call_args[1]["port"] == main.settings.server_port
