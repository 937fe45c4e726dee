from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

# Pin the settings the application reads at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BAKERY_SEED_DATA"] = "false"
os.environ["BAKERY_PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["LOGFIRE_ENABLED"] = "false"
os.environ["ENABLE_FILE_LOGGING"] = "false"

# Load test/.env for anything not pinned above
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://localhost",
        "http://127.0.0.1",
        "http://testserver",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_async = httpx._client.AsyncClient.request

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if any(url_str.startswith(p) for p in allowed_prefixes):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)
