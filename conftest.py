import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Optional overrides for local test runs
env_test_path = os.path.join(os.path.dirname(__file__), ".env.test")
if os.path.exists(env_test_path):
    load_dotenv(env_test_path, override=True)

# Login rate limiting is switched on explicitly where a test needs it
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from libs.common.config import get_settings  # noqa: E402

# Clear cached settings to reload with new env vars
get_settings.cache_clear()

from services.transport_service.app.main import create_app  # noqa: E402

GESTOR_ID = 1
ADMIN_ID = 2


@pytest.fixture
def app():
    """A fresh app per test, so stores never leak between tests."""
    return create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient bound to the in-process app.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def gestor_headers() -> dict:
    """Claimed identity of the seeded gestor_logistico account."""
    return {"user-id": str(GESTOR_ID)}


@pytest.fixture
def admin_headers() -> dict:
    """Claimed identity of the seeded admin account."""
    return {"user-id": str(ADMIN_ID)}
