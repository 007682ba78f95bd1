import pytest

from libs.auth.accounts import AccountStore
from libs.common.config import DEFAULT_SEED_ACCOUNTS
from services.transport_service.services.registry import TransportRegistry


@pytest.fixture
def account_store() -> AccountStore:
    """Account store holding the default seeded accounts."""
    return AccountStore.from_seeds(DEFAULT_SEED_ACCOUNTS)


@pytest.fixture
def registry() -> TransportRegistry:
    return TransportRegistry()
