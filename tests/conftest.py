"""
Shared pytest fixtures.

Rate-limit counters, the price cache and dependency overrides are
process-global; every test starts from a clean slate.
"""

import pytest

from app.interfaces.market.dependencies import price_cache
from app.main import app
from app.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def _reset_process_state():
    limiter.reset()
    price_cache.clear()
    yield
    app.dependency_overrides.clear()
    limiter.reset()
    price_cache.clear()
