"""Fixtures for REST API tests.

Every test in this package is skipped when the backend at BASE_URL does not
answer its health check.
"""

import pytest

from saucedemo_e2e.services import ApiHelper


@pytest.fixture(autouse=True)
def require_api(api: ApiHelper) -> None:
    """Skip when the REST backend is unreachable."""
    if not api.check_health():
        pytest.skip(f"REST backend not reachable at {api.base_url}")
