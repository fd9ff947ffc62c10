"""Playwright E2E test fixtures for the SauceDemo suite.

This module provides fixtures for:
- Browser and page setup (viewport, headed mode, slow motion)
- Page objects bound to the test's page
- Role authentication that tolerates roles which never reach the inventory
- The REST API helper with automatic cleanup
- Visual regression capture

Usage:
    @pytest.mark.e2e
    def test_standard_user_sees_products(authenticated_page, inventory_page):
        authenticated_page(get_user(UserRole.STANDARD))
        inventory_page.wait_for_page_load()
        assert inventory_page.get_product_count() > 0
"""

import os
from collections.abc import Callable, Generator, Mapping
from typing import Any

import pytest
from playwright.sync_api import Page

from saucedemo_e2e.config import Settings
from saucedemo_e2e.core.auth import authenticate
from saucedemo_e2e.core.roles import get_role_registry
from saucedemo_e2e.models import SauceDemoUser, UserRole
from saucedemo_e2e.pages import InventoryPage, LoginPage
from saucedemo_e2e.services import ApiHelper
from saucedemo_e2e.visual import VisualHelper

# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure a fixed viewport so screenshots are comparable."""
    return {
        **browser_context_args,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": os.environ.get("HEADED", "0") != "1",
        "slow_mo": int(os.environ.get("SLOW_MO", "0")),
    }


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def sauce_users() -> Mapping[UserRole, SauceDemoUser]:
    """Provide the role table (one record per role)."""
    return get_role_registry()


@pytest.fixture
def login_page(page: Page, settings: Settings) -> LoginPage:
    """Provide a LoginPage bound to this test's page."""
    return LoginPage(page, settings)


@pytest.fixture
def inventory_page(page: Page, settings: Settings) -> InventoryPage:
    """Provide an InventoryPage bound to this test's page."""
    return InventoryPage(page, settings)


@pytest.fixture
def authenticated_page(page: Page, settings: Settings) -> Callable[..., Page]:
    """Return a helper that logs a role in on this test's page.

    The helper never fails on a missing redirect; assertions in the test
    body decide the outcome.

    Usage:
        page = authenticated_page(get_user(UserRole.STANDARD))
        page = authenticated_page(user, timeout_ms=settings.performance_redirect_timeout_ms)
    """

    def _authenticate(user: SauceDemoUser, timeout_ms: int | None = None) -> Page:
        return authenticate(page, user, settings, timeout_ms=timeout_ms)

    return _authenticate


# =============================================================================
# API and Visual Fixtures
# =============================================================================


@pytest.fixture
def api(settings: Settings) -> Generator[ApiHelper, None, None]:
    """Provide the REST helper; users it created are deleted afterwards."""
    with ApiHelper(settings=settings) as helper:
        yield helper


@pytest.fixture
def visual(settings: Settings) -> VisualHelper:
    """Provide the visual regression helper."""
    return VisualHelper(settings)
