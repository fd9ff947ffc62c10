"""Role authentication helper used by the ``authenticated_page`` fixture."""

from __future__ import annotations

import re
import time

import structlog
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from saucedemo_e2e.config.settings import Settings, get_settings
from saucedemo_e2e.models.role import SauceDemoUser
from saucedemo_e2e.pages.login_page import LoginPage

log = structlog.get_logger(__name__)

INVENTORY_URL_PATTERN = re.compile(r"inventory")


def authenticate(
    page: Page,
    user: SauceDemoUser,
    settings: Settings | None = None,
    timeout_ms: int | None = None,
) -> Page:
    """Log ``user`` in on ``page`` and wait for the product listing.

    The wait is best effort. Locked-out, slow and erroring roles may never
    reach the inventory, so a timeout here is logged and ignored; the test
    body's assertions decide the outcome.

    Args:
        page: Page to authenticate on.
        user: Role record to log in with.
        settings: Suite settings (defaults to cached settings).
        timeout_ms: Redirect wait; defaults to ``login_redirect_timeout_ms``.

    Returns:
        The same page, in whatever state the login left it.
    """
    settings = settings or get_settings()
    wait_ms = settings.login_redirect_timeout_ms if timeout_ms is None else timeout_ms

    login_page = LoginPage(page, settings)
    login_page.goto()

    started = time.monotonic()
    login_page.login(user.username, user.password)

    try:
        page.wait_for_url(INVENTORY_URL_PATTERN, timeout=wait_ms)
    except PlaywrightTimeoutError:
        log.info(
            "authentication_timeout_ignored",
            role=user.role.value,
            timeout_ms=wait_ms,
            url=page.url,
        )
    else:
        log.info(
            "authenticated",
            role=user.role.value,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )

    return page
