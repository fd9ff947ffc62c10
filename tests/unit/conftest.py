"""Fixtures for offline unit tests.

This module provides:
- ``settings`` built without .env and with temporary artifact directories
- ``mock_page``: a Playwright ``Page`` double whose locator factories return
  one stable mock per distinct query, so page objects and tests see the
  same locator objects

Usage:
    @pytest.mark.unit
    def test_login(mock_page, settings):
        login = LoginPage(mock_page, settings)
        login.login("u", "p")
        mock_page.get_by_role("button", name="Login").click.assert_called_once()
"""

import os
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Locator, Page

from saucedemo_e2e.config.settings import Settings


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    unit_dir = Path(__file__).parent
    for item in items:
        if unit_dir in item.path.parents:
            item.add_marker(pytest.mark.unit)


class LocatorFactory:
    """Return the same ``MagicMock(spec=Locator)`` for identical queries."""

    def __init__(self, method: str) -> None:
        self.method = method
        self.created: dict[tuple[Any, ...], MagicMock] = {}

    def __call__(self, *args: Any, **kwargs: Any) -> MagicMock:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in self.created:
            self.created[key] = MagicMock(spec=Locator, name=f"{self.method}{args}{kwargs}")
        return self.created[key]


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings isolated from the developer's .env and working directory."""
    for key in list(os.environ):
        if key.startswith("SAUCE_") or key in ("BASE_URL", "UPDATE_SNAPSHOTS"):
            monkeypatch.delenv(key)
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        snapshot_dir=tmp_path / "snapshots",
        visual_output_dir=tmp_path / "visual",
        screenshot_dir=tmp_path / "screenshots",
        probe_timeout_ms=500,
    )


@pytest.fixture
def mock_page() -> MagicMock:
    """Playwright Page double with stable locators per query."""
    page = MagicMock(spec=Page)
    page.url = "https://www.saucedemo.com/"
    page.locator.side_effect = LocatorFactory("locator")
    page.get_by_role.side_effect = LocatorFactory("get_by_role")
    page.get_by_text.side_effect = LocatorFactory("get_by_text")
    page.get_by_test_id.side_effect = LocatorFactory("get_by_test_id")
    return page
