"""Shared plumbing for page objects."""

from __future__ import annotations

import structlog
from playwright.sync_api import Page

from saucedemo_e2e.config.settings import Settings, get_settings


class BasePage:
    """Base class for page objects.

    Holds the Playwright page, the suite settings and a logger bound to the
    page object's name. Locators are created in subclass ``__init__``;
    Playwright resolves them lazily on each action.
    """

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        self.page = page
        self.settings = settings or get_settings()
        self.log = structlog.get_logger(__name__).bind(page_object=type(self).__name__)

    @property
    def url(self) -> str:
        """Current browser URL."""
        return self.page.url
