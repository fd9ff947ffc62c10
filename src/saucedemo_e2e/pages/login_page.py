"""LoginPage - page object for the SauceDemo login form."""

from __future__ import annotations

from playwright.sync_api import Page

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.core import probes
from saucedemo_e2e.pages.base import BasePage


class LoginPage(BasePage):
    """Encapsulates all login-related interactions.

    ``login`` is role-agnostic: it never waits for an outcome because the
    same call succeeds for some roles and shows an error for others. The
    caller decides what to wait for.

    Usage:
        login_page = LoginPage(page)
        login_page.goto()
        login_page.login("standard_user", "secret_sauce")
        assert login_page.get_error_message() is None
    """

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        super().__init__(page, settings)

        # Role-based locators are the most stable for this form
        self.username_input = page.get_by_role("textbox", name="Username")
        self.password_input = page.get_by_role("textbox", name="Password")
        self.login_button = page.get_by_role("button", name="Login")
        # Errors render as an <h3> starting with "Epic sadface:"
        self.error_message = page.get_by_role("heading", level=3)

    def goto(self) -> None:
        """Navigate to the login page and wait for the network to settle."""
        self.page.goto(self.settings.sauce_base_url)
        self.page.wait_for_load_state("networkidle")
        self.log.debug("login_page_opened", url=self.settings.sauce_base_url)

    def login(self, username: str, password: str) -> None:
        """Fill the credentials and submit the form."""
        self.username_input.fill(username)
        self.password_input.fill(password)
        self.login_button.click()
        self.log.info("login_submitted", username=username)

    def get_error_message(self) -> str | None:
        """Return the error heading text, or ``None`` when no error is shown."""
        return probes.text_or_none(self.error_message, self.settings.probe_timeout_ms)

    def has_error_message(self, error_text: str) -> bool:
        """Check whether the shown error contains ``error_text``."""
        message = self.get_error_message()
        return message is not None and error_text in message

    def is_loaded(self) -> bool:
        """Check whether the username field is visible."""
        return probes.is_visible(self.username_input, self.settings.probe_timeout_ms)

    def get_page_title(self) -> str:
        """Return the document title."""
        return self.page.title()
