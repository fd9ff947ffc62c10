"""InventoryPage - page object for the SauceDemo product listing."""

from __future__ import annotations

from pathlib import Path

from playwright.sync_api import Locator, Page

from saucedemo_e2e.config.settings import Settings
from saucedemo_e2e.core import probes
from saucedemo_e2e.pages.base import BasePage


class InventoryPage(BasePage):
    """Encapsulates all inventory/products page interactions.

    The cart badge is not rendered when the cart is empty, so
    ``get_cart_item_count`` returns ``None`` rather than ``0`` in that state.
    Callers compare with ``(count or 0)``.
    """

    def __init__(self, page: Page, settings: Settings | None = None) -> None:
        super().__init__(page, settings)

        self.inventory_container = page.locator('[data-test="inventory-container"]')
        self.product_items = page.locator('[data-test="inventory-item"]')
        self.cart_badge = page.locator('[class*="shopping_cart_badge"]')
        self.hamburger_menu = page.get_by_role("button", name="Open Menu")
        self.logout_button = page.get_by_role("link", name="Logout")
        self.sort_dropdown = page.get_by_role("combobox")
        # Shown once logout lands back on the login form
        self.login_username_input = page.get_by_role("textbox", name="Username")

    # -------------------------------------------------------------------------
    # Page state
    # -------------------------------------------------------------------------

    def wait_for_page_load(self) -> None:
        """Block until the product container is visible.

        Raises:
            playwright.sync_api.TimeoutError: If the container does not appear
                within ``page_load_timeout_ms``.
        """
        self.inventory_container.wait_for(
            state="visible", timeout=self.settings.page_load_timeout_ms
        )

    def is_loaded(self) -> bool:
        """Check whether the product container is visible."""
        return probes.is_visible(self.inventory_container, self.settings.probe_timeout_ms)

    def get_product_count(self) -> int:
        """Count rendered product rows."""
        return self.product_items.count()

    def get_product_names(self) -> list[str]:
        """Return product display names in render order."""
        names: list[str] = []
        for index in range(self.product_items.count()):
            name = (
                self.product_items.nth(index)
                .locator('[data-test="inventory-item-name"]')
                .text_content()
            )
            if name:
                names.append(name.strip())
        return names

    # -------------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------------

    def _product_button(self, product_name: str) -> Locator:
        row = self.product_items.filter(has=self.page.get_by_text(product_name, exact=True))
        return row.get_by_role("button")

    def add_product_to_cart(self, product_name: str) -> None:
        """Click the add button on the row named ``product_name``.

        Raises:
            playwright.sync_api.TimeoutError: If no row matches the name.
        """
        self._product_button(product_name).click()
        self.log.info("product_added_to_cart", product=product_name)

    def remove_product_from_cart(self, product_name: str) -> None:
        """Click the remove button on the row named ``product_name``."""
        self._product_button(product_name).click()
        self.log.info("product_removed_from_cart", product=product_name)

    def get_cart_item_count(self) -> int | None:
        """Return the cart badge value, or ``None`` when no badge is shown."""
        text = probes.text_or_none(self.cart_badge, self.settings.probe_timeout_ms)
        if text is None or not text.strip():
            return None
        return int(text.strip())

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def logout(self) -> None:
        """Log out through the hamburger menu and wait for the login form.

        Works from any logged-in page (listing, cart, product detail).

        Raises:
            playwright.sync_api.TimeoutError: If the login form is not shown
                within ``logout_timeout_ms``.
        """
        self.hamburger_menu.click()
        self.logout_button.click()
        self.login_username_input.wait_for(
            state="visible", timeout=self.settings.logout_timeout_ms
        )
        self.log.info("logged_out", url=self.page.url)

    def click_product(self, product_name: str) -> None:
        """Open the detail page of a product."""
        self.page.get_by_role("link", name=product_name, exact=True).first.click()
        self.page.wait_for_load_state("networkidle")

    def sort_by(self, option_value: str) -> None:
        """Sort the listing, e.g. ``"az"``, ``"za"``, ``"lohi"`` or ``"hilo"``."""
        self.sort_dropdown.select_option(option_value)

    def take_screenshot(self, filename: str) -> Path:
        """Save a full-page screenshot under the configured screenshot dir."""
        path = Path(self.settings.screenshot_dir) / f"{filename}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path), full_page=True)
        return path
