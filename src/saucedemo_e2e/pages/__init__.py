"""
Page Objects

Page Object Model (POM) for the SauceDemo storefront.
Encapsulates page interactions and locators.

Usage:
    from saucedemo_e2e.pages import InventoryPage, LoginPage

    login = LoginPage(page)
    login.goto()
    login.login(user.username, user.password)

Pattern:
    - One class per page
    - Methods for actions (goto, login, add_product_to_cart)
    - Attributes for locators
    - Tolerant queries return None/False instead of raising
"""

from saucedemo_e2e.pages.base import BasePage
from saucedemo_e2e.pages.inventory_page import InventoryPage
from saucedemo_e2e.pages.login_page import LoginPage

__all__ = ["BasePage", "InventoryPage", "LoginPage"]
