"""Configuration module for the SauceDemo suite.

Usage:
    from saucedemo_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.sauce_base_url)

Note:
    Tests that patch the environment must call ``get_settings.cache_clear()``
    before reading settings again.
"""

from saucedemo_e2e.config.logging import configure_logging
from saucedemo_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
