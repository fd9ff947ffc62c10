"""Shared pytest fixtures for the SauceDemo suite.

This module provides:
- Environment loading (.env) before settings are read
- The ``--update-baselines`` option for visual regression
- Structured logging for the session
- The ``settings`` fixture

Usage:
    @pytest.mark.e2e
    def test_something(settings):
        assert settings.sauce_base_url.startswith("https://")
"""

import os
from collections.abc import Generator

import pytest
from dotenv import load_dotenv

from saucedemo_e2e.config import Settings, configure_logging, get_settings
from saucedemo_e2e.core.roles import get_role_registry

# =============================================================================
# Command Line Options
# =============================================================================


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--update-baselines",
        action="store_true",
        default=False,
        help="Rewrite visual regression baselines instead of comparing against them",
    )


def pytest_configure(config: pytest.Config) -> None:
    # Load .env without overriding variables already set in the shell
    load_dotenv()

    if config.getoption("--update-baselines"):
        os.environ["UPDATE_SNAPSHOTS"] = "1"

    get_settings.cache_clear()
    get_role_registry.cache_clear()
    configure_logging(get_settings())


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(scope="session")
def settings() -> Generator[Settings, None, None]:
    """Provide the session-wide settings loaded from the environment."""
    yield get_settings()
