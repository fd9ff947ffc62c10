"""Role registry for SauceDemo test users.

The registry is a process-lifetime constant table built once from settings.
Lookups are pure; a missing role is a configuration error, never a silent
default.

Usage:
    from saucedemo_e2e.core.roles import get_user
    from saucedemo_e2e.models import UserRole

    user = get_user(UserRole.STANDARD)
    login_page.login(user.username, user.password)
"""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

import structlog

from saucedemo_e2e.config.settings import Settings, get_settings
from saucedemo_e2e.core.exceptions import ConfigurationError
from saucedemo_e2e.models.role import SauceDemoUser, UserRole

log = structlog.get_logger(__name__)

# Descriptions and expected behaviour per role, as documented by SauceDemo
ROLE_PROFILES: dict[UserRole, tuple[str, str]] = {
    UserRole.STANDARD: (
        "Standard user with full functionality",
        "User should be able to login, view products, add items to cart, "
        "checkout, and logout without any issues",
    ),
    UserRole.LOCKED_OUT: (
        "Account locked due to too many login attempts",
        'Login should fail with "Sorry, this user has been locked out" error message',
    ),
    UserRole.PROBLEM: (
        "User experiencing UI/functional issues",
        "User can login but experiences rendering issues, broken images, "
        "or missing elements on product pages",
    ),
    UserRole.PERFORMANCE: (
        "User experiencing significant performance delays",
        "User can login and interact but experiences 3-second delays on each action",
    ),
    UserRole.ERROR: (
        "User experiencing error pages and failures",
        "User can login but experiences errors during checkout or on specific pages",
    ),
    UserRole.VISUAL: (
        "User experiencing visual regression/styling issues",
        "User can login and navigate but sees visual inconsistencies, "
        "misaligned elements, or incorrect colors",
    ),
}

# Every role except the locked-out account reaches the product listing
ROLES_REACHING_INVENTORY: tuple[UserRole, ...] = tuple(
    role for role in UserRole if role is not UserRole.LOCKED_OUT
)


def _username_for(role: UserRole, settings: Settings) -> str:
    usernames = {
        UserRole.STANDARD: settings.sauce_standard_user,
        UserRole.LOCKED_OUT: settings.sauce_locked_out_user,
        UserRole.PROBLEM: settings.sauce_problem_user,
        UserRole.PERFORMANCE: settings.sauce_performance_glitch_user,
        UserRole.ERROR: settings.sauce_error_user,
        UserRole.VISUAL: settings.sauce_visual_user,
    }
    return usernames[role]


def build_role_registry(settings: Settings) -> Mapping[UserRole, SauceDemoUser]:
    """Build the complete, read-only role table from settings.

    Args:
        settings: Settings providing usernames and the shared password.

    Returns:
        Read-only mapping with exactly one record per ``UserRole``.

    Raises:
        ConfigurationError: If a role has no profile or empty credentials.
    """
    registry: dict[UserRole, SauceDemoUser] = {}

    for role in UserRole:
        profile = ROLE_PROFILES.get(role)
        if profile is None:
            raise ConfigurationError(f"No profile defined for role '{role.value}'")

        username = _username_for(role, settings)
        if not username or not settings.sauce_password:
            raise ConfigurationError(f"Empty credentials for role '{role.value}'")

        description, expected_behavior = profile
        registry[role] = SauceDemoUser(
            role=role,
            username=username,
            password=settings.sauce_password,
            description=description,
            expected_behavior=expected_behavior,
        )

    log.debug("role_registry_built", roles=[role.value for role in registry])
    return MappingProxyType(registry)


@lru_cache
def get_role_registry() -> Mapping[UserRole, SauceDemoUser]:
    """Get the cached role table for this process."""
    return build_role_registry(get_settings())


def get_user(
    role: UserRole | str,
    registry: Mapping[UserRole, SauceDemoUser] | None = None,
) -> SauceDemoUser:
    """Look up the credential record for a role.

    Args:
        role: A ``UserRole`` or its string value (e.g. ``"standard_user"``).
        registry: Table to search; defaults to the process registry.

    Raises:
        ConfigurationError: If the role is unknown or missing from the table.
    """
    table = registry if registry is not None else get_role_registry()

    try:
        key = UserRole(role)
    except ValueError as e:
        raise ConfigurationError(f"Unknown role '{role}'") from e

    user = table.get(key)
    if user is None:
        raise ConfigurationError(f"No credentials registered for role '{key.value}'")
    return user
