"""Data models for roles and REST payloads."""

from saucedemo_e2e.models.role import SauceDemoUser, UserRole
from saucedemo_e2e.models.user import TokenResponse, User

__all__ = ["SauceDemoUser", "TokenResponse", "User", "UserRole"]
