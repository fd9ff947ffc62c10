"""
Test Data Factories

Factory-boy based factories for generating test data.
Follows the pattern: Faker + overrides + auto-cleanup.

Usage:
    from tests.support.factories import UserPayloadFactory

    payload = UserPayloadFactory.build()  # In-memory only
    user = api.create_user(**payload)  # Persisted, cleaned up by the api fixture

Pattern:
    - Use build() everywhere; persistence goes through ApiHelper
    - Always create through the api fixture so cleanup is registered
"""

from tests.support.factories.product_factory import ProductFactory
from tests.support.factories.user_factory import UserPayloadFactory

__all__ = ["ProductFactory", "UserPayloadFactory"]
