"""
Test Helpers

Pure functions for common test operations.
No framework dependencies - can be used anywhere.

Usage:
    from tests.support.helpers import wait_for_condition, unique_id
"""

from tests.support.helpers.data_helpers import random_email, random_string, unique_id
from tests.support.helpers.wait_helpers import wait_for_condition

__all__ = ["random_email", "random_string", "unique_id", "wait_for_condition"]
