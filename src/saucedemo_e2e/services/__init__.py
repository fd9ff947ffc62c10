"""REST service helpers."""

from saucedemo_e2e.services.api_helper import ApiHelper

__all__ = ["ApiHelper"]
