"""Role models for SauceDemo test users.

Each role is a SauceDemo account with a documented, deliberately abnormal
behaviour profile. The enum values are the default usernames.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """Closed set of SauceDemo roles."""

    STANDARD = "standard_user"
    LOCKED_OUT = "locked_out_user"
    PROBLEM = "problem_user"
    PERFORMANCE = "performance_glitch_user"
    ERROR = "error_user"
    VISUAL = "visual_user"


class SauceDemoUser(BaseModel):
    """Credentials and behaviour narrative for one role."""

    model_config = ConfigDict(frozen=True)

    role: UserRole
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    description: str
    expected_behavior: str
