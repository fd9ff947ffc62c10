"""REST API payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class User(BaseModel):
    """User record returned by ``POST /api/users``.

    Extra fields from the backend are preserved so tests can assert on them.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    email: str
    name: str
    role: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Track numeric ids as strings so cleanup paths are uniform."""
        return str(v) if isinstance(v, int) else v


class TokenResponse(BaseModel):
    """Bearer token returned by the auth endpoints."""

    model_config = ConfigDict(extra="allow")

    token: str
