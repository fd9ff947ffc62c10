"""API helper for E2E test setup via REST calls.

This module provides utilities to:
- Create and delete users faster than through the UI
- Log users in and out and refresh bearer tokens
- Clean up every user created during a test, whatever the test outcome

Setup calls (create, login, refresh) raise ``ApiRequestError`` on non-2xx
responses. Teardown calls (delete, logout) are best effort: expected
statuses (404, 401) pass silently and anything else is logged.
"""

import time
from typing import Any

import httpx
import structlog

from saucedemo_e2e.config.settings import Settings, get_settings
from saucedemo_e2e.core.exceptions import ApiRequestError
from saucedemo_e2e.models.user import TokenResponse, User

log = structlog.get_logger(__name__)


def default_user_payload() -> dict[str, Any]:
    """Payload used by ``create_user`` before caller overrides."""
    return {
        "email": f"test-{int(time.time() * 1000)}@example.com",
        "name": "Test User",
        "password": "password123",
    }


class ApiHelper:
    """Helper for API interactions during E2E tests.

    Every successful ``create_user`` registers the new id; ``cleanup`` (run by
    ``__exit__``) deletes each registered id exactly once.

    Example:
        with ApiHelper() as api:
            user = api.create_user(name="John Doe")
            token = api.login_user(user.email, "password123").token
        # user deleted here, even if the block raised
    """

    def __init__(
        self,
        base_url: str | None = None,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = settings.api_timeout
        self._client = client
        self._created_user_ids: list[str] = []

    def __enter__(self) -> "ApiHelper":
        return self

    def __exit__(self, *args: Any) -> None:
        try:
            self.cleanup()
        finally:
            self.close()

    @property
    def client(self) -> httpx.Client:
        """Lazily created httpx client."""
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout)
            log.debug("httpx_client_created", base_url=self.base_url)
        return self._client

    def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            self._client.close()
            self._client = None
            log.debug("httpx_client_closed", base_url=self.base_url)

    @property
    def created_user_ids(self) -> list[str]:
        """Ids still pending cleanup, in creation order."""
        return list(self._created_user_ids)

    # -------------------------------------------------------------------------
    # Health Check
    # -------------------------------------------------------------------------

    def check_health(self) -> bool:
        """Check if the API is reachable and healthy."""
        try:
            response = self.client.get("/health")
        except httpx.HTTPError as e:
            log.debug("api_health_check_failed", base_url=self.base_url, error=str(e))
            return False
        return response.is_success

    # -------------------------------------------------------------------------
    # User Operations
    # -------------------------------------------------------------------------

    def create_user(self, **overrides: Any) -> User:
        """Create a user; it is deleted automatically at cleanup.

        Raises:
            ApiRequestError: If the backend does not return 2xx.
        """
        payload = {**default_user_payload(), **overrides}
        response = self.client.post("/api/users", json=payload)

        if not response.is_success:
            raise ApiRequestError(
                "Failed to create user", status_code=response.status_code, body=response.text
            )

        user = User.model_validate(response.json())
        self._created_user_ids.append(user.id)
        log.info("api_user_created", user_id=user.id, email=user.email)
        return user

    def delete_user(self, user_id: str) -> int:
        """Delete a user. Returns the HTTP status code.

        404 is expected (already gone); other non-2xx statuses are logged.
        """
        response = self.client.delete(f"/api/users/{user_id}")

        if response.is_success:
            if user_id in self._created_user_ids:
                self._created_user_ids.remove(user_id)
            log.debug("api_user_deleted", user_id=user_id)
        elif response.status_code != 404:
            log.warning(
                "api_user_delete_failed",
                user_id=user_id,
                status_code=response.status_code,
            )
        return response.status_code

    # -------------------------------------------------------------------------
    # Auth Operations
    # -------------------------------------------------------------------------

    def login_user(self, email: str, password: str) -> TokenResponse:
        """Log a user in and return the bearer token.

        Raises:
            ApiRequestError: If the backend does not return 2xx.
        """
        response = self.client.post("/api/auth/login", json={"email": email, "password": password})

        if not response.is_success:
            raise ApiRequestError(
                "Login failed", status_code=response.status_code, body=response.text
            )
        return TokenResponse.model_validate(response.json())

    def logout_user(self) -> int:
        """Log out the current session. Returns the HTTP status code.

        401 is expected when no session is active; other non-2xx statuses are
        logged.
        """
        response = self.client.post("/api/auth/logout")

        if not response.is_success and response.status_code != 401:
            log.warning("api_logout_unexpected_status", status_code=response.status_code)
        return response.status_code

    def refresh_token(self, token: str) -> TokenResponse:
        """Exchange a bearer token for a fresh one.

        Raises:
            ApiRequestError: If the backend does not return 2xx.
        """
        response = self.client.post(
            "/api/auth/refresh",
            headers={"Authorization": f"Bearer {token}"},
        )

        if not response.is_success:
            raise ApiRequestError(
                "Token refresh failed", status_code=response.status_code, body=response.text
            )
        return TokenResponse.model_validate(response.json())

    # -------------------------------------------------------------------------
    # Cleanup
    # -------------------------------------------------------------------------

    def cleanup(self) -> list[str]:
        """Delete every user created by this helper.

        The tracking list is drained before deleting, so each id is attempted
        once even if ``cleanup`` runs again. A failing id does not stop the
        remaining deletions.

        Returns:
            Ids whose deletion raised a transport error.
        """
        pending, self._created_user_ids = self._created_user_ids, []
        failed: list[str] = []

        for user_id in pending:
            try:
                self.delete_user(user_id)
            except httpx.HTTPError as e:
                failed.append(user_id)
                log.warning("api_cleanup_failed", user_id=user_id, error=str(e))

        if pending:
            log.info("api_cleanup_finished", attempted=len(pending), failed=len(failed))
        return failed
