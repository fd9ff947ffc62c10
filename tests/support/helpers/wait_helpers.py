"""
Wait Helpers

Polling for state that the backend settles asynchronously.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool],
    timeout_seconds: float = 10.0,
    poll_interval_seconds: float = 0.5,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Call ``action`` until ``condition`` accepts its result.

    Raises:
        TimeoutError: If the condition is still false after ``timeout_seconds``.
            The last result is included in the message.

    Example:
        # Wait until a deleted user is really gone
        wait_for_condition(
            action=lambda: api.delete_user(user.id),
            condition=lambda status: status == 404,
        )
    """
    deadline = time.monotonic() + timeout_seconds
    result = action()

    while not condition(result):
        if time.monotonic() >= deadline:
            raise TimeoutError(f"{error_message}. Last result: {result!r}")
        time.sleep(poll_interval_seconds)
        result = action()

    return result
