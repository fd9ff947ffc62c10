"""Tolerant locator probes.

A probe waits briefly for an element and reports absence as a value
(``False``/``None``) instead of an exception. Only Playwright errors are
treated as absence; anything else propagates.
"""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator


def is_visible(locator: Locator, timeout_ms: int) -> bool:
    """Return whether ``locator`` becomes visible within ``timeout_ms``.

    A timeout of 0 checks the current state without waiting.
    """
    try:
        if timeout_ms <= 0:
            return locator.is_visible()
        locator.wait_for(state="visible", timeout=timeout_ms)
        return True
    except PlaywrightError:
        # TimeoutError subclasses Error; a detached page also lands here
        return False


def text_or_none(locator: Locator, timeout_ms: int) -> str | None:
    """Return the visible element's text, or ``None`` when it is absent."""
    if not is_visible(locator, timeout_ms):
        return None
    try:
        if timeout_ms <= 0:
            # No waiting: read whatever is attached right now
            texts = locator.all_text_contents()
            return texts[0] if texts else None
        return locator.text_content(timeout=timeout_ms)
    except PlaywrightError:
        return None
