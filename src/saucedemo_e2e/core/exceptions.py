"""Exception hierarchy for the SauceDemo suite.

Only setup-fatal conditions are raised from here. Best-effort failures
(cleanup, logout) are logged and expected absences are returned as
``None``/``False`` by the page objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from saucedemo_e2e.visual.compare import ComparisonResult


class SauceDemoE2EError(Exception):
    """Base exception for all suite errors."""

    pass


class ConfigurationError(SauceDemoE2EError):
    """Raised when configuration is invalid or incomplete.

    Example:
        raise ConfigurationError("No credentials registered for role 'visual_user'")
    """

    pass


class ApiRequestError(SauceDemoE2EError):
    """Raised when a setup-critical REST call returns a non-2xx status.

    Attributes:
        operation: Human readable name of the failed call.
        status_code: HTTP status code returned by the backend.
        body: Response body text, kept for the failure report.

    Example:
        raise ApiRequestError("Failed to create user", status_code=500, body="boom")
    """

    def __init__(self, operation: str, status_code: int, body: str = "") -> None:
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(f"{operation}: {status_code} {body}".rstrip())


class VisualComparisonError(SauceDemoE2EError, AssertionError):
    """Base class for screenshot comparison failures.

    Subclasses ``AssertionError`` so pytest reports them as test failures
    rather than errors.
    """

    pass


class BaselineMissingError(VisualComparisonError):
    """Raised when no baseline exists and update mode is off.

    The captured image is written as the new baseline before raising, so the
    next run compares against it.
    """

    def __init__(self, name: str, baseline_path: str) -> None:
        self.name = name
        self.baseline_path = baseline_path
        super().__init__(
            f"Baseline for '{name}' did not exist; wrote actual screenshot to {baseline_path}"
        )


class VisualMismatchError(VisualComparisonError):
    """Raised when a screenshot exceeds its differing-pixel budget."""

    def __init__(self, result: ComparisonResult) -> None:
        self.result = result
        if result.size_mismatch:
            detail = "image sizes differ"
        else:
            detail = (
                f"{result.diff_pixels} pixels differ "
                f"(budget {result.max_diff_pixels}, threshold {result.threshold})"
            )
        super().__init__(f"Screenshot '{result.name}' does not match baseline: {detail}")
