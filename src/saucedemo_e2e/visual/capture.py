"""Visual regression capture helpers.

Screenshots are taken with animations disabled and with dynamic regions
masked, then compared against stored baselines by ``SnapshotComparator``.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from playwright.sync_api import Locator, Page

from saucedemo_e2e.config.settings import Settings, get_settings
from saucedemo_e2e.visual.compare import ComparisonResult, SnapshotComparator

log = structlog.get_logger(__name__)

# Test ids of regions that change between runs
DEFAULT_MASK_TEST_IDS: tuple[str, ...] = ("timestamp", "session-id", "user-id")


class VisualHelper:
    """Captures masked, deterministic screenshots and compares them.

    Usage:
        visual = VisualHelper()
        visual.capture_screenshot(page, "dashboard-full.png", full_page=True)
        visual.capture_element(page, '[data-test="inventory-container"]', "inventory.png")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        comparator: SnapshotComparator | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.comparator = comparator or SnapshotComparator(
            snapshot_dir=self.settings.snapshot_dir,
            output_dir=self.settings.visual_output_dir,
            update_snapshots=self.settings.update_snapshots,
        )

    def default_masks(self, page: Page) -> list[Locator]:
        """Locators for dynamic regions; absent elements are simply not painted."""
        return [page.get_by_test_id(test_id) for test_id in DEFAULT_MASK_TEST_IDS]

    def capture_screenshot(
        self,
        page: Page,
        name: str,
        *,
        mask: Sequence[Locator] | None = None,
        full_page: bool = False,
        max_diff_pixels: int | None = None,
        threshold: float | None = None,
    ) -> ComparisonResult:
        """Capture the page with default and caller masks and compare it."""
        page.wait_for_load_state("load")
        masks = [*self.default_masks(page), *(mask or [])]

        image = page.screenshot(full_page=full_page, mask=masks, animations="disabled")
        return self._compare(name, image, max_diff_pixels, threshold)

    def capture_element(
        self,
        page: Page,
        selector: str,
        name: str,
        *,
        mask: Sequence[Locator] | None = None,
        max_diff_pixels: int | None = None,
        threshold: float | None = None,
    ) -> ComparisonResult:
        """Capture a single element once it is visible and compare it."""
        element = page.locator(selector)
        element.wait_for(state="visible")
        return self.assert_screenshot(
            element,
            name,
            mask=mask,
            max_diff_pixels=max_diff_pixels,
            threshold=threshold,
        )

    def assert_screenshot(
        self,
        target: Page | Locator,
        name: str,
        *,
        mask: Sequence[Locator] | None = None,
        max_diff_pixels: int | None = None,
        threshold: float | None = None,
    ) -> ComparisonResult:
        """Capture a page or locator with the default policy and compare it.

        Raises:
            BaselineMissingError: On first run for ``name``.
            VisualMismatchError: When the capture exceeds its budget.
        """
        page = target if isinstance(target, Page) else target.page
        masks = [*self.default_masks(page), *(mask or [])]

        image = target.screenshot(mask=masks, animations="disabled")
        return self._compare(name, image, max_diff_pixels, threshold)

    def _compare(
        self,
        name: str,
        image: bytes,
        max_diff_pixels: int | None,
        threshold: float | None,
    ) -> ComparisonResult:
        budget = (
            self.settings.default_max_diff_pixels if max_diff_pixels is None else max_diff_pixels
        )
        ratio = self.settings.default_threshold if threshold is None else threshold

        log.debug("visual_capture", name=name, budget=budget, threshold=ratio)
        return self.comparator.compare(name, image, threshold=ratio, max_diff_pixels=budget)
