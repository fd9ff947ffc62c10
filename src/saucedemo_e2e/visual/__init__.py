"""Visual regression helpers."""

from saucedemo_e2e.visual.capture import DEFAULT_MASK_TEST_IDS, VisualHelper
from saucedemo_e2e.visual.compare import ComparisonResult, SnapshotComparator

__all__ = ["DEFAULT_MASK_TEST_IDS", "ComparisonResult", "SnapshotComparator", "VisualHelper"]
