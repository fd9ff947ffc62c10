"""Screenshot comparison against stored baselines.

Pillow does the pixel work. This module only applies the policy:
- a pixel differs when its largest channel difference exceeds ``threshold``
  (a 0..1 ratio of the 0..255 channel range)
- a screenshot mismatches when more than ``max_diff_pixels`` pixels differ,
  or when the image sizes differ
- baselines live in ``snapshot_dir`` under the literal scenario file name
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

import structlog
from PIL import Image, ImageChops

from saucedemo_e2e.core.exceptions import BaselineMissingError, VisualMismatchError

log = structlog.get_logger(__name__)

DIFF_COLOR = (255, 0, 0)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of one baseline comparison.

    Attributes:
        name: Baseline file name, e.g. ``saucedemo-login-page.png``.
        matched: True when within budget (or when the baseline was rewritten).
        diff_pixels: Pixels whose difference exceeds the threshold.
        total_pixels: Pixels in the actual screenshot.
        max_diff_pixels: Allowed differing pixels.
        threshold: Per-pixel similarity threshold.
        size_mismatch: True when the images have different dimensions.
        baseline_written: True when this run created or replaced the baseline.
        baseline_path: Path of the baseline image.
        actual_path: Where the actual image was saved on mismatch.
        diff_path: Where the diff image was saved on mismatch.
    """

    name: str
    matched: bool
    diff_pixels: int
    total_pixels: int
    max_diff_pixels: int
    threshold: float
    size_mismatch: bool = False
    baseline_written: bool = False
    baseline_path: Path | None = None
    actual_path: Path | None = None
    diff_path: Path | None = None


def diff_mask(actual: Image.Image, baseline: Image.Image, threshold: float) -> Image.Image:
    """Return an ``L`` mask that is 255 where the images differ beyond ``threshold``.

    Both images must have the same size.
    """
    difference = ImageChops.difference(actual.convert("RGBA"), baseline.convert("RGBA"))

    bands = difference.split()
    channel_max = bands[0]
    for band in bands[1:]:
        channel_max = ImageChops.lighter(channel_max, band)

    cutoff = round(threshold * 255)
    return channel_max.point(lambda value: 255 if value > cutoff else 0)


def count_diff_pixels(actual: Image.Image, baseline: Image.Image, threshold: float) -> int:
    """Count pixels that differ beyond ``threshold``."""
    return diff_mask(actual, baseline, threshold).histogram()[255]


def render_diff_image(
    actual: Image.Image, baseline: Image.Image, mask: Image.Image
) -> Image.Image:
    """Build a ``baseline | actual | diff`` composite with differences in red."""
    width, height = actual.size
    faded = Image.blend(actual.convert("RGB"), Image.new("RGB", actual.size, "white"), 0.7)
    highlight = Image.composite(Image.new("RGB", actual.size, DIFF_COLOR), faded, mask)

    composite = Image.new("RGB", (width * 3, height), "white")
    composite.paste(baseline.convert("RGB"), (0, 0))
    composite.paste(actual.convert("RGB"), (width, 0))
    composite.paste(highlight, (width * 2, 0))
    return composite


class SnapshotComparator:
    """Compares screenshots with baselines stored on disk.

    Usage:
        comparator = SnapshotComparator(Path("tests/e2e/__snapshots__"), Path("out"))
        comparator.compare("login.png", png_bytes, threshold=0.2, max_diff_pixels=50)
    """

    def __init__(
        self,
        snapshot_dir: Path,
        output_dir: Path,
        update_snapshots: bool = False,
    ) -> None:
        self.snapshot_dir = Path(snapshot_dir)
        self.output_dir = Path(output_dir)
        self.update_snapshots = update_snapshots

    def baseline_path(self, name: str) -> Path:
        return self.snapshot_dir / name

    def compare(
        self,
        name: str,
        actual_png: bytes,
        threshold: float,
        max_diff_pixels: int,
    ) -> ComparisonResult:
        """Compare ``actual_png`` with the baseline called ``name``.

        Returns:
            The comparison result when the screenshot matches, or when update
            mode rewrote the baseline.

        Raises:
            BaselineMissingError: If no baseline existed (it is written first).
            VisualMismatchError: If the screenshot exceeds its budget.
        """
        baseline_path = self.baseline_path(name)
        actual = Image.open(io.BytesIO(actual_png))
        total_pixels = actual.size[0] * actual.size[1]

        if self.update_snapshots or not baseline_path.exists():
            existed = baseline_path.exists()
            self._write(baseline_path, actual_png)
            log.info("visual_baseline_written", name=name, path=str(baseline_path))
            if not self.update_snapshots and not existed:
                raise BaselineMissingError(name, str(baseline_path))
            return ComparisonResult(
                name=name,
                matched=True,
                diff_pixels=0,
                total_pixels=total_pixels,
                max_diff_pixels=max_diff_pixels,
                threshold=threshold,
                baseline_written=True,
                baseline_path=baseline_path,
            )

        with Image.open(baseline_path) as baseline:
            baseline.load()
            if baseline.size != actual.size:
                result = self._mismatch(
                    name, actual, baseline, actual_png, None, threshold, max_diff_pixels
                )
                raise VisualMismatchError(result)

            mask = diff_mask(actual, baseline, threshold)
            diff_pixels = mask.histogram()[255]

            if diff_pixels > max_diff_pixels:
                result = self._mismatch(
                    name, actual, baseline, actual_png, mask, threshold, max_diff_pixels
                )
                raise VisualMismatchError(result)

        log.debug("visual_match", name=name, diff_pixels=diff_pixels, budget=max_diff_pixels)
        return ComparisonResult(
            name=name,
            matched=True,
            diff_pixels=diff_pixels,
            total_pixels=total_pixels,
            max_diff_pixels=max_diff_pixels,
            threshold=threshold,
            baseline_path=baseline_path,
        )

    def _mismatch(
        self,
        name: str,
        actual: Image.Image,
        baseline: Image.Image,
        actual_png: bytes,
        mask: Image.Image | None,
        threshold: float,
        max_diff_pixels: int,
    ) -> ComparisonResult:
        stem = Path(name).stem
        actual_path = self.output_dir / f"{stem}-actual.png"
        self._write(actual_path, actual_png)

        diff_path = None
        diff_pixels = actual.size[0] * actual.size[1]
        if mask is not None:
            diff_pixels = mask.histogram()[255]
            diff_path = self.output_dir / f"{stem}-diff.png"
            render_diff_image(actual, baseline, mask).save(diff_path)

        log.warning(
            "visual_mismatch",
            name=name,
            diff_pixels=diff_pixels,
            budget=max_diff_pixels,
            size_mismatch=mask is None,
            actual_path=str(actual_path),
        )
        return ComparisonResult(
            name=name,
            matched=False,
            diff_pixels=diff_pixels,
            total_pixels=actual.size[0] * actual.size[1],
            max_diff_pixels=max_diff_pixels,
            threshold=threshold,
            size_mismatch=mask is None,
            baseline_path=self.baseline_path(name),
            actual_path=actual_path,
            diff_path=diff_path,
        )

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
