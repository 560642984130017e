# pipeline/boolean_pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from ..models.boolean_op import BooleanOp
from ..models.compressed_image import CompressedImage
from ..services.compressed_image_service import CompressedImageService

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# 16x16 sample used when no grid is supplied
SAMPLE_GRID = np.array([
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 0, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0],
    [1, 1, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1],
], dtype=np.uint8)


@dataclass
class SelfCheckReport:
    """Rendered stages of the invert / XOR / AND sequence."""
    original: str
    inverted: str
    after_xor: str
    after_and: str
    xor_all_black: bool    # img ^ ~img must be black everywhere
    and_matches_inverted: bool

    @property
    def passed(self) -> bool:
        return self.xor_all_black and self.and_matches_inverted


# ------------------------------------------------------------------
def apply_operation(
    first: CompressedImage,
    second: CompressedImage,
    op: Union[BooleanOp, str],
    *,
    image_service: CompressedImageService | None = None,
) -> CompressedImage:
    """
    Combine *first* with *second* in place and return *first*.
    """
    image_service = image_service or CompressedImageService()
    if isinstance(op, str):
        op = BooleanOp.from_name(op)
    image_service.combine(first, second, op)
    return first


def run_self_check(
    grid: Sequence[Sequence[int]] = SAMPLE_GRID,
    *,
    image_service: CompressedImageService | None = None,
) -> SelfCheckReport:
    """
    1. compress *grid* twice (img1, img2)
    2. invert img2
    3. img1 ^= img2  → all black
    4. img1 &= img2  → equal to img2
    """
    image_service = image_service or CompressedImageService()

    img1 = image_service.from_grid(grid)
    img2 = image_service.copy(img1)
    original = image_service.render(img1)

    image_service.invert(img2)
    inverted = image_service.render(img2)

    image_service.perform_xor(img1, img2)
    after_xor = image_service.render(img1)
    xor_all_black = image_service.black_pixel_count(img1) == img1.width * img1.height

    image_service.perform_and(img1, img2)
    after_and = image_service.render(img1)
    and_matches = image_service.equals(img1, img2)

    report = SelfCheckReport(
        original=original,
        inverted=inverted,
        after_xor=after_xor,
        after_and=after_and,
        xor_all_black=xor_all_black,
        and_matches_inverted=and_matches,
    )
    logger.info(f"Self-check {'passed' if report.passed else 'FAILED'} "
                f"on {img1.width}x{img1.height} image")
    return report
