from __future__ import annotations

from typing import Callable, List, Sequence, Union
import os
import logging

import numpy as np
from dotenv import load_dotenv

from ..exceptions import DimensionMismatchError
from ..models.boolean_op import BooleanOp
from ..models.compressed_image import CompressedImage
from ..models.run import Run
from ..repositories.compressed_image_repository import CompressedImageRepository
from ..repositories.run_length_codec import RunLengthCodec

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

RUN_SEPARATOR = " "

RowOp = Union[BooleanOp, np.ufunc, Callable[[bool, bool], bool]]


class CompressedImageService:
    """
    Boolean algebra over compressed images.
    *   Every mutation expands one row at a time, never a whole image.
    *   New rows are built in full before any of them replaces the old ones.
    """

    def __init__(self,
                 row_delimiter: str = None,
                 white_row_marker: str = None):
        """
        Args:
            row_delimiter: separator between rendered rows (defaults to env var)
            white_row_marker: rendering of an all-white row (defaults to env var)
        """
        if row_delimiter is None:
            row_delimiter = os.getenv("RLE_ROW_DELIMITER", ",")
        if white_row_marker is None:
            white_row_marker = os.getenv("RLE_WHITE_ROW_MARKER", "/")
        # rendering stays canonical only if rows cannot be confused with runs
        if not row_delimiter or RUN_SEPARATOR in row_delimiter or "(" in row_delimiter:
            raise ValueError(
                f"Row delimiter must be non-empty, without spaces or parentheses: {row_delimiter!r}"
            )
        if not white_row_marker or row_delimiter in white_row_marker or "(" in white_row_marker:
            raise ValueError(
                f"White-row marker must be non-empty and distinct from rows: {white_row_marker!r}"
            )
        self.row_delimiter = row_delimiter
        self.white_row_marker = white_row_marker
        self.repository = CompressedImageRepository()
        self.codec = RunLengthCodec()

    # ─── Construction ──────────────────────────────────────────────
    def from_grid(self, grid: Sequence[Sequence[int]],
                  width: int = None, height: int = None) -> CompressedImage:
        """
        Compress a dense grid. Width/height default to the grid's own shape.
        """
        if height is None:
            height = len(grid)
        if width is None:
            width = len(grid[0]) if height else 0
        image = self.repository.create_image(grid, width, height)
        logger.info(f"Compressed {width}x{height} image into {self.run_count(image)} runs")
        return image

    def copy(self, image: CompressedImage) -> CompressedImage:
        return self.repository.copy_image(image)

    # ─── Binary operations ─────────────────────────────────────────
    def combine(self, image: CompressedImage, other: CompressedImage, op: RowOp) -> None:
        """
        Replace every row of *image* with op(image_row, other_row).

        *other* is only read. Raises DimensionMismatchError before any row
        is touched when the two sizes differ.
        """
        if (image.width, image.height) != (other.width, other.height):
            raise DimensionMismatchError(
                f"Size of the two images do not match: "
                f"{image.width}x{image.height} vs {other.width}x{other.height}"
            )
        row_op = self._as_row_op(op)
        logger.debug(f"Combining {image.width}x{image.height} images with {op}")

        new_rows: List[List[Run]] = []
        for i in range(image.height):
            row_a = self.codec.expand(image.rows[i], image.width)
            row_b = self.codec.expand(other.rows[i], other.width)
            new_rows.append(self.codec.collapse(row_op(row_a, row_b)))
        self.repository.replace_rows(image, new_rows)

    def perform_and(self, image: CompressedImage, other: CompressedImage) -> None:
        self.combine(image, other, BooleanOp.AND)

    def perform_or(self, image: CompressedImage, other: CompressedImage) -> None:
        self.combine(image, other, BooleanOp.OR)

    def perform_xor(self, image: CompressedImage, other: CompressedImage) -> None:
        self.combine(image, other, BooleanOp.XOR)

    def invert(self, image: CompressedImage) -> None:
        new_rows = [
            self.codec.collapse(np.logical_not(self.codec.expand(runs, image.width)))
            for runs in image.rows
        ]
        self.repository.replace_rows(image, new_rows)
        logger.debug(f"Inverted {image.width}x{image.height} image")

    # ─── Read-only helpers ─────────────────────────────────────────
    def render(self, image: CompressedImage) -> str:
        """
        Canonical text form, built from the run lists only:
            "<width> <height>, <row0>,<row1>,..."
        A row is its runs as "(start,end)" joined by spaces, or the
        white-row marker when it has none.
        """
        segments = [
            RUN_SEPARATOR.join(str(run) for run in runs) if runs else self.white_row_marker
            for runs in image.rows
        ]
        return f"{image.width} {image.height}, " + self.row_delimiter.join(segments)

    @staticmethod
    def equals(image: CompressedImage, other: CompressedImage) -> bool:
        return (
            image.width == other.width
            and image.height == other.height
            and image.rows == other.rows
        )

    @staticmethod
    def run_count(image: CompressedImage) -> int:
        return sum(len(runs) for runs in image.rows)

    @staticmethod
    def black_pixel_count(image: CompressedImage) -> int:
        return sum(len(run) for runs in image.rows for run in runs)

    def get_row(self, image: CompressedImage, index: int) -> List[Run]:
        return list(self.repository.retrieve_row(image, index))

    def get_dense_row(self, image: CompressedImage, index: int) -> np.ndarray:
        """Row `index` as a (width,) bool array, True = white."""
        return self.repository.expand_row(image, index)

    def set_row(self, image: CompressedImage, index: int, runs: Sequence[Run]) -> None:
        self.repository.replace_row(image, index, runs)

    def to_grid(self, image: CompressedImage) -> np.ndarray:
        return self.repository.to_grid(image)

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _as_row_op(op: RowOp) -> Callable[[np.ndarray, np.ndarray], np.ndarray]:
        if isinstance(op, BooleanOp):
            return op.ufunc
        if isinstance(op, np.ufunc):
            return op
        # scalar (bool, bool) -> bool callable
        return np.vectorize(lambda a, b: bool(op(bool(a), bool(b))), otypes=[bool])
