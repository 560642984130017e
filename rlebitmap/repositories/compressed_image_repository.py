from typing import List, Sequence

import numpy as np

from ..exceptions import InvalidDimensionsError, RowIndexError
from ..models.compressed_image import CompressedImage
from ..models.run import Run
from .run_length_codec import RunLengthCodec


class CompressedImageRepository:
    """
    Handles construction and row access for CompressedImage entities.
    """
    codec = RunLengthCodec()

    @classmethod
    def create_image(cls, grid: Sequence[Sequence[int]], width: int, height: int) -> CompressedImage:
        """
        Compress a dense grid (0 = black, 1 = white) row by row.
        Only the first `height` rows are read.
        """
        if width < 0 or height < 0:
            raise InvalidDimensionsError(f"Negative size {width}x{height}")
        if len(grid) < height:
            raise InvalidDimensionsError(f"Grid has {len(grid)} rows, expected {height}")

        rows = []
        for i in range(height):
            dense = np.asarray(grid[i])
            if dense.ndim != 1 or dense.size != width:
                raise InvalidDimensionsError(
                    f"Row {i} has {dense.size} pixels, expected {width}"
                )
            rows.append(cls.codec.collapse(dense != 0))
        return CompressedImage(width=width, height=height, rows=rows)

    @staticmethod
    def copy_image(image: CompressedImage) -> CompressedImage:
        # Run is frozen, so copying the lists is enough
        return CompressedImage(
            width=image.width,
            height=image.height,
            rows=[list(runs) for runs in image.rows],
        )

    @staticmethod
    def _check_index(image: CompressedImage, index: int) -> None:
        if not 0 <= index < image.height:
            raise RowIndexError(f"Row {index} outside [0, {image.height})")

    @classmethod
    def retrieve_row(cls, image: CompressedImage, index: int) -> List[Run]:
        cls._check_index(image, index)
        return image.rows[index]

    @classmethod
    def expand_row(cls, image: CompressedImage, index: int) -> np.ndarray:
        return cls.codec.expand(cls.retrieve_row(image, index), image.width)

    @classmethod
    def replace_row(cls, image: CompressedImage, index: int, runs: Sequence[Run]) -> None:
        """Validate a run list and swap it in as row `index`."""
        cls._check_index(image, index)
        runs = list(runs)
        cls.codec.validate_runs(runs, image.width)
        image.rows[index] = runs

    @staticmethod
    def replace_rows(image: CompressedImage, rows: List[List[Run]]) -> None:
        """
        Swap in a complete set of freshly collapsed rows in one assignment.
        """
        if len(rows) != image.height:
            raise InvalidDimensionsError(f"Got {len(rows)} rows, expected {image.height}")
        image.rows = rows

    @classmethod
    def to_grid(cls, image: CompressedImage) -> np.ndarray:
        """
        Full dense expansion, shape (H, W), uint8 with 1 = white.
        Not used for rendering.
        """
        grid = np.ones((image.height, image.width), dtype=np.uint8)
        for i, runs in enumerate(image.rows):
            grid[i] = cls.codec.expand(runs, image.width)
        return grid
