from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError

from ..exceptions import MalformedGridError


class GridRepository:
    """
    Handles file I/O for dense grids: (H, W) uint8 arrays, 1 = white, 0 = black.
    """

    @staticmethod
    def parse(text: str) -> np.ndarray:
        """
        Parse "width height" followed by width*height values of 0 or 1,
        all whitespace separated.
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise MalformedGridError("Missing width/height header")
        try:
            width, height = int(tokens[0]), int(tokens[1])
        except ValueError:
            raise MalformedGridError(f"Bad header: {tokens[0]!r} {tokens[1]!r}") from None
        if width < 0 or height < 0:
            raise MalformedGridError(f"Negative size {width}x{height}")

        values = tokens[2:]
        if len(values) != width * height:
            raise MalformedGridError(
                f"Expected {width * height} pixel values, got {len(values)}"
            )
        bad = sorted({v for v in values if v not in ("0", "1")})
        if bad:
            raise MalformedGridError(f"Pixel values must be 0 or 1, got {bad[:5]}")

        return np.array([int(v) for v in values], dtype=np.uint8).reshape(height, width)

    @staticmethod
    def format(grid: np.ndarray) -> str:
        height, width = grid.shape
        lines = [f"{width} {height}"]
        lines += [" ".join(str(int(v)) for v in row) for row in grid]
        return "\n".join(lines) + "\n"

    @classmethod
    def load_text(cls, path: Union[str, Path]) -> np.ndarray:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Grid file not found: {path}")
        return cls.parse(path.read_text(encoding="utf-8"))

    @classmethod
    def save_text(cls, grid: np.ndarray, path: Union[str, Path]) -> None:
        Path(path).write_text(cls.format(grid), encoding="utf-8")

    @staticmethod
    def load_bitmap(path: Union[str, Path]) -> np.ndarray:
        """Any raster Pillow can open, thresholded at mid-gray. Light = white."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Bitmap not found: {path}")
        try:
            with PILImage.open(path) as img:
                return (np.asarray(img.convert("L")) >= 128).astype(np.uint8)
        except UnidentifiedImageError as e:
            raise MalformedGridError(f"Not a readable bitmap: {path}") from e

    @staticmethod
    def save_bitmap(grid: np.ndarray, path: Union[str, Path]) -> None:
        PILImage.fromarray((grid != 0).astype(np.uint8) * 255).convert("1").save(path)
