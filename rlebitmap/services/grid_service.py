from pathlib import Path
from typing import Union

import numpy as np

from ..repositories.grid_repository import GridRepository

TEXT_EXTS = {".txt", ".grid"}


class GridService:
    """I/O helpers for dense grids.  No compression logic here."""

    def __init__(self):
        self.grid_repository = GridRepository()

    def parse(self, text: str) -> np.ndarray:
        return self.grid_repository.parse(text)

    def format(self, grid: np.ndarray) -> str:
        return self.grid_repository.format(grid)

    def load(self, path: Union[str, Path]) -> np.ndarray:
        """
        Load a grid from disk: text grids by extension, anything else via Pillow.
        """
        path = Path(path)
        if path.suffix.lower() in TEXT_EXTS:
            return self.grid_repository.load_text(path)
        return self.grid_repository.load_bitmap(path)

    def save(self, grid: np.ndarray, path: Union[str, Path]) -> None:
        path = Path(path)
        if path.suffix.lower() in TEXT_EXTS:
            self.grid_repository.save_text(grid, path)
        else:
            self.grid_repository.save_bitmap(grid, path)
