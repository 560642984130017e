from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import InvalidDimensionsError
from .run import Run


@dataclass
class CompressedImage:
    """
    Simple data object: image size plus one run list per row.
    No codec logic outside the repositories.
    """
    width: int
    height: int
    rows: Optional[List[List[Run]]] = None  # len == height, [] = all-white row

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidDimensionsError(f"Negative size {self.width}x{self.height}")
        if self.rows is None:
            self.rows = [[] for _ in range(self.height)]
        elif len(self.rows) != self.height:
            raise InvalidDimensionsError(
                f"Got {len(self.rows)} rows for an image of height {self.height}"
            )

    def __setattr__(self, name, value):
        # size is fixed once set
        if name in ("width", "height") and name in self.__dict__:
            raise AttributeError(f"{name} is immutable after construction")
        super().__setattr__(name, value)
