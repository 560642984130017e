from enum import Enum

import numpy as np


class BooleanOp(Enum):
    """
    Pointwise operations on the black pixels of two images.

    Dense rows are white = True, so each member maps to the dual ufunc:
    black AND black is white OR white, and black XOR is white XNOR.
    """
    AND = "and"
    OR = "or"
    XOR = "xor"

    @property
    def ufunc(self) -> np.ufunc:
        return _UFUNCS[self]

    @classmethod
    def from_name(cls, name: str) -> "BooleanOp":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown boolean operation: {name!r}") from None


_UFUNCS = {
    BooleanOp.AND: np.logical_or,
    BooleanOp.OR: np.logical_and,
    BooleanOp.XOR: np.equal,
}
