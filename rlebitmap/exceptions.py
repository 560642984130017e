class RleBitmapError(Exception):
    """Base class for every failure raised by rlebitmap."""


class DimensionMismatchError(RleBitmapError, ValueError):
    """Two operands of a binary operation differ in width or height."""


class InvalidDimensionsError(RleBitmapError, ValueError):
    """A dense grid does not have the declared width/height."""


class RowIndexError(RleBitmapError, IndexError):
    """A row index falls outside [0, height)."""


class InvalidRunsError(RleBitmapError, ValueError):
    """A hand-built run list breaks bounds, ordering or the gap rule."""


class MalformedGridError(RleBitmapError, ValueError):
    """Textual grid input could not be parsed."""
