"""
Run-length compressed two-color images with pointwise boolean algebra.
"""
from .exceptions import (
    RleBitmapError,
    DimensionMismatchError,
    InvalidDimensionsError,
    RowIndexError,
    InvalidRunsError,
    MalformedGridError,
)
from .models.run import Run
from .models.boolean_op import BooleanOp
from .models.compressed_image import CompressedImage
from .services.compressed_image_service import CompressedImageService

__all__ = [
    "RleBitmapError",
    "DimensionMismatchError",
    "InvalidDimensionsError",
    "RowIndexError",
    "InvalidRunsError",
    "MalformedGridError",
    "Run",
    "BooleanOp",
    "CompressedImage",
    "CompressedImageService",
]
