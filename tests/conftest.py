import numpy as np
import pytest

from rlebitmap.repositories.run_length_codec import RunLengthCodec
from rlebitmap.services.compressed_image_service import CompressedImageService
from rlebitmap.services.grid_service import GridService


@pytest.fixture
def codec():
    return RunLengthCodec()


@pytest.fixture
def image_service(monkeypatch):
    monkeypatch.delenv("RLE_ROW_DELIMITER", raising=False)
    monkeypatch.delenv("RLE_WHITE_ROW_MARKER", raising=False)
    return CompressedImageService()


@pytest.fixture
def grid_service():
    return GridService()


@pytest.fixture
def scenario_grid():
    # 1 = white, 0 = black
    return [[1, 0, 0, 1],
            [0, 1, 1, 0]]


@pytest.fixture
def random_grids():
    rng = np.random.default_rng(7)
    return [rng.integers(0, 2, size=(6, 13)).astype(np.uint8) for _ in range(8)]
