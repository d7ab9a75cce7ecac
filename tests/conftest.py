import numpy as np
import pytest
from PIL import Image

from asciiramp.model import as_pixel_buffer

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)


def solid_buffer(width, height, rgb):
    """A read-only buffer filled with a single colour."""
    return as_pixel_buffer(np.full((height, width, 3), rgb, dtype=np.uint8))


def split_buffer(width, height, left, right):
    """Left half one colour, right half another."""
    arr = np.empty((height, width, 3), dtype=np.uint8)
    arr[:, : width // 2] = left
    arr[:, width // 2 :] = right
    return as_pixel_buffer(arr)


@pytest.fixture
def white_png(tmp_path):
    path = tmp_path / "white.png"
    Image.new("RGB", (8, 8), WHITE).save(path)
    return path
