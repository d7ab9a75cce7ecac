from dataclasses import dataclass
from enum import Enum

import numpy as np

from asciiramp.errors import InvalidGridSpec

# (r, g, b) in RGB mode, a single lightness value in grayscale mode
ColorSample = tuple[int, int, int] | int


class SampleMode(Enum):
    RGB = "rgb"
    GRAYSCALE = "grayscale"

    @classmethod
    def from_colour(cls, colour: bool) -> "SampleMode":
        return cls.RGB if colour else cls.GRAYSCALE


@dataclass(frozen=True)
class GridSpec:
    cols: int
    rows: int

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise InvalidGridSpec(f"Grid must be at least 1x1, got {self.cols}x{self.rows}")


@dataclass(frozen=True)
class Tile:
    x0: int
    y0: int
    width: int
    height: int


@dataclass(frozen=True)
class Cell:
    char: str
    colour: ColorSample


OutputGrid = list[list[Cell]]


def as_pixel_buffer(pixels) -> np.ndarray:
    """Coerce an array-like of RGB triples into a read-only (height, width, 3) uint8 array."""
    arr = np.asarray(pixels)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"Expected an array of shape (height, width, 3), got {arr.shape}")
    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Channel values must be integers, got dtype {arr.dtype}")
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("Channel values must be in the range 0-255")
        arr = arr.astype(np.uint8)
    buffer = arr.view()
    buffer.flags.writeable = False
    return buffer


def buffer_dims(buffer: np.ndarray) -> tuple[int, int]:
    """Return (width, height) of a pixel buffer."""
    return buffer.shape[1], buffer.shape[0]
