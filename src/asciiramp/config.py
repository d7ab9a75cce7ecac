from dataclasses import dataclass

from asciiramp.errors import InvalidGridSpec
from asciiramp.model import GridSpec, SampleMode

DEFAULT_WIDTH = 80
DEFAULT_DEPTH = 70


@dataclass(frozen=True)
class ConversionConfig:
    colour: bool = False
    depth: int = DEFAULT_DEPTH
    cols: int = DEFAULT_WIDTH
    rows: int | None = None  # derived from the image aspect ratio when None
    braille: bool = False  # reserved, has no effect
    paint_background: bool = False
    trim_border: bool = False

    def __post_init__(self):
        if not 0 <= self.depth <= 255:
            raise ValueError(f"Depth must be in the range 0-255, got {self.depth}")
        if self.cols < 1:
            raise InvalidGridSpec(f"Width must be at least 1, got {self.cols}")
        if self.rows is not None and self.rows < 1:
            raise InvalidGridSpec(f"Height must be at least 1, got {self.rows}")

    @property
    def mode(self) -> SampleMode:
        return SampleMode.from_colour(self.colour)

    def grid_spec(self, width_px: int, height_px: int) -> GridSpec:
        return derive_grid_spec(width_px, height_px, self.cols, self.rows)


def derive_grid_spec(width_px: int, height_px: int, cols: int, rows: int | None = None) -> GridSpec:
    """Build the grid for an image, deriving ``rows`` from the aspect ratio when not given."""
    if rows is None:
        if width_px < 1:
            raise InvalidGridSpec(f"Cannot derive a height from an image {width_px} pixels wide")
        rows = int(cols * (height_px / width_px))
    return GridSpec(cols=cols, rows=rows)
