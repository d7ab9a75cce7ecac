import logging

import numpy as np

from asciiramp.luminance import lightness, lightness_array
from asciiramp.mapper import ramp_indices, select_ramp
from asciiramp.model import Cell, ColorSample, GridSpec, OutputGrid, SampleMode, buffer_dims
from asciiramp.sampling import aggregate_grid, sample_grid
from asciiramp.tiling import tile_size

log = logging.getLogger(__name__)


def representative_lightness(colour: ColorSample, mode: SampleMode) -> int:
    """The value a tile is quantized on.

    In RGB mode this is the lightness of the averaged colour, in grayscale mode
    the averaged per-pixel lightness itself.
    """
    if mode is SampleMode.RGB:
        return lightness(colour)
    return colour


def _as_sample(colour) -> ColorSample:
    if isinstance(colour, list):
        return tuple(colour)
    return colour


def build(
    buffer: np.ndarray,
    grid: GridSpec,
    mode: SampleMode,
    depth: int,
    trim_border: bool = False,
) -> OutputGrid:
    """Convert a pixel buffer into rows of cells, one cell per tile.

    Every tile is reduced in one pass over a (rows, cols, tile_h, tile_w, 3)
    view of the buffer, giving the same values as sample/aggregate applied
    tile by tile. The grid is validated before anything is computed, so an
    unusable grid raises InvalidGridSpec and nothing is returned. With
    ``trim_border`` the outermost ring of cells is dropped, giving
    ``rows - 2`` rows of ``cols - 2`` cells.
    """
    tile_width, tile_height = tile_size(buffer_dims(buffer), grid)
    ramp, scale = select_ramp(depth)
    log.debug(
        "Building %dx%d grid of %dx%d tiles in %s mode with a %d-glyph ramp",
        grid.cols,
        grid.rows,
        tile_width,
        tile_height,
        mode.value,
        len(ramp),
    )

    colours = aggregate_grid(sample_grid(buffer, grid, tile_width, tile_height), mode)
    values = lightness_array(colours) if mode is SampleMode.RGB else colours
    indices = ramp_indices(values, scale, len(ramp))

    if trim_border:
        colours = colours[1:-1, 1:-1]
        indices = indices[1:-1, 1:-1]

    return [
        [Cell(char=ramp[index], colour=_as_sample(colour)) for index, colour in zip(index_row, colour_row)]
        for index_row, colour_row in zip(indices.tolist(), colours.tolist())
    ]
