import numpy as np

from asciiramp.luminance import lightness_array
from asciiramp.model import ColorSample, GridSpec, SampleMode, Tile


def sample(buffer: np.ndarray, tile: Tile, mode: SampleMode) -> np.ndarray:
    """Gather one sample per pixel inside ``tile``.

    RGB mode returns the raw triples as an (n, 3) uint8 array. Grayscale mode
    returns the lightness of each pixel as an (n,) uint8 array, so a grayscale
    tile is later averaged over per-pixel lightness rather than over channels.
    """
    region = buffer[tile.y0 : tile.y0 + tile.height, tile.x0 : tile.x0 + tile.width]
    pixels = region.reshape(-1, 3)
    if mode is SampleMode.RGB:
        return pixels
    return lightness_array(pixels)


def aggregate(samples, mode: SampleMode) -> ColorSample:
    """Reduce a tile's samples to their truncated mean.

    Sums are taken in int64 so large tiles cannot overflow.
    """
    samples = np.asarray(samples)
    count = len(samples)
    if count == 0:
        raise ValueError("Cannot aggregate an empty tile")
    totals = samples.sum(axis=0, dtype=np.int64)
    if mode is SampleMode.RGB:
        r, g, b = (int(total) // count for total in totals)
        return (r, g, b)
    return int(totals) // count


def sample_grid(buffer: np.ndarray, grid: GridSpec, tile_width: int, tile_height: int) -> np.ndarray:
    """All tiles at once, as an array of shape (rows, cols, tile_height, tile_width, 3)."""
    trimmed = buffer[: grid.rows * tile_height, : grid.cols * tile_width]
    return trimmed.reshape(grid.rows, tile_height, grid.cols, tile_width, 3).transpose(0, 2, 1, 3, 4)


def aggregate_grid(cells: np.ndarray, mode: SampleMode) -> np.ndarray:
    """Per-tile truncated means for the output of sample_grid.

    Returns (rows, cols, 3) channel means in RGB mode and (rows, cols) means
    of per-pixel lightness in grayscale mode, both int64.
    """
    count = cells.shape[2] * cells.shape[3]
    if mode is SampleMode.RGB:
        return cells.sum(axis=(2, 3), dtype=np.int64) // count
    return lightness_array(cells).sum(axis=(2, 3), dtype=np.int64) // count
