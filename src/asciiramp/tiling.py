import logging

from asciiramp.errors import InvalidGridSpec
from asciiramp.model import GridSpec, Tile

log = logging.getLogger(__name__)


def tile_size(buffer_dims: tuple[int, int], grid: GridSpec) -> tuple[int, int]:
    """Return (tile_width, tile_height) for laying ``grid`` over a buffer of ``buffer_dims``."""
    width, height = buffer_dims
    tile_width = width // grid.cols
    tile_height = height // grid.rows
    if tile_width == 0 or tile_height == 0:
        raise InvalidGridSpec(
            f"A {grid.cols}x{grid.rows} grid is finer than the {width}x{height} image "
            f"(tile size would be {tile_width}x{tile_height})"
        )
    return tile_width, tile_height


def tiles(buffer_dims: tuple[int, int], grid: GridSpec) -> list[Tile]:
    """Partition the buffer into ``grid.cols * grid.rows`` tiles, row-major.

    Tiles never overlap. Pixels left over by the floor division on the right
    and bottom edges belong to no tile.
    """
    tile_width, tile_height = tile_size(buffer_dims, grid)
    log.debug(
        "Tiling %dx%d image into %dx%d grid of %dx%d tiles", *buffer_dims, grid.cols, grid.rows, tile_width, tile_height
    )
    return [
        Tile(x0=col * tile_width, y0=row * tile_height, width=tile_width, height=tile_height)
        for row in range(grid.rows)
        for col in range(grid.cols)
    ]
