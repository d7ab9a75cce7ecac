import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciiramp.config import ConversionConfig
from asciiramp.grid import build
from asciiramp.model import OutputGrid, as_pixel_buffer, buffer_dims
from asciiramp.render import format_grid

log = logging.getLogger(__name__)


def load_pixels(image: Image.Image | str | Path) -> np.ndarray:
    """Decode an image (or take an already opened one) into a read-only RGB pixel buffer."""
    if not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert("RGB")
    return as_pixel_buffer(np.asarray(image, dtype=np.uint8))


def image_to_grid(image: Image.Image | str | Path, config: ConversionConfig) -> OutputGrid:
    if config.braille:
        log.warning("Braille mode is not implemented, falling back to the character ramp")
    buffer = load_pixels(image)
    width, height = buffer_dims(buffer)
    grid = config.grid_spec(width, height)
    log.debug("Loaded %dx%d image", width, height)
    return build(buffer, grid, config.mode, config.depth, trim_border=config.trim_border)


def image_to_ascii(image: Image.Image | str | Path, config: ConversionConfig | None = None) -> str:
    if config is None:
        config = ConversionConfig()
    grid = image_to_grid(image, config)
    return format_grid(grid, colour=config.colour, paint_background=config.paint_background)
