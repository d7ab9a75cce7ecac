import numpy as np

GAMMA = 2.2

# ITU-R BT.709 weights for R, G, B
BT709_WEIGHTS = (0.2126, 0.7152, 0.0722)


def lightness_array(pixels) -> np.ndarray:
    """Perceptual lightness of every RGB triple in an array of shape (..., 3).

    Channels are gamma-expanded (``C ** 2.2``), combined with BT.709 weights
    into ``Y`` and mapped through ``L = 116 * Y ** (1/3) - 16``. ``L`` is clamped
    to 0-255 before truncating to uint8: black gives -16 and most other colours
    land well above 255.
    """
    rgb = np.asarray(pixels, dtype=np.float64)
    linear = rgb**GAMMA
    wr, wg, wb = BT709_WEIGHTS
    y = wr * linear[..., 0] + wg * linear[..., 1] + wb * linear[..., 2]
    lum = 116.0 * y ** (1.0 / 3.0) - 16.0
    return np.clip(lum, 0.0, 255.0).astype(np.uint8)


def lightness(rgb) -> int:
    """Lightness of a single (r, g, b) triple, in 0-255."""
    return int(lightness_array(rgb))
