import numpy as np

from asciiramp.charsets import DEPTH_THRESHOLD, RAMP_10, RAMP_10_SCALE, RAMP_70, RAMP_70_SCALE


def select_ramp(depth: int) -> tuple[str, int]:
    """Return (ramp, scale) for a depth. Depth only picks one of two fixed ramps."""
    if depth <= DEPTH_THRESHOLD:
        return RAMP_10, RAMP_10_SCALE
    return RAMP_70, RAMP_70_SCALE


def ramp_index(value: int, scale: int, size: int) -> int:
    """floor(value / 255 * scale), clamped to a valid index of a ramp of ``size`` glyphs."""
    index = int(value / 255 * scale)
    return min(max(index, 0), size - 1)


def ramp_indices(values: np.ndarray, scale: int, size: int) -> np.ndarray:
    """ramp_index over an array of lightness values."""
    return np.clip((np.asarray(values) / 255 * scale).astype(np.int64), 0, size - 1)


def map_char(value: int, depth: int) -> str:
    """Quantize a 0-255 lightness into a character from the ramp selected by ``depth``."""
    ramp, scale = select_ramp(depth)
    return ramp[ramp_index(value, scale, len(ramp))]
