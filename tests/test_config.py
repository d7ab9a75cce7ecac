import pytest

from asciiramp.config import ConversionConfig, derive_grid_spec
from asciiramp.errors import InvalidGridSpec
from asciiramp.model import GridSpec, SampleMode


def test_defaults():
    config = ConversionConfig()
    assert config.cols == 80
    assert config.depth == 70
    assert config.rows is None
    assert config.mode is SampleMode.GRAYSCALE


def test_colour_selects_rgb_mode():
    assert ConversionConfig(colour=True).mode is SampleMode.RGB


def test_rows_derived_from_aspect_ratio():
    assert derive_grid_spec(200, 100, cols=40) == GridSpec(cols=40, rows=20)


def test_derived_rows_are_truncated():
    # 10 * 33 / 20 = 16.5
    assert derive_grid_spec(20, 33, cols=10).rows == 16


def test_explicit_rows_win():
    assert ConversionConfig(cols=10, rows=3).grid_spec(100, 100) == GridSpec(cols=10, rows=3)


def test_very_wide_image_gives_no_rows():
    with pytest.raises(InvalidGridSpec):
        derive_grid_spec(1000, 10, cols=20)


def test_zero_width_rejected():
    with pytest.raises(InvalidGridSpec):
        ConversionConfig(cols=0)


def test_zero_height_rejected():
    with pytest.raises(InvalidGridSpec):
        ConversionConfig(rows=0)


@pytest.mark.parametrize("depth", [-1, 256])
def test_depth_out_of_range(depth):
    with pytest.raises(ValueError, match="Depth"):
        ConversionConfig(depth=depth)
