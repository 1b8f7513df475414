"""
tests/test_gradient
~~~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from colorkey import ConfigurationError, build_gradient, get_colormap
from colorkey.core.gradient import gradient_fractions


@pytest.mark.unit
def test_vertical_gradient_rows_match_colormap(gray_cmap):
    """
    Ensures each row carries the provider color for that row's fraction.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
    """
    image = build_gradient(gray_cmap, 4, 256, vertical=True)
    fractions = gradient_fractions(256)

    assert image.shape == (256, 4, 3)
    assert image.dtype == np.uint8
    for row, frac in enumerate(fractions):
        expected = gray_cmap.color_for(float(frac))
        assert tuple(image[row, 0]) == expected
        assert (image[row] == image[row, 0]).all()


@pytest.mark.unit
def test_vertical_gradient_runs_high_to_low(gray_cmap):
    """
    Ensures the top row is the top of the scale and the bottom row the bottom.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
    """
    image = build_gradient(gray_cmap, 3, 10)

    assert tuple(image[0, 0]) == (255, 255, 255)
    assert tuple(image[-1, 0]) == (0, 0, 0)
    assert gray_cmap.calls[0] == pytest.approx(1.0)
    assert gray_cmap.calls[-1] == pytest.approx(0.0)


@pytest.mark.unit
def test_horizontal_gradient_sweeps_columns(gray_cmap):
    """
    Ensures a horizontal gradient varies across columns, not rows.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
    """
    image = build_gradient(gray_cmap, 50, 6, vertical=False)

    assert image.shape == (6, 50, 3)
    assert (image == image[0]).all()
    assert tuple(image[0, 0]) == (255, 255, 255)
    assert tuple(image[0, -1]) == (0, 0, 0)
    assert len(np.unique(image[0, :, 0])) > 1


@pytest.mark.unit
def test_gradient_single_step_uses_top_of_scale(gray_cmap):
    """
    Ensures a one-row gradient uses fraction 1.0.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
    """
    image = build_gradient(gray_cmap, 2, 1)

    assert image.shape == (1, 2, 3)
    assert tuple(image[0, 0]) == (255, 255, 255)


@pytest.mark.unit
@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10), (10, -5)])
def test_gradient_rejects_non_positive_dimensions(gray_cmap, width, height):
    """
    Ensures non-positive dimensions are a configuration error.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
        width (int): Requested width.
        height (int): Requested height.

    Raises:
        ConfigurationError: If width or height is not positive.
    """
    with pytest.raises(ConfigurationError):
        build_gradient(gray_cmap, width, height)
    assert gray_cmap.calls == []


@pytest.mark.unit
def test_gradient_rejects_non_integer_dimensions(gray_cmap):
    """
    Ensures float and bool dimensions are rejected.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.

    Raises:
        ConfigurationError: If a dimension is not an integer.
    """
    with pytest.raises(ConfigurationError):
        build_gradient(gray_cmap, 2.5, 10)
    with pytest.raises(ConfigurationError):
        build_gradient(gray_cmap, True, 10)


@pytest.mark.unit
def test_gradient_is_read_only_snapshot(gray_cmap):
    """
    Ensures each call returns a new, read-only buffer.

    Args:
        gray_cmap (GrayColormap): Deterministic gray provider.
    """
    first = build_gradient(gray_cmap, 2, 8)
    second = build_gradient(gray_cmap, 2, 8)

    assert first is not second
    assert np.array_equal(first, second)
    with pytest.raises(ValueError):
        first[0, 0, 0] = 1


@pytest.mark.api
def test_viridis_gradient_endpoints():
    """
    Ensures the default colormap's endpoints land on the first and last rows.
    """
    cmap = get_colormap()
    image = build_gradient(cmap, 20, 256)

    assert tuple(image[0, 0]) == cmap.color_for(1.0)
    assert tuple(image[-1, 0]) == cmap.color_for(0.0)
    assert tuple(image[0, 0]) != tuple(image[-1, 0])
