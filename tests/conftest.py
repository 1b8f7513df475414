"""
tests/conftest
~~~~~~~~~~~~~~
"""

import matplotlib
import pytest

from colorkey import Canvas, PlotDimensions

matplotlib.use("Agg", force=True)


class GrayColormap:
    """
    Deterministic provider mapping a fraction to an equal-channel gray level.
    """

    name = "gray-test"

    def __init__(self):
        self.calls = []

    def color_for(self, fraction):
        self.calls.append(fraction)
        level = int(round(255 * min(max(fraction, 0.0), 1.0)))
        return (level, level, level)


@pytest.fixture
def gray_cmap():
    """
    Returns a recording gray colormap provider.

    Returns:
        GrayColormap: Provider with a `calls` log of requested fractions.
    """
    return GrayColormap()


@pytest.fixture
def dims():
    """
    Returns plot geometry with data offset (100, 50) and size (300, 200).

    Returns:
        PlotDimensions: Data-area geometry on a 500x400 canvas.
    """
    return PlotDimensions(
        data_offset_x=100,
        data_offset_y=50,
        data_width=300,
        data_height=200,
        figure_width=500,
        figure_height=400,
    )


@pytest.fixture
def canvas():
    """
    Yields a 500x400 canvas and closes it after the test.

    Yields:
        Canvas: White pixel-space canvas.
    """
    c = Canvas(500, 400)
    try:
        yield c
    finally:
        c.close()
