"""
colorkey/core/geometry
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """
    Data class for storing a screen-space rectangle in canvas pixels (y grows downward).
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class PlotDimensions:
    """
    Data class for storing the data-area geometry of a plot on its target canvas.
    """

    data_offset_x: float
    data_offset_y: float
    data_width: float
    data_height: float
    figure_width: float = math.nan
    figure_height: float = math.nan

    @property
    def data_rect(self) -> Rect:
        """
        Returns the data area as a rectangle.

        Returns:
            Rect: Data area in canvas pixels.
        """
        return Rect(self.data_offset_x, self.data_offset_y, self.data_width, self.data_height)


@dataclass(frozen=True)
class AxisLimits:
    """
    Data class for storing the data-space extent a plottable asks the axes to include.
    NaN bounds do not take part in auto-scaling.
    """

    x_min: float = math.nan
    x_max: float = math.nan
    y_min: float = math.nan
    y_max: float = math.nan

    @property
    def is_undefined(self) -> bool:
        return all(math.isnan(v) for v in (self.x_min, self.x_max, self.y_min, self.y_max))
