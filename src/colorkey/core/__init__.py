"""
colorkey/core
~~~~~~~~~~~~~
"""

from .colormap import (
    DEFAULT_COLORMAP,
    ColormapProvider,
    MatplotlibColormap,
    available_colormaps,
    get_colormap,
)
from .errors import ConfigurationError, LengthMismatchError, ResourceError
from .geometry import AxisLimits, PlotDimensions, Rect
from .gradient import build_gradient, gradient_fractions
from .ticks import Tick, TickRegistry

__all__ = [
    "DEFAULT_COLORMAP",
    "ColormapProvider",
    "MatplotlibColormap",
    "available_colormaps",
    "get_colormap",
    "ConfigurationError",
    "LengthMismatchError",
    "ResourceError",
    "AxisLimits",
    "PlotDimensions",
    "Rect",
    "build_gradient",
    "gradient_fractions",
    "Tick",
    "TickRegistry",
]
