"""
colorkey
~~~~~~~~

colorkey: colorbar legends for raster chart canvases
"""

from .core.colormap import get_colormap
from .core.errors import ConfigurationError, LengthMismatchError, ResourceError
from .core.geometry import AxisLimits, PlotDimensions, Rect
from .core.gradient import build_gradient
from .plot.canvas import Canvas
from .plot.renderers.colorbar import Colorbar

__all__ = [
    "get_colormap",
    "ConfigurationError",
    "LengthMismatchError",
    "ResourceError",
    "AxisLimits",
    "PlotDimensions",
    "Rect",
    "build_gradient",
    "Canvas",
    "Colorbar",
]

__version__ = "0.1.0"
