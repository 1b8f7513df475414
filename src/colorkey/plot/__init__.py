"""
colorkey/plot
~~~~~~~~~~~~~
"""

from .canvas import Canvas, Font, Graphics
from .renderers import Colorbar, LegendItem, Plottable
from .style import DEFAULT_STYLE, StyleConfig

__all__ = [
    "Canvas",
    "Font",
    "Graphics",
    "Colorbar",
    "LegendItem",
    "Plottable",
    "DEFAULT_STYLE",
    "StyleConfig",
]
