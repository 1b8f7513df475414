"""Plot element renderers."""

from .base import LegendItem, Plottable
from .colorbar import Colorbar

__all__ = [
    "Colorbar",
    "LegendItem",
    "Plottable",
]
