"""
colorkey/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.geometry import AxisLimits, PlotDimensions
    from ..canvas import Canvas


@dataclass(frozen=True)
class LegendItem:
    """
    Data class for storing one entry a plottable contributes to the shared legend.
    """

    label: str


class Plottable(Protocol):
    """
    Class for defining the interface shared by chart elements.
    Protocol only; implement in concrete plottables.
    """

    is_visible: bool
    x_axis_index: int
    y_axis_index: int

    def render(self, dims: PlotDimensions, canvas: Canvas, low_quality: bool = False) -> Any:
        """
        Draws the element onto a canvas.

        Args:
            dims (PlotDimensions): Data-area geometry on the canvas.
            canvas (Canvas): Target drawing surface.
            low_quality (bool): Trade fidelity for speed. Defaults to False.
        """
        # Protocol stub; no runtime implementation
        ...

    def validate_data(self, deep: bool = False) -> None:
        """
        Checks that the element's data can be rendered.

        Args:
            deep (bool): Also run per-value checks. Defaults to False.
        """
        ...

    def get_legend_items(self) -> List[LegendItem]:
        """
        Returns the items this element adds to the shared legend.
        """
        ...

    def get_axis_limits(self) -> AxisLimits:
        """
        Returns the data extent this element contributes to auto-scaling.
        """
        ...
