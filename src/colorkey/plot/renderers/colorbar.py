"""
colorkey/plot/renderers/colorbar
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence, Tuple, TypedDict, Union, TYPE_CHECKING

import numpy as np
from matplotlib.colors import Colormap, is_color_like

from ...core.colormap import ColormapProvider, get_colormap
from ...core.errors import ConfigurationError
from ...core.geometry import AxisLimits, PlotDimensions, Rect
from ...core.gradient import build_gradient
from ...core.ticks import Tick, TickRegistry
from ...util.warnings import warn
from ..canvas import Font
from ..style import StyleConfig

if TYPE_CHECKING:
    from ..canvas import Canvas
    from .base import LegendItem

ColormapLike = Union[str, Colormap, ColormapProvider]

_SUPPORTED_EDGES = ("right",)


def _validate_width(width: Any) -> int:
    """
    Validates the gradient strip width.

    Args:
        width (Any): Requested width in pixels.

    Returns:
        int: Validated width.

    Raises:
        ConfigurationError: If width is not a positive integer.
    """
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width <= 0:
        raise ConfigurationError(f"colorbar width must be a positive integer, got {width!r}")
    return int(width)


class ColorbarLayout(TypedDict):
    """
    Typed dictionary for resolved colorbar drawing parameters.
    """

    colorbar_pad: float
    border_color: Any
    border_width: float
    tick_mark_color: Any
    tick_mark_length: float
    tick_mark_width: float
    tick_label_gap: float
    font: Font


_LENGTH_KEYS = (
    "colorbar_pad",
    "border_width",
    "tick_mark_length",
    "tick_mark_width",
    "tick_label_gap",
    "tick_label_fontsize",
)
_COLOR_KEYS = ("border_color", "tick_mark_color", "tick_label_color")


def _resolve_colorbar_layout(style: StyleConfig) -> ColorbarLayout:
    """
    Resolves and validates every style value the render pass reads.

    Args:
        style (StyleConfig): Colorbar style.

    Returns:
        ColorbarLayout: Drawing parameters with lengths as floats.

    Raises:
        ConfigurationError: If the edge is unsupported, a length is not a finite
            number, or a color is not recognized by Matplotlib.
    """
    edge = style["edge"]
    if edge not in _SUPPORTED_EDGES:
        raise ConfigurationError(
            f"Unsupported colorbar edge {edge!r}; expected one of {_SUPPORTED_EDGES}"
        )
    # Lengths must be finite numbers
    lengths: Dict[str, float] = {}
    for key in _LENGTH_KEYS:
        value = style[key]
        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise ConfigurationError(f"style {key!r} must be a number, got {value!r}")
        if not math.isfinite(float(value)):
            raise ConfigurationError(f"style {key!r} must be finite, got {value!r}")
        lengths[key] = float(value)
    for key in _COLOR_KEYS:
        if not is_color_like(style[key]):
            raise ConfigurationError(f"style {key!r} is not a valid color: {style[key]!r}")
    font_name = style["tick_label_font"]
    if not isinstance(font_name, str) or not font_name:
        raise ConfigurationError(f"style 'tick_label_font' must be a font name, got {font_name!r}")

    return {
        "colorbar_pad": lengths["colorbar_pad"],
        "border_color": style["border_color"],
        "border_width": lengths["border_width"],
        "tick_mark_color": style["tick_mark_color"],
        "tick_mark_length": lengths["tick_mark_length"],
        "tick_mark_width": lengths["tick_mark_width"],
        "tick_label_gap": lengths["tick_label_gap"],
        "font": Font(
            name=font_name,
            size=lengths["tick_label_fontsize"],
            color=style["tick_label_color"],
            bold=bool(style["tick_label_bold"]),
        ),
    }


def _compute_colorbar_rect(dims: PlotDimensions, width: float, pad: float) -> Rect:
    """
    Computes the gradient strip rectangle beside the data area.

    Args:
        dims (PlotDimensions): Data-area geometry.
        width (float): Strip width in pixels.
        pad (float): Gap between the data area's right edge and the strip.

    Returns:
        Rect: Strip rectangle in canvas pixels.
    """
    x = dims.data_offset_x + dims.data_width + pad
    return Rect(x, dims.data_offset_y, width, dims.data_height)


def _tick_y(rect: Rect, fraction: float) -> float:
    # Fraction 1 sits on the top edge, 0 on the bottom edge
    return rect.top + (1.0 - fraction) * rect.height


class Colorbar:
    """
    Class for a colorbar drawn along the right edge of the data area.

    The gradient image is cached and rebuilt only when the colormap changes or
    on request. Ticks are caller-supplied (fraction, label) pairs drawn in
    insertion order; fractions outside [0, 1] are drawn outside the strip.
    """

    def __init__(
        self,
        colormap: Optional[ColormapLike] = None,
        *,
        width: int = 20,
        **style: Any,
    ) -> None:
        """
        Initializes the Colorbar instance and builds its gradient image.

        Args:
            colormap (Optional[ColormapLike]): Colormap name, Matplotlib Colormap, or
                provider. Defaults to None (viridis).

        Kwargs:
            width (int): Gradient strip width in pixels. Defaults to 20.
            **style: Overrides for keys in DEFAULT_STYLE. Defaults to {}.

        Raises:
            ConfigurationError: If the colormap or width is invalid.
            KeyError: If a style key is unknown.
        """
        self.style = StyleConfig()
        self.style.update(style)
        self.is_visible = True
        self._width = _validate_width(width)
        self._ticks = TickRegistry()
        self._colormap = get_colormap(colormap)
        self._gradient: Optional[np.ndarray] = None
        self.rebuild()

    # --------------------------------------------------------
    # Configuration
    # --------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = _validate_width(value)

    @property
    def edge(self) -> str:
        return str(self.style["edge"])

    # Single implicit axis pair; assignments are accepted and ignored
    @property
    def x_axis_index(self) -> int:
        return 0

    @x_axis_index.setter
    def x_axis_index(self, value: int) -> None:
        pass

    @property
    def y_axis_index(self) -> int:
        return 0

    @y_axis_index.setter
    def y_axis_index(self, value: int) -> None:
        pass

    @property
    def tick_font(self) -> Font:
        return _resolve_colorbar_layout(self.style)["font"]

    # --------------------------------------------------------
    # Colormap and gradient cache
    # --------------------------------------------------------

    @property
    def colormap(self) -> ColormapProvider:
        return self._colormap

    @colormap.setter
    def colormap(self, value: ColormapLike) -> None:
        self.set_colormap(value)

    def set_colormap(self, colormap: ColormapLike) -> None:
        """
        Replaces the colormap and rebuilds the cached gradient immediately.

        Args:
            colormap (ColormapLike): Colormap name, Matplotlib Colormap, or provider.

        Raises:
            ConfigurationError: If the colormap cannot be resolved or rasterized. The
                previous colormap and gradient are kept in that case.
        """
        provider = get_colormap(colormap)
        image = build_gradient(provider, self._width, self.style["gradient_height"], True)
        self._gradient = None
        self._colormap = provider
        self._gradient = image

    def invalidate(self) -> None:
        """
        Drops the cached gradient; the next render rebuilds it.
        """
        self._gradient = None

    def rebuild(self) -> None:
        """
        Rebuilds the cached gradient from the current colormap and width.
        """
        image = self.get_gradient_image()
        self._gradient = None
        self._gradient = image

    @property
    def has_cached_gradient(self) -> bool:
        return self._gradient is not None

    @property
    def gradient_image(self) -> np.ndarray:
        """
        Returns the cached gradient, building it if absent.

        Returns:
            np.ndarray: Read-only RGB image, top row is the top of the scale.
        """
        if self._gradient is None:
            self.rebuild()
        return self._gradient

    def get_gradient_image(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        vertical: bool = True,
    ) -> np.ndarray:
        """
        Rasterizes the colormap without touching the cached gradient.

        Args:
            width (Optional[int]): Image width. Defaults to None (the colorbar width).
            height (Optional[int]): Image height. Defaults to None (style `gradient_height`).
            vertical (bool): Sweep rows when True, columns when False. Defaults to True.

        Returns:
            np.ndarray: Read-only RGB image of shape (height, width, 3).

        Raises:
            ConfigurationError: If width or height is not positive.
        """
        width = self._width if width is None else width
        height = self.style["gradient_height"] if height is None else height
        return build_gradient(self._colormap, width, height, vertical)

    # --------------------------------------------------------
    # Ticks
    # --------------------------------------------------------

    @property
    def ticks(self) -> Tuple[Tick, ...]:
        return self._ticks.ticks

    @property
    def tick_registry(self) -> TickRegistry:
        return self._ticks

    def clear_ticks(self) -> None:
        """
        Removes all tick marks and labels.
        """
        self._ticks.clear()

    def add_tick(self, fraction: float, label: str) -> None:
        """
        Adds a tick mark and label.

        Args:
            fraction (float): From 0 (bottom, darkest) to 1 (top, brightest).
            label (str): Text displayed beside the tick.
        """
        self._ticks.add(fraction, label)

    def add_ticks(self, fractions: Sequence[float], labels: Sequence[str]) -> None:
        """
        Adds tick marks and labels pairwise.

        Args:
            fractions (Sequence[float]): Scale positions.
            labels (Sequence[str]): Tick labels.

        Raises:
            LengthMismatchError: If the sequences differ in length; nothing is added.
        """
        self._ticks.add_many(fractions, labels)

    def set_ticks(self, fractions: Sequence[float], labels: Sequence[str]) -> None:
        """
        Replaces all tick marks and labels.

        Args:
            fractions (Sequence[float]): Scale positions.
            labels (Sequence[str]): Tick labels.

        Raises:
            LengthMismatchError: If the sequences differ in length; existing ticks are kept.
        """
        self._ticks.set_many(fractions, labels)

    # --------------------------------------------------------
    # Plottable interface
    # --------------------------------------------------------

    def get_legend_items(self) -> List[LegendItem]:
        return []

    def get_axis_limits(self) -> AxisLimits:
        return AxisLimits()

    def validate_data(self, deep: bool = False) -> None:
        """
        Checks that the colorbar can be rendered.

        Args:
            deep (bool): Also check each tick fraction. Defaults to False.

        Raises:
            LengthMismatchError: If tick positions and labels are inconsistent.
            ConfigurationError: If the edge or a style value is invalid, or (deep) a
                tick fraction is not finite.
        """
        self._ticks.validate()
        _resolve_colorbar_layout(self.style)
        if not deep:
            return
        for tick in self._ticks:
            if not math.isfinite(tick.fraction):
                raise ConfigurationError(f"Tick {tick.label!r} has non-finite fraction {tick.fraction}")
            if not 0.0 <= tick.fraction <= 1.0:
                warn(
                    f"Tick {tick.label!r} at fraction {tick.fraction:g} lies outside the colorbar"
                )

    # --------------------------------------------------------
    # Rendering
    # --------------------------------------------------------

    def colorbar_rect(self, dims: PlotDimensions) -> Rect:
        """
        Computes where the gradient strip is drawn for a given plot geometry.

        Args:
            dims (PlotDimensions): Data-area geometry.

        Returns:
            Rect: Strip rectangle in canvas pixels.
        """
        layout = _resolve_colorbar_layout(self.style)
        return _compute_colorbar_rect(dims, self._width, layout["colorbar_pad"])

    def tick_positions(self, rect: Rect) -> List[float]:
        """
        Computes the vertical position of each tick, in registry order.

        Args:
            rect (Rect): Gradient strip rectangle.

        Returns:
            List[float]: Tick y coordinates in canvas pixels.
        """
        return [_tick_y(rect, tick.fraction) for tick in self._ticks]

    def render(
        self, dims: PlotDimensions, canvas: Canvas, low_quality: bool = False
    ) -> Optional[Rect]:
        """
        Draws the gradient strip, its border, and the ticks.

        Args:
            dims (PlotDimensions): Data-area geometry on the canvas.
            canvas (Canvas): Target drawing surface.
            low_quality (bool): Disable antialiasing for tick marks and labels.
                Defaults to False.

        Returns:
            Optional[Rect]: Strip rectangle, or None if the colorbar is hidden.

        Raises:
            LengthMismatchError: If tick positions and labels are inconsistent.
            ConfigurationError: If a style value cannot be drawn; nothing is drawn.
            ResourceError: If the canvas cannot be drawn on.
        """
        if not self.is_visible:
            return None
        # Resolve everything that can fail before the first artist is drawn
        self._ticks.validate()
        layout = _resolve_colorbar_layout(self.style)
        image = self.gradient_image
        rect = _compute_colorbar_rect(dims, self._width, layout["colorbar_pad"])
        self._render_colorbar(dims, canvas, image, rect, layout)
        self._render_ticks(dims, canvas, low_quality, rect, layout)
        return rect

    def _render_colorbar(
        self,
        dims: PlotDimensions,
        canvas: Canvas,
        image: np.ndarray,
        rect: Rect,
        layout: ColorbarLayout,
    ) -> None:
        """
        Draws the cached gradient stretched into the strip and outlines it.

        Args:
            dims (PlotDimensions): Data-area geometry.
            canvas (Canvas): Target drawing surface.
            image (np.ndarray): Cached gradient image.
            rect (Rect): Strip rectangle.
            layout (ColorbarLayout): Resolved drawing parameters.
        """
        with canvas.graphics(dims, low_quality=True, clip_to_data_area=False) as gfx:
            # One pixel taller so no seam shows along the bottom edge
            gfx.draw_image(image, rect.x, rect.y, rect.width, rect.height + 1)
            gfx.draw_rectangle(
                rect.x,
                rect.y,
                rect.width,
                rect.height,
                color=layout["border_color"],
                line_width=layout["border_width"],
            )

    def _render_ticks(
        self,
        dims: PlotDimensions,
        canvas: Canvas,
        low_quality: bool,
        rect: Rect,
        layout: ColorbarLayout,
    ) -> None:
        """
        Draws tick marks outward from the strip and their labels.

        Args:
            dims (PlotDimensions): Data-area geometry.
            canvas (Canvas): Target drawing surface.
            low_quality (bool): Disable antialiasing.
            rect (Rect): Strip rectangle.
            layout (ColorbarLayout): Resolved drawing parameters.
        """
        if len(self._ticks) == 0:
            return
        tick_left = rect.right
        tick_right = tick_left + layout["tick_mark_length"]
        label_x = tick_right + layout["tick_label_gap"]
        with canvas.graphics(dims, low_quality=low_quality, clip_to_data_area=False) as gfx:
            for tick, y in zip(self._ticks, self.tick_positions(rect)):
                gfx.draw_line(
                    tick_left,
                    y,
                    tick_right,
                    y,
                    color=layout["tick_mark_color"],
                    line_width=layout["tick_mark_width"],
                )
                gfx.draw_text(tick.label, label_x, y, layout["font"])

    def __repr__(self) -> str:
        return (
            f"Colorbar(colormap={self._colormap!r}, width={self._width}, "
            f"ticks={len(self._ticks)}, visible={self.is_visible})"
        )
