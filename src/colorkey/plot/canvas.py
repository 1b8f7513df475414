"""
colorkey/plot/canvas
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Union

import numpy as np
from matplotlib.artist import Artist
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.image import AxesImage
from matplotlib.lines import Line2D
from matplotlib.patches import Rectangle
from matplotlib.text import Text

from ..core.errors import ResourceError
from ..core.geometry import PlotDimensions

ColorValue = Union[str, tuple]


@dataclass(frozen=True)
class Font:
    """
    Data class for storing text rendering parameters.
    """

    name: str = "DejaVu Sans"
    size: float = 12
    color: ColorValue = "black"
    bold: bool = False


class Canvas:
    """
    Class for a raster drawing surface addressed in pixels, origin at the top-left.

    Backed by a Matplotlib Agg figure holding one full-bleed axes whose data
    coordinates equal canvas pixels.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        dpi: float = 100,
        background: ColorValue = "white",
    ) -> None:
        """
        Initializes the Canvas instance.

        Args:
            width (int): Canvas width in pixels.
            height (int): Canvas height in pixels.

        Kwargs:
            dpi (float): Figure resolution. Defaults to 100.
            background (ColorValue): Figure face color. Defaults to "white".

        Raises:
            ValueError: If width, height, or dpi is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        if dpi <= 0:
            raise ValueError(f"canvas dpi must be positive, got {dpi}")
        self.width = int(width)
        self.height = int(height)
        self.dpi = float(dpi)
        self._fig: Optional[Figure] = Figure(
            figsize=(self.width / self.dpi, self.height / self.dpi),
            dpi=self.dpi,
            facecolor=background,
        )
        FigureCanvasAgg(self._fig)
        # Full-bleed axes in pixel units, y axis pointing down
        ax = self._fig.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_axis_off()
        ax.set_autoscale_on(False)
        self._ax = ax
        self._zorder = 0

    @property
    def closed(self) -> bool:
        return self._fig is None

    @property
    def figure(self) -> Figure:
        """
        Returns the backing figure.

        Raises:
            ResourceError: If the canvas is closed.
        """
        if self._fig is None:
            raise ResourceError("canvas is closed")
        return self._fig

    @property
    def axes(self):
        """
        Returns the pixel-space axes that receives all artists.

        Raises:
            ResourceError: If the canvas is closed.
        """
        if self._fig is None:
            raise ResourceError("canvas is closed")
        return self._ax

    def px_to_points(self, px: float) -> float:
        """
        Converts a pixel length to points at the canvas resolution.

        Args:
            px (float): Length in pixels.

        Returns:
            float: Length in points.
        """
        return float(px) * 72.0 / self.dpi

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    @contextmanager
    def graphics(
        self,
        dims: Optional[PlotDimensions] = None,
        *,
        low_quality: bool = False,
        clip_to_data_area: bool = False,
    ) -> Iterator[Graphics]:
        """
        Acquires a drawing scope for a single drawing step.

        The scope is released when the block exits, normally or by exception.

        Args:
            dims (Optional[PlotDimensions]): Plot geometry, required for clipping. Defaults to None.

        Kwargs:
            low_quality (bool): Disable antialiasing and smooth image scaling. Defaults to False.
            clip_to_data_area (bool): Clip artists to the data area. Defaults to False.

        Yields:
            Graphics: Active drawing scope.

        Raises:
            ResourceError: If the canvas is closed.
            ValueError: If clipping is requested without plot dimensions.
        """
        if self._fig is None:
            raise ResourceError("cannot acquire graphics on a closed canvas")
        if clip_to_data_area and dims is None:
            raise ValueError("clip_to_data_area requires plot dimensions")
        gfx = Graphics(
            self,
            low_quality=low_quality,
            clip_dims=dims if clip_to_data_area else None,
        )
        try:
            yield gfx
        finally:
            gfx.release()

    def to_array(self) -> np.ndarray:
        """
        Rasterizes the canvas.

        Returns:
            np.ndarray: uint8 RGBA array of shape (height, width, 4).

        Raises:
            ResourceError: If the canvas is closed.
        """
        fig = self.figure
        fig.canvas.draw()
        return np.asarray(fig.canvas.buffer_rgba()).copy()

    def save(self, path: str, **kwargs) -> None:
        """
        Writes the canvas to an image file.

        Args:
            path (str): Output path; the format follows the extension.

        Kwargs:
            **kwargs: Forwarded to `Figure.savefig`. Defaults to {}.
        """
        self.figure.savefig(path, dpi=self.dpi, **kwargs)

    def close(self) -> None:
        """
        Releases the backing figure. Further drawing raises ResourceError.
        """
        if self._fig is not None:
            self._fig.clear()
        self._fig = None
        self._ax = None

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Graphics:
    """
    Class for a short-lived drawing scope on a Canvas.

    Coordinates and lengths are in canvas pixels. A released scope rejects
    further drawing.
    """

    def __init__(
        self,
        canvas: Canvas,
        *,
        low_quality: bool = False,
        clip_dims: Optional[PlotDimensions] = None,
    ) -> None:
        self.canvas = canvas
        self.low_quality = bool(low_quality)
        self._clip_dims = clip_dims
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        self._released = True

    def _active_axes(self):
        if self._released:
            raise ResourceError("graphics scope has been released")
        return self.canvas.axes

    def _finish(self, artist: Artist) -> Artist:
        """
        Applies quality, clipping, and stacking order to a new artist.

        Args:
            artist (Artist): Artist already added to the canvas axes.

        Returns:
            Artist: The same artist.
        """
        artist.set_zorder(self.canvas._next_zorder())
        if hasattr(artist, "set_antialiased"):
            artist.set_antialiased(not self.low_quality)
        if self._clip_dims is None:
            artist.set_clip_on(False)
        else:
            rect = self._clip_dims.data_rect
            clip = Rectangle(
                (rect.x, rect.y),
                rect.width,
                rect.height,
                transform=self.canvas.axes.transData,
            )
            artist.set_clip_path(clip)
        return artist

    def draw_image(
        self, image: np.ndarray, x: float, y: float, width: float, height: float
    ) -> AxesImage:
        """
        Draws an image stretched into a rectangle.

        Args:
            image (np.ndarray): RGB or RGBA image, row 0 at the top.
            x (float): Left edge.
            y (float): Top edge.
            width (float): Target width.
            height (float): Target height.

        Returns:
            AxesImage: Image artist.
        """
        ax = self._active_axes()
        artist = ax.imshow(
            image,
            extent=(x, x + width, y + height, y),
            origin="upper",
            aspect="auto",
            interpolation="nearest" if self.low_quality else "bilinear",
        )
        return self._finish(artist)

    def draw_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        color: ColorValue = "black",
        line_width: float = 1,
    ) -> Rectangle:
        """
        Draws a rectangle outline.

        Args:
            x (float): Left edge.
            y (float): Top edge.
            width (float): Rectangle width.
            height (float): Rectangle height.

        Kwargs:
            color (ColorValue): Outline color. Defaults to "black".
            line_width (float): Outline width in pixels. Defaults to 1.

        Returns:
            Rectangle: Patch artist.
        """
        ax = self._active_axes()
        patch = Rectangle(
            (x, y),
            width,
            height,
            fill=False,
            edgecolor=color,
            linewidth=self.canvas.px_to_points(line_width),
        )
        ax.add_patch(patch)
        return self._finish(patch)

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        *,
        color: ColorValue = "black",
        line_width: float = 1,
    ) -> Line2D:
        """
        Draws a straight line segment.

        Args:
            x0 (float): Start x.
            y0 (float): Start y.
            x1 (float): End x.
            y1 (float): End y.

        Kwargs:
            color (ColorValue): Line color. Defaults to "black".
            line_width (float): Line width in pixels. Defaults to 1.

        Returns:
            Line2D: Line artist.
        """
        ax = self._active_axes()
        line = Line2D(
            [x0, x1],
            [y0, y1],
            color=color,
            linewidth=self.canvas.px_to_points(line_width),
            solid_capstyle="butt",
        )
        ax.add_line(line)
        return self._finish(line)

    def draw_text(self, text: str, x: float, y: float, font: Font) -> Text:
        """
        Draws left-aligned text vertically centered on y.

        Args:
            text (str): Text to draw.
            x (float): Left edge of the text.
            y (float): Vertical center of the text.
            font (Font): Font parameters; size is in points.

        Returns:
            Text: Text artist.
        """
        ax = self._active_axes()
        artist = ax.text(
            x,
            y,
            text,
            ha="left",
            va="center",
            fontfamily=font.name,
            fontsize=font.size,
            color=font.color,
            fontweight="bold" if font.bold else "normal",
        )
        return self._finish(artist)
