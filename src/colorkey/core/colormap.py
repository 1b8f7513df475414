"""
colorkey/core/colormap
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, Union, runtime_checkable

import matplotlib
import numpy as np
from matplotlib.colors import Colormap

from .errors import ConfigurationError

RGB = Tuple[int, int, int]

DEFAULT_COLORMAP = "viridis"


@runtime_checkable
class ColormapProvider(Protocol):
    """
    Class for defining the colormap capability consumed by the colorbar.
    Protocol only; implement in concrete providers.
    """

    name: str

    def color_for(self, fraction: float) -> RGB:
        """
        Maps a normalized fraction to a color.

        Args:
            fraction (float): Position along the scale, from 0 (lowest) to 1 (highest).

        Returns:
            RGB: (r, g, b) channel values in 0..255.
        """
        # Protocol stub; no runtime implementation
        ...


class MatplotlibColormap:
    """
    Class for adapting a Matplotlib colormap to the ColormapProvider interface.
    """

    def __init__(self, cmap: Union[str, Colormap]) -> None:
        """
        Initializes the MatplotlibColormap instance.

        Args:
            cmap (Union[str, Colormap]): Registered colormap name or Colormap object.

        Raises:
            ConfigurationError: If the colormap name is not registered.
        """
        if isinstance(cmap, str):
            try:
                cmap = matplotlib.colormaps[cmap]
            except KeyError as exc:
                raise ConfigurationError(f"Unknown colormap: {cmap!r}") from exc
        if not isinstance(cmap, Colormap):
            raise ConfigurationError(
                f"Expected a colormap name or matplotlib Colormap, got {type(cmap).__name__}"
            )
        self.cmap = cmap
        self.name = cmap.name

    def color_for(self, fraction: float) -> RGB:
        """
        Maps a normalized fraction to an 8-bit RGB color.

        Args:
            fraction (float): Position along the scale. Clamped to [0, 1].

        Returns:
            RGB: (r, g, b) channel values in 0..255.
        """
        frac = float(np.clip(fraction, 0.0, 1.0))
        r, g, b, _a = self.cmap(frac)
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatplotlibColormap):
            return NotImplemented
        return self.cmap == other.cmap

    def __repr__(self) -> str:
        return f"MatplotlibColormap({self.name!r})"


def get_colormap(
    cmap: Optional[Union[str, Colormap, ColormapProvider]] = None,
) -> ColormapProvider:
    """
    Resolves a colormap specification to a provider.

    Args:
        cmap (Optional[Union[str, Colormap, ColormapProvider]]): Colormap name, Matplotlib
            Colormap, or provider. Defaults to None (viridis).

    Returns:
        ColormapProvider: Provider usable by the gradient rasterizer.

    Raises:
        ConfigurationError: If the specification cannot be resolved.
    """
    if cmap is None:
        return MatplotlibColormap(DEFAULT_COLORMAP)
    if isinstance(cmap, (str, Colormap)):
        return MatplotlibColormap(cmap)
    if isinstance(cmap, ColormapProvider):
        return cmap
    raise ConfigurationError(f"Cannot resolve colormap from {type(cmap).__name__}")


def available_colormaps() -> List[str]:
    """
    Lists the registered colormap names.

    Returns:
        List[str]: Sorted colormap names.
    """
    return sorted(matplotlib.colormaps)
