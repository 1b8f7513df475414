"""
colorkey/core/gradient
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .colormap import ColormapProvider


def _validate_dimension(name: str, value: int) -> int:
    """
    Validates one gradient dimension.

    Args:
        name (str): Dimension name used in error messages.
        value (int): Pixel count.

    Returns:
        int: Validated pixel count.

    Raises:
        ConfigurationError: If the value is not a positive integer.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"gradient {name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"gradient {name} must be positive, got {value}")
    return int(value)


def gradient_fractions(n: int) -> np.ndarray:
    """
    Computes the scale fraction for each step along the swept axis.

    The first step is the top of the scale (1.0) and the last is the bottom (0.0).

    Args:
        n (int): Number of steps (rows or columns).

    Returns:
        np.ndarray: Fractions in descending order.
    """
    n = _validate_dimension("length", n)
    if n == 1:
        return np.ones(1)
    return 1.0 - np.arange(n) / (n - 1)


def build_gradient(
    colormap: ColormapProvider,
    width: int,
    height: int,
    vertical: bool = True,
) -> np.ndarray:
    """
    Rasterizes a colormap sweep into an RGB pixel buffer.

    Args:
        colormap (ColormapProvider): Provider mapping fractions to colors.
        width (int): Buffer width in pixels.
        height (int): Buffer height in pixels.
        vertical (bool): Sweep rows (tall strip) when True, columns when False.
            Defaults to True.

    Returns:
        np.ndarray: Read-only uint8 array of shape (height, width, 3).

    Raises:
        ConfigurationError: If width or height is not a positive integer.
    """
    width = _validate_dimension("width", width)
    height = _validate_dimension("height", height)
    # One color per step along the swept axis
    n_steps = height if vertical else width
    colors = np.array(
        [colormap.color_for(float(f)) for f in gradient_fractions(n_steps)],
        dtype=np.uint8,
    )
    # Broadcast each step across the other axis
    if vertical:
        image = np.repeat(colors[:, np.newaxis, :], width, axis=1)
    else:
        image = np.repeat(colors[np.newaxis, :, :], height, axis=0)
    image.flags.writeable = False
    return image
