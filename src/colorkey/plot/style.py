"""
colorkey/plot/style
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, TypeAlias, TypedDict, Union

# Type alias for style values
StyleValue: TypeAlias = Union[str, float, int, bool, None]


class StyleDefaults(TypedDict):
    """
    Type class for colorbar style defaults.
    """

    edge: str
    colorbar_pad: float
    gradient_height: int
    border_color: str
    border_width: float
    tick_mark_color: str
    tick_mark_length: float
    tick_mark_width: float
    tick_label_gap: float
    tick_label_font: str
    tick_label_fontsize: float
    tick_label_color: str
    tick_label_bold: bool


DEFAULT_STYLE: StyleDefaults = {
    # Placement relative to the data area (only "right" is drawn)
    "edge": "right",
    # Horizontal gap between the data area and the gradient strip (px)
    "colorbar_pad": 10,
    # Rows in the cached gradient image
    "gradient_height": 256,
    # Outline around the gradient strip
    "border_color": "black",
    "border_width": 1,
    # Tick marks, drawn outward from the strip's right edge
    "tick_mark_color": "black",
    "tick_mark_length": 3,
    "tick_mark_width": 1,
    # Tick labels, left-aligned past the tick mark
    "tick_label_gap": 2,
    "tick_label_font": "DejaVu Sans",
    "tick_label_fontsize": 12,
    "tick_label_color": "black",
    "tick_label_bold": False,
}


class StyleConfig:
    """
    Class for storing colorbar style defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}

    def _check_key(self, key: str) -> None:
        """
        Rejects keys that have no default.

        Args:
            key (str): Style key.

        Raises:
            KeyError: If the key is unknown.
        """
        if key not in self._defaults:
            raise KeyError(f"Unknown style key: {key!r}. Available keys: {sorted(self._defaults)}")

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.

        Raises:
            KeyError: If the key is unknown.
        """
        self._check_key(key)
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once. No override is applied if any key is unknown.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.

        Raises:
            KeyError: If any key is unknown.
        """
        for key in overrides:
            self._check_key(key)
        self._overrides.update(overrides)

    def reset(self) -> None:
        """
        Drops all overrides.
        """
        self._overrides.clear()

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults
