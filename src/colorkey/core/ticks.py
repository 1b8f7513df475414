"""
colorkey/core/ticks
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .errors import LengthMismatchError


@dataclass(frozen=True)
class Tick:
    """
    Data class for storing one colorbar tick: a scale position and its label.
    """

    fraction: float
    label: str


def _pair_ticks(fractions: Sequence[float], labels: Sequence[str]) -> List[Tick]:
    """
    Pairs tick fractions with labels, enforcing equal lengths.

    Args:
        fractions (Sequence[float]): Scale positions, 0 (bottom) to 1 (top).
        labels (Sequence[str]): Text displayed beside each tick.

    Returns:
        List[Tick]: Paired ticks in input order.

    Raises:
        LengthMismatchError: If the sequences differ in length.
    """
    fractions = list(fractions)
    labels = list(labels)
    if len(fractions) != len(labels):
        raise LengthMismatchError(
            "fractions and labels must have the same length "
            f"(got {len(fractions)} fractions and {len(labels)} labels)"
        )
    return [Tick(float(f), str(s)) for f, s in zip(fractions, labels)]


class TickRegistry:
    """
    Class for storing colorbar ticks in display order.

    Ticks are kept as paired records; insertion order is display order and duplicates
    are allowed. Fractions are not range-checked here.
    """

    def __init__(self) -> None:
        """
        Initializes the TickRegistry instance.
        """
        self._ticks: List[Tick] = []

    def clear(self) -> None:
        """
        Removes all ticks.
        """
        self._ticks.clear()

    def add(self, fraction: float, label: str) -> None:
        """
        Appends a single tick.

        Args:
            fraction (float): Scale position, 0 (bottom) to 1 (top).
            label (str): Text displayed beside the tick.
        """
        self._ticks.append(Tick(float(fraction), str(label)))

    def add_many(self, fractions: Sequence[float], labels: Sequence[str]) -> None:
        """
        Appends ticks pairwise. Nothing is appended if the lengths differ.

        Args:
            fractions (Sequence[float]): Scale positions.
            labels (Sequence[str]): Tick labels.

        Raises:
            LengthMismatchError: If the sequences differ in length.
        """
        self._ticks.extend(_pair_ticks(fractions, labels))

    def set_many(self, fractions: Sequence[float], labels: Sequence[str]) -> None:
        """
        Replaces all ticks. Existing ticks are kept if the lengths differ.

        Args:
            fractions (Sequence[float]): Scale positions.
            labels (Sequence[str]): Tick labels.

        Raises:
            LengthMismatchError: If the sequences differ in length.
        """
        ticks = _pair_ticks(fractions, labels)
        self._ticks = ticks

    def validate(self) -> None:
        """
        Checks that every stored fraction has exactly one label.

        Raises:
            LengthMismatchError: If stored fractions and labels are inconsistent.
        """
        fractions, labels = self.fractions, self.labels
        if len(fractions) != len(labels):
            raise LengthMismatchError("Tick labels and positions must have the same length")

    @property
    def ticks(self) -> Tuple[Tick, ...]:
        return tuple(self._ticks)

    @property
    def fractions(self) -> Tuple[float, ...]:
        return tuple(t.fraction for t in self._ticks)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(t.label for t in self._ticks)

    def __len__(self) -> int:
        return len(self._ticks)

    def __iter__(self) -> Iterator[Tick]:
        return iter(self.ticks)

    def __repr__(self) -> str:
        return f"TickRegistry({list(self._ticks)!r})"
