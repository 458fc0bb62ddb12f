from math import isfinite
from typing import Any, List, Optional, Sequence, Tuple

__all__ = ("BoundingBoxCalculator", "is_number", "is_object", "Point")

#: Type specification for a single point in a trajectory
Point = Tuple[float, float, float]


def is_object(value: Any) -> bool:
    """Returns whether the given value is a JSON object, i.e. a dictionary."""
    return isinstance(value, dict)


def is_number(value: Any, *, finite: bool = False) -> bool:
    """Returns whether the given value is a JSON number. Booleans are not
    considered to be numbers.

    Parameters:
        value: the value to test
        finite: whether to reject infinities and NaNs
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isfinite(value) if finite else True


class BoundingBoxCalculator:
    """Class that iteratively calculates the axis-aligned bounding box of a
    set of points.
    """

    _max: Optional[List[float]]
    _min: Optional[List[float]]

    def __init__(self, dim: int = 3):
        """Constructor.

        Parameters:
            dim: the dimensions of the bounding box
        """
        self._dim = int(dim)
        self._min, self._max = None, None

    @property
    def is_empty(self) -> bool:
        """Returns whether the bounding box is empty (has no points)."""
        return self._min is None

    def add(self, point: Sequence[float]) -> None:
        """Adds a new point to the set of points."""
        if self.is_empty:
            self._min = list(point[: self._dim])
            self._max = list(point[: self._dim])
        else:
            assert self._min is not None and self._max is not None
            for i in range(self._dim):
                self._min[i] = min(self._min[i], point[i])
                self._max[i] = max(self._max[i], point[i])

    def get_corners(self) -> Tuple[Sequence[float], Sequence[float]]:
        """Returns the opposite corners of the bounding box.

        Raises:
            ValueError: if no points were added to the bounding box yet
        """
        if self.is_empty:
            raise ValueError("the bounding box is empty")

        assert self._min is not None and self._max is not None
        return tuple(self._min), tuple(self._max)

    def pad(self, amount: float) -> None:
        """Pads the bounding box on each side with the given padding.

        No changes are made when the bounding box has no points yet.
        """
        if amount < 0:
            raise ValueError("padding must be non-negative")

        if amount > 0 and not self.is_empty:
            assert self._min is not None and self._max is not None
            for i in range(self._dim):
                self._min[i] -= amount
                self._max[i] += amount
