"""Read-only view of the trajectory of a single drone in a show
specification.
"""

from dataclasses import dataclass
from math import inf
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .errors import ErrorKind, ShowValidationError
from .generators import iter_pairs, slice_between
from .utils import BoundingBoxCalculator, Point

__all__ = ("TrajectorySegment", "TrajectorySpecification")


@dataclass(frozen=True)
class TrajectorySegment:
    """A single segment in a trajectory specification."""

    t: float
    """The start time of the segment, relative to the takeoff time of the
    trajectory.
    """

    duration: float
    """The total duration of the segment."""

    points: List[Point]
    """The control points of the segment, including the start and end point."""

    @property
    def has_control_points(self) -> bool:
        """Returns whether the segment is a Bézier curve with control points."""
        return len(self.points) > 2

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def start_time(self) -> float:
        return self.t

    @property
    def end_time(self) -> float:
        return self.t + self.duration

    def split_at(
        self, fraction: float
    ) -> Tuple["TrajectorySegment", "TrajectorySegment"]:
        """Splits the segment into two pieces at the given relative fraction.

        Parameters:
            fraction: the fraction to split the segment at

        Returns:
            the two smaller pieces that the segment was split into
        """
        if fraction < 0 or fraction > 1:
            raise ValueError("fraction must be between 0 and 1")
        elif fraction == 0:
            return TrajectorySegment(self.t, 0, [self.start]), self
        elif fraction == 1:
            return self, TrajectorySegment(self.end_time, 0, [self.end])

        first_points, second_points = _de_casteljau(fraction, self.points)
        first_duration = self.duration * fraction
        return (
            TrajectorySegment(self.t, first_duration, first_points),
            TrajectorySegment(
                self.t + first_duration, self.duration - first_duration, second_points
            ),
        )

    def split_to_max_duration(
        self, max_duration: float
    ) -> Iterable["TrajectorySegment"]:
        """Splits the segment into smaller pieces such that the duration of
        each piece is less than or equal to the given maxium duration.
        """
        if max_duration <= 0:
            raise ValueError("maximum duration must be positive")

        num_splits = int(self.duration // max_duration)
        current = self
        while num_splits > 0:
            head, current = current.split_at(1 / (num_splits + 1))
            num_splits -= 1
            yield head
        yield current


def _de_casteljau(
    t: float, points: Sequence[Point]
) -> Tuple[List[Point], List[Point]]:
    """Splits a Bézier curve given by its control points at the given
    parameter value. See https://pomax.github.io/bezierinfo/#splitting .
    """
    left: List[Point] = []
    right: List[Point] = []

    while points:
        left.append(points[0])
        right.append(points[-1])
        points = [
            (
                (1 - t) * p[0] + t * q[0],
                (1 - t) * p[1] + t * q[1],
                (1 - t) * p[2] + t * q[2],
            )
            for p, q in iter_pairs(points)
        ]

    right.reverse()
    return left, right


def _to_point(value: Sequence[float]) -> Point:
    return float(value[0]), float(value[1]), float(value[2])


class TrajectorySpecification:
    """Read-only view of the trajectory of a single drone in a show
    specification.
    """

    def __init__(self, data: Dict[str, Any]):
        """Constructor.

        Parameters:
            data: the raw JSON trajectory dictionary in the show specification

        Raises:
            ShowValidationError: if the trajectory has no version number or
                the version number is not supported
        """
        self._data = data

        version = self._data.get("version")
        if version is None:
            raise ShowValidationError(
                "trajectory must have a version number",
                kind=ErrorKind.MISSING_FIELD,
                path="trajectory.version",
            )
        if version != 1:
            raise ShowValidationError(
                "only version 1 trajectories are supported",
                path="trajectory.version",
            )

    @property
    def bounding_box(self) -> Tuple[Point, Point]:
        """Returns the coordinates of the opposite corners of the axis-aligned
        bounding box of the trajectory, including its control points.

        Raises:
            ValueError: if the trajectory has no points
        """
        bbox = BoundingBoxCalculator(dim=3)
        for _, point, control_points in self._data.get("points", ()):
            bbox.add(point)
            for control_point in control_points:
                bbox.add(control_point)
        return bbox.get_corners()  # type: ignore

    @property
    def end_time(self) -> float:
        """Returns the timestamp of the last point of the trajectory, relative
        to the takeoff time. Zero for empty trajectories.
        """
        points = self._data.get("points")
        return float(points[-1][0]) if points else 0.0

    @property
    def is_empty(self) -> bool:
        """Returns whether the trajectory is empty (i.e. has no points)."""
        return not bool(self._data.get("points"))

    @property
    def home_position(self) -> Point:
        """Returns the home position of the drone within the show, inferred
        from the first point of the trajectory. Units are in meters.
        """
        points = self._data.get("points")
        if points:
            _, home, _ = points[0]
            if home and len(home) == 3:
                return _to_point(home)
        return 0.0, 0.0, 0.0

    @property
    def landing_time(self) -> float:
        """Returns the landing time of the drone within the show, in seconds.
        Inferred from the last point of the trajectory when not given.
        """
        landing_time = self._data.get("landingTime")
        if landing_time is None:
            return self.takeoff_time + self.end_time
        return float(landing_time)

    @property
    def takeoff_time(self) -> float:
        """Returns the takeoff time of the drone within the show, in seconds."""
        return float(self._data.get("takeoffTime") or 0.0)

    def iter_segments(self, max_length: float = inf) -> Iterable[TrajectorySegment]:
        """Iterates over the segments of the trajectory.

        Parameters:
            max_length: maximum duration of a segment; longer segments are
                split into smaller pieces

        Raises:
            ValueError: if the first point has control points or the time
                does not move forward between consecutive points
        """
        points = self._data.get("points")
        if not points:
            return

        if points[0][2]:
            raise ValueError("first keyframe must have no control points")

        for (prev_t, start, _), (t, end, control) in iter_pairs(points):
            # Round to milliseconds so floating-point errors do not accumulate
            dt = round(t - prev_t, 3)
            if dt < 0:
                raise ValueError(f"time should not move backwards at t = {t}")
            elif dt == 0:
                raise ValueError(f"time should not stand still at t = {t}")

            segment = TrajectorySegment(
                t=prev_t,
                duration=dt,
                points=[_to_point(p) for p in (start, *control, end)],
            )
            if dt > max_length:
                yield from segment.split_to_max_duration(max_length)
            else:
                yield segment

    def segments_in_time_window(
        self, start: float, end: float
    ) -> Iterable[TrajectorySegment]:
        """Returns the segments of the trajectory that overlap with the given
        time window. Times are relative to the takeoff time.
        """
        return slice_between(
            self.iter_segments(),
            lambda segment: segment.end_time > start,
            lambda segment: segment.start_time >= end,
        )
