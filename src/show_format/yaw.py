from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .errors import ErrorKind, ShowValidationError
from .generators import iter_pairs

__all__ = ("YawSetpoint", "YawSetpointList")


@dataclass
class YawSetpoint:
    """The simplest representation of a yaw setpoint."""

    time: float
    """The timestamp associated to the yaw setpoint, in seconds."""

    yaw: float
    """The yaw angle associated to the yaw setpoint, in degrees."""


class YawSetpointList:
    """Simplest representation of a causal yaw setpoint list in time.

    Setpoints are assumed to be linear, i.e. yaw rate is constant
    between setpoints.
    """

    def __init__(
        self,
        setpoints: Sequence[Union[YawSetpoint, Tuple[float, float]]] = (),
        auto_yaw: bool = False,
        auto_yaw_offset: float = 0,
    ):
        if auto_yaw and setpoints:
            raise ValueError("Setpoints cannot be used with auto yaw")

        items = [
            p if isinstance(p, YawSetpoint) else YawSetpoint(*p) for p in setpoints
        ]

        self.setpoints = sorted(items, key=attrgetter("time"))
        self.auto_yaw = auto_yaw
        self.auto_yaw_offset = auto_yaw_offset

    @classmethod
    def from_json(cls, data: Dict[str, Any]):
        """Constructs a yaw setpoint list from its JSON representation
        typically used in show specifications.

        Raises:
            ShowValidationError: if the version number is missing or not
                supported
            ValueError: if the auto yaw settings are invalid
        """
        version: Optional[int] = data.get("version")

        if version is None:
            raise ShowValidationError(
                "Yaw control must have a version number",
                kind=ErrorKind.MISSING_FIELD,
                path="yawControl.version",
            )

        if version != 1:
            raise ShowValidationError(
                "Only version 1 yaw controls are supported", path="yawControl.version"
            )

        auto_yaw = data.get("autoYaw", False)
        if isinstance(auto_yaw, (float, int)):
            auto_yaw = bool(auto_yaw)
        if not isinstance(auto_yaw, bool):
            raise ValueError("Yaw control's auto yaw value must be a boolean")

        auto_yaw_offset = data.get("autoYawOffset", 0)
        if isinstance(auto_yaw_offset, int):
            auto_yaw_offset = float(auto_yaw_offset)
        if not isinstance(auto_yaw_offset, float):
            raise ValueError("Yaw control's auto yaw offset must be a number")

        return cls(
            setpoints=data.get("setpoints", []),
            auto_yaw=auto_yaw,
            auto_yaw_offset=auto_yaw_offset,
        )

    @property
    def yaw_offset(self) -> float:
        """Returns the yaw offset associated to the yaw setpoint list."""
        if self.auto_yaw:
            return self.auto_yaw_offset

        if not self.setpoints:
            return 0

        return self.setpoints[0].yaw

    def yaw_at(self, time: float) -> float:
        """Returns the yaw angle at the given time instant, in degrees, using
        linear interpolation between setpoints. The yaw is constant before
        the first and after the last setpoint.
        """
        if not self.setpoints:
            return self.yaw_offset

        if time <= self.setpoints[0].time:
            return self.setpoints[0].yaw

        for prev, current in iter_pairs(self.setpoints):
            if time < current.time:
                ratio = (time - prev.time) / (current.time - prev.time)
                return prev.yaw + ratio * (current.yaw - prev.yaw)

        return self.setpoints[-1].yaw
