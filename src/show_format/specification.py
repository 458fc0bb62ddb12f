"""Accessor functions that extract parts of a validated show specification."""

from base64 import b64decode
from typing import Any, Dict, List, Optional, Union

from .asset import Asset
from .errors import ErrorKind, ShowValidationError
from .trajectory import TrajectorySpecification
from .types import EnvironmentType, ShowSpecification, Vector3
from .utils import is_object
from .yaw import YawSetpointList

__all__ = (
    "get_audio_from_show_specification",
    "get_drone_count_from_show_specification",
    "get_drones_from_show_specification",
    "get_environment_type_from_show_specification",
    "get_home_position_from_drone_specification",
    "get_light_program_from_drone_specification",
    "get_title_from_show_specification",
    "get_trajectory_from_drone_specification",
    "get_yaw_control_from_drone_specification",
)


DroneSpecification = Dict[str, Any]
"""Type alias for the specification of a single drone."""


def get_drones_from_show_specification(
    show: ShowSpecification,
) -> List[DroneSpecification]:
    """Returns the list of drone specifications from the given show
    specification.
    """
    return show["swarm"]["drones"]


def get_drone_count_from_show_specification(show: ShowSpecification) -> int:
    """Returns the number of drones in the show."""
    return len(get_drones_from_show_specification(show))


def get_environment_type_from_show_specification(
    show: ShowSpecification,
) -> EnvironmentType:
    """Returns the type of the environment of the show. Shows without an
    explicit environment type are outdoor shows.
    """
    environment = show.get("environment")
    if not is_object(environment) or environment.get("type") is None:
        return EnvironmentType.OUTDOOR
    return EnvironmentType(environment["type"])


def get_title_from_show_specification(show: ShowSpecification) -> Optional[str]:
    """Returns the title of the show from its metadata, if known."""
    meta = show.get("meta")
    if not is_object(meta):
        return None
    title = meta.get("title")
    return str(title) if title is not None else None


def get_audio_from_show_specification(
    show: ShowSpecification,
) -> Optional[Union[bytes, Asset]]:
    """Returns the audio data associated to the show; the raw bytes if the
    audio was loaded from the compiled show file, an Asset_ placeholder if it
    was not, or ``None`` if the show has no audio.
    """
    media = show.get("media")
    audio = media.get("audio") if is_object(media) else None
    if not is_object(audio):
        return None
    return audio.get("data")


def get_trajectory_from_drone_specification(
    drone: DroneSpecification,
) -> TrajectorySpecification:
    """Returns the trajectory of a single drone from its specification."""
    return TrajectorySpecification(drone["settings"]["trajectory"])


def get_light_program_from_drone_specification(
    drone: DroneSpecification,
) -> Optional[Union[bytes, Asset]]:
    """Returns the light program of a single drone as bytecode, or ``None``
    if the drone has no light program. Light programs loaded from a binary
    entry of a compiled show file are returned as they are; these may be
    Asset_ placeholders if the assets were not loaded.
    """
    lights = drone["settings"].get("lights")
    if lights is None:
        return None

    version = lights.get("version")
    if version is None:
        raise ShowValidationError(
            "light program must have a version number",
            kind=ErrorKind.MISSING_FIELD,
            path="lights.version",
        )
    if version != 1:
        raise ShowValidationError(
            "only version 1 light programs are supported", path="lights.version"
        )

    data = lights["data"]
    return b64decode(data) if isinstance(data, str) else data


def get_yaw_control_from_drone_specification(
    drone: DroneSpecification,
) -> Optional[YawSetpointList]:
    """Returns the yaw control of a single drone, or ``None`` if the drone has
    no yaw control.
    """
    yaw_control = drone["settings"].get("yawControl")
    return YawSetpointList.from_json(yaw_control) if yaw_control is not None else None


def get_home_position_from_drone_specification(
    drone: DroneSpecification,
) -> Vector3:
    """Returns the home position of a single drone. Units are in meters.

    The home position is inferred from the first point of the trajectory
    when it is not given explicitly.
    """
    home = drone["settings"].get("home")
    if home and len(home) == 3:
        return float(home[0]), float(home[1]), float(home[2])
    return get_trajectory_from_drone_specification(drone).home_position
