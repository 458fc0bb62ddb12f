"""Functions that check whether a JSON-based show specification looks like a
valid one.

All the validators in this module are pure: they inspect the object that they
receive but never modify it. They raise a ShowValidationError_ for the first
violated rule.
"""

from typing import Any, Optional

from .asset import Asset
from .constants import (
    MAX_DRONE_COUNT,
    SUPPORTED_LIGHT_PROGRAM_VERSIONS,
    SUPPORTED_SHOW_VERSIONS,
    SUPPORTED_TRAJECTORY_VERSIONS,
    SUPPORTED_YAW_CONTROL_VERSIONS,
)
from .errors import ErrorKind, Result, ShowValidationError
from .types import EnvironmentType, ShowSpecification
from .utils import is_number, is_object

__all__ = (
    "check_show_specification",
    "validate_camera",
    "validate_light_program",
    "validate_show_specification",
    "validate_trajectory",
    "validate_version_in_show_specification",
    "validate_yaw_control",
)


_ENVIRONMENT_TYPES = frozenset(item.value for item in EnvironmentType)


def _missing(message: str, path: Optional[str] = None) -> ShowValidationError:
    return ShowValidationError(message, kind=ErrorKind.MISSING_FIELD, path=path)


def _invalid(message: str, path: Optional[str] = None) -> ShowValidationError:
    return ShowValidationError(message, kind=ErrorKind.INVALID_VALUE, path=path)


def _is_supported_version(version: Any, supported) -> bool:
    return is_number(version) and version in supported


def _is_numeric_array(value: Any, min_length: int) -> bool:
    return (
        isinstance(value, list)
        and len(value) >= min_length
        and all(is_number(x, finite=True) for x in value)
    )


def validate_version_in_show_specification(spec: Any) -> None:
    """Validates the version number in the given show specification.

    Raises:
        ShowValidationError: if the version number is missing or unsupported
    """
    if not is_object(spec) or spec.get("version") is None:
        raise _missing("No version number in specification", "version")

    if not _is_supported_version(spec["version"], SUPPORTED_SHOW_VERSIONS):
        raise _invalid(
            f"Unsupported version number in specification: {spec['version']!r}; "
            "only version 1 files are supported",
            "version",
        )


def validate_show_specification(
    spec: Any, *, max_drone_count: Optional[int] = None
) -> None:
    """Runs some basic checks on a JSON-based show specification to see
    whether it looks like a valid show specification.

    Parameters:
        spec: the specification to validate
        max_drone_count: maximum number of drones allowed in the show;
            ``None`` means to use the default limit

    Raises:
        ShowValidationError: if the show specification does not look like a
            valid one. The error refers to the first rule that was violated.
    """
    validate_version_in_show_specification(spec)

    if max_drone_count is None:
        max_drone_count = MAX_DRONE_COUNT

    swarm = spec.get("swarm")
    if not is_object(swarm):
        raise _missing(
            "Show specification schema mismatch: no drones (swarm is missing)",
            "swarm",
        )

    drones = swarm.get("drones")
    if not isinstance(drones, list) or not drones:
        raise _missing("Show specification contains no drones", "swarm.drones")

    if len(drones) > max_drone_count:
        raise ShowValidationError(
            f"Too many drones in show file; maximum allowed is {max_drone_count}",
            kind=ErrorKind.LIMIT_EXCEEDED,
            path="swarm.drones",
        )

    for index, drone in enumerate(drones):
        path = f"swarm.drones[{index}].settings"
        settings = drone.get("settings") if is_object(drone) else None
        if not is_object(settings) or settings.get("trajectory") is None:
            raise _missing(
                f"Found drone without trajectory in show specification "
                f"(drone #{index})",
                f"{path}.trajectory",
            )

        validate_trajectory(settings["trajectory"], path=f"{path}.trajectory")

        if settings.get("lights") is not None:
            validate_light_program(settings["lights"], path=f"{path}.lights")

        if settings.get("yawControl") is not None:
            validate_yaw_control(settings["yawControl"], path=f"{path}.yawControl")

    if "environment" not in spec:
        return

    environment = spec["environment"]
    if not is_object(environment):
        raise _invalid("Invalid environment in show specification", "environment")

    if "type" in environment and (
        not isinstance(environment["type"], str)
        or environment["type"] not in _ENVIRONMENT_TYPES
    ):
        raise _invalid(
            "Invalid environment type in show specification", "environment.type"
        )

    cameras = environment.get("cameras")
    if cameras is None:
        return

    if not isinstance(cameras, list):
        raise _invalid(
            "Environment must contain an array of cameras", "environment.cameras"
        )

    for index, camera in enumerate(cameras):
        validate_camera(camera, path=f"environment.cameras[{index}]")


def check_show_specification(
    spec: Any, *, max_drone_count: Optional[int] = None
) -> Result[ShowSpecification]:
    """Non-raising variant of `validate_show_specification()`.

    Returns:
        a successful result holding the specification itself if it is valid,
        or a failed result holding the validation error
    """
    try:
        validate_show_specification(spec, max_drone_count=max_drone_count)
    except ShowValidationError as ex:
        return Result.failure(ex)
    return Result.success(spec)


def validate_camera(camera: Any, *, path: str = "camera") -> None:
    """Runs some basic checks on a JSON-based camera specification. Missing
    fields are allowed as they all have reasonable defaults.

    Raises:
        ShowValidationError: if the camera specification does not look like
            a valid one
    """
    if not is_object(camera):
        raise _invalid("Camera must be an object", path)

    if "type" in camera and not isinstance(camera["type"], str):
        raise _invalid("Camera type must be a string", f"{path}.type")

    if "position" in camera and not _is_numeric_array(camera["position"], 3):
        raise _invalid(
            "Camera position must be a numeric array of length 3", f"{path}.position"
        )

    if "orientation" in camera and not _is_numeric_array(camera["orientation"], 4):
        raise _invalid(
            "Camera orientation must be a numeric array of length 4",
            f"{path}.orientation",
        )


def validate_trajectory(trajectory: Any, *, path: str = "trajectory") -> None:
    """Runs some basic checks on a JSON-based trajectory specification.

    Raises:
        ShowValidationError: if the trajectory specification does not look
            like a valid one
    """
    if not is_object(trajectory):
        raise _invalid("Trajectory must be an object", path)

    if not _is_supported_version(
        trajectory.get("version"), SUPPORTED_TRAJECTORY_VERSIONS
    ):
        raise _invalid("Only version 1 trajectories are supported", f"{path}.version")

    points = trajectory.get("points")
    if not isinstance(points, list) or not points:
        raise _invalid("Trajectory schema mismatch: invalid points", f"{path}.points")

    for key in ("takeoffTime", "landingTime"):
        value = trajectory.get(key)
        if value is not None and not is_number(value):
            raise _invalid(
                f"Trajectory schema mismatch: {key} must be a number", f"{path}.{key}"
            )


def validate_light_program(lights: Any, *, path: str = "lights") -> None:
    """Runs some basic checks on a JSON-based light program specification.

    Raises:
        ShowValidationError: if the light program does not look like a valid
            one
    """
    if not is_object(lights):
        raise _invalid("Light program must be an object", path)

    if not _is_supported_version(lights.get("version"), SUPPORTED_LIGHT_PROGRAM_VERSIONS):
        raise _invalid("Only version 1 light programs are supported", f"{path}.version")

    if not isinstance(lights.get("data"), (str, bytes, Asset)):
        raise _invalid(
            "Light program schema mismatch: data must be a base64-encoded string "
            "or a binary asset",
            f"{path}.data",
        )


def validate_yaw_control(yaw_control: Any, *, path: str = "yawControl") -> None:
    """Runs some basic checks on a JSON-based yaw control specification.

    Raises:
        ShowValidationError: if the yaw control does not look like a valid one
    """
    if not is_object(yaw_control):
        raise _invalid("Yaw control must be an object", path)

    if not _is_supported_version(
        yaw_control.get("version"), SUPPORTED_YAW_CONTROL_VERSIONS
    ):
        raise _invalid("Only version 1 yaw controls are supported", f"{path}.version")

    setpoints = yaw_control.get("setpoints")
    if setpoints is not None and not isinstance(setpoints, list):
        raise _invalid(
            "Yaw control schema mismatch: invalid setpoints", f"{path}.setpoints"
        )

    auto_yaw = yaw_control.get("autoYaw")
    if auto_yaw is not None and not isinstance(auto_yaw, bool):
        raise _invalid(
            "Yaw control's auto yaw value must be a boolean", f"{path}.autoYaw"
        )

    if auto_yaw and setpoints:
        raise _invalid(
            "Setpoints cannot be used with auto yaw in yaw control", f"{path}.setpoints"
        )

    offset = yaw_control.get("autoYawOffset")
    if offset is not None and not is_number(offset):
        raise _invalid(
            "Yaw control's auto yaw offset must be a number", f"{path}.autoYawOffset"
        )
