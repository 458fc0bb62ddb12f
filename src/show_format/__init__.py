"""Validation and loading of Skybrush drone show specifications and compiled
show files.
"""

from .asset import Asset
from .camera import (
    get_cameras_from_show_specification,
    get_default_camera_from_show_specification,
)
from .compiled import (
    create_compiled_show,
    load_compiled_show,
    load_compiled_show_async,
    load_compiled_show_from_file,
    LoadedShow,
    try_load_compiled_show,
)
from .config import LoaderConfiguration
from .constants import MAX_DRONE_COUNT, SHOW_SPECIFICATION_ENTRY
from .errors import (
    ErrorKind,
    MalformedContainerError,
    MissingEntryError,
    Result,
    ShowFormatError,
    ShowValidationError,
)
from .generators import iter_pairs, slice_between
from .specification import (
    get_audio_from_show_specification,
    get_drone_count_from_show_specification,
    get_drones_from_show_specification,
    get_environment_type_from_show_specification,
    get_home_position_from_drone_specification,
    get_light_program_from_drone_specification,
    get_title_from_show_specification,
    get_trajectory_from_drone_specification,
    get_yaw_control_from_drone_specification,
)
from .trajectory import TrajectorySegment, TrajectorySpecification
from .types import Camera, CameraType, DroneType, EnvironmentType, ShowSpecification
from .validation import (
    check_show_specification,
    validate_camera,
    validate_light_program,
    validate_show_specification,
    validate_trajectory,
    validate_yaw_control,
)
from .version import __version__
from .yaw import YawSetpoint, YawSetpointList

__all__ = (
    "__version__",
    "Asset",
    "Camera",
    "CameraType",
    "check_show_specification",
    "create_compiled_show",
    "DroneType",
    "EnvironmentType",
    "ErrorKind",
    "get_audio_from_show_specification",
    "get_cameras_from_show_specification",
    "get_default_camera_from_show_specification",
    "get_drone_count_from_show_specification",
    "get_drones_from_show_specification",
    "get_environment_type_from_show_specification",
    "get_home_position_from_drone_specification",
    "get_light_program_from_drone_specification",
    "get_title_from_show_specification",
    "get_trajectory_from_drone_specification",
    "get_yaw_control_from_drone_specification",
    "iter_pairs",
    "load_compiled_show",
    "load_compiled_show_async",
    "load_compiled_show_from_file",
    "LoadedShow",
    "LoaderConfiguration",
    "MalformedContainerError",
    "MAX_DRONE_COUNT",
    "MissingEntryError",
    "Result",
    "SHOW_SPECIFICATION_ENTRY",
    "ShowFormatError",
    "ShowSpecification",
    "ShowValidationError",
    "slice_between",
    "TrajectorySegment",
    "TrajectorySpecification",
    "try_load_compiled_show",
    "validate_camera",
    "validate_light_program",
    "validate_show_specification",
    "validate_trajectory",
    "validate_yaw_control",
    "YawSetpoint",
    "YawSetpointList",
)
