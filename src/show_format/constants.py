"""Constants related to the Skybrush compiled show format."""

__all__ = (
    "COORDINATE_SYSTEM_TYPE",
    "MAX_DRONE_COUNT",
    "SHOW_SPECIFICATION_ENTRY",
    "SUPPORTED_LIGHT_PROGRAM_VERSIONS",
    "SUPPORTED_SHOW_VERSIONS",
    "SUPPORTED_TRAJECTORY_VERSIONS",
    "SUPPORTED_YAW_CONTROL_VERSIONS",
)

COORDINATE_SYSTEM_TYPE = "nwu"
"""Coordinate system type for drone shows."""

MAX_DRONE_COUNT = 5000
"""Maximum number of drones that we support in a single show by default."""

SHOW_SPECIFICATION_ENTRY = "show.json"
"""Name of the entry in a compiled show file that holds the show specification."""

SUPPORTED_SHOW_VERSIONS = (1,)
SUPPORTED_TRAJECTORY_VERSIONS = (1,)
SUPPORTED_LIGHT_PROGRAM_VERSIONS = (1,)
SUPPORTED_YAW_CONTROL_VERSIONS = (1,)
