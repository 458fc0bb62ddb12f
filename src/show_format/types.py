"""Types describing the structure of a show specification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

__all__ = (
    "Camera",
    "CameraType",
    "DroneType",
    "EnvironmentType",
    "Quaternion",
    "ShowSpecification",
    "Vector3",
)


ShowSpecification = Dict[str, Any]
"""Type alias for show specification objects."""

Vector3 = Tuple[float, float, float]
"""A single 3D coordinate in tuple notation."""

Quaternion = Tuple[float, float, float, float]
"""Quaternion in tuple notation, in JPL order (wxyz)."""


class EnvironmentType(Enum):
    """Enumeration that specifies whether the show is an outdoor or an indoor
    show.
    """

    OUTDOOR = "outdoor"
    INDOOR = "indoor"


class CameraType(Enum):
    """Enumeration of the supported camera types."""

    PERSPECTIVE = "perspective"


class DroneType(Enum):
    """Enumeration of the supported drone types."""

    GENERIC = "generic"


@dataclass(frozen=True)
class Camera:
    """Name, position and orientation of a pre-defined camera of the show.

    In the base orientation, the camera points towards the negative Z axis
    such that the positive X axis is to the right. The coordinate system is
    right-handed.
    """

    name: Optional[str] = None
    """Optional human-readable identifier of the camera."""

    type: CameraType = CameraType.PERSPECTIVE
    """The type of the camera."""

    position: Vector3 = (0.0, 0.0, 0.0)
    """The position of the camera."""

    orientation: Quaternion = (1.0, 0.0, 0.0, 0.0)
    """The orientation of the camera relative to its base orientation."""

    focal_length: float = 23.0
    """The focal length of the camera, in millimeters."""

    default: bool = field(default=False)
    """Whether this is the preferred camera of the show."""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Camera":
        """Creates a camera from its JSON representation in a show
        specification, filling in the defaults for the missing fields. The
        input object is not modified.

        Raises:
            ValueError: if the camera type is not known
        """
        kwds: Dict[str, Any] = {}

        if data.get("name") is not None:
            kwds["name"] = str(data["name"])
        if data.get("type") is not None:
            kwds["type"] = CameraType(data["type"])
        if data.get("position") is not None:
            x, y, z = data["position"][:3]
            kwds["position"] = (float(x), float(y), float(z))
        if data.get("orientation") is not None:
            w, x, y, z = data["orientation"][:4]
            kwds["orientation"] = (float(w), float(x), float(y), float(z))
        if data.get("focalLength") is not None:
            kwds["focal_length"] = float(data["focalLength"])
        kwds["default"] = bool(data.get("default", False))

        return cls(**kwds)

    @property
    def json(self) -> Dict[str, Any]:
        """Returns the JSON representation of the camera."""
        result: Dict[str, Any] = {
            "type": self.type.value,
            "position": list(self.position),
            "orientation": list(self.orientation),
            "focalLength": self.focal_length,
        }
        if self.name is not None:
            result["name"] = self.name
        if self.default:
            result["default"] = True
        return result
