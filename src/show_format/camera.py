from typing import Any, Dict, List, Optional

from .errors import ErrorKind, ShowValidationError
from .types import Camera, ShowSpecification
from .utils import is_object
from .validation import validate_camera

__all__ = (
    "get_cameras_from_show_specification",
    "get_default_camera_from_show_specification",
)


def get_cameras_from_show_specification(
    spec: ShowSpecification,
) -> List[Dict[str, Any]]:
    """Returns the list of cameras from a show specification, in the order
    they appear in the specification.

    The show specification does not need to be validated; missing
    environments and camera lists are treated as if there were no cameras.

    Raises:
        ShowValidationError: if the cameras of the environment are specified
            but they are not stored in an array
    """
    environment = spec.get("environment") if is_object(spec) else None
    if not is_object(environment):
        return []

    cameras = environment.get("cameras")
    if cameras is None:
        return []

    if not isinstance(cameras, list):
        raise ShowValidationError(
            "environment.cameras must be an array",
            kind=ErrorKind.INVALID_VALUE,
            path="environment.cameras",
        )

    return cameras


def get_default_camera_from_show_specification(
    spec: ShowSpecification,
) -> Optional[Camera]:
    """Returns the camera that should be selected when the user made no
    explicit selection: the first camera marked as default, or the first
    camera if no camera is marked as default. Entries of the camera list that
    are not objects are skipped. Returns ``None`` if the show has no cameras.

    Raises:
        ShowValidationError: if the selected camera is not a valid camera
            specification
    """
    candidates = [
        (index, camera)
        for index, camera in enumerate(get_cameras_from_show_specification(spec))
        if is_object(camera)
    ]
    if not candidates:
        return None

    index, camera = next(
        (item for item in candidates if item[1].get("default")), candidates[0]
    )
    path = f"environment.cameras[{index}]"

    validate_camera(camera, path=path)
    try:
        return Camera.from_json(camera)
    except ValueError as ex:
        raise ShowValidationError(
            f"Invalid camera in show specification: {ex}",
            kind=ErrorKind.INVALID_VALUE,
            path=path,
        ) from ex
