from pytest import mark, raises

from show_format import (
    Camera,
    CameraType,
    ErrorKind,
    ShowValidationError,
    get_cameras_from_show_specification,
    get_default_camera_from_show_specification,
    validate_show_specification,
)


def test_retrieve_cameras_from_show_specification(show):
    validate_show_specification(show)
    cameras = get_cameras_from_show_specification(show)

    assert isinstance(cameras, list)
    assert len(cameras) == 2
    assert cameras[0] == {
        "name": "First camera",
        "type": "perspective",
        "position": [1, 2, 3],
        "orientation": [1, 0, 0, 0],
    }
    assert cameras[1] == {
        "name": "Second camera",
        "type": "perspective",
        "position": [10, 7, 4],
        "orientation": [-0.707, 0, 0.707, 0],
        "default": True,
    }
    assert cameras is show["environment"]["cameras"]

    del show["environment"]["cameras"]
    assert get_cameras_from_show_specification(show) == []

    show["environment"]["cameras"] = "foo"
    with raises(ShowValidationError, match="must be an array") as ex:
        get_cameras_from_show_specification(show)
    assert ex.value.kind is ErrorKind.INVALID_VALUE


def test_cameras_without_environment(show):
    del show["environment"]
    assert get_cameras_from_show_specification(show) == []
    assert get_cameras_from_show_specification({}) == []


def test_cameras_from_partial_specification():
    assert get_cameras_from_show_specification({"environment": None}) == []
    assert get_cameras_from_show_specification({"environment": "hell"}) == []
    assert get_cameras_from_show_specification({"environment": {"cameras": None}}) == []


def test_default_camera(show):
    camera = get_default_camera_from_show_specification(show)
    assert camera == Camera(
        name="Second camera",
        type=CameraType.PERSPECTIVE,
        position=(10.0, 7.0, 4.0),
        orientation=(-0.707, 0.0, 0.707, 0.0),
        default=True,
    )

    del show["environment"]["cameras"][1]["default"]
    camera = get_default_camera_from_show_specification(show)
    assert camera is not None and camera.name == "First camera"

    show["environment"]["cameras"] = []
    assert get_default_camera_from_show_specification(show) is None


def test_camera_defaults():
    data = {}
    camera = Camera.from_json(data)

    assert data == {}
    assert camera.name is None
    assert camera.type is CameraType.PERSPECTIVE
    assert camera.position == (0, 0, 0)
    assert camera.orientation == (1, 0, 0, 0)
    assert camera.focal_length == 23
    assert camera.default is False
    assert camera.json == {
        "type": "perspective",
        "position": [0, 0, 0],
        "orientation": [1, 0, 0, 0],
        "focalLength": 23,
    }


def test_camera_with_unknown_type():
    with raises(ValueError):
        Camera.from_json({"type": "orthographic"})


def test_default_camera_skips_non_object_entries():
    spec = {"environment": {"cameras": ["foo", 42, None]}}
    assert get_default_camera_from_show_specification(spec) is None

    spec["environment"]["cameras"].append({"name": "Real camera"})
    camera = get_default_camera_from_show_specification(spec)
    assert camera is not None and camera.name == "Real camera"


@mark.parametrize(
    "camera",
    [
        {"position": [1, 2]},
        {"position": "nowhere"},
        {"orientation": [1, 0, 0]},
        {"type": "orthographic"},
    ],
)
def test_default_camera_with_invalid_properties(camera):
    spec = {"environment": {"cameras": ["foo", camera]}}
    with raises(ShowValidationError) as ex:
        get_default_camera_from_show_specification(spec)
    assert ex.value.kind is ErrorKind.INVALID_VALUE
    assert ex.value.path.startswith("environment.cameras[1]")
