from copy import deepcopy
from pytest import fixture

from show_format import create_compiled_show


TEST_SHOW = {
    "version": 1,
    "environment": {
        "type": "outdoor",
        "cameras": [
            {
                "name": "First camera",
                "type": "perspective",
                "position": [1, 2, 3],
                "orientation": [1, 0, 0, 0],
            },
            {
                "name": "Second camera",
                "type": "perspective",
                "position": [10, 7, 4],
                "orientation": [-0.707, 0, 0.707, 0],
                "default": True,
            },
        ],
    },
    "meta": {"title": "Test show for Skybrush Live Demo"},
    "swarm": {
        "drones": [
            {
                "type": "generic",
                "settings": {
                    "name": f"Drone {index + 1}",
                    "trajectory": {
                        "version": 1,
                        "points": [
                            [0, [index * 2, 0, 0], []],
                            [10, [index * 2, 0, 10], []],
                            [20, [index * 2, 10, 10], [[index * 2, 5, 15]]],
                        ],
                        "takeoffTime": 5,
                    },
                    "lights": {"version": 1, "data": "AQID"},
                    "yawControl": {
                        "version": 1,
                        "setpoints": [[0, 0], [10, 90]],
                    },
                },
            }
            for index in range(3)
        ]
    },
}


@fixture
def show() -> dict:
    """A valid show specification with three drones and two cameras."""
    return deepcopy(TEST_SHOW)


@fixture
def compiled_show(show) -> bytes:
    """A valid compiled show file without assets."""
    return create_compiled_show(show)


@fixture
def compiled_show_with_assets(show) -> bytes:
    """A valid compiled show file with an audio asset."""
    show["media"] = {
        "audio": {
            "data": {"$ref": "zip:assets/music.mp3"},
            "mediaType": "audio/mpeg",
        }
    }
    return create_compiled_show(show, {"assets/music.mp3": b"lalalalalaaaaa"})
