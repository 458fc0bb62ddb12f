from pytest import raises

from show_format import (
    Asset,
    EnvironmentType,
    ShowValidationError,
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


def test_show_level_accessors(show):
    assert get_drone_count_from_show_specification(show) == 3
    assert len(get_drones_from_show_specification(show)) == 3
    assert get_title_from_show_specification(show) == (
        "Test show for Skybrush Live Demo"
    )
    assert get_environment_type_from_show_specification(show) is (
        EnvironmentType.OUTDOOR
    )
    assert get_audio_from_show_specification(show) is None

    show["environment"]["type"] = "indoor"
    assert get_environment_type_from_show_specification(show) is (
        EnvironmentType.INDOOR
    )

    del show["environment"]
    del show["meta"]
    assert get_environment_type_from_show_specification(show) is (
        EnvironmentType.OUTDOOR
    )
    assert get_title_from_show_specification(show) is None

    show["media"] = {"audio": {"data": Asset("music.mp3")}}
    assert get_audio_from_show_specification(show) == Asset("music.mp3")


def test_drone_level_accessors(show):
    drone = get_drones_from_show_specification(show)[2]

    trajectory = get_trajectory_from_drone_specification(drone)
    assert trajectory.takeoff_time == 5

    assert get_light_program_from_drone_specification(drone) == b"\x01\x02\x03"

    yaw_control = get_yaw_control_from_drone_specification(drone)
    assert yaw_control is not None
    assert yaw_control.yaw_at(5) == 45

    assert get_home_position_from_drone_specification(drone) == (4, 0, 0)

    drone["settings"]["home"] = [1, 2, 3]
    assert get_home_position_from_drone_specification(drone) == (1, 2, 3)


def test_drone_without_optional_settings(show):
    drone = get_drones_from_show_specification(show)[0]
    del drone["settings"]["lights"]
    del drone["settings"]["yawControl"]

    assert get_light_program_from_drone_specification(drone) is None
    assert get_yaw_control_from_drone_specification(drone) is None


def test_light_program_with_invalid_version(show):
    drone = get_drones_from_show_specification(show)[0]

    drone["settings"]["lights"]["version"] = 2
    with raises(ShowValidationError, match="version 1"):
        get_light_program_from_drone_specification(drone)

    del drone["settings"]["lights"]["version"]
    with raises(ShowValidationError, match="version number"):
        get_light_program_from_drone_specification(drone)
