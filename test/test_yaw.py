from pytest import raises

from show_format.errors import ShowValidationError
from show_format.yaw import YawSetpoint, YawSetpointList


def test_yaw_setpoints_without_version_number():
    with raises(ShowValidationError):
        YawSetpointList.from_json({})


def test_yaw_setpoints_with_invalid_version_number():
    with raises(ShowValidationError):
        YawSetpointList.from_json({"version": -23})


def test_yaw_setpoints_and_auto_yaw():
    with raises(ValueError):
        YawSetpointList.from_json(
            {"version": 1, "setpoints": [(0, 0)], "autoYaw": True}
        )


def test_empty_yaw_setpoints():
    spec = YawSetpointList.from_json({"version": 1, "setpoints": []})

    assert spec.auto_yaw is False
    assert spec.auto_yaw_offset == 0
    assert spec.setpoints == []
    assert spec.yaw_offset == 0
    assert spec.yaw_at(12) == 0


def test_auto_yaw():
    spec = YawSetpointList.from_json(
        {"version": 1, "autoYaw": True, "autoYawOffset": 45}
    )
    assert spec.auto_yaw is True
    assert spec.yaw_offset == 45.0
    assert spec.yaw_at(100) == 45.0


def test_yaw_at():
    spec = YawSetpointList.from_json(
        {"version": 1, "setpoints": [[10, 90], [0, 0], [20, 30]]}
    )

    assert spec.setpoints[0] == YawSetpoint(0, 0)
    assert spec.yaw_offset == 0
    assert spec.yaw_at(-5) == 0
    assert spec.yaw_at(0) == 0
    assert spec.yaw_at(5) == 45
    assert spec.yaw_at(10) == 90
    assert spec.yaw_at(15) == 60
    assert spec.yaw_at(20) == 30
    assert spec.yaw_at(25) == 30
