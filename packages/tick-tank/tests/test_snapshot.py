"""Tests for position/heading snapshot and restore."""

import json

import pytest

from tick_tank.motion import MotionController, MotionState
from tick_tank.types import SnapshotError
from tick_tank.vec import Point2D


def make_controller() -> MotionController:
    return MotionController(
        MotionState(position=Point2D(0.0, 0.0), speed=5, rotation_speed=2)
    )


def test_snapshot_holds_position_and_angle_only():
    controller = make_controller()
    controller.set_destination(Point2D(0.0, 30.0))
    for _ in range(4):
        controller.advance()

    snap = controller.snapshot()
    assert set(snap) == {"version", "position", "current_angle"}
    assert snap["position"] == [0.0, 0.0]
    assert snap["current_angle"] == 6.0


def test_snapshot_is_json_compatible():
    controller = make_controller()
    snap = controller.snapshot()
    assert json.loads(json.dumps(snap)) == snap


def test_restore_into_fresh_controller():
    source = make_controller()
    source.set_destination(Point2D(20.0, 0.0))
    source.advance()
    source.advance()

    target = make_controller()
    target.restore(json.loads(json.dumps(source.snapshot())))
    assert target.state.position == source.state.position
    assert target.state.current_angle == source.state.current_angle


def test_restore_drops_path_and_destination():
    controller = make_controller()
    controller.set_destination(Point2D(20.0, 0.0))
    controller.advance()
    snap = controller.snapshot()

    controller.restore(snap)
    assert controller.destination is None
    assert controller.tracker.is_empty
    assert controller.state.distance_gone == 0.0


def test_restore_aligns_target_with_angle():
    controller = make_controller()
    controller.restore({"version": 1, "position": [3.0, 4.0], "current_angle": 45.0})
    assert controller.state.target_angle == 45.0
    controller.set_destination(Point2D(13.0, 14.0))
    controller.advance()
    assert controller.state.current_angle == 45.0
    assert controller.state.target_angle == pytest.approx(45.0)


def test_restored_controller_is_idle():
    controller = make_controller()
    controller.restore({"version": 1, "position": [3.0, 4.0], "current_angle": 10.0})
    before = controller.snapshot()
    controller.advance()
    assert controller.snapshot() == before


# --- Errors ---

def test_restore_rejects_unknown_version():
    controller = make_controller()
    with pytest.raises(SnapshotError, match="version"):
        controller.restore({"version": 99, "position": [0, 0], "current_angle": 0})


def test_restore_rejects_missing_version():
    with pytest.raises(SnapshotError):
        make_controller().restore({"position": [0, 0], "current_angle": 0})


@pytest.mark.parametrize(
    "payload",
    [
        {"version": 1, "current_angle": 0},
        {"version": 1, "position": [1.0], "current_angle": 0},
        {"version": 1, "position": [1.0, 2.0], "current_angle": "north"},
        {"version": 1, "position": None, "current_angle": 0},
        [],
        None,
        "x",
        {"version": 1, "position": [float("nan"), 0.0], "current_angle": 0},
        {"version": 1, "position": [1.0, 2.0], "current_angle": float("inf")},
        {"version": 1, "position": [1.0, 2.0], "current_angle": "nan"},
    ],
)
def test_restore_rejects_malformed_payload(payload):
    controller = make_controller()
    with pytest.raises(SnapshotError, match="Malformed"):
        controller.restore(payload)
    assert controller.state.position == Point2D(0.0, 0.0)
