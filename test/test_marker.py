import dataclasses

import pytest

from add_markers.geometry import Pose
from add_markers.marker import ADD, CUBE, DELETE, MarkerModel


def test_initial_marker_is_hidden_at_identity():
    snap = MarkerModel().snapshot()
    assert snap.frame_id == 'map'
    assert snap.identity == ('add_markers', 0)
    assert snap.shape == CUBE
    assert snap.scale == (0.4, 0.4, 0.4)
    assert snap.color == (0.3, 0.5, 0.7, 0.0)
    assert snap.pose == Pose(qw=1.0)
    assert snap.action == ADD
    assert not snap.visible


def test_show_and_hide_only_touch_alpha():
    model = MarkerModel()
    model.show()
    assert model.snapshot().color == (0.3, 0.5, 0.7, 1.0)
    model.hide()
    assert model.snapshot().color == (0.3, 0.5, 0.7, 0.0)


def test_set_pose_keeps_only_planar_fields():
    model = MarkerModel()
    model.set_pose(Pose(x=1.5, y=-2.0, z=0.7, qx=0.1, qy=0.2, qz=0.3, qw=0.9))
    assert model.pose == Pose(x=1.5, y=-2.0, z=0.0, qx=0.0, qy=0.0, qz=0.0, qw=0.9)


def test_snapshot_is_a_frozen_copy():
    model = MarkerModel()
    snap = model.snapshot()
    model.set_pose(Pose(x=5.0, y=5.0))
    model.show()
    assert snap.pose.x == 0.0
    assert snap.alpha == 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.id = 3


def test_deletion_keeps_identity():
    model = MarkerModel()
    model.show()
    gone = model.deletion()
    assert gone.action == DELETE
    assert gone.identity == model.identity
