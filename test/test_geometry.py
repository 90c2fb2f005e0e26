import math

import pytest

from add_markers.geometry import IDENTITY, Pose, arrived, distance
from add_markers.tracker import PoseTracker


def test_distance_ignores_orientation():
    a = Pose(x=1.0, y=2.0, qz=1.0, qw=0.0)
    b = Pose(x=1.0, y=2.0)
    assert distance(a, b) == 0.0


@pytest.mark.parametrize('p', [
    IDENTITY,
    Pose(x=3.0, y=-2.5, z=0.1),
    Pose(x=1e6, y=-1e6, z=42.0, qx=0.5, qy=0.5, qz=0.5, qw=0.5),
])
def test_pose_arrives_at_itself(p):
    assert arrived(p, p)


@pytest.mark.parametrize('p, t', [
    (Pose(x=0.1), Pose(y=0.2)),
    (Pose(x=3.0, y=0.0), Pose(x=3.0, y=3.0)),
    (Pose(x=0.4), IDENTITY),
    (Pose(x=-0.2, y=0.2, z=0.1), Pose(x=0.05)),
])
def test_arrived_is_symmetric(p, t):
    assert arrived(p, t) == arrived(t, p)


def test_exact_threshold_is_not_arrival():
    assert distance(Pose(x=0.4), IDENTITY) == pytest.approx(0.4)
    assert not arrived(Pose(x=0.4), IDENTITY)
    assert not arrived(IDENTITY, Pose(x=0.4))


def test_just_inside_threshold_is_arrival():
    assert arrived(Pose(x=0.399), IDENTITY)
    assert arrived(Pose(x=0.3999999), IDENTITY)


def test_beyond_threshold_is_not_arrival():
    assert not arrived(Pose(x=0.3, y=0.3), IDENTITY)
    assert not arrived(Pose(z=5.0), IDENTITY)


def test_nan_never_arrives():
    nan = Pose(x=math.nan)
    assert not arrived(nan, IDENTITY)
    assert not arrived(IDENTITY, nan)
    assert not arrived(nan, nan)


def test_custom_threshold():
    assert arrived(Pose(x=0.9), IDENTITY, threshold=1.0)
    assert not arrived(Pose(x=1.0), IDENTITY, threshold=1.0)


def test_pose_is_finite():
    assert IDENTITY.is_finite()
    assert not Pose(qw=math.inf).is_finite()
    assert not Pose(y=math.nan).is_finite()


def test_tracker_starts_empty():
    assert PoseTracker().current() is None


def test_tracker_keeps_most_recent_pose():
    tracker = PoseTracker()
    tracker.update(Pose(x=1.0))
    tracker.update(Pose(x=2.0))
    tracker.update(Pose(x=3.0, y=1.0))
    assert tracker.current() == Pose(x=3.0, y=1.0)
