#!/usr/bin/env python3
"""
Marker Model - the single cube shown at the pickup and drop off zones

Only the pose and the alpha channel change during a mission. Everything
else is fixed when the model is created.
"""

from dataclasses import dataclass, replace

from add_markers.config import (
    MARKER_FRAME_ID,
    MARKER_ID,
    MARKER_NAMESPACE,
    MARKER_RGB,
    MARKER_SCALE,
)
from add_markers.geometry import IDENTITY, Pose


CUBE = 'cube'

ADD = 'add'
DELETE = 'delete'

HIDDEN = 0.0
VISIBLE = 1.0


@dataclass(frozen=True)
class MarkerSnapshot:
    """Immutable copy of the marker taken at a publisher tick"""
    frame_id: str
    namespace: str
    id: int
    shape: str
    pose: Pose
    scale: tuple
    color: tuple  # (r, g, b, a)
    action: str = ADD

    @property
    def identity(self):
        return (self.namespace, self.id)

    @property
    def alpha(self):
        return self.color[3]

    @property
    def visible(self):
        return self.alpha > 0.0


class MarkerModel:
    def __init__(self, frame_id=MARKER_FRAME_ID, namespace=MARKER_NAMESPACE,
                 marker_id=MARKER_ID, scale=MARKER_SCALE, rgb=MARKER_RGB):
        self._frame_id = frame_id
        self._namespace = namespace
        self._id = marker_id
        self._scale = (scale, scale, scale)
        self._rgb = tuple(rgb)

        # Hidden at the origin until a pickup goal shows up
        self._pose = IDENTITY
        self._alpha = HIDDEN

    @property
    def identity(self):
        return (self._namespace, self._id)

    @property
    def pose(self):
        return self._pose

    @property
    def alpha(self):
        return self._alpha

    def set_pose(self, pose: Pose):
        """Place the marker on the ground plane at the pose's x/y heading."""
        # Only x, y and w are carried over; everything else stays zero
        self._pose = Pose(x=float(pose.x), y=float(pose.y), qw=float(pose.qw))

    def show(self):
        self._alpha = VISIBLE

    def hide(self):
        self._alpha = HIDDEN

    def snapshot(self) -> MarkerSnapshot:
        return MarkerSnapshot(
            frame_id=self._frame_id,
            namespace=self._namespace,
            id=self._id,
            shape=CUBE,
            pose=self._pose,
            scale=self._scale,
            color=self._rgb + (self._alpha,),
        )

    def deletion(self) -> MarkerSnapshot:
        """Snapshot that tells the viewer to drop the marker"""
        return replace(self.snapshot(), action=DELETE)
