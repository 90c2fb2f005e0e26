"""
Pose type and the arrival check used by the mission
"""

import math
from dataclasses import dataclass

import numpy as np

from add_markers.config import ARRIVAL_THRESHOLD


@dataclass(frozen=True)
class Pose:
    """Position in meters plus orientation quaternion."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    qx: float = 0.0
    qy: float = 0.0
    qz: float = 0.0
    qw: float = 1.0

    @property
    def position(self):
        return np.array([self.x, self.y, self.z], dtype=float)

    @property
    def quaternion(self):
        return (self.qx, self.qy, self.qz, self.qw)

    def is_finite(self):
        return all(math.isfinite(v) for v in (self.x, self.y, self.z, *self.quaternion))


# A goal has the same shape as a pose
Goal = Pose

IDENTITY = Pose()


def distance(p: Pose, t: Pose) -> float:
    """Euclidean distance between two positions (orientation ignored)"""
    return float(np.linalg.norm(p.position - t.position))


def arrived(p: Pose, t: Pose, threshold: float = ARRIVAL_THRESHOLD) -> bool:
    """True when p is strictly closer than threshold to t; NaN never arrives"""
    return distance(p, t) < threshold
