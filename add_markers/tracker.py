from typing import Optional

from add_markers.geometry import Pose


class PoseTracker:
    """Holds the most recent robot pose, overwriting older ones"""

    def __init__(self):
        self._pose = None

    def update(self, pose: Pose):
        self._pose = pose

    def current(self) -> Optional[Pose]:
        return self._pose
