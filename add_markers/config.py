"""
Mission constants for the pick-and-place marker demo
"""

from dataclasses import dataclass


ARRIVAL_THRESHOLD = 0.4   # meters
PICKUP_DWELL = 5.0        # seconds
PUBLISH_RATE = 50.0       # Hz
QUEUE_DEPTH = 1

MARKER_FRAME_ID = 'map'
MARKER_NAMESPACE = 'add_markers'
MARKER_ID = 0
MARKER_SCALE = 0.4        # meters per side
MARKER_RGB = (0.3, 0.5, 0.7)

GOAL_TOPIC = 'target'
ODOM_TOPIC = 'odom'
MARKER_TOPIC = 'visualization_marker'


@dataclass(frozen=True)
class MissionConfig:
    arrival_threshold: float = ARRIVAL_THRESHOLD
    pickup_dwell: float = PICKUP_DWELL
    publish_rate: float = PUBLISH_RATE
    queue_depth: int = QUEUE_DEPTH
    goal_topic: str = GOAL_TOPIC
    odom_topic: str = ODOM_TOPIC
    marker_topic: str = MARKER_TOPIC
