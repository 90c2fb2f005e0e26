#!/usr/bin/env python3
"""
Input adapters - turn middleware messages into internal Pose values

Values are copied out as plain floats so nothing keeps a reference to the
incoming message. Anything malformed comes back as None.
"""

import math
from typing import Optional

from tf_transformations import euler_from_quaternion

from add_markers.geometry import Goal, Pose


def _pose_fields(pose_msg) -> Optional[Pose]:
    try:
        position = pose_msg.position
        orientation = pose_msg.orientation
        pose = Pose(
            x=float(position.x),
            y=float(position.y),
            z=float(position.z),
            qx=float(orientation.x),
            qy=float(orientation.y),
            qz=float(orientation.z),
            qw=float(orientation.w),
        )
    except (AttributeError, TypeError, ValueError):
        return None

    if not pose.is_finite():
        return None
    return pose


def pose_from_odometry(msg) -> Optional[Pose]:
    """Extract the robot pose from a nav_msgs/Odometry message"""
    try:
        pose_msg = msg.pose.pose
    except AttributeError:
        return None
    return _pose_fields(pose_msg)


def goal_from_message(msg) -> Optional[Goal]:
    """Accept a geometry_msgs/Pose, or a PoseStamped and unwrap it"""
    inner = getattr(msg, 'pose', None)
    if inner is not None and hasattr(inner, 'position'):
        msg = inner
    return _pose_fields(msg)


def heading_degrees(pose: Pose) -> float:
    """Yaw of the pose in degrees, for log lines"""
    norm = math.sqrt(sum(q * q for q in pose.quaternion))
    if norm == 0.0:
        return 0.0
    _, _, yaw = euler_from_quaternion(list(pose.quaternion))
    return math.degrees(yaw)
