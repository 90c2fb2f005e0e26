#!/usr/bin/env python3
"""
Add Markers - shows a cube at the pickup zone, hides it while the object
is carried, and shows it again at the drop off zone

Listens to goals announced on /target and robot odometry on /odom, and
publishes the marker on /visualization_marker at 50 Hz.
"""

import sys

import rclpy
from rclpy.executors import ExternalShutdownException
from rclpy.logging import get_logger
from rclpy.node import Node
from rclpy.signals import SignalHandlerOptions
from geometry_msgs.msg import Pose as PoseMsg
from nav_msgs.msg import Odometry
from visualization_msgs.msg import Marker

from add_markers.adapters import goal_from_message, heading_degrees, pose_from_odometry
from add_markers.config import MissionConfig
from add_markers.marker import DELETE, MarkerModel
from add_markers.mission import (
    DwellExpired,
    GoalReceived,
    MissionState,
    PickPlaceMission,
    PoseUpdated,
)
from add_markers.publisher import MarkerPublisherLoop
from add_markers.tracker import PoseTracker


def marker_to_msg(snapshot, stamp=None):
    """Build a visualization_msgs/Marker from a MarkerSnapshot"""
    marker = Marker()
    marker.header.frame_id = snapshot.frame_id
    if stamp is not None:
        marker.header.stamp = stamp
    marker.ns = snapshot.namespace
    marker.id = snapshot.id
    marker.type = Marker.CUBE
    marker.action = Marker.DELETE if snapshot.action == DELETE else Marker.ADD

    marker.pose.position.x = snapshot.pose.x
    marker.pose.position.y = snapshot.pose.y
    marker.pose.position.z = snapshot.pose.z
    marker.pose.orientation.x = snapshot.pose.qx
    marker.pose.orientation.y = snapshot.pose.qy
    marker.pose.orientation.z = snapshot.pose.qz
    marker.pose.orientation.w = snapshot.pose.qw

    marker.scale.x, marker.scale.y, marker.scale.z = snapshot.scale
    marker.color.r, marker.color.g, marker.color.b, marker.color.a = snapshot.color
    return marker


class AddMarkers(Node):
    def __init__(self, config=None):
        super().__init__('add_markers')
        base = config if config is not None else MissionConfig()

        # Parameters
        self.declare_parameter('goal_topic', base.goal_topic)
        self.declare_parameter('odom_topic', base.odom_topic)
        self.declare_parameter('marker_topic', base.marker_topic)
        self.config = MissionConfig(
            arrival_threshold=base.arrival_threshold,
            pickup_dwell=base.pickup_dwell,
            publish_rate=base.publish_rate,
            queue_depth=base.queue_depth,
            goal_topic=self.get_parameter('goal_topic').value,
            odom_topic=self.get_parameter('odom_topic').value,
            marker_topic=self.get_parameter('marker_topic').value,
        )

        self.tracker = PoseTracker()
        self.marker = MarkerModel()
        self.mission = PickPlaceMission(
            self.marker, self.config.arrival_threshold, logger=self.get_logger())

        # Publisher for the marker
        self.marker_pub = self.create_publisher(
            Marker, self.config.marker_topic, self.config.queue_depth)

        # Goal announcements from the navigation driver and robot odometry
        self.goal_sub = self.create_subscription(
            PoseMsg,
            self.config.goal_topic,
            self._goal_callback,
            self.config.queue_depth
        )
        self.odom_sub = self.create_subscription(
            Odometry,
            self.config.odom_topic,
            self._odom_callback,
            self.config.queue_depth
        )

        self.loop = MarkerPublisherLoop(
            self.marker, self._publish_snapshot, self.config.publish_rate,
            logger=self.get_logger())
        self.publish_timer = self.create_timer(self.loop.period, self.loop.tick)

        # One-shot timer armed when the robot reaches the pickup
        self.dwell_timer = None

        self.get_logger().info('Display markers for the pick up and drop off.')
        self.get_logger().info('Waiting for a goal location')

    def _goal_callback(self, msg):
        goal = goal_from_message(msg)
        if goal is None:
            self.get_logger().debug('Dropped malformed goal message')
            return

        self.get_logger().info(
            f'Goal received: ({goal.x:.2f}, {goal.y:.2f}, {heading_degrees(goal):.1f}°)')
        self.dispatch(GoalReceived(goal))

    def _odom_callback(self, msg: Odometry):
        pose = pose_from_odometry(msg)
        if pose is None:
            self.get_logger().debug('Dropped malformed odometry message')
            return

        self.tracker.update(pose)
        self.dispatch(PoseUpdated(pose))

    def dispatch(self, event):
        """Feed one event to the mission and arm the dwell timer on pickup"""
        previous = self.mission.state
        state = self.mission.handle(event)
        if state == MissionState.AT_PICKUP and previous != MissionState.AT_PICKUP:
            self._start_dwell()
        return state

    def _start_dwell(self):
        self._cancel_dwell()
        self.get_logger().info(
            f'Waiting {self.config.pickup_dwell:.1f} seconds to simulate a pickup')
        self.dwell_timer = self.create_timer(self.config.pickup_dwell, self._dwell_callback)

    def _dwell_callback(self):
        self._cancel_dwell()
        self.dispatch(DwellExpired())

    def _cancel_dwell(self):
        if self.dwell_timer is not None:
            self.dwell_timer.cancel()
            self.destroy_timer(self.dwell_timer)
            self.dwell_timer = None

    def _publish_snapshot(self, snapshot):
        self.marker_pub.publish(marker_to_msg(snapshot, self.get_clock().now().to_msg()))

    def remove_marker(self):
        """Stop publishing and ask the viewer to delete the marker"""
        self.loop.stop()
        if not rclpy.ok():
            return
        try:
            self._publish_snapshot(self.marker.deletion())
        except Exception as e:
            self.get_logger().warning(f'Failed to delete marker: {e}')

    def destroy_node(self):
        """Clean shutdown"""
        self._cancel_dwell()
        self.publish_timer.cancel()
        super().destroy_node()


def main(args=None):
    try:
        # SIGINT arrives as KeyboardInterrupt with the context still valid,
        # so the marker can be deleted before shutdown
        rclpy.init(args=args, signal_handler_options=SignalHandlerOptions.NO)
        node = AddMarkers()
    except Exception as e:
        get_logger('add_markers').error(f'Failed to start add_markers: {e}')
        if rclpy.ok():
            rclpy.shutdown()
        return 1

    try:
        rclpy.spin(node)
    except (KeyboardInterrupt, ExternalShutdownException):
        pass
    finally:
        node.remove_marker()
        node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
