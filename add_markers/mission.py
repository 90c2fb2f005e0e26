#!/usr/bin/env python3
"""
Mission State Machine - pickup then drop off, driven by goals and poses

States only ever move forward:

    AWAITING_PICKUP_GOAL -> EN_ROUTE_TO_PICKUP -> AT_PICKUP
        -> EN_ROUTE_TO_DROPOFF -> AT_DROPOFF

The marker is visible while the robot drives to the pickup and once the
object has been dropped off. It is hidden while the object is carried.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

from add_markers.config import ARRIVAL_THRESHOLD
from add_markers.geometry import Goal, Pose, arrived
from add_markers.marker import MarkerModel


class MissionState(IntEnum):
    AWAITING_PICKUP_GOAL = 0
    EN_ROUTE_TO_PICKUP = 1
    AT_PICKUP = 2
    EN_ROUTE_TO_DROPOFF = 3
    AT_DROPOFF = 4


VISIBLE_STATES = frozenset({MissionState.EN_ROUTE_TO_PICKUP, MissionState.AT_DROPOFF})


@dataclass(frozen=True)
class GoalReceived:
    goal: Pose


@dataclass(frozen=True)
class PoseUpdated:
    pose: Pose


@dataclass(frozen=True)
class DwellExpired:
    pass


class PickPlaceMission:
    def __init__(self, marker=None, threshold=ARRIVAL_THRESHOLD, logger=None):
        self.marker = marker if marker is not None else MarkerModel()
        self.threshold = threshold
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self._state = MissionState.AWAITING_PICKUP_GOAL
        self._goal = None
        self._dwell_active = False
        self._pending_goal = None

    @property
    def state(self):
        return self._state

    @property
    def goal(self):
        return self._goal

    @property
    def dwell_active(self):
        return self._dwell_active

    @property
    def pending_goal(self):
        return self._pending_goal

    @property
    def finished(self):
        return self._state == MissionState.AT_DROPOFF

    def handle(self, event) -> MissionState:
        """Apply one event and return the resulting state"""
        if isinstance(event, GoalReceived):
            self._on_goal(event.goal)
        elif isinstance(event, PoseUpdated):
            self._on_pose(event.pose)
        elif isinstance(event, DwellExpired):
            self._on_dwell_expired()
        else:
            raise TypeError(f'Unknown mission event: {event!r}')
        return self._state

    def _on_goal(self, goal: Goal):
        """
        Install the pickup goal, or the drop off goal once the robot is at
        the pickup. A goal arriving during the pickup dwell is not accepted
        yet: it is deferred (newest wins) and installed when the dwell ends.
        """
        if self._state == MissionState.AWAITING_PICKUP_GOAL:
            self._goal = goal
            self.marker.set_pose(goal)
            self._enter(MissionState.EN_ROUTE_TO_PICKUP)
            self.logger.info(
                f'Robot is on the way to pick up the object at ({goal.x:.2f}, {goal.y:.2f})')

        elif self._state == MissionState.AT_PICKUP:
            if self._dwell_active:
                # Still picking up; keep the newest goal for when the dwell ends
                self._pending_goal = goal
                self.logger.debug('Drop off goal held until pickup completes')
            else:
                self._start_dropoff(goal)

        else:
            self.logger.debug(f'Goal ignored in state {self._state.name}')

    def _on_pose(self, pose: Pose):
        if self._state == MissionState.EN_ROUTE_TO_PICKUP:
            if arrived(pose, self._goal, self.threshold):
                self._enter(MissionState.AT_PICKUP)
                self._dwell_active = True
                self.logger.info('Robot is picking up the object')

        elif self._state == MissionState.EN_ROUTE_TO_DROPOFF:
            if arrived(pose, self._goal, self.threshold):
                self.marker.set_pose(self._goal)
                self._enter(MissionState.AT_DROPOFF)
                self.logger.info('Drop the object at the drop off point')

    def _on_dwell_expired(self):
        if self._state != MissionState.AT_PICKUP or not self._dwell_active:
            return
        self._dwell_active = False
        self.logger.info('Object picked up')

        if self._pending_goal is not None:
            goal, self._pending_goal = self._pending_goal, None
            self._start_dropoff(goal)

    def _start_dropoff(self, goal: Goal):
        self._goal = goal
        self.marker.set_pose(goal)
        self._enter(MissionState.EN_ROUTE_TO_DROPOFF)
        self.logger.info(
            f'Robot is carrying the object to the drop off point at ({goal.x:.2f}, {goal.y:.2f})')

    def _enter(self, state: MissionState):
        self._state = state
        if state in VISIBLE_STATES:
            self.marker.show()
        else:
            self.marker.hide()
