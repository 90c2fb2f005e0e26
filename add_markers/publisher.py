#!/usr/bin/env python3
"""
Publisher Loop - emits the current marker snapshot at a fixed rate

The loop does not own a timer. Whoever drives it (an rclpy timer in the
node, a plain loop in tests) calls tick() once per period.
"""

import logging

from add_markers.config import PUBLISH_RATE


class MarkerIdentityError(ValueError):
    pass


class MarkerPublisherLoop:
    def __init__(self, model, publish, rate=PUBLISH_RATE, logger=None):
        """
        model   - MarkerModel to snapshot every tick
        publish - callable taking a MarkerSnapshot
        """
        self.model = model
        self.publish = publish
        self.rate = rate
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self.identity = model.identity
        self.ticks = 0
        self.published = 0
        self.failures = 0
        self._stopped = False

    @property
    def period(self):
        return 1.0 / self.rate

    @property
    def stopped(self):
        return self._stopped

    def stop(self):
        self._stopped = True

    def tick(self):
        """Publish one snapshot; returns it, or None if nothing went out"""
        if self._stopped:
            self.logger.debug('Publisher stopped, skipping tick')
            return None

        self.ticks += 1
        snapshot = self.model.snapshot()
        if snapshot.identity != self.identity:
            raise MarkerIdentityError(
                f'Marker identity changed from {self.identity} to {snapshot.identity}')

        try:
            self.publish(snapshot)
        except Exception as e:
            # Next tick retries with whatever the model holds then
            self.failures += 1
            self.logger.warning(f'Failed to publish marker: {e}')
            return None

        self.published += 1
        return snapshot
