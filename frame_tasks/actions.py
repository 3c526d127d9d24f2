"""
Concrete action components for the frame task scheduler.

These wrap common per-step behaviours (fire a callback, wait for a duration)
into the Action interface so they can be driven by a Task.
"""

import logging
from typing import Any, Callable

from .base import Action

logger = logging.getLogger(__name__)


class OneOffAction(Action):
    """
    Calls a zero-argument callback once and completes.

    The callback's return value is ignored; the action always reports done
    after its first update.
    """

    def __init__(self, callback: Callable[[], Any]):
        """
        Initialize with the callback to fire.

        Args:
            callback: Zero-argument callable invoked on the first update
        """
        self.callback = callback
        self.fired = False

    def update(self, delta: float) -> bool:
        """Fire the callback on the first call; later calls do nothing."""
        if not self.fired:
            self.fired = True
            logger.debug(f"OneOffAction firing {self.callback!r}")
            self.callback()
        return False


class WaitAction(Action):
    """
    Waits until the accumulated step deltas reach a target duration.

    Keeps running while elapsed_time < wait_for and completes on the step
    where elapsed_time >= wait_for.
    """

    def __init__(self, wait_for: float):
        """
        Initialize with the duration to wait.

        Args:
            wait_for: Target duration, in the same units as the update delta
        """
        self.wait_for = wait_for
        self.elapsed_time = 0

    @property
    def remaining(self) -> float:
        """Time left before the wait completes; never negative."""
        return max(0, self.wait_for - self.elapsed_time)

    @property
    def progress(self) -> float:
        """Fraction of the wait completed, clamped to [0.0, 1.0]."""
        if self.wait_for <= 0:
            return 1.0
        return min(1.0, max(0.0, self.elapsed_time / self.wait_for))

    def update(self, delta: float) -> bool:
        self.elapsed_time += delta
        return self.elapsed_time < self.wait_for
