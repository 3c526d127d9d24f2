"""
Base classes and enums for the frame task scheduler.
"""

from enum import Enum


class TaskPhase(Enum):
    """Where a Task currently is in its update cycle."""
    ACTIVE_SELF = "ACTIVE_SELF"
    DRAINING_QUEUE = "DRAINING_QUEUE"
    IDLE_PARALLEL_ONLY = "IDLE_PARALLEL_ONLY"
    FINISHED = "FINISHED"


class Action:
    """
    Base class for all per-step units of work.

    Every payload a Task drives must inherit from this class and override
    update. The base implementation is a placeholder that completes on its
    first update.
    """

    def update(self, delta: float) -> bool:
        """
        Advance this action by one step.

        Args:
            delta: Elapsed time for this step, supplied by the host loop.

        Returns:
            bool: True if the action should be updated again on the next step,
                  False once it is done.
        """
        return False
