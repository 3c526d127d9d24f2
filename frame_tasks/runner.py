"""
Fixed-step runner for driving a task tree without a host frame loop.
"""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import InvalidTaskError, StepLimitExceededError
from .settings import RunnerSettings
from .task import Task

logger = logging.getLogger(__name__)


class TaskRunner:
    """Drives a root Task with a fixed delta, for headless simulations and tools."""

    def __init__(self, task: Task, settings: Optional[RunnerSettings] = None):
        if not isinstance(task, Task):
            raise InvalidTaskError(task)
        self.task = task
        self.settings = settings or RunnerSettings()
        self.steps = 0
        self.elapsed = 0.0
        self.finished = False

    def step(self, delta: Optional[float] = None) -> bool:
        """Run a single update; returns the task's continuation flag."""
        delta = self.settings.step_delta if delta is None else delta
        running = self.task.update(delta)
        self.steps += 1
        self.elapsed += delta
        self.finished = not running
        return running

    def run(self) -> int:
        """
        Update until the task reports completion.

        The step limit counts every step this runner has taken, including
        manual step() calls and earlier run() calls. Once the limit is hit,
        calling run() again returns immediately without stepping.

        Returns:
            int: Total number of steps taken by this runner.
        """
        max_steps = self.settings.max_steps
        logger.info(f"🚀 Running {self.task!r} (step_delta={self.settings.step_delta}, max_steps={max_steps})")

        while not self.finished:
            if max_steps is not None and self.steps >= max_steps:
                logger.warning(f"Step limit of {max_steps} reached with {self.task!r} still running")
                if self.settings.raise_on_step_limit:
                    raise StepLimitExceededError(self.task, self.steps)
                return self.steps
            self.step()

        logger.info(f"✅ {self.task!r} finished after {self.steps} steps ({self.elapsed:.3f} elapsed)")
        return self.steps


def run_until_complete(
    task: Task,
    step_delta: float = 1 / 60,
    max_steps: Optional[int] = 10_000,
    raise_on_step_limit: bool = True,
) -> int:
    """Build a runner for task and run it to completion."""
    settings = RunnerSettings(step_delta=step_delta, max_steps=max_steps, raise_on_step_limit=raise_on_step_limit)
    return TaskRunner(task, settings).run()
