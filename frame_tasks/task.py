"""
The Task update-tree node.

A Task drives one Action to completion, then drains its queue of child Tasks
one at a time, while advancing its parallel children on every step.
"""

import logging
from typing import List, Optional

from .base import Action, TaskPhase
from .exceptions import InvalidActionError, InvalidTaskError

logger = logging.getLogger(__name__)


def _require_task(task: object) -> None:
    if not isinstance(task, Task):
        raise InvalidTaskError(task)


class Task:
    """
    Wraps a single Action plus two collections of child Tasks.

    queued_tasks run one after another once this task's own Action is done.
    parallel_tasks are advanced on every update, alongside everything else.
    Children are tracked by identity, never by value.
    """

    def __init__(self, action: Action):
        """
        Initialize with the Action this task drives.

        Args:
            action: Action instance to update until it reports done
        """
        if not isinstance(action, Action):
            raise InvalidActionError(action)
        self.action = action
        self.is_parallel = False
        self.is_done = False
        self.queued_tasks: List['Task'] = []
        self.parallel_tasks: List['Task'] = []

    def __repr__(self) -> str:
        return (
            f"<Task action={type(self.action).__name__} done={self.is_done} "
            f"parallel={self.is_parallel} queued={len(self.queued_tasks)} "
            f"running={len(self.parallel_tasks)}>"
        )

    @property
    def current_queued_task(self) -> Optional['Task']:
        return self.queued_tasks[0] if self.queued_tasks else None

    @property
    def has_queued_tasks(self) -> bool:
        return len(self.queued_tasks) > 0

    @property
    def has_parallel_tasks(self) -> bool:
        return len(self.parallel_tasks) > 0

    @property
    def phase(self) -> TaskPhase:
        if not self.is_done:
            return TaskPhase.ACTIVE_SELF
        if self.has_queued_tasks:
            return TaskPhase.DRAINING_QUEUE
        if self.has_parallel_tasks:
            return TaskPhase.IDLE_PARALLEL_ONLY
        return TaskPhase.FINISHED

    def update(self, delta: float) -> bool:
        """
        Advance this task and its children by one step.

        Args:
            delta: Elapsed time for this step, passed through to every Action

        Returns:
            bool: False once the own Action is done and both the queue and the
                  parallel set are empty, True otherwise.
        """
        # Run our own action until it's done, then work through the queue.
        if not self.is_done:
            if not self.action.update(delta):
                self.is_done = True
                logger.debug(f"{self!r} action finished")
        else:
            while self.has_queued_tasks and self.current_queued_task.is_parallel:
                promoted = self.queued_tasks.pop(0)
                self.parallel_tasks.append(promoted)
                logger.debug(f"Promoted {promoted!r} to parallel set")

            if self.has_queued_tasks:
                current = self.current_queued_task
                if not current.update(delta):
                    # The child may have queued more work on us, so drop it by identity.
                    self.queued_tasks = [task for task in self.queued_tasks if task is not current]
                    logger.debug(f"Queued {current!r} finished")

        if self.has_parallel_tasks:
            finished = [task for task in list(self.parallel_tasks) if not task.update(delta)]
            if finished:
                self.parallel_tasks = [
                    task for task in self.parallel_tasks
                    if not any(task is done for done in finished)
                ]
                logger.debug(f"{len(finished)} parallel task(s) finished")

        return not (self.is_done and not self.has_queued_tasks and not self.has_parallel_tasks)

    def then(self, task: 'Task') -> 'Task':
        """Queue a task to run after everything already queued."""
        _require_task(task)
        self.queued_tasks.append(task)
        logger.debug(f"Queued {task!r} at position {len(self.queued_tasks) - 1}")
        return self

    def next(self, task: 'Task') -> 'Task':
        """Queue a task to run before everything already queued."""
        _require_task(task)
        self.queued_tasks.insert(0, task)
        logger.debug(f"Queued {task!r} next")
        return self

    def also(self, task: 'Task') -> 'Task':
        """Run a task alongside this one, starting with the next update."""
        _require_task(task)
        task.is_parallel = True
        self.parallel_tasks.append(task)
        logger.debug(f"Added parallel {task!r}")
        return self

    def then_also(self, task: 'Task') -> 'Task':
        """Queue a task that is moved to the parallel set when the queue reaches it."""
        _require_task(task)
        task.is_parallel = True
        return self.then(task)

    def cancel(self, task: 'Task') -> None:
        """Stop advancing a direct child. Its own state is left untouched."""
        _require_task(task)
        self.queued_tasks = [queued for queued in self.queued_tasks if queued is not task]
        self.parallel_tasks = [parallel for parallel in self.parallel_tasks if parallel is not task]
        logger.debug(f"Cancelled {task!r}")
