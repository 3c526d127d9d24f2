"""
Frame Task Scheduler

A tree of composable tasks advanced once per host frame.
Tasks run their own Action, then their queued children in order, while
parallel children are advanced on every step.
"""

from .base import Action, TaskPhase
from .actions import OneOffAction, WaitAction
from .task import Task
from .exceptions import FrameTaskException, InvalidActionError, InvalidTaskError, StepLimitExceededError
from .settings import RunnerSettings
from .runner import TaskRunner, run_until_complete

__all__ = [
    'Action',
    'TaskPhase',
    'OneOffAction',
    'WaitAction',
    'Task',
    'FrameTaskException',
    'InvalidActionError',
    'InvalidTaskError',
    'StepLimitExceededError',
    'RunnerSettings',
    'TaskRunner',
    'run_until_complete',
]
