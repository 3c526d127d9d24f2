"""A central module for all custom exceptions used in the frame_tasks package."""

class FrameTaskException(Exception):
    """Base exception for all frame_tasks errors for easier top-level catching."""
    pass

class InvalidActionError(FrameTaskException, TypeError):
    """Raised when a Task is constructed with something that is not an Action."""
    def __init__(self, action: object):
        self.action = action
        super().__init__(f"{action!r} must be an instance of Action")

class InvalidTaskError(FrameTaskException, TypeError):
    """Raised when a composition method receives something that is not a Task."""
    def __init__(self, task: object):
        self.task = task
        super().__init__(f"{task!r} must be an instance of Task")

class StepLimitExceededError(FrameTaskException):
    """Raised when a runner hits its step limit before the task tree finishes."""
    def __init__(self, task: object, steps: int):
        self.task = task
        self.steps = steps
        super().__init__(f"{task!r} still running after {steps} steps")
