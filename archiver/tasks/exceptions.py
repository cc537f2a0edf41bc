class TaskError(Exception):
    """Base exception for task routing errors."""


class TaskValidationError(TaskError):
    """Raised when a task event is malformed or misses required fields."""
