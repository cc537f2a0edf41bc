from archiver.tasks.models import TaskResponse, TaskType
from archiver.tasks.router import TaskRouter

__all__ = ["TaskResponse", "TaskRouter", "TaskType"]
