"""Owner-scoped task service for tasktrack."""

from tasktrack.c2_task_service.task_service import TaskPage, TaskService

__all__ = ["TaskPage", "TaskService"]
