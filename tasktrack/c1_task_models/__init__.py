"""Task models for tasktrack."""

from tasktrack.c1_task_models.task import Task

__all__ = ["Task"]
