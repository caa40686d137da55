"""Task enums for tasktrack."""

from tasktrack.c1_task_enums.task_enums import SortOrder, TaskSortField, TaskStatus

__all__ = ["SortOrder", "TaskSortField", "TaskStatus"]
