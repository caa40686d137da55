"""Task-related enums for tasktrack."""

from enum import Enum


class TaskStatus(str, Enum):
    """Enum for task status."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskSortField(str, Enum):
    """Fields a task listing can be ordered by."""
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"
    TITLE = "title"


class SortOrder(str, Enum):
    """Enum for sort direction."""
    ASC = "asc"
    DESC = "desc"
