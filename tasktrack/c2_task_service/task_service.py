"""Owner-scoped task storage for tasktrack."""

import logging
import math
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List

from tasktrack.c1_database_session.database_manager import DatabaseManager
from tasktrack.c1_task_enums.task_enums import SortOrder, TaskSortField, TaskStatus
from tasktrack.c1_task_models.task import Task
from tasktrack.c2_validation_service.schemas import CreateTaskInput, ListTasksQuery
from tasktrack.core.errors import TaskNotFound

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    TaskSortField.DUE_DATE: Task.due_date,
    TaskSortField.CREATED_AT: Task.created_at,
    TaskSortField.TITLE: Task.title,
}


@dataclass
class TaskPage:
    """One page of a task listing plus its pagination block."""

    tasks: List[Task]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    def pagination(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.page < self.total_pages,
            "hasPrev": self.page > 1,
        }


def _column_values(fields: Dict[str, Any]) -> Dict[str, Any]:
    values = {}
    for key, value in fields.items():
        if isinstance(value, TaskStatus):
            value = value.value
        values[key] = value
    return values


class TaskService:
    """
    Task repository where every statement is filtered by the owner.

    There is no method that reaches a task without an ``owner_id``; a task
    owned by another account behaves exactly like one that does not exist.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @staticmethod
    def _owned(db, owner_id: str):
        return db.query(Task).filter(Task.user_id == owner_id)

    def create(self, owner_id: str, fields: CreateTaskInput) -> Task:
        task = Task(
            id=str(uuid.uuid4()),
            user_id=owner_id,
            title=fields.title,
            description=fields.description,
            due_date=fields.due_date,
            status=(fields.status or TaskStatus.PENDING).value,
        )
        with self.db_manager.session_scope() as db:
            db.add(task)
            db.flush()
            db.expunge(task)

        logger.info(f"Created task {task.id} for account {owner_id}")
        return task

    def list(self, owner_id: str, query: ListTasksQuery) -> TaskPage:
        """Return one page of the owner's tasks, filtered and sorted."""
        column = SORT_COLUMNS[query.sort_by]
        if query.sort_order == SortOrder.ASC:
            ordering = (column.asc(), Task.id.asc())
        else:
            ordering = (column.desc(), Task.id.desc())

        with self.db_manager.session_scope() as db:
            scoped = self._owned(db, owner_id)
            if query.status is not None:
                scoped = scoped.filter(Task.status == query.status.value)

            # count and page share the same predicate
            total = scoped.order_by(None).count()
            tasks = scoped.order_by(*ordering).offset(query.offset).limit(query.limit).all()
            for task in tasks:
                db.expunge(task)

        return TaskPage(tasks=tasks, page=query.page, limit=query.limit, total=total)

    def get(self, owner_id: str, task_id: str) -> Task:
        """
        Fetch one task.

        Raises:
            TaskNotFound: If the task does not exist or belongs to someone else
        """
        with self.db_manager.session_scope() as db:
            task = self._owned(db, owner_id).filter(Task.id == task_id).first()
            if task is None:
                raise TaskNotFound()
            db.expunge(task)
            return task

    def update(self, owner_id: str, task_id: str, changes: Dict[str, Any]) -> Task:
        """
        Apply a partial update.

        The ownership check is part of the UPDATE statement itself, so it
        holds at the moment of the write. Any failure rolls back the whole
        transaction.

        Raises:
            TaskNotFound: If no owned task matched
        """
        values = _column_values(changes)
        with self.db_manager.session_scope() as db:
            scoped = self._owned(db, owner_id).filter(Task.id == task_id)
            if values:
                matched = scoped.update(values, synchronize_session=False)
            else:
                matched = scoped.count()
            if not matched:
                raise TaskNotFound()

            task = scoped.populate_existing().one()
            db.expunge(task)

        logger.info(f"Updated task {task_id} ({', '.join(sorted(values)) or 'no fields'})")
        return task

    def delete(self, owner_id: str, task_id: str) -> None:
        """
        Delete a task.

        Raises:
            TaskNotFound: If no owned task matched
        """
        with self.db_manager.session_scope() as db:
            deleted = self._owned(db, owner_id).filter(Task.id == task_id).delete(synchronize_session=False)
            if not deleted:
                raise TaskNotFound()

        logger.info(f"Deleted task {task_id} for account {owner_id}")
