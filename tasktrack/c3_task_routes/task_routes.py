"""Task management routes for tasktrack."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, Request

from tasktrack.c2_validation_service import (
    CreateTaskInput,
    ListTasksQuery,
    UpdateTaskInput,
    validate_input,
)

logger = logging.getLogger(__name__)


def create_task_router(server_state):
    """Create task router with server_state dependency.

    Every route depends on ``current_owner``; a refused credential ends the
    request before the task service is touched.

    Args:
        server_state: AppState holding the access gate and task service

    Returns:
        APIRouter: Configured router with /tasks endpoints
    """
    router = APIRouter(prefix="/tasks", tags=["tasks"])

    def current_owner(authorization: Optional[str] = Header(default=None)) -> str:
        return server_state.access_gate.authenticate(authorization)

    @router.post("", status_code=201)
    def create_task(payload: Any = Body(None), owner_id: str = Depends(current_owner)):
        """Create a task owned by the caller."""
        fields = validate_input(CreateTaskInput, payload)
        task = server_state.tasks.create(owner_id, fields)
        return {"success": True, "data": task.to_dict(), "message": "Task created successfully"}

    @router.get("")
    def list_tasks(request: Request, owner_id: str = Depends(current_owner)):
        """List the caller's tasks with filtering, sorting and pagination."""
        query = validate_input(ListTasksQuery, dict(request.query_params))
        page = server_state.tasks.list(owner_id, query)
        return {
            "success": True,
            "data": {
                "tasks": [task.to_dict() for task in page.tasks],
                "pagination": page.pagination(),
            },
        }

    @router.get("/{task_id}")
    def get_task(task_id: str, owner_id: str = Depends(current_owner)):
        """Fetch one of the caller's tasks."""
        task = server_state.tasks.get(owner_id, task_id)
        return {"success": True, "data": task.to_dict()}

    @router.put("/{task_id}")
    def update_task(task_id: str, payload: Any = Body(None), owner_id: str = Depends(current_owner)):
        """Change only the supplied fields of one of the caller's tasks."""
        changes = validate_input(UpdateTaskInput, payload).changes()
        task = server_state.tasks.update(owner_id, task_id, changes)
        return {"success": True, "data": task.to_dict(), "message": "Task updated successfully"}

    @router.delete("/{task_id}")
    def delete_task(task_id: str, owner_id: str = Depends(current_owner)):
        """Delete one of the caller's tasks."""
        server_state.tasks.delete(owner_id, task_id)
        return {"success": True, "message": "Task deleted successfully"}

    return router
