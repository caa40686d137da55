"""Input schemas for every tasktrack entry point."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from tasktrack.c1_task_enums.task_enums import SortOrder, TaskSortField, TaskStatus

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt only looks at the first 72 bytes
MAX_LIMIT = 100
# keeps (page - 1) * limit inside a signed 64-bit OFFSET
MAX_PAGE = 2**31 - 1


def _to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class InputModel(BaseModel):
    """Base for untrusted input: unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CredentialsInput(InputModel):
    """Registration and login payload."""

    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class _TaskFields(InputModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")
    status: Optional[TaskStatus] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def require_iso_string(cls, value: Any) -> Any:
        if value is None:
            return value
        # a full date-time only: no bare dates, no epoch numbers
        if not isinstance(value, str) or "T" not in value:
            raise ValueError("dueDate must be an ISO-8601 datetime string")
        return value

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_utc_naive(value)


class CreateTaskInput(_TaskFields):
    """Task creation payload. Title is required."""

    title: str = Field(..., min_length=1)


class UpdateTaskInput(_TaskFields):
    """Partial task update. Only keys present in the payload are changes."""

    @field_validator("title", "status", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ListTasksQuery(InputModel):
    """Query-string parameters for listing tasks."""

    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int = Field(default=10, ge=1, le=MAX_LIMIT)
    status: Optional[TaskStatus] = None
    sort_by: TaskSortField = Field(default=TaskSortField.CREATED_AT, alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder.DESC, alias="sortOrder")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
