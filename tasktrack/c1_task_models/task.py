"""Task model for tasktrack."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from tasktrack.c1_database_session.base import Base
from tasktrack.c1_task_enums.task_enums import TaskStatus

_STATUS_VALUES = ", ".join(f"'{s.value}'" for s in TaskStatus)


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    # stored as naive UTC
    return value.replace(tzinfo=timezone.utc).isoformat().replace("+00:00", "Z")


class Task(Base):
    """Task owned by exactly one account."""

    __tablename__ = "tasks"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    title = Column(Text, CheckConstraint("length(title) > 0", name="ck_tasks_title_not_empty"), nullable=False)
    description = Column(Text)
    due_date = Column(DateTime)
    status = Column(
        String,
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_tasks_status"),
        default=TaskStatus.PENDING.value,
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    owner = relationship("Account", back_populates="tasks")

    __table_args__ = (
        Index("idx_tasks_user_status", "user_id", "status"),
        Index("idx_tasks_user_created_at", "user_id", "created_at"),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the field names the HTTP API uses."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "description": self.description,
            "dueDate": _isoformat(self.due_date),
            "status": self.status,
            "createdAt": _isoformat(self.created_at),
        }
