"""Account database model for tasktrack."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.orm import relationship

from tasktrack.c1_database_session.base import Base


class Account(Base):
    """Registered account. Created by registration only, never mutated here."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="owner")

    __table_args__ = (Index("idx_users_created_at", "created_at"),)

    def __repr__(self):
        # password_hash deliberately left out
        return f"<Account id={self.id!r} email={self.email!r}>"
