"""Password hashing service for tasktrack."""

from tasktrack.c2_password_service.password_service import PasswordService

__all__ = ["PasswordService"]
