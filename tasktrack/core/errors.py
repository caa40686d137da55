"""Domain error types for tasktrack.

Every error carries the HTTP status and the public message the API surfaces.
Internal detail goes to the server log only.
"""

from typing import Any, Dict, List, Optional


class TaskTrackError(Exception):
    """Base class for errors with a public HTTP representation."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationFailed(TaskTrackError):
    """Untrusted input did not match its schema."""

    status_code = 400
    message = "Validation error"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors


class DuplicateEmail(TaskTrackError):
    status_code = 409
    message = "User already exists"


class Unauthorized(TaskTrackError):
    status_code = 401
    message = "Invalid or expired token"


class AccountNotFound(TaskTrackError):
    status_code = 404
    message = "User not found"


class CredentialMismatch(TaskTrackError):
    status_code = 401
    message = "Incorrect password"


class TaskNotFound(TaskTrackError):
    """Task is absent or owned by someone else; the two are not distinguished."""

    status_code = 404
    message = "Task not found"
