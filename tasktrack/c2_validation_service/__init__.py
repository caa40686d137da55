"""C2 Validation Service - schema-checked decoding of untrusted input."""

from tasktrack.c2_validation_service.schemas import (
    CreateTaskInput,
    CredentialsInput,
    ListTasksQuery,
    UpdateTaskInput,
)
from tasktrack.c2_validation_service.validation_helpers import format_errors, validate_input

__all__ = [
    "CreateTaskInput",
    "CredentialsInput",
    "ListTasksQuery",
    "UpdateTaskInput",
    "format_errors",
    "validate_input",
]
