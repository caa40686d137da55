"""Bearer credential service for tasktrack."""

from tasktrack.c2_credential_service.credential_service import IDENTITY_CLAIM, CredentialService
from tasktrack.c2_credential_service.token_errors import (
    BadTokenSignature,
    ExpiredToken,
    InvalidToken,
    MalformedToken,
    MissingIdentity,
)

__all__ = [
    "IDENTITY_CLAIM",
    "CredentialService",
    "InvalidToken",
    "MalformedToken",
    "BadTokenSignature",
    "ExpiredToken",
    "MissingIdentity",
]
