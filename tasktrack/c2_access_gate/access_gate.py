"""Resolve the calling account from an ``Authorization: Bearer`` header."""

import logging
from typing import Optional

from tasktrack.c2_credential_service.credential_service import IDENTITY_CLAIM, CredentialService
from tasktrack.c2_credential_service.token_errors import InvalidToken
from tasktrack.core.errors import Unauthorized

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AccessGate:
    """Turns a presented credential into an owner id, or refuses it."""

    def __init__(self, credentials: CredentialService):
        self.credentials = credentials

    def authenticate(self, authorization: Optional[str]) -> str:
        """
        Verify the header value and return the account id it proves.

        Every codec failure is reported the same way so the caller cannot
        tell which check failed.

        Raises:
            Unauthorized: If the header is missing, malformed or the token is refused
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise Unauthorized("Authorization header missing or invalid")

        token = authorization[len(BEARER_PREFIX):].strip()
        if not token:
            raise Unauthorized("Token is required")

        try:
            claims = self.credentials.verify(token)
        except InvalidToken as e:
            logger.warning(f"Rejected bearer token: {type(e).__name__}")
            raise Unauthorized("Invalid or expired token") from e

        return str(claims[IDENTITY_CLAIM])
