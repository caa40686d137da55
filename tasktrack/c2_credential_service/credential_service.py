"""Issue and verify signed, time-bounded bearer tokens."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from tasktrack.c2_credential_service.token_errors import (
    BadTokenSignature,
    ExpiredToken,
    MalformedToken,
    MissingIdentity,
)

logger = logging.getLogger(__name__)

IDENTITY_CLAIM = "userId"


class CredentialService:
    """JWT codec bound to one signing secret.

    Rotating the secret invalidates every outstanding token, since their
    signatures no longer verify.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)):
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, claims: Dict[str, Any], now: Optional[datetime] = None) -> str:
        """Sign ``claims`` into a token valid for ``ttl`` from ``now``."""
        if not claims.get(IDENTITY_CLAIM):
            raise ValueError(f"Claims must include '{IDENTITY_CLAIM}'")

        issued_at = now or datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = int(issued_at.timestamp())
        payload["exp"] = int((issued_at + self.ttl).timestamp())
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def issue_for_account(self, account) -> str:
        return self.issue({IDENTITY_CLAIM: account.id, "email": account.email})

    def verify(self, token: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Return the token's claims.

        Raises:
            MalformedToken: If the token cannot be decoded at all
            BadTokenSignature: If the signature does not verify
            ExpiredToken: If ``exp`` is at or before ``now``
            MissingIdentity: If the identity claim is absent
        """
        try:
            jwt.get_unverified_header(token)
        except JWTError as e:
            raise MalformedToken(str(e)) from e

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise BadTokenSignature(str(e)) from e

        # expiry checked here so callers can pin the clock
        current = now or datetime.now(timezone.utc)
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            raise MalformedToken("Token has no expiry")
        if current.timestamp() >= exp:
            raise ExpiredToken("Token has expired")

        if not claims.get(IDENTITY_CLAIM):
            raise MissingIdentity(f"Token has no '{IDENTITY_CLAIM}' claim")
        return claims
