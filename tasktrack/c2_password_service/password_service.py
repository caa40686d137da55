"""Password hashing and verification for tasktrack accounts."""

import bcrypt


class PasswordService:
    """One-way hashing of account secrets with bcrypt.

    Every call to ``hash`` draws a fresh salt, so two digests of the same
    secret differ. ``matches`` re-derives the digest with the stored salt
    and compares in constant time (``bcrypt.checkpw``).
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, secret: str) -> str:
        """Hash a secret for storage.

        Raises:
            ValueError: If the secret is empty
        """
        if not secret:
            raise ValueError("Password must not be empty")
        digest = bcrypt.hashpw(secret.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        return digest.decode("utf-8")

    def matches(self, secret: str, digest: str) -> bool:
        """Check a secret against a stored digest."""
        if not secret or not digest:
            return False
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # not a bcrypt digest
            return False
