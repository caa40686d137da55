"""Account registration and lookup for tasktrack."""

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tasktrack.c1_account_models.account import Account
from tasktrack.c1_database_session.database_manager import DatabaseManager
from tasktrack.c2_password_service.password_service import PasswordService
from tasktrack.core.errors import AccountNotFound, CredentialMismatch, DuplicateEmail

logger = logging.getLogger(__name__)


class AccountService:
    """Account directory backed by the ``users`` table."""

    def __init__(self, db_manager: DatabaseManager, passwords: PasswordService):
        self.db_manager = db_manager
        self.passwords = passwords

    def register(self, email: str, secret: str) -> Account:
        """
        Create an account.

        Uniqueness is enforced by the unique constraint on ``users.email``;
        whichever concurrent insert loses gets ``DuplicateEmail``.

        Raises:
            DuplicateEmail: If the email is already registered
        """
        account = Account(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=self.passwords.hash(secret),
        )
        try:
            with self.db_manager.session_scope() as db:
                db.add(account)
                db.flush()
                db.expunge(account)
        except IntegrityError as e:
            logger.info(f"Registration rejected, email already in use: {email}")
            raise DuplicateEmail() from e

        logger.info(f"Registered account {account.id}")
        return account

    def find_by_email(self, email: str) -> Optional[Account]:
        with self.db_manager.session_scope() as db:
            account = db.query(Account).filter(Account.email == email).first()
            if account is not None:
                db.expunge(account)
            return account

    def authenticate(self, email: str, secret: str) -> Account:
        """
        Resolve an account from login credentials.

        Raises:
            AccountNotFound: If no account has this email
            CredentialMismatch: If the password is wrong
        """
        account = self.find_by_email(email)
        if account is None:
            logger.warning(f"Login for unknown email: {email}")
            raise AccountNotFound()
        if not self.passwords.matches(secret, account.password_hash):
            logger.warning(f"Login with wrong password for account {account.id}")
            raise CredentialMismatch()
        return account
