"""Account directory service for tasktrack."""

from tasktrack.c2_account_service.account_service import AccountService

__all__ = ["AccountService"]
