"""Account models for tasktrack."""

from tasktrack.c1_account_models.account import Account

__all__ = ["Account"]
