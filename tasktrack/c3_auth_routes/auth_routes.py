"""Registration and login routes for tasktrack."""

import logging
from typing import Any

from fastapi import APIRouter, Body

from tasktrack.c2_validation_service import CredentialsInput, validate_input

logger = logging.getLogger(__name__)


def create_auth_router(server_state):
    """Create auth router with server_state dependency.

    Args:
        server_state: AppState holding the account service and credential service

    Returns:
        APIRouter: Configured router with /auth endpoints
    """
    router = APIRouter(prefix="/auth", tags=["auth"])

    @router.post("/register")
    def register(payload: Any = Body(None)):
        """Register a new account."""
        data = validate_input(CredentialsInput, payload)
        server_state.accounts.register(data.email, data.password)
        return {"success": True, "message": "User registered successfully"}

    @router.post("/login")
    def login(payload: Any = Body(None)):
        """Exchange email and password for a bearer token."""
        data = validate_input(CredentialsInput, payload)
        account = server_state.accounts.authenticate(data.email, data.password)
        token = server_state.credentials.issue_for_account(account)
        logger.info(f"Issued token for account {account.id}")
        return {"success": True, "message": "Login successful", "token": token}

    return router
