"""HTTP application assembly for tasktrack."""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasktrack import __version__
from tasktrack.c1_database_session import DatabaseManager
from tasktrack.c2_access_gate import AccessGate
from tasktrack.c2_account_service import AccountService
from tasktrack.c2_credential_service import CredentialService
from tasktrack.c2_password_service import PasswordService
from tasktrack.c2_task_service import TaskService
from tasktrack.c2_validation_service import format_errors
from tasktrack.c3_auth_routes import create_auth_router
from tasktrack.c3_health_routes import create_health_router
from tasktrack.c3_task_routes import create_task_router
from tasktrack.core.config import Settings, get_settings
from tasktrack.core.errors import TaskTrackError, ValidationFailed

logger = logging.getLogger(__name__)


class AppState:
    """Components shared by every request, wired once from settings."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.db_manager = DatabaseManager(settings.database_url)
        self.passwords = PasswordService(rounds=settings.bcrypt_rounds)
        self.credentials = CredentialService(
            settings.require_secret(),
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(days=settings.token_ttl_days),
        )
        self.accounts = AccountService(self.db_manager, self.passwords)
        self.access_gate = AccessGate(self.credentials)
        self.tasks = TaskService(self.db_manager)

    def initialize(self):
        self.db_manager.create_tables()


def _error_body(message: str, errors=None) -> dict:
    body = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def register_exception_handlers(app: FastAPI):
    """Render every failure as ``{success: false, message, errors?}``."""

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.errors))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content=_error_body("Validation error", format_errors(exc.errors())))

    @app.exception_handler(TaskTrackError)
    async def domain_error_handler(request: Request, exc: TaskTrackError):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content=_error_body("Internal server error"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted

    Returns:
        FastAPI: App with auth, task and health routes mounted
    """
    settings = settings or get_settings()
    server_state = AppState(settings)
    server_state.initialize()

    app = FastAPI(
        title="tasktrack",
        description="Per-user task tracking API",
        version=__version__,
    )
    app.state.server_state = server_state

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(create_health_router(server_state))
    app.include_router(create_auth_router(server_state))
    app.include_router(create_task_router(server_state))

    logger.info("tasktrack application created")
    return app
