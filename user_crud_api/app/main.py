"""
Main entrypoint for the User CRUD API.

This module assembles the FastAPI application, sets up logging,
wires the user service to its repository and includes the versioned
routers.  ``create_app`` builds the app, which is then instantiated at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn user_crud_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import UserNotFoundError
from .core.logging_config import setup_logging
from .repositories.user_repository import SQLiteUserRepository, UserRepository
from .services.user_service import UserService


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[UserRepository]
        Storage used by the user service.  When omitted an
        ``SQLiteUserRepository`` on ``settings.database_url`` is created
        and its schema is migrated on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so the imports and startup below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if repository is None:
        repository = SQLiteUserRepository()
    app.state.user_service = UserService(repository)

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=404)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Only the SQLite repository owns a schema we know how to migrate.
        if isinstance(repository, SQLiteUserRepository):
            init_db(repository.database_path)
            logger.info("Database ready at %s", repository.database_path)

    return app


app = create_app()
