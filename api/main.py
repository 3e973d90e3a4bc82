"""FastAPI application for the Ad Copy Assistant.

This module provides the main application setup and router configuration.
All route handlers are organized in the api/routers/ directory.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from actions import ActionError, ActionErrorCode
from api.dependencies import set_config, set_store
from api.routers import actions_router, system_router
from config import AppConfig, ConfigManager
from storage import SQLiteStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def error_response(error: ActionError) -> JSONResponse:
    return JSONResponse(
        status_code=error.code.status_code,
        content={"success": False, "error": error.to_dict()},
    )


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    if exc.code is ActionErrorCode.INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.code.value}: {exc.message}")
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return error_response(ActionError(ActionErrorCode.BAD_REQUEST, message))


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Configuration to use. Loaded through ConfigManager at
            startup when omitted.

    Returns:
        Configured FastAPI application instance.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        manager = None
        app_config = config
        if app_config is None:
            manager = ConfigManager()
            app_config = manager.get_config()

        configure_logging(app_config.log_level)

        store = SQLiteStore(app_config.db_path)
        await store.initialize()

        set_config(app_config, manager)
        set_store(store)
        logger.info("Ad Copy Assistant API started")

        yield

        logger.info("Ad Copy Assistant API shutting down")
        set_store(None)
        set_config(None)

    application = FastAPI(
        title="Ad Copy Assistant",
        description="Manage ad copy variations for campaigns and log their performance",
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_exception_handler(ActionError, action_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    # =========================================================================
    # Router Registration
    # =========================================================================
    application.include_router(system_router)
    application.include_router(actions_router)

    return application


app = create_app()
