"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging and
error handling and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Importing the app here makes it easy
to run with uvicorn or another ASGI server, e.g.::

    uvicorn user_directory_api.app.main:app --reload

Each application owns exactly one ``UserStore`` and one
``UserService``, stored on ``app.state``.  Pass a store to
``create_app`` to share or pre‑populate it, e.g. in tests.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.endpoints import info
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import UserApiError, describe_validation_errors
from .core.logging_config import setup_logging
from .services.user_service import UserService
from .services.user_store import UserStore


logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}`` with its status code."""

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": describe_validation_errors(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(store: Optional[UserStore] = None, settings: Settings = default_settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Record store backing the application.  A new, empty store is
        created when omitted.
    settings : Settings
        Configuration to use; defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_service = UserService(store if store is not None else UserStore())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        # Unhandled errors propagate out of call_next and become a 500.
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    install_error_handlers(app)

    app.include_router(info.router, tags=["info"])
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.debug("Application %s %s configured", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
