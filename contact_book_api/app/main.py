"""
Main entrypoint for the Contact Book API.

This module assembles the FastAPI application: it sets up logging,
opens CORS to the configured origins, registers the error handlers
and includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Importing the app here makes it easy to run with
uvicorn or another ASGI server, e.g.::

    uvicorn contact_book_api.app.main:app --port 3000

The database handle is created per application and opened in the
startup event; it is available to handlers as ``app.state.db``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import ContactServiceError
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        # Integer parts are positions (e.g. a JSON decode offset), not fields.
        names = [str(part) for part in loc[1:] if not isinstance(part, int)]
        field = ".".join(names) or (str(loc[0]) if loc else "request")
        parts.append(f"{field}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        ``settings`` read from the environment; tests pass their own
        to point the app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    # Initialise logging before anything else so that the startup
    # event can report database problems.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)
    app.state.settings = app_settings
    app.state.db = Database(app_settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContactServiceError)
    async def contact_service_error_handler(request: Request, exc: ContactServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _format_request_errors(exc)})

    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # A failed connection is logged and the service keeps serving;
        # store operations then fail with 500 until restart.
        app.state.db.connect()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
