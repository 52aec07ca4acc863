"""
Main entrypoint for the Cinema API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  ``create_app`` builds and configures
the app, which is then instantiated at import time as ``app``, so it
can be served directly::

    uvicorn cinema_api.app.main:app --reload

Title and version come from ``Settings`` in ``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import JsonFileStore, PersistenceError, get_document_store
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def _install_openapi(app: FastAPI) -> None:
    """Add the bearer security scheme to the generated OpenAPI document.

    The scheme is advertised for clients that already send tokens; no
    route checks it.
    """

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})["bearerAuth"] = {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="CRUD API for books, users, movies and theaters backed by a JSON document.",
        debug=settings.debug,
    )

    @app.get("/", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok", "name": settings.project_name, "version": settings.api_version}

    app.include_router(v1_router)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Honour dependency overrides so tests never touch the real file.
        store = app.dependency_overrides.get(get_document_store, get_document_store)()
        if isinstance(store, JsonFileStore):
            store.init()
        logger.info("%s %s started", settings.project_name, settings.api_version)

    _install_openapi(app)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
