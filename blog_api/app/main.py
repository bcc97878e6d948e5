"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or another ASGI server, e.g.::

    uvicorn blog_api.app.main:app --reload

Each application owns its own store, kept on ``app.state.storage``.
Pass a ``storage`` to ``create_app`` to use a different one (tests do
this to start from a known state).
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.storage import BaseStorage, MemStorage


def create_app(storage: Optional[BaseStorage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[BaseStorage]
        Store used by every route of this application.  Defaults to a
        new ``MemStorage`` seeded according to
        ``settings.seed_sample_posts``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log during setup.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage if storage is not None else MemStorage(seed=settings.seed_sample_posts)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # The web client calls the unversioned ``/api`` paths.  The same
    # router is also reachable under ``/api/v1`` for clients that pin a
    # version; that copy is left out of the OpenAPI schema.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
