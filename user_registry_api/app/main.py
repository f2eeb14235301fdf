"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application: logging, CORS, the
``{message}`` error renderers, the user store and the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_registry_api.app.main:app --reload

Interactive API documentation is served at ``settings.docs_url``
(``/swagger`` by default).
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import UserStore, seed_users
from .api.v1.router import router as v1_router
from .services.user_service import generate_user_id


def create_app(
    store: Optional[UserStore] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store backing the user endpoints.  When omitted a new store is
        created, seeded with the demo users if ``settings.seed_users``
        is enabled.
    id_factory : Optional[Callable[[], str]]
        Callable producing ids for new users.  Defaults to random
        UUID4 strings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        docs_url=settings.docs_url,
        servers=[{"url": settings.server_url}],
    )

    if store is None:
        store = UserStore(seed_users() if settings.seed_users else None)
    app.state.store = store
    app.state.id_factory = id_factory or generate_user_id

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routes are public at /users, without a version prefix.
    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Server is running on %s (%d users loaded)", settings.server_url, len(app.state.store))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
