"""
Main entrypoint for the Smart Deals API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the resource routers and the lifespan that owns the MongoDB
store.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn smart_deals_api.app.main:app --reload

A pre‑built ``MongoStore`` may be passed to ``create_app``; the
application then uses it as is and leaves closing it to the caller.
Otherwise the store is created from ``Settings`` on start‑up and
closed on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from anyio import to_thread
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import MongoStore
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Smart Deals Server is Running Fast 🚀"


def create_app(store: Optional[MongoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MongoStore]
        Store to serve requests from.  When omitted, one is built from
        ``settings`` during start‑up.
    settings : Optional[Settings]
        Configuration; defaults to the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned: Optional[MongoStore] = None
        if getattr(app.state, "store", None) is None:
            owned = MongoStore.from_settings(settings)
            app.state.store = owned
            # A failed ping is logged and the server keeps listening.  The
            # driver blocks until server selection times out, so keep it
            # off the event loop.
            await to_thread.run_sync(owned.ping)
        logger.info("%s %s is ready", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            if owned is not None:
                await to_thread.run_sync(owned.close)
                app.state.store = None

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def read_root() -> str:
        return ROOT_MESSAGE

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
