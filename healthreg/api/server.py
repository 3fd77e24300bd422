"""FastAPI server for the check registry."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from healthreg import __version__
from healthreg.api.check_routes import check_router
from healthreg.checks.service import CheckService
from healthreg.checks.store import CheckStore
from healthreg.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the check store on startup. A store that cannot load aborts startup."""
    store = CheckStore(settings.repo_path)
    logger.info("Check store ready: %d checks in %s", len(store), store.path)

    app.state.check_store = store
    app.state.check_service = CheckService(store)

    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Health Check Registry",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(check_router, prefix="/api")

    return app


app = create_app()
