"""
Main entrypoint for the User Records API.

This module assembles the FastAPI application: it configures logging,
builds the storage gateway once, installs CORS and the JSON error
handlers, and includes the routers.  The table is created and seeded in
the application lifespan, before the first request is served.  The app
is instantiated at import time as ``app`` so it can be run with::

    uvicorn user_records_api.app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings
from .core.exceptions import RecordNotFound, ServiceError
from .core.logging_config import setup_logging
from .core.storage import UserTableGateway

logger = logging.getLogger(__name__)


def create_app(
    gateway: Optional[UserTableGateway] = None,
    config: Settings = settings,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    gateway : Optional[UserTableGateway]
        Storage gateway used by every request.  When omitted one is
        built from ``config``.  Tests pass a fake here.
    config : Settings
        Settings to read logging, CORS and startup policy from.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    setup_logging(config)

    if gateway is None:
        gateway = UserTableGateway.from_settings(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.gateway.initialize(
            fail_fast=config.fail_fast,
            seed=config.seed_on_startup,
        )
        logger.info("%s ready", config.project_name)
        yield

    app = FastAPI(title=config.project_name, version=config.api_version, lifespan=lifespan)
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RecordNotFound)
    async def record_not_found_handler(request: Request, exc: RecordNotFound) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "User not found"})

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
