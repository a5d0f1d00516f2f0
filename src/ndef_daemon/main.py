#!/usr/bin/env python3
"""
Main entry point for the ndef2api daemon.

This script initializes and runs the FastAPI application that exposes the
NDEF decoder to presentation-layer clients (phone apps, kiosks, web UIs) that
read tags and need the records turned into typed payloads.

Key responsibilities include:
- Configuring application-wide logging.
- Initializing the FastAPI application, including:
    - Setting up Prometheus metrics middleware.
    - Registering API routers (NDEF decoding, health/status/metrics).
    - Defining startup and shutdown handlers.
- Providing a command-line interface to start the Uvicorn server.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import PlainTextResponse

from ndef_daemon._version import VERSION
from ndef_daemon.config import (
    configure_logger,
    get_decoder_config,
    get_fastapi_config,
    get_server_config,
)
from ndef_daemon.middleware import prometheus_http_middleware

from .api_routers.ndef import api_router_ndef
from .api_routers.status import api_router_status

# ── Logging ──────────────────────────────────────────────────────────────────
logger = configure_logger()

logger.info("ndef2api starting up...")


def create_app():
    # ── FastAPI setup ──────────────────────────────────────────────────────────
    fastapi_config = get_fastapi_config()
    API_TITLE = fastapi_config["title"]
    API_SERVER_DESCRIPTION = fastapi_config["server_description"]
    API_ROOT_PATH = fastapi_config["root_path"]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Startup ---
        decoder_config = get_decoder_config()
        logger.info(
            "ndef2api %s ready (max_payload_size=%d, max_records=%d)",
            VERSION,
            decoder_config["max_payload_size"],
            decoder_config["max_records"],
        )
        yield
        # --- Shutdown ---
        logger.info("ndef2api shutting down...")

    app = FastAPI(
        title=API_TITLE,
        version=VERSION,
        servers=[{"url": "/", "description": API_SERVER_DESCRIPTION}],
        root_path=API_ROOT_PATH,
        lifespan=lifespan,
    )

    # ── Middleware ─────────────────────────────────────────────────────────────
    @app.middleware("http")
    async def prometheus_middleware_handler(request, call_next):
        """Prometheus metrics middleware for HTTP requests."""
        return await prometheus_http_middleware(request, call_next)

    # ── Exception Handlers ─────────────────────────────────────────────────────
    @app.exception_handler(ResponseValidationError)
    async def validation_exception_handler(request, exc):
        """Handles response validation errors with a plain text message."""
        logger.error(f"Response validation error: {exc}")
        return PlainTextResponse(f"Validation error: {exc}", status_code=500)

    # ── API Routers ────────────────────────────────────────────────────────────
    app.include_router(api_router_ndef, prefix="/api")
    app.include_router(api_router_status, prefix="/api")

    return app


app = create_app()


# ── Entrypoint ─────────────────────────────────────────────────────────────
def main():
    """
    Main function to run the Uvicorn server for the ndef2api application.

    Retrieves host, port, and log level from environment variables or defaults,
    then starts the Uvicorn server.
    """
    server_config = get_server_config()
    host = server_config["host"]
    port = server_config["port"]
    log_level = server_config["log_level"]

    logger.info(f"Starting Uvicorn server on {host}:{port} with log level '{log_level}'")
    uvicorn.run(app, host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    main()
