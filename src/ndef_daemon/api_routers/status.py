"""
Manages API routes for service health, status and metrics.

This module provides FastAPI endpoints for:
- Liveness probing.
- Server status (version, uptime).
- Prometheus metrics exposition.
"""

import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ndef_daemon._version import VERSION

api_router_status = APIRouter()  # Router for health, status and metrics endpoints

SERVER_START_TIME = time.time()


@api_router_status.get("/healthz")
async def healthz():
    """Liveness probe. The decoder holds no state, so a running process is healthy."""
    return JSONResponse(status_code=200, content={"status": "ok"})


@api_router_status.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@api_router_status.get("/status/server")
async def get_server_status():
    """Returns basic server status information."""
    uptime_seconds = time.time() - SERVER_START_TIME
    return {
        "status": "ok",
        "version": VERSION,
        "server_start_time_unix": SERVER_START_TIME,
        "uptime_seconds": uptime_seconds,
        "message": "ndef2api server is running.",
    }
