"""
api_routers

This package contains FastAPI APIRouter modules that define the API endpoints
for the ndef2api application.

Routers:
    - ndef: Endpoints for decoding NDEF records and messages and reading lookup tables
    - status: Health, server status and Prometheus metrics endpoints
"""

from .ndef import api_router_ndef
from .status import api_router_status

__all__ = ["api_router_ndef", "api_router_status"]
