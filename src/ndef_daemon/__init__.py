"""
ndef_daemon

HTTP service for ndef2api, providing a FastAPI-based backend that decodes NDEF
records and messages submitted by tag-reading clients.

Modules:
    - config: Logging, FastAPI, Uvicorn and decoder-limit settings from the environment
    - main: FastAPI application setup and server entry point
    - metrics: Prometheus metric definitions
    - middleware: HTTP metrics middleware
    - models: Pydantic models for API request/response validation
    - record_processing: Decoding of submitted records with metrics and logging
"""

from ._version import VERSION
from .config import configure_logger, get_decoder_config
from .main import app, create_app

__all__ = [
    "VERSION",
    "app",
    "create_app",
    "configure_logger",
    "get_decoder_config",
]
