"""
Handles application configuration for the ndef2api daemon.

This module is responsible for:
- Configuring logging for the application.
- Providing FastAPI application settings (title, description, root_path).
- Providing Uvicorn server settings (host, port, log level).
- Providing decoder limits (maximum payload size, maximum records per request)
  from environment variables.
"""

import logging
import os

import coloredlogs

from ndef_decoder.message import MAX_PAYLOAD_SIZE

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 64


def configure_logger():
    """
    Configures the root logger with coloredlogs.

    The console level comes from the LOG_LEVEL environment variable (default
    INFO). Existing root handlers are removed first, so calling this again
    replaces the previous setup instead of duplicating output.

    Returns:
        logging.Logger: The configured root logger.
    """
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
        log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Handlers filter by their own level; the root logger passes everything.
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── FastAPI Configuration ──────────────────────────────────────────────────
def get_fastapi_config():
    """
    Retrieves FastAPI application settings from environment variables.

    Returns:
        dict: A dictionary containing title, server_description, and root_path
              for the FastAPI application.
    """
    return {
        "title": os.getenv("NDEF2API_TITLE", "ndef2api"),
        "server_description": os.getenv("NDEF2API_SERVER_DESCRIPTION", "NFC NDEF Decoder API"),
        "root_path": os.getenv("NDEF2API_ROOT_PATH", ""),
    }


# ── Uvicorn Configuration ──────────────────────────────────────────────────
def get_server_config():
    """
    Retrieves Uvicorn server settings from environment variables.

    Returns:
        dict: A dictionary containing 'host', 'port' (int) and 'log_level'.
    """
    return {
        "host": os.getenv("NDEF2API_HOST", "0.0.0.0"),
        "port": int(os.getenv("NDEF2API_PORT", "8000")),
        "log_level": os.getenv("NDEF2API_LOG_LEVEL", "info").lower(),
    }


# ── Decoder Configuration ──────────────────────────────────────────────────
def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw, 0)
    except ValueError:
        module_logger.warning(f"Invalid {name} '{raw}'. Defaulting to {default}.")
        return default
    if value <= 0:
        module_logger.warning(f"{name} must be positive, got {value}. Defaulting to {default}.")
        return default
    return value


def get_decoder_config():
    """
    Retrieves decoder limits from environment variables.

    Returns:
        dict: A dictionary containing:
              - 'max_payload_size': Largest record payload accepted by the message parser
                (NDEF_MAX_PAYLOAD_SIZE, decimal or 0x-prefixed hex).
              - 'max_records': Largest number of records accepted per request
                (NDEF_MAX_RECORDS).
    """
    return {
        "max_payload_size": _positive_int_from_env("NDEF_MAX_PAYLOAD_SIZE", MAX_PAYLOAD_SIZE),
        "max_records": _positive_int_from_env("NDEF_MAX_RECORDS", DEFAULT_MAX_RECORDS),
    }
