"""
tests

Test suite for the ndef2api project.

This package contains unit and integration tests for all components of the
ndef2api project, including the NDEF decoder library and the daemon.

Subpackages:
    - ndef_daemon: Tests for the FastAPI service, its configuration and metrics
"""
