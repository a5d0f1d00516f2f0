"""
tests.ndef_daemon

Test suite for the ndef_daemon package of ndef2api.

This package contains unit tests for the components of the daemon, including
API endpoints, configuration handling, metrics and record processing.
"""
