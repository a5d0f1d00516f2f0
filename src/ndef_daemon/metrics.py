"""
Defines Prometheus metrics for monitoring the ndef2api application.

This module centralizes the definition of all Counter and Histogram metrics used
to track record decoding, message parsing and HTTP requests.
"""

from prometheus_client import Counter, Histogram

RECORD_COUNTER = Counter("ndef2api_records_total", "Total NDEF records submitted for decoding")
SUCCESSFUL_DECODES = Counter("ndef2api_successful_decodes_total", "Total successful decodes")
DECODE_ERRORS = Counter(
    "ndef2api_decode_errors_total", "Total records that failed to decode", ["error"]
)
CLASSIFICATION_MISSES = Counter(
    "ndef2api_classification_misses_total", "Total records whose TNF or RTD was not classified"
)
UNKNOWN_URI_PREFIXES = Counter(
    "ndef2api_unknown_uri_prefix_total", "Total URI records with an unknown identifier code"
)
PAYLOAD_KIND_COUNTER = Counter(
    "ndef2api_payload_kind_total", "Decoded payloads by kind", ["kind"]
)
DECODE_LATENCY = Histogram(
    "ndef2api_decode_latency_seconds", "Time spent decoding the records of one request"
)
MESSAGE_COUNTER = Counter("ndef2api_messages_total", "Total raw NDEF messages parsed")
MALFORMED_MESSAGES = Counter(
    "ndef2api_malformed_messages_total", "Total raw NDEF messages that failed to parse"
)
HTTP_REQUESTS = Counter(
    "ndef2api_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status_code"]
)
HTTP_LATENCY = Histogram(
    "ndef2api_http_request_latency_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
)
