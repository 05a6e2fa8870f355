"""Module containing constants which are relevant for both Client and Server."""

ALL_HEADERS = ("_all",)
"""
ALL_HEADERS is a special value for `headers` argument representing a request for returning
all headers available.
"""

DEFAULT_PAGE_SIZE_HINT = 0
"""A page size hint of zero lets the server decide how many entries to return."""

NDJSON_CONTENT_TYPE = "application/x-ndjson"
JSON_CONTENT_TYPE = "application/json"

SUPPORTED_CONTENT_TYPES = (NDJSON_CONTENT_TYPE, JSON_CONTENT_TYPE)
"""Response media types a server can produce, in order of preference."""
