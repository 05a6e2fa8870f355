"""ZeroEventHub module."""

from .api_handler import ZeroEventHubFastApiHandler
from .client import Client
from .constants import ALL_HEADERS, JSON_CONTENT_TYPE, NDJSON_CONTENT_TYPE
from .cursor import FIRST_CURSOR, LAST_CURSOR, Cursor
from .data_reader import DataReader
from .errors import (
    APIError,
    MalformedResponse,
    TransportError,
    ValidationError,
    ZeroEventHubError,
)
from .event import Event
from .event_receiver import EventReceiver, receive_events
from .feed import (
    CheckpointEntry,
    EventEntry,
    FeedEntry,
    FeedResult,
    generate_feed_entries,
    generate_multi_partition_feed,
)
from .page_event_receiver import PageEventReceiver
from .query import FeedRequest, decode_query, encode_query
from .serialization import (
    entry_to_dict,
    iter_ndjson,
    negotiate_media_type,
    render_json_document,
)

__all__ = [
    "ALL_HEADERS",
    "FIRST_CURSOR",
    "JSON_CONTENT_TYPE",
    "LAST_CURSOR",
    "NDJSON_CONTENT_TYPE",
    "APIError",
    "CheckpointEntry",
    "Client",
    "Cursor",
    "DataReader",
    "Event",
    "EventEntry",
    "EventReceiver",
    "FeedEntry",
    "FeedRequest",
    "FeedResult",
    "MalformedResponse",
    "PageEventReceiver",
    "TransportError",
    "ValidationError",
    "ZeroEventHubError",
    "ZeroEventHubFastApiHandler",
    "decode_query",
    "encode_query",
    "entry_to_dict",
    "generate_feed_entries",
    "generate_multi_partition_feed",
    "iter_ndjson",
    "negotiate_media_type",
    "receive_events",
    "render_json_document",
]
