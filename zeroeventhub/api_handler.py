"""Api handlers definition."""

import logging
from collections.abc import AsyncIterable, Iterable

from fastapi import HTTPException, Request, Response, status
from fastapi.responses import StreamingResponse

from .constants import NDJSON_CONTENT_TYPE
from .data_reader import DataReader
from .errors import ValidationError
from .feed import FeedEntry
from .query import FeedRequest, decode_query
from .serialization import aiter_ndjson, negotiate_media_type, render_json_document

logger = logging.getLogger(__name__)


class ZeroEventHubFastApiHandler:
    """Handler for ZeroEventHub from server side using fastapi."""

    def __init__(
        self,
        data_reader: DataReader,
        server_partition_count: int,
    ) -> None:
        """Initialize the ZeroEventHubFastApiHandler with DataReader."""
        self.data_reader = data_reader
        self.server_partition_count = server_partition_count

    def validate(self, request: Request) -> FeedRequest:
        """Validate all required parameters and its format.
        Return the expected parameter structure for next step processing.
        """
        try:
            return decode_query(request.query_params, self.server_partition_count)
        except ValidationError as err:
            raise HTTPException(status_code=err.status(), detail=err.message) from err

    async def handle(self, request: Request) -> Response:
        """Handle the request after validation.
        Return final response to the client, in the media type negotiated from its
        `Accept` header.
        """
        feed_request = self.validate(request)
        media_type = negotiate_media_type(request.headers.get("accept"))
        if media_type is None:
            return Response(status_code=status.HTTP_406_NOT_ACCEPTABLE)

        logger.debug(
            "serving %s for partitions %s",
            media_type,
            [cursor.partition_id for cursor in feed_request.cursors],
        )
        entries = self.data_reader.get_data(
            feed_request.cursors, feed_request.headers, feed_request.page_size_hint
        )
        if media_type == NDJSON_CONTENT_TYPE:
            return StreamingResponse(aiter_ndjson(entries), media_type=media_type)
        return Response(
            content=render_json_document(await collect(entries)), media_type=media_type
        )


async def collect(entries: Iterable[FeedEntry] | AsyncIterable[FeedEntry]) -> list[FeedEntry]:
    """Gather all entries from a sync or async source."""
    if isinstance(entries, AsyncIterable):
        return [entry async for entry in entries]
    return list(entries)
