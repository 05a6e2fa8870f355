"""Module containing client-side related code for ZeroEventHub."""

import inspect
import logging
from collections.abc import AsyncGenerator, Awaitable, Callable, Iterable
from contextlib import aclosing
from types import TracebackType
from typing import Any

import httpx

from .constants import DEFAULT_PAGE_SIZE_HINT, JSON_CONTENT_TYPE, NDJSON_CONTENT_TYPE
from .cursor import Cursor
from .decoder import adecode_lines, decode_document, decode_lines
from .errors import TransportError
from .event import Event
from .event_receiver import EventReceiver, receive_events
from .query import encode_query
from .response_line_iterator import aiter_lines, splitlines

logger = logging.getLogger(__name__)

RequestCallback = Callable[[httpx.Request], Awaitable[None] | None]

ACCEPT = f"{NDJSON_CONTENT_TYPE}, {JSON_CONTENT_TYPE};q=0.9"


class Client:
    """Client-side code to query a ZeroEventHub server to fetch events."""

    def __init__(
        self,
        url: str,
        partition_count: int,
        http_client: httpx.AsyncClient | None = None,
        request_callback: RequestCallback | None = None,
    ) -> None:
        """
        Initializes a new instance of the Client class.

        :param url: The base URL for the service.
        :param partition_count: The number of partitions the ZeroEventHub server has.
        :param http_client: A httpx AsyncClient under which to make the HTTP requests.
            This allows one time setup of authentication etc. on the session,
            and increases performance if fetching events frequently due to
            connection pooling. When omitted the client creates and owns one.
        :param request_callback: An optional callable, sync or async, invoked with each
            request before it is sent, e.g. to add authorization headers.
        """
        self.url = url
        self.partition_count = partition_count
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()
        self._request_callback = request_callback

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Return the http_client being used by this client."""
        return self._http_client

    async def aclose(self) -> None:
        """Close the http client, if it was created by this client."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "Client":
        """Enter the client context; the http client is closed on exit if owned."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Close the http client, if it was created by this client."""
        await self.aclose()

    async def fetch_events(
        self,
        cursors: Cursor | Iterable[Cursor],
        page_size_hint: int | None = DEFAULT_PAGE_SIZE_HINT,
        headers: Iterable[str] | None = None,
    ) -> AsyncGenerator[Event[Any] | Cursor, None]:
        """
        Fetch events from the server using the provided cursors, page size hint and
        desired headers.

        Events and checkpoints are yielded in the order the server sent them, as soon
        as each line has been decoded.

        :param cursors: A cursor, or a sequence of cursors, to be used in the request.
        :param page_size_hint: An optional hint for the page size of the response.
            0 or None lets the server decide.
        :param headers: An optional sequence containing event headers desired in the response.
        :raises ValidationError: if cursors are missing.
        :raises TransportError: if unable to call the endpoint successfully, or if the
            response status code does not indicate success.
        :raises MalformedResponse: if a line from the response is not a valid event or checkpoint.
        """
        params = encode_query(cursors, self.partition_count, page_size_hint, headers)
        request = self._http_client.build_request(
            "GET", self.url, params=params, headers={"Accept": ACCEPT}
        )
        await self._invoke_request_callback(request)

        logger.debug("fetching events from %s", request.url)
        try:
            res = await self._http_client.send(request, stream=True)
        except httpx.RequestError as error:
            msg = f"error while requesting {request.url}"
            raise TransportError(msg) from error

        try:
            self._raise_for_status(res)
            async for event_or_checkpoint in self._process_response(res):
                yield event_or_checkpoint
        except httpx.RequestError as error:
            msg = f"error while reading the response from {request.url}"
            raise TransportError(msg, status_code=res.status_code) from error
        finally:
            await res.aclose()

    async def fetch_into(
        self,
        event_receiver: EventReceiver,
        cursors: Cursor | Iterable[Cursor],
        page_size_hint: int | None = DEFAULT_PAGE_SIZE_HINT,
        headers: Iterable[str] | None = None,
    ) -> None:
        """
        Fetch events from the server and hand them to the given event receiver in order.

        Takes the same arguments and raises the same errors as `fetch_events`. A failed
        fetch is not rolled back: the receiver keeps whatever it got before the failure.

        :param event_receiver: the receiver to pass the events and checkpoints to.
        """
        async with aclosing(self.fetch_events(cursors, page_size_hint, headers)) as events:
            await receive_events(event_receiver, events)

    async def _invoke_request_callback(self, request: httpx.Request) -> None:
        """Let the request callback modify the request, awaiting it if it is async."""
        if self._request_callback is None:
            return
        result = self._request_callback(request)
        if inspect.isawaitable(result):
            await result

    @staticmethod
    def _raise_for_status(res: httpx.Response) -> None:
        """
        Check the response status before any of the body is read.

        :raises TransportError: if response status code does not indicate success.
        """
        logger.debug("received status %d from %s", res.status_code, res.request.url)
        try:
            res.raise_for_status()
        except httpx.HTTPStatusError as error:
            raise TransportError(str(error), status_code=res.status_code) from error

    async def _process_response(
        self, res: httpx.Response
    ) -> AsyncGenerator[Event[Any] | Cursor, None]:
        """
        Process the response from the server.

        A `application/json` response holding an array is decoded as a whole document,
        anything else as line-delimited JSON.

        :param res: the server response
        :raises MalformedResponse: if the body cannot be decoded into events and checkpoints.
        """
        media_type = res.headers.get("content-type", "").split(";")[0].strip().lower()
        if media_type != JSON_CONTENT_TYPE:
            async for event_or_checkpoint in adecode_lines(aiter_lines(res)):
                yield event_or_checkpoint
            return

        await res.aread()
        body = res.text
        if body.lstrip().startswith("["):
            for event_or_checkpoint in decode_document(body):
                yield event_or_checkpoint
        else:
            for event_or_checkpoint in decode_lines(splitlines(body)):
                yield event_or_checkpoint
