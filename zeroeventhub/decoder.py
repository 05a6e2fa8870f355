"""Decoding of feed response lines into events and checkpoints."""

import json
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any

from .cursor import Cursor
from .errors import MalformedResponse
from .event import RawEvent


def parse_checkpoint_or_event(raw_line: str) -> RawEvent | Cursor | None:
    """
    Parse a line of response from the server.

    A line holding the JSON literal `null` carries nothing and yields None.

    :param raw_line: The raw JSON line from the server
    :raises MalformedResponse: if the line is not valid JSON, or does not describe
        an event or a checkpoint.
    """
    try:
        checkpoint_or_event = json.loads(raw_line)
    except json.JSONDecodeError as error:
        msg = "could not deserialize response line"
        raise MalformedResponse(msg) from error
    return classify(checkpoint_or_event)


def classify(checkpoint_or_event: Any) -> RawEvent | Cursor | None:
    """
    Turn one decoded JSON value of the feed into an event or a checkpoint.

    A non-empty `cursor` makes it a checkpoint, whatever else it carries. Otherwise
    it must carry non-null `data` to be an event.

    :raises MalformedResponse: if the value violates the feed line schema.
    """
    if checkpoint_or_event is None:
        return None
    if not isinstance(checkpoint_or_event, dict):
        msg = f"expected a JSON object, got {type(checkpoint_or_event).__name__}"
        raise MalformedResponse(msg)

    partition_id = checkpoint_or_event.get("partition")
    if isinstance(partition_id, bool) or not isinstance(partition_id, int) or partition_id < 0:
        msg = f"invalid partition {partition_id!r}"
        raise MalformedResponse(msg)

    cursor = checkpoint_or_event.get("cursor")
    if cursor is not None and not isinstance(cursor, str):
        msg = "error while parsing checkpoint: cursor must be a string"
        raise MalformedResponse(msg)
    if cursor:
        return Cursor(partition_id=partition_id, cursor=cursor)

    data = checkpoint_or_event.get("data")
    if data is None:
        msg = "cursor and data both empty"
        raise MalformedResponse(msg)

    headers = checkpoint_or_event.get("headers")
    if headers is not None and not (
        isinstance(headers, dict)
        and all(isinstance(value, str) for value in headers.values())
    ):
        msg = "error while parsing event: headers must map strings to strings"
        raise MalformedResponse(msg)

    return RawEvent(partition_id=partition_id, headers=headers, data=data)


def decode_lines(lines: Iterable[str]) -> Iterator[RawEvent | Cursor]:
    """Decode line-delimited JSON lines one by one, skipping empty lines."""
    for line in lines:
        if not line:
            continue
        if (checkpoint_or_event := parse_checkpoint_or_event(line)) is not None:
            yield checkpoint_or_event


async def adecode_lines(lines: AsyncIterable[str]) -> AsyncIterator[RawEvent | Cursor]:
    """Decode line-delimited JSON lines as they arrive, skipping empty lines."""
    async for line in lines:
        if not line:
            continue
        if (checkpoint_or_event := parse_checkpoint_or_event(line)) is not None:
            yield checkpoint_or_event


def decode_document(body: str) -> Iterator[RawEvent | Cursor]:
    """
    Decode a whole-document JSON array of feed entries.

    :raises MalformedResponse: if the body is not a JSON array, or an element is malformed.
    """
    try:
        document = json.loads(body)
    except json.JSONDecodeError as error:
        msg = "could not deserialize response body"
        raise MalformedResponse(msg) from error
    if not isinstance(document, list):
        msg = "expected a JSON array of feed entries"
        raise MalformedResponse(msg)

    for element in document:
        if (checkpoint_or_event := classify(element)) is not None:
            yield checkpoint_or_event
