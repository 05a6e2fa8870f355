"""Content negotiation and serialization of feed entries."""

import json
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any

from .constants import NDJSON_CONTENT_TYPE, SUPPORTED_CONTENT_TYPES
from .feed import CheckpointEntry, EventEntry, FeedEntry


def entry_to_dict(entry: FeedEntry) -> dict[str, Any]:
    """Return the wire shape of a feed entry, holding only the fields of its kind."""
    if isinstance(entry, CheckpointEntry):
        return {"partition": entry.partition, "cursor": entry.cursor}
    if isinstance(entry, EventEntry):
        data: dict[str, Any] = {"partition": entry.partition}
        if entry.headers is not None:
            data["headers"] = dict(entry.headers)
        data["data"] = entry.data
        return data
    msg = f"cannot serialize {type(entry).__name__} as a feed entry"
    raise TypeError(msg)


def _dumps(value: Any) -> str:
    """Serialize a value as compact JSON."""
    return json.dumps(value, separators=(",", ":"))


def iter_ndjson(entries: Iterable[FeedEntry]) -> Iterator[bytes]:
    """Serialize each entry as one line of JSON, terminated by a line feed."""
    for entry in entries:
        yield f"{_dumps(entry_to_dict(entry))}\n".encode()


async def aiter_ndjson(
    entries: Iterable[FeedEntry] | AsyncIterable[FeedEntry],
) -> AsyncIterator[bytes]:
    """Serialize entries from a sync or async source as line-delimited JSON."""
    if isinstance(entries, AsyncIterable):
        async for entry in entries:
            yield f"{_dumps(entry_to_dict(entry))}\n".encode()
    else:
        for line in iter_ndjson(entries):
            yield line


def render_json_document(entries: Iterable[FeedEntry]) -> bytes:
    """Serialize all entries as a single JSON array."""
    return _dumps([entry_to_dict(entry) for entry in entries]).encode()


def _parse_accept(accept: str) -> Iterator[tuple[str, float]]:
    for part in accept.split(","):
        media_range, *params = (item.strip() for item in part.split(";"))
        if not media_range:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        yield media_range.lower(), quality


def _matches(media_range: str, content_type: str) -> bool:
    if media_range in ("*/*", content_type):
        return True
    main_type, _, sub_type = media_range.partition("/")
    return sub_type == "*" and content_type.startswith(f"{main_type}/")


def negotiate_media_type(accept: str | None) -> str | None:
    """
    Choose the media type of the response from the `Accept` header of the request.

    Line-delimited JSON is preferred when the client accepts both equally; no header
    at all means line-delimited JSON. Returns None when nothing supported is acceptable.
    """
    if not accept or not accept.strip():
        return NDJSON_CONTENT_TYPE

    ranges = list(_parse_accept(accept))
    best: str | None = None
    best_quality = 0.0
    for content_type in SUPPORTED_CONTENT_TYPES:
        # the most specific matching range decides the quality
        matching = [
            (media_range.count("*"), quality)
            for media_range, quality in ranges
            if _matches(media_range, content_type)
        ]
        if not matching:
            continue
        quality = min(matching)[1]
        if quality > best_quality:
            best, best_quality = content_type, quality
    return best
