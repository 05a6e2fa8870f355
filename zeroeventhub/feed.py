"""Server-side feed entries and their generation from fetch results."""

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

E = TypeVar("E")


@dataclass(frozen=True)
class EventEntry:
    """An event of a partition, as sent to the client."""

    partition: int
    data: Any
    headers: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        """Reject events without data, which clients cannot tell apart from a bad line."""
        if self.data is None:
            msg = f"event data of partition {self.partition} must not be None"
            raise ValueError(msg)


@dataclass(frozen=True)
class CheckpointEntry:
    """The position a partition has advanced to, once the events before it are handled."""

    partition: int
    cursor: str


FeedEntry = EventEntry | CheckpointEntry


@dataclass(frozen=True)
class FeedResult(Generic[E]):
    """The events read from a single partition, and the cursor following the last of them."""

    events: Sequence[E]
    cursor: str


def generate_feed_entries(
    partition: int,
    result: FeedResult[E],
    headers: Callable[[E], Mapping[str, str] | None] | None = None,
) -> list[FeedEntry]:
    """
    Turn the fetch result of a partition into feed entries.

    The events are always followed by the checkpoint, so a client which persists a
    checkpoint only after handling everything before it never skips an event on resume.

    :param partition: the partition the result was read from.
    :param result: the events and the new cursor of the partition.
    :param headers: an optional callable returning the headers to send with an event.
    """
    entries: list[FeedEntry] = [
        EventEntry(partition, event, headers(event) if headers else None)
        for event in result.events
    ]
    entries.append(CheckpointEntry(partition, result.cursor))
    return entries


def generate_multi_partition_feed(
    results: Mapping[int, FeedResult[E]],
    headers: Callable[[E], Mapping[str, str] | None] | None = None,
) -> Iterator[FeedEntry]:
    """
    Multiplex the fetch results of several partitions into one feed.

    Each partition's segment keeps its events before its checkpoint; the segments
    themselves follow the iteration order of `results`, which clients must not rely on.
    """
    for partition, result in results.items():
        yield from generate_feed_entries(partition, result, headers)
