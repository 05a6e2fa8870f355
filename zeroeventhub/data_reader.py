"""Module to define the DataReader interface."""

from collections.abc import AsyncIterable, Iterable, Sequence
from typing import Protocol

from .cursor import Cursor
from .feed import FeedEntry

# pylint: disable=R0903


class DataReader(Protocol):
    """
    DataReader is an interface describing an abstraction for reading data for ZeroEventHub response
    and generate header values based on the list of header keys requested from client.

    Implementations typically read a `FeedResult` per requested partition and turn it into
    entries with `generate_feed_entries`, which keeps each checkpoint after its events.
    """

    def get_data(
        self,
        cursors: Sequence[Cursor],
        headers: Sequence[str] | None,
        page_size: int | None,
    ) -> Iterable[FeedEntry] | AsyncIterable[FeedEntry]:
        """
        Read a page of events at server side for the given cursors.

        :param cursors: the requested partition and start point for receiving events
        :param headers: the header keys to be be fullfiled with values
        :param page_size: page size of the return data
        """
        ...
