"""This module defines a Cursor dataclass for use by the client and server."""

from dataclasses import dataclass

FIRST_CURSOR = "_first"
"""FIRST_CURSOR is a special cursor: starts at the first event."""

LAST_CURSOR = "_last"
"""LAST_CURSOR is a special cursor: starts at the last available event."""


@dataclass(frozen=True)
class Cursor:
    """
    A dataclass encapsulating both the partition ID and the actual cursor within this partition.

    On the client side a Cursor received from the server is a checkpoint: the position
    to resume from once every event preceding it has been handled.

    :param partition_id: The partition ID
    :param cursor: The opaque cursor within the partition
    """

    partition_id: int
    cursor: str

    def __post_init__(self) -> None:
        """Reject partition IDs which are not non-negative integers."""
        if isinstance(self.partition_id, bool) or not isinstance(self.partition_id, int):
            msg = f"partition id must be an integer, got {self.partition_id!r}"
            raise ValueError(msg)
        if self.partition_id < 0:
            msg = f"partition id must not be negative, got {self.partition_id}"
            raise ValueError(msg)

    @classmethod
    def first(cls, partition_id: int) -> "Cursor":
        """Return a cursor positioned at the beginning of the given partition."""
        return cls(partition_id, FIRST_CURSOR)

    @classmethod
    def last(cls, partition_id: int) -> "Cursor":
        """Return a cursor positioned at the end of the given partition."""
        return cls(partition_id, LAST_CURSOR)
