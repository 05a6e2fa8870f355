"""Module to make it easy to receive a page of events."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from .cursor import Cursor
from .errors import MalformedResponse
from .event import Event
from .event_receiver import EventReceiver

T = TypeVar("T")


def _identity(data: Any) -> Any:
    """Keep the event data as the raw JSON value."""
    return data


class PageEventReceiver(EventReceiver, Generic[T]):
    """
    Receive a page of events.

    The event data is converted with the given `deserialize` callable before being
    stored, e.g. a pydantic `TypeAdapter(...).validate_python` or a dataclass factory.
    By default the raw JSON value is kept.
    """

    def __init__(self, deserialize: Callable[[Any], T] = _identity) -> None:
        """Initialize the PageEventReceiver with empty state."""
        self._deserialize = deserialize
        self._events: list[Event[T]] = []
        self._checkpoints: list[Cursor] = []
        self._latest_checkpoints: dict[int, Cursor] = {}

    def clear(self) -> None:
        """Clear the received events and checkpoints, ready to handle a new page."""
        self._events.clear()
        self._checkpoints.clear()
        self._latest_checkpoints.clear()

    @property
    def events(self) -> Sequence[Event[T]]:
        """Return the page of events received."""
        return self._events

    @property
    def checkpoints(self) -> Sequence[Cursor]:
        """Return the page of checkpoints received."""
        return self._checkpoints

    @property
    def latest_checkpoints(self) -> Mapping[int, Cursor]:
        """Only return the latest checkpoint for each partition, keyed by partition ID."""
        return dict(self._latest_checkpoints)

    async def event(self, event: Event[Any]) -> None:
        """
        Deserialize the data of the given event and add it to the list.

        :param event: the event
        :raises MalformedResponse: if the data cannot be deserialized, or deserializes to None.
        """
        try:
            data = self._deserialize(event.data)
        except Exception as error:
            msg = "failed to deserialize event data"
            raise MalformedResponse(msg) from error
        if data is None:
            msg = "event data is null"
            raise MalformedResponse(msg)
        self._events.append(Event(event.partition_id, event.headers, data))

    async def checkpoint(self, checkpoint: Cursor) -> None:
        """
        Add the given checkpoint to the list.

        :param checkpoint: the cursor to use as a checkpoint to continue processing from later
        """
        self._checkpoints.append(checkpoint)
        self._latest_checkpoints[checkpoint.partition_id] = checkpoint
