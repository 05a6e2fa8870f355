"""Module to define the event dataclass."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Event(Generic[T]):
    """
    All properties received relating to a certain event.

    As decoded from the wire `data` is the raw JSON value; an event receiver may
    replace it with a deserialized payload of its own type.
    """

    partition_id: int
    headers: dict[str, str] | None
    data: T


RawEvent = Event[Any]
