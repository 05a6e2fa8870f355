"""Encoding and decoding of the query parameters of a feed request."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .cursor import Cursor
from .errors import ValidationError, cursors_missing


@dataclass(frozen=True)
class FeedRequest:
    """The parameters of a feed request, as understood by the server."""

    cursors: list[Cursor]
    headers: list[str] | None
    page_size_hint: int | None


def encode_query(
    cursors: Cursor | Iterable[Cursor],
    partition_count: int,
    page_size_hint: int | None = None,
    headers: Iterable[str] | None = None,
) -> dict[str, str | int]:
    """
    Build the query parameters of a feed request.

    When the same partition appears more than once, the cursor supplied last is used.

    :param cursors: the cursor, or the cursors, of the partitions to fetch events for.
    :param partition_count: the number of partitions the server is expected to have.
    :param page_size_hint: an optional hint for the page size; 0 or None lets the server decide.
    :param headers: an optional sequence of event header names desired in the response.
        A single string is taken as one header name.
    :raises ValidationError: if no cursors are given.
    """
    if isinstance(cursors, Cursor):
        cursors = [cursors]
    params: dict[str, str | int] = {"n": partition_count}

    has_cursor = False
    for cursor in cursors or ():
        params[f"cursor{cursor.partition_id}"] = cursor.cursor
        has_cursor = True
    if not has_cursor:
        raise cursors_missing()

    if page_size_hint:
        params["pagesizehint"] = page_size_hint

    if isinstance(headers, str):
        headers = [headers]
    header_names = list(headers) if headers else []
    if header_names:
        params["headers"] = ",".join(header_names)

    return params


def decode_query(query_params: Mapping[str, str], partition_count: int) -> FeedRequest:
    """
    Validate the query parameters of an incoming feed request.

    Only `cursor<i>` parameters for partitions below the declared partition count are
    considered.

    :param query_params: the query string parameters of the request.
    :param partition_count: the number of partitions this server has.
    :raises ValidationError: if a parameter is missing or invalid.
    """
    n_param = query_params.get("n")
    if n_param is None:
        raise ValidationError("Parameter n not found")
    try:
        client_partition_count = int(n_param)
    except ValueError as err:
        raise ValidationError("Invalid parameter n") from err
    if client_partition_count != partition_count:
        raise ValidationError("Partition count doesn't match as expected")

    cursors = []
    for partition_id in range(client_partition_count):
        cursor_value = query_params.get(f"cursor{partition_id}")
        if cursor_value:
            cursors.append(Cursor(partition_id, cursor_value))
    if not cursors:
        raise ValidationError("Cursor parameter is missing")

    page_size_hint = None
    if page_size_hint_param := query_params.get("pagesizehint"):
        try:
            page_size_hint = int(page_size_hint_param)
        except ValueError as err:
            raise ValidationError("Invalid parameter pagesizehint") from err

    headers = None
    if headers_param := query_params.get("headers"):
        headers = headers_param.rstrip(",").split(",")

    return FeedRequest(cursors=cursors, headers=headers, page_size_hint=page_size_hint)
