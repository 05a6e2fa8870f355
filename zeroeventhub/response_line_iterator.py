"""httpx response line iterator."""

import collections.abc

import httpx

NEWLINE = "\n"


class LineDecoder:
    """
    Handles incrementally reading lines from text.

    Only the line feed character terminates a line; other characters which
    `str.splitlines` treats as line boundaries are kept as part of the line.
    """

    def __init__(self) -> None:
        """Initialize the line decoder with an empty buffer."""
        self.buffer: list[str] = []

    def decode(self, text: str) -> list[str]:
        """Decode the given text into the lines completed by it."""
        if NEWLINE not in text:
            if text:
                self.buffer.append(text)
            return []

        lines = text.split(NEWLINE)
        lines[0] = "".join(self.buffer) + lines[0]
        # the last segment is not yet newline terminated (empty if the text ended with one)
        remainder = lines.pop()
        self.buffer = [remainder] if remainder else []
        return lines

    def flush(self) -> list[str]:
        """Flush the line buffer."""
        if not self.buffer:
            return []

        lines = ["".join(self.buffer)]
        self.buffer = []
        return lines


def splitlines(text: str) -> list[str]:
    """Split a complete body into lines on line feeds only."""
    decoder = LineDecoder()
    return decoder.decode(text) + decoder.flush()


async def aiter_lines(response: httpx.Response) -> collections.abc.AsyncIterator[str]:
    """Iterate through the lines in the response as the body is received."""
    decoder = LineDecoder()
    async for text in response.aiter_text():
        for line in decoder.decode(text):
            yield line
    for line in decoder.flush():
        yield line
