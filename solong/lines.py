"""Buffered line reading from file-like objects."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

BUFFER_SIZE = 42
_MAX_BUFFER = 2147483647


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield lines from stream, reading buffer_size units at a time.

    Each line keeps its trailing newline; the last line may lack one. Works
    with text and binary streams. Raises ValueError for a buffer size
    outside 1 to 2147483647.
    """
    if buffer_size <= 0 or buffer_size > _MAX_BUFFER:
        raise ValueError("buffer_size must be between 1 and 2147483647")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if pending is None:
            pending = chunk[:0]
        if not chunk:
            break
        pending += chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        index = pending.find(newline)
        while index >= 0:
            yield pending[: index + 1]
            pending = pending[index + 1:]
            index = pending.find(newline)
    if pending:
        yield pending