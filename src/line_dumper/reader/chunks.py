"""Line-bounded chunk reading."""

from collections.abc import Iterator
from typing import BinaryIO

from line_dumper.errors import BufferSizeError, FileOpenError
from line_dumper.reader.types import MAX_BUFFER_SIZE, MIN_BUFFER_SIZE, Chunk


def parse_buffer_size(text: str) -> int:
    """
    Parse a buffer size argument into a validated integer.

    Raises BufferSizeError for non-numeric text and for values outside
    [MIN_BUFFER_SIZE, MAX_BUFFER_SIZE].
    """
    try:
        size = int(text, 10)
    except ValueError:
        raise BufferSizeError(text, "not an integer") from None

    if size < MIN_BUFFER_SIZE:
        raise BufferSizeError(text, f"must be at least {MIN_BUFFER_SIZE}")
    if size > MAX_BUFFER_SIZE:
        raise BufferSizeError(text, f"must be at most {MAX_BUFFER_SIZE}")
    return size


def iter_line_chunks(handle: BinaryIO, buffer_size: int) -> Iterator[Chunk]:
    """
    Yield line-bounded reads from an open binary handle.

    Each chunk ends at a newline or holds buffer_size - 1 bytes, whichever
    comes first. Iteration stops at the first empty read.
    """
    limit = buffer_size - 1
    while True:
        chunk = handle.readline(limit)
        if not chunk:
            return
        yield chunk


def read_line_chunks(path: str, buffer_size: int) -> Iterator[Chunk]:
    """Open a file and yield its chunks; the handle is closed when iteration ends."""
    try:
        handle = open(path, "rb")  # noqa: SIM115
    except OSError as exc:
        raise FileOpenError(path) from exc

    with handle:
        yield from iter_line_chunks(handle, buffer_size)
