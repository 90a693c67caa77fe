import logging
import sys
import time
from pathlib import Path
from typing import BinaryIO

from line_dumper.reader.chunks import read_line_chunks
from line_dumper.reader.types import DumpStats

logger = logging.getLogger(__name__)


def dump_file(path: str, buffer_size: int, out: BinaryIO) -> DumpStats:
    """
    Copy a file to a binary stream one line-bounded chunk at a time.

    Lines longer than buffer_size - 1 bytes are written as several chunks;
    the bytes reaching the stream are identical to the file either way.
    Raises FileOpenError before anything is written when the file cannot
    be opened.
    """
    start = time.perf_counter()
    stats = DumpStats()

    logger.info("Starting: file=%s, buffer_size=%d", Path(path).name, buffer_size)

    chunks_in_line = 0
    for chunk in read_line_chunks(path, buffer_size):
        out.write(chunk)
        stats.chunks_written += 1
        stats.bytes_written += len(chunk)
        chunks_in_line += 1
        logger.debug("Chunk %d: %d bytes", stats.chunks_written, len(chunk))

        if chunk.endswith(b"\n"):
            stats.lines_read += 1
            if chunks_in_line > 1:
                stats.split_lines += 1
            chunks_in_line = 0

    # Final line without a trailing newline.
    if chunks_in_line:
        stats.lines_read += 1
        if chunks_in_line > 1:
            stats.split_lines += 1

    out.flush()

    if stats.split_lines > 0:
        logger.info(
            "%d of %d lines exceeded %d bytes and were split across chunks",
            stats.split_lines,
            stats.lines_read,
            buffer_size - 1,
        )

    total_time = time.perf_counter() - start
    logger.info(
        "Done: %d lines, %d chunks, %d bytes in %.3fs",
        stats.lines_read,
        stats.chunks_written,
        stats.bytes_written,
        total_time,
    )
    return stats


def main_dump(path: str, buffer_size: int) -> None:
    """Main entry point that writes the file to stdout."""
    sys.stdout.flush()
    dump_file(path, buffer_size, sys.stdout.buffer)
