"""Shared constants and metadata structures for chunked reading."""

from dataclasses import dataclass

# One data byte plus the slot reserved for the terminator.
MIN_BUFFER_SIZE = 2

# 64MB cap on a single read.
MAX_BUFFER_SIZE = 64 * 1024 * 1024

type Chunk = bytes


@dataclass
class DumpStats:
    """Statistics from a dump_file operation."""

    lines_read: int = 0
    chunks_written: int = 0
    bytes_written: int = 0
    split_lines: int = 0
