from line_dumper.reader.chunks import iter_line_chunks, parse_buffer_size, read_line_chunks
from line_dumper.reader.types import MAX_BUFFER_SIZE, MIN_BUFFER_SIZE, DumpStats

__all__ = [
    "DumpStats",
    "MAX_BUFFER_SIZE",
    "MIN_BUFFER_SIZE",
    "iter_line_chunks",
    "parse_buffer_size",
    "read_line_chunks",
]
