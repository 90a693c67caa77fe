"""line-dumper - Print a file using line-bounded reads of a fixed buffer size."""

from line_dumper.dump import dump_file, main_dump

__all__ = ["dump_file", "main_dump"]
