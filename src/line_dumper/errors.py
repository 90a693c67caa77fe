"""Error types raised by line-dumper."""


class LineDumperError(Exception):
    """Base class for errors reported by the command-line interface."""


class UsageError(LineDumperError):
    """Wrong number of arguments or any other argument-parser failure."""


class BufferSizeError(LineDumperError, ValueError):
    """Buffer size is not an integer inside the accepted range."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid buffer size '{text}': {reason}.")
        self.text = text
        self.reason = reason


class FileOpenError(LineDumperError):
    """Input file could not be opened for reading."""

    def __init__(self, filename: str):
        super().__init__(f"File '{filename}' not found.")
        self.filename = filename
