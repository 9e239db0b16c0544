import logging

from contextlib import contextmanager
from os import PathLike
from typing import Iterator

from .reader import CharReader, Utf8Reader
from .source import StreamByteSource

logger = logging.getLogger("utf8reader")


@contextmanager
def open_reader(path: str | PathLike) -> Iterator[Utf8Reader]:
    """Open a file for reading character by character.

    The file is closed when the block exits, whether normally or by an
    exception.
    """
    reader = Utf8Reader(StreamByteSource.from_path(path))
    logger.info("reading %s", reader.name)
    try:
        yield reader
    finally:
        reader.close()


def count_chars(reader: CharReader) -> int:
    """Count characters from the start of the stream to its end."""
    reader.reset_position_to_start()
    count = 0
    for _ in reader:
        count += 1
    return count
