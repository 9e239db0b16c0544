from .__version__ import __version__
from .errors import ReaderError, EndOfStream, InvalidEncoding
from .source import ByteSource, StreamByteSource, MemoryByteSource
from .reader import CharReader, Utf8Reader
from .main import open_reader, count_chars

__all__ = [
    "__version__",
    "ReaderError",
    "EndOfStream",
    "InvalidEncoding",
    "ByteSource",
    "StreamByteSource",
    "MemoryByteSource",
    "CharReader",
    "Utf8Reader",
    "open_reader",
    "count_chars",
]
