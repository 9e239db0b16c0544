from __future__ import annotations

import io
import os
import logging

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

logger = logging.getLogger("utf8reader.source")


class ByteSource(ABC):
    """Ordered, finite sequence of bytes with a movable cursor."""

    name: str

    @abstractmethod
    def read_byte(self) -> Optional[int]:
        """Return the next byte and advance the cursor.

        Returns None if the source is exhausted.
        """

    @property
    @abstractmethod
    def position(self) -> int:
        ...

    @position.setter
    @abstractmethod
    def position(self, offset: int) -> None:
        ...

    @property
    @abstractmethod
    def length(self) -> int:
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resources."""

    def __enter__(self) -> ByteSource:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class StreamByteSource(ByteSource):
    """Byte source over a seekable binary stream.

    Args:
        stream: Readable and seekable binary stream.
        name: Source name used in messages. Taken from the stream if
            omitted.
        owned: Close the stream when the source is closed.
    """

    def __init__(self,
                 stream: BinaryIO,
                 name: Optional[str] = None,
                 owned: bool = True):
        self.name = name or str(getattr(stream, 'name', '<stream>'))

        if not stream.readable():
            raise ValueError(f"stream must be readable: {self.name}")
        if not stream.seekable():
            raise ValueError(f"stream must be seekable: {self.name}")

        self.stream = stream
        self.owned = owned
        self._closed = False

        current = stream.tell()
        self._length = stream.seek(0, io.SEEK_END)
        stream.seek(current, io.SEEK_SET)

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> StreamByteSource:
        stream = open(path, 'rb')
        try:
            source = cls(stream, name=os.fspath(path))
        except ValueError:
            stream.close()
            raise
        logger.debug("opened %s, %d bytes", source.name, source.length)
        return source

    def read_byte(self) -> Optional[int]:
        data = self.stream.read(1)
        if not data:
            return None
        return data[0]

    @property
    def position(self) -> int:
        return self.stream.tell()

    @position.setter
    def position(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"negative offset: {offset}")
        self.stream.seek(offset, io.SEEK_SET)

    @property
    def length(self) -> int:
        return self._length

    @property
    def closed(self) -> bool:
        return self._closed or self.stream.closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.owned:
            self.stream.close()
        logger.debug("closed %s", self.name)

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, length={self._length})"


class MemoryByteSource(StreamByteSource):
    def __init__(self, data: bytes):
        super().__init__(io.BytesIO(data), name="<bytes>")
