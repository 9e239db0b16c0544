from __future__ import annotations

import codecs
import logging

from abc import ABC, abstractmethod
from typing import Optional

from .errors import EndOfStream, InvalidEncoding
from .source import ByteSource

logger = logging.getLogger("utf8reader.reader")

# Longest UTF-8 encoded character
MAX_SEQUENCE_LENGTH = 4


class CharReader(ABC):
    """Stream of characters.

    Besides the explicit `read_next_char` calls, the reader can be iterated
    over and used as a context manager, which closes it on exit.
    """

    @property
    @abstractmethod
    def eof(self) -> bool:
        ...

    @abstractmethod
    def read_next_char(self) -> str:
        ...

    @abstractmethod
    def reset_position_to_start(self) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    def __iter__(self) -> CharReader:
        return self

    def __next__(self) -> str:
        if self.eof:
            raise StopIteration
        try:
            return self.read_next_char()
        except EndOfStream as e:
            if e.partial:
                raise
            raise StopIteration

    def __enter__(self) -> CharReader:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class Utf8Reader(CharReader):
    """
    Decodes UTF-8 characters from a byte source, one byte at a time.

    The reader takes ownership of the source: closing the reader closes
    the source. Instances must not be shared between threads.
    """

    def __init__(self, source: ByteSource):
        self.source: Optional[ByteSource] = source
        self.name = source.name
        self._eof = False

    @property
    def eof(self) -> bool:
        """True if the next `read_next_char` call fails with EndOfStream.

        Updated after each successful decode and after an attempt to read
        from the exhausted source.
        """
        return self._eof

    @property
    def closed(self) -> bool:
        return self.source is None

    @property
    def position(self) -> Optional[int]:
        if self.source is None:
            return None
        return self.source.position

    def read_next_char(self) -> str:
        """Decode the next character.

        Raises:
            EndOfStream: If the source has no more bytes, either before the
                character or in the middle of it.
            InvalidEncoding: If the bytes are not valid UTF-8.
            ValueError: If the reader is closed.
        """
        source = self.source
        if source is None:
            raise ValueError(f"I/O operation on closed reader: {self.name}")
        if self._eof:
            raise EndOfStream(f"{self.name}: the stream has run out of "
                              "characters")

        start = source.position
        buffer = bytearray()

        while True:
            byte = source.read_byte()
            if byte is None:
                self._eof = True
                raise EndOfStream(f"{self.name}: the stream has run out of "
                                  "characters", bytes(buffer))
            buffer.append(byte)

            try:
                char, consumed = codecs.utf_8_decode(buffer, 'strict', False)
            except UnicodeDecodeError:
                logger.debug("%s: invalid sequence %r at %d",
                             self.name, bytes(buffer), start)
                raise InvalidEncoding(bytes(buffer), start) from None

            if consumed:
                # buffer held an incomplete prefix before this byte, so it
                # now completes exactly one character
                assert len(char) == 1 and consumed == len(buffer)
                self._eof = source.position >= source.length
                return char

            # incomplete sequence, need more bytes
            if len(buffer) >= MAX_SEQUENCE_LENGTH:
                raise InvalidEncoding(bytes(buffer), start)

    def reset_position_to_start(self) -> None:
        if self.source is None:
            self._eof = True
            return
        self.source.position = 0
        self._eof = False
        logger.debug("%s: reset to start", self.name)

    def close(self) -> None:
        if self.source is None:
            return
        source, self.source = self.source, None
        source.close()

    def __repr__(self):
        state = "closed" if self.closed else f"position={self.position}"
        return f"Utf8Reader({self.name!r}, {state}, eof={self._eof})"
