class ReaderError(Exception):
    """Base class for character reader errors."""


class EndOfStream(ReaderError, EOFError):
    """No more bytes are available to complete a character.

    Attributes:
        partial: Bytes of a sequence truncated by the end of the source.
            Empty if the source ended on a character boundary.
    """

    def __init__(self, message: str, partial: bytes = b""):
        super().__init__(message)
        self.partial = partial


class InvalidEncoding(ReaderError, ValueError):
    def __init__(self, data: bytes, position: int):
        self.data = data
        self.position = position
        super().__init__(
            f"invalid UTF-8 sequence {data.hex(' ')} at offset {position}")
