import io
import unittest

from pathlib import Path
from tempfile import TemporaryDirectory

from utf8reader.source import MemoryByteSource, StreamByteSource


class NonSeekable(io.RawIOBase):
    def readable(self):
        return True


class StreamByteSourceTest(unittest.TestCase):
    def test_read_bytes(self):
        src = MemoryByteSource(b"\x00\x7f\xff")

        self.assertEqual(src.length, 3)
        self.assertEqual([src.read_byte() for _ in range(4)],
                         [0, 0x7f, 0xff, None])
        self.assertEqual(src.position, 3)

    def test_set_position(self):
        src = MemoryByteSource(b"abc")

        src.position = 2
        self.assertEqual(src.read_byte(), ord("c"))
        src.position = 0
        self.assertEqual(src.read_byte(), ord("a"))

    def test_negative_position(self):
        src = MemoryByteSource(b"abc")

        with self.assertRaises(ValueError):
            src.position = -1

    def test_length_keeps_position(self):
        stream = io.BytesIO(b"abcdef")
        stream.seek(2)
        src = StreamByteSource(stream)

        self.assertEqual(src.length, 6)
        self.assertEqual(src.position, 2)

    def test_not_readable(self):
        with TemporaryDirectory() as d:
            path = Path(d) / "out.bin"
            with open(path, "wb") as fout:
                with self.assertRaises(ValueError):
                    StreamByteSource(fout)

    def test_not_seekable(self):
        with self.assertRaises(ValueError):
            StreamByteSource(NonSeekable())

    def test_names(self):
        self.assertEqual(MemoryByteSource(b"").name, "<bytes>")
        self.assertEqual(StreamByteSource(io.BytesIO()).name, "<stream>")
        self.assertEqual(StreamByteSource(io.BytesIO(), name="x").name, "x")

    def test_close(self):
        stream = io.BytesIO(b"abc")
        src = StreamByteSource(stream)

        src.close()
        src.close()
        self.assertTrue(src.closed)
        self.assertTrue(stream.closed)

    def test_close_not_owned(self):
        stream = io.BytesIO(b"abc")

        with StreamByteSource(stream, owned=False) as src:
            pass
        self.assertTrue(src.closed)
        self.assertFalse(stream.closed)


class FileByteSourceTest(unittest.TestCase):
    def test_from_path(self):
        with TemporaryDirectory() as d:
            path = Path(d) / "data.txt"
            path.write_bytes("añ".encode("utf-8"))

            with StreamByteSource.from_path(path) as src:
                self.assertEqual(src.name, str(path))
                self.assertEqual(src.length, 3)
                self.assertEqual(src.read_byte(), ord("a"))
                stream = src.stream
            self.assertTrue(stream.closed)

    def test_missing_file(self):
        with TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                StreamByteSource.from_path(Path(d) / "missing.txt")
