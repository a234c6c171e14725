"""
Binary Reader for UTX packages.

Provides sequential little-endian reads over a seekable binary stream
(an open file or an in-memory buffer), plus compact index reading.
"""

import io
import struct
from typing import BinaryIO, Union

from .compact import decode_compact
from .errors import UnexpectedEOF


class BinaryReader:
    """Little-endian reader over a seekable binary stream.

    Accepts either an open binary file object or a bytes-like buffer, which
    is wrapped in a BytesIO. Reads past the end raise UnexpectedEOF rather
    than returning short data.
    """

    def __init__(self, source: Union[bytes, bytearray, memoryview, BinaryIO]):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self.stream = source

    def seek(self, pos: int):
        """Seek to absolute position."""
        self.stream.seek(pos, io.SEEK_SET)

    def tell(self) -> int:
        """Return current position."""
        return self.stream.tell()

    def size(self) -> int:
        """Return total stream length without moving the cursor."""
        pos = self.stream.tell()
        end = self.stream.seek(0, io.SEEK_END)
        self.stream.seek(pos, io.SEEK_SET)
        return end

    def at_end(self) -> bool:
        return self.tell() >= self.size()

    def read_bytes(self, count: int) -> bytes:
        """Read exactly `count` raw bytes."""
        pos = self.tell()
        result = self.stream.read(count)
        if len(result) != count:
            raise UnexpectedEOF(
                f"Read of {count} bytes at offset {pos} hit end of stream "
                f"after {len(result)} bytes"
            )
        return result

    def read_uint8(self) -> int:
        return self.read_bytes(1)[0]

    def read_uint16(self) -> int:
        return struct.unpack("<H", self.read_bytes(2))[0]

    def read_int32(self) -> int:
        return struct.unpack("<i", self.read_bytes(4))[0]

    def read_uint32(self) -> int:
        return struct.unpack("<I", self.read_bytes(4))[0]

    def read_compact_index(self) -> int:
        """Read a compact index (variable-length signed integer)."""
        value, _consumed = decode_compact(self.read_uint8)
        return value


def read_compact_index_at(data: bytes, offset: int) -> tuple[int, int]:
    """Read a compact index from bytes at given offset.

    Standalone function for cases where a BinaryReader isn't used.

    Args:
        data: Raw bytes
        offset: Starting offset

    Returns:
        (value, new_offset) tuple
    """
    pos = offset

    def next_byte() -> int:
        nonlocal pos
        if pos >= len(data):
            raise UnexpectedEOF(f"Unexpected end of data in compact index at {offset}")
        b = data[pos]
        pos += 1
        return b

    value, consumed = decode_compact(next_byte)
    return value, offset + consumed
