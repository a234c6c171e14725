"""
Compact index codec.

Unreal packages store most integers as a variable-length signed value of
1 to 5 bytes:

- Byte 0: bit 7 sign, bit 6 continuation, bits 0-5 value
- Bytes 1-3: bit 7 continuation, bits 0-6 value (offsets 6, 13, 20)
- Byte 4: bits 0-4 value at offset 27, always the last byte

The magnitude therefore never exceeds 32 bits.
"""

from typing import Callable, Tuple

MAX_COMPACT_BYTES = 5
MAX_MAGNITUDE = (1 << 32) - 1


def decode_compact(next_byte: Callable[[], int]) -> Tuple[int, int]:
    """Decode one compact index.

    Args:
        next_byte: Callable returning the next byte of input. Whatever it
            raises at end of input propagates unchanged.

    Returns:
        (value, bytes_consumed) tuple
    """
    b = next_byte()
    consumed = 1
    negative = b & 0x80
    value = b & 0x3F
    more = b & 0x40
    shift = 6

    while more:
        b = next_byte()
        consumed += 1
        if consumed == MAX_COMPACT_BYTES:
            # Top byte only has room for 5 bits; bit 7 is ignored
            value |= (b & 0x1F) << shift
            break
        value |= (b & 0x7F) << shift
        shift += 7
        more = b & 0x80

    return (-value if negative else value), consumed


def encode_compact(value: int) -> bytes:
    """Encode an integer in the shortest compact index form."""
    magnitude = abs(value)
    if magnitude > MAX_MAGNITUDE:
        raise ValueError(f"Compact index magnitude out of range: {value}")

    first = magnitude & 0x3F
    if value < 0:
        first |= 0x80
    magnitude >>= 6
    if magnitude:
        first |= 0x40
    out = bytearray([first])

    for _ in range(3):
        if not magnitude:
            break
        b = magnitude & 0x7F
        magnitude >>= 7
        if magnitude:
            b |= 0x80
        out.append(b)

    if magnitude:
        out.append(magnitude & 0x1F)

    return bytes(out)
