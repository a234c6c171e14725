"""
Name table reader.

Names are stored in one of two encodings depending on the package
version:

- Unreal (version < 64): zero-terminated, no length prefix
- Unreal Tournament (version >= 64): one length byte, then that many
  bytes including the terminating zero

Each name is followed by a 32-bit flags value.
"""

from dataclasses import dataclass
from typing import List, Sequence

from . import config
from .errors import InvalidHeaderError, NameTooLongError, UnexpectedEOF
from .header import PackageHeader
from .reader import BinaryReader


@dataclass(frozen=True)
class NameEntry:
    raw: bytes
    flags: int = 0

    @property
    def text(self) -> str:
        """Name as text, up to the first terminator."""
        return self.raw.split(b"\x00", 1)[0].decode("latin-1")


class NameTable:
    """Ordered, immutable list of names referenced by index."""

    def __init__(self, entries: Sequence[NameEntry]):
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index: int) -> NameEntry:
        return self.lookup(index)

    def lookup(self, index: int) -> NameEntry:
        """Get a name by index, rejecting anything outside the table."""
        if not 0 <= index < len(self._entries):
            raise InvalidHeaderError(
                f"Name index {index} outside name table of {len(self._entries)} entries"
            )
        return self._entries[index]

    def find(self, text: str) -> int:
        """Return the index of the first name equal to `text`, or -1."""
        for i, entry in enumerate(self._entries):
            if entry.text == text:
                return i
        return -1

    def texts(self) -> List[str]:
        return [entry.text for entry in self._entries]


def read_name(reader: BinaryReader, version: int) -> bytes:
    """Read one name in the encoding used by `version`.

    The returned bytes are exactly what is stored on disk, terminator
    included.

    Raises:
        UnexpectedEOF: length-prefixed name cut short by end of stream
        NameTooLongError: zero-terminated name longer than NAME_MAX_LEN
    """
    if version >= config.LENGTH_PREFIXED_NAME_VERSION:
        length = reader.read_uint8()
        return reader.read_bytes(length)

    end = reader.size()
    scratch = bytearray()
    while len(scratch) < config.NAME_MAX_LEN and reader.tell() < end:
        b = reader.read_uint8()
        scratch.append(b)
        if b == 0:
            break

    if len(scratch) == config.NAME_MAX_LEN and scratch[-1] != 0:
        raise NameTooLongError(
            f"Name at offset {reader.tell() - len(scratch)} is not terminated "
            f"within {config.NAME_MAX_LEN} bytes"
        )
    return bytes(scratch)


def read_name_table(reader: BinaryReader, header: PackageHeader) -> NameTable:
    """Read all `header.name_count` names.

    Either the whole table is returned or InvalidHeaderError is raised;
    entries read before a failure are discarded with the local list.
    """
    reader.seek(header.name_offset)

    entries: List[NameEntry] = []
    for i in range(header.name_count):
        try:
            raw = read_name(reader, header.version)
            flags = reader.read_uint32()
        except (UnexpectedEOF, NameTooLongError) as e:
            raise InvalidHeaderError(f"Bad name table entry {i}: {e}") from e
        entries.append(NameEntry(raw, flags))

    return NameTable(entries)
