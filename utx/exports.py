"""Export table reader."""

from dataclasses import dataclass
from typing import List

from .errors import InvalidHeaderError, UnexpectedEOF
from .header import PackageHeader
from .reader import BinaryReader
from .references import ObjectRef, resolve_reference


@dataclass(frozen=True)
class ExportEntry:
    """An object defined inside the package."""
    class_ref: ObjectRef
    super_ref: ObjectRef
    group: int          # plain u32, not a reference
    object_name: int    # name table index
    object_flags: int
    serial_size: int
    serial_offset: int


def read_export(reader: BinaryReader) -> ExportEntry:
    class_index = reader.read_compact_index()
    super_index = reader.read_compact_index()
    group = reader.read_uint32()
    object_name = reader.read_compact_index()
    object_flags = reader.read_uint32()
    serial_size = reader.read_compact_index()
    serial_offset = reader.read_compact_index()

    return ExportEntry(
        class_ref=resolve_reference(class_index),
        super_ref=resolve_reference(super_index),
        group=group,
        object_name=object_name,
        object_flags=object_flags,
        serial_size=serial_size,
        serial_offset=serial_offset,
    )


def read_export_table(reader: BinaryReader, header: PackageHeader) -> List[ExportEntry]:
    """Read all `header.export_count` exports from `header.export_offset`."""
    reader.seek(header.export_offset)

    exports: List[ExportEntry] = []
    for i in range(header.export_count):
        try:
            exports.append(read_export(reader))
        except UnexpectedEOF as e:
            raise InvalidHeaderError(f"Bad export table entry {i}: {e}") from e
    return exports
