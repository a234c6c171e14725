"""Import table reader."""

from dataclasses import dataclass
from typing import List

from .errors import InvalidHeaderError, UnexpectedEOF
from .header import PackageHeader
from .reader import BinaryReader
from .references import ObjectRef, resolve_reference


@dataclass(frozen=True)
class ImportEntry:
    """An object the package references from another package."""
    class_package: int  # raw name index, unresolved
    class_name: int     # raw name index, unresolved
    package: ObjectRef
    object_name: int


def read_import(reader: BinaryReader) -> ImportEntry:
    class_package = reader.read_compact_index()
    class_name = reader.read_compact_index()
    # Stored as a 32-bit field but holds a signed reference
    package = reader.read_int32()
    object_name = reader.read_compact_index()

    return ImportEntry(
        class_package=class_package,
        class_name=class_name,
        package=resolve_reference(package),
        object_name=object_name,
    )


def read_import_table(reader: BinaryReader, header: PackageHeader) -> List[ImportEntry]:
    """Read all `header.import_count` imports from `header.import_offset`."""
    reader.seek(header.import_offset)

    imports: List[ImportEntry] = []
    for i in range(header.import_count):
        try:
            imports.append(read_import(reader))
        except UnexpectedEOF as e:
            raise InvalidHeaderError(f"Bad import table entry {i}: {e}") from e
    return imports
