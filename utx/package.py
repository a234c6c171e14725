"""
UTX Package Reader.

Parses Unreal / Unreal Tournament packages (.utx, .u, .unr, etc.) into a
header plus name, export and import tables, and loads texture packages
into a target.
"""

from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional

from . import config
from .errors import (
    AllocationError,
    CouldNotOpenError,
    IllegalOperationError,
    InvalidHeaderError,
)
from .exports import ExportEntry, read_export_table
from .header import PackageHeader, check_header, read_header
from .imports import ImportEntry, read_import_table
from .names import NameTable, read_name_table
from .reader import BinaryReader
from .references import ObjectRef
from .target import AssetTarget


@dataclass
class Package:
    """Parsed package structure.

    Provides access to:
    - names: NameTable of all names in the package
    - exports: objects defined by the package
    - imports: objects referenced from other packages
    """
    header: PackageHeader
    names: NameTable
    exports: List[ExportEntry]
    imports: List[ImportEntry]
    reader: Optional[BinaryReader] = field(default=None, repr=False)

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def licensee(self) -> int:
        return self.header.license_mode

    def export_name(self, index: int) -> str:
        """Object name of export `index` (zero-based)."""
        export = self._export(index)
        return self.names.lookup(export.object_name).text

    def import_name(self, index: int) -> str:
        """Object name of import `index` (zero-based)."""
        imp = self._import(index)
        return self.names.lookup(imp.object_name).text

    def object_name(self, ref: ObjectRef) -> str:
        """Object name a reference points at, or empty string for null."""
        if ref.is_null:
            return ""
        if ref.is_import:
            return self.import_name(ref.index)
        return self.export_name(ref.index)

    def class_name(self, export: ExportEntry) -> str:
        """Class name of an export; a null class reference means "Class"."""
        if export.class_ref.is_null:
            return "Class"
        return self.object_name(export.class_ref)

    def exports_by_class(self, class_name: str) -> List[int]:
        """Indices of all exports of a specific class."""
        return [
            i for i, export in enumerate(self.exports)
            if self.class_name(export) == class_name
        ]

    def texture_exports(self) -> List[int]:
        """Indices of exports whose object name marks them as textures."""
        return [
            i for i, export in enumerate(self.exports)
            if self.names.lookup(export.object_name).text == config.TEXTURE_OBJECT_NAME
        ]

    def export_data(self, index: int) -> bytes:
        """Raw serialized data of export `index`.

        Needs the package to still be attached to its reader.
        """
        export = self._export(index)
        if export.serial_size <= 0:
            return b""
        if self.reader is None:
            raise ValueError("Package is detached from its stream")
        if export.serial_offset < 0:
            raise InvalidHeaderError(
                f"Export {index} has negative serial offset {export.serial_offset}"
            )
        if export.serial_offset + export.serial_size > self.reader.size():
            raise InvalidHeaderError(f"Export {index} data runs past end of package")
        self.reader.seek(export.serial_offset)
        return self.reader.read_bytes(export.serial_size)

    def dump_info(self):
        """Print package summary information."""
        print(f"  Signature: {self.header.signature:#010x}")
        print(f"  Version: {self.version}/{self.licensee} ({self.header.generation})")
        print(f"  Flags: {self.header.flags:#010x}")
        print(f"  Names: {len(self.names)}")
        print(f"  Imports: {len(self.imports)}")
        print(f"  Exports: {len(self.exports)}")

    def _export(self, index: int) -> ExportEntry:
        if not 0 <= index < len(self.exports):
            raise InvalidHeaderError(
                f"Export index {index} outside export table of {len(self.exports)} entries"
            )
        return self.exports[index]

    def _import(self, index: int) -> ImportEntry:
        if not 0 <= index < len(self.imports):
            raise InvalidHeaderError(
                f"Import index {index} outside import table of {len(self.imports)} entries"
            )
        return self.imports[index]


@dataclass
class LoadContext:
    """Stream to parse and the target the result is loaded into."""
    reader: BinaryReader
    target: Optional[AssetTarget]


@dataclass(frozen=True)
class LoadResult:
    header: PackageHeader
    texture_exports: List[int]
    texture_names: List[str]


def read_package(reader: BinaryReader) -> Package:
    """Parse header, names, exports and imports, in that order.

    Raises:
        InvalidHeaderError: bad signature/version or any broken table
        AllocationError: a table could not be held in memory
    """
    header = read_header(reader)
    if not check_header(header):
        raise InvalidHeaderError(
            f"Invalid package header: signature {header.signature:#010x}, "
            f"version {header.version}"
        )

    try:
        names = read_name_table(reader, header)
        exports = read_export_table(reader, header)
        imports = read_import_table(reader, header)
    except MemoryError as e:
        raise AllocationError(f"Could not allocate package tables: {e}") from e

    return Package(header=header, names=names, exports=exports, imports=imports, reader=reader)


def load_package(ctx: LoadContext) -> LoadResult:
    """Parse a package and finalize the context's target.

    The parsed tables do not outlive this call; the texture exports found
    are returned instead.
    """
    if ctx.target is None:
        raise IllegalOperationError("No target to load the package into")

    package = read_package(ctx.reader)
    texture_exports = package.texture_exports()
    result = LoadResult(
        header=package.header,
        texture_exports=texture_exports,
        texture_names=[package.export_name(i) for i in texture_exports],
    )
    del package

    ctx.target.finalize()
    return result


def load_utx_file(fp: BinaryIO, target: Optional[AssetTarget]) -> LoadResult:
    """Load from an already-open file, restoring its position afterwards."""
    first_pos = fp.tell()
    try:
        return load_package(LoadContext(BinaryReader(fp), target))
    finally:
        fp.seek(first_pos)


def load_utx(filepath: str, target: Optional[AssetTarget]) -> LoadResult:
    """Load a package file into `target`."""
    try:
        fp = open(filepath, "rb")
    except OSError as e:
        raise CouldNotOpenError(f"Could not open {filepath}: {e}") from e
    with fp:
        return load_utx_file(fp, target)


def load_utx_bytes(data: bytes, target: Optional[AssetTarget]) -> LoadResult:
    """Load from an in-memory package."""
    return load_package(LoadContext(BinaryReader(data), target))


def open_package(filepath: str) -> Package:
    """Read a whole package file and parse its tables.

    The returned package stays attached to an in-memory copy of the file,
    so export data can be read from it.
    """
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as e:
        raise CouldNotOpenError(f"Could not open {filepath}: {e}") from e
    return read_package(BinaryReader(data))
