"""
UTX Package Utilities

Structural reader for Unreal / Unreal Tournament texture packages:
header, name table, export table and import table.
"""

from .compact import decode_compact, encode_compact
from .errors import (
    AllocationError,
    CouldNotOpenError,
    FinalizeError,
    IllegalOperationError,
    InvalidHeaderError,
    NameTooLongError,
    PackageError,
    UnexpectedEOF,
)
from .header import PackageHeader, check_header, read_header
from .names import NameEntry, NameTable, read_name, read_name_table
from .package import (
    LoadContext,
    LoadResult,
    Package,
    load_package,
    load_utx,
    load_utx_bytes,
    load_utx_file,
    open_package,
    read_package,
)
from .reader import BinaryReader
from .references import ObjectRef, resolve_reference
from .target import ImageTarget

__all__ = [
    'AllocationError',
    'BinaryReader',
    'CouldNotOpenError',
    'FinalizeError',
    'IllegalOperationError',
    'ImageTarget',
    'InvalidHeaderError',
    'LoadContext',
    'LoadResult',
    'NameEntry',
    'NameTable',
    'NameTooLongError',
    'ObjectRef',
    'Package',
    'PackageError',
    'PackageHeader',
    'UnexpectedEOF',
    'check_header',
    'decode_compact',
    'encode_compact',
    'load_package',
    'load_utx',
    'load_utx_bytes',
    'load_utx_file',
    'open_package',
    'read_header',
    'read_name',
    'read_name_table',
    'read_package',
    'resolve_reference',
]
