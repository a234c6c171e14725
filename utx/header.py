"""
UTX package header.

The header is a fixed 36-byte little-endian block at the start of the
package, described here as a construct Struct.
"""

from dataclasses import dataclass

from construct import ConstructError, Int16ul, Int32ul, Struct

from . import config
from .errors import InvalidHeaderError, UnexpectedEOF
from .reader import BinaryReader

HEADER_STRUCT = Struct(
    "signature" / Int32ul,
    "version" / Int16ul,
    "license_mode" / Int16ul,
    "flags" / Int32ul,
    "name_count" / Int32ul,
    "name_offset" / Int32ul,
    "export_count" / Int32ul,
    "export_offset" / Int32ul,
    "import_count" / Int32ul,
    "import_offset" / Int32ul,
)


@dataclass(frozen=True)
class PackageHeader:
    signature: int
    version: int
    license_mode: int
    flags: int
    name_count: int
    name_offset: int
    export_count: int
    export_offset: int
    import_count: int
    import_offset: int

    @property
    def uses_length_prefixed_names(self) -> bool:
        return self.version >= config.LENGTH_PREFIXED_NAME_VERSION

    @property
    def generation(self) -> str:
        """Engine generation the version belongs to."""
        return "tournament" if self.uses_length_prefixed_names else "unreal"


def read_header(reader: BinaryReader) -> PackageHeader:
    """Read the 36-byte header at the current position.

    Does not validate the values; see check_header.
    """
    try:
        parsed = HEADER_STRUCT.parse(reader.read_bytes(config.HEADER_SIZE))
    except (UnexpectedEOF, ConstructError) as e:
        raise InvalidHeaderError(f"Truncated package header: {e}") from e
    return PackageHeader(
        signature=parsed.signature,
        version=parsed.version,
        license_mode=parsed.license_mode,
        flags=parsed.flags,
        name_count=parsed.name_count,
        name_offset=parsed.name_offset,
        export_count=parsed.export_count,
        export_offset=parsed.export_offset,
        import_count=parsed.import_count,
        import_offset=parsed.import_offset,
    )


def check_header(header: PackageHeader) -> bool:
    if header.signature != config.PACKAGE_SIGNATURE:
        return False
    return config.MIN_VERSION <= header.version <= config.MAX_VERSION


def build_header(header: PackageHeader) -> bytes:
    """Serialize a header back to its 36-byte on-disk form."""
    return HEADER_STRUCT.build(dict(
        signature=header.signature,
        version=header.version,
        license_mode=header.license_mode,
        flags=header.flags,
        name_count=header.name_count,
        name_offset=header.name_offset,
        export_count=header.export_count,
        export_offset=header.export_offset,
        import_count=header.import_count,
        import_offset=header.import_offset,
    ))
