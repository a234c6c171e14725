"""Synthetic package builder shared by the tests."""

import struct

import pytest

from utx.compact import encode_compact
from utx.config import HEADER_SIZE, LENGTH_PREFIXED_NAME_VERSION, PACKAGE_SIGNATURE
from utx.header import PackageHeader, build_header

EXPORT_DEFAULTS = dict(
    class_index=0, super_index=0, group=0, object_name=0,
    object_flags=0, serial_size=0, serial_offset=0,
)
IMPORT_DEFAULTS = dict(class_package=0, class_name=0, package=0, object_name=0)


def encode_name(name, version, flags=0):
    raw = name if isinstance(name, bytes) else name.encode("latin-1") + b"\x00"
    if version >= LENGTH_PREFIXED_NAME_VERSION:
        raw = bytes([len(raw)]) + raw
    return raw + struct.pack("<I", flags)


def encode_export(**fields):
    e = {**EXPORT_DEFAULTS, **fields}
    return (
        encode_compact(e["class_index"])
        + encode_compact(e["super_index"])
        + struct.pack("<I", e["group"])
        + encode_compact(e["object_name"])
        + struct.pack("<I", e["object_flags"])
        + encode_compact(e["serial_size"])
        + encode_compact(e["serial_offset"])
    )


def encode_import(**fields):
    i = {**IMPORT_DEFAULTS, **fields}
    return (
        encode_compact(i["class_package"])
        + encode_compact(i["class_name"])
        + struct.pack("<i", i["package"])
        + encode_compact(i["object_name"])
    )


def build_package(
    names=("None",),
    exports=(),
    imports=(),
    version=69,
    signature=PACKAGE_SIGNATURE,
    order=("names", "exports", "imports"),
    gap=0,
    prefix=b"",
    payload=b"",
    counts=None,
):
    """Build a package image.

    `payload` sits right after the header (offset len(prefix) + HEADER_SIZE), so
    exports can point their serial data at it. `counts` overrides the
    table counts written to the header.
    """
    sections = {
        "names": b"".join(encode_name(n, version) for n in names),
        "exports": b"".join(encode_export(**e) for e in exports),
        "imports": b"".join(encode_import(**i) for i in imports),
    }

    body = bytearray(payload)
    pos = len(prefix) + HEADER_SIZE + len(payload)
    offsets = {}
    for key in order:
        body += b"\xee" * gap
        pos += gap
        offsets[key] = pos
        body += sections[key]
        pos += len(sections[key])

    table_counts = {"names": len(names), "exports": len(exports), "imports": len(imports)}
    table_counts.update(counts or {})

    header = PackageHeader(
        signature=signature,
        version=version,
        license_mode=0,
        flags=0x0001,
        name_count=table_counts["names"],
        name_offset=offsets["names"],
        export_count=table_counts["exports"],
        export_offset=offsets["exports"],
        import_count=table_counts["imports"],
        import_offset=offsets["imports"],
    )
    return prefix + build_header(header) + bytes(body)


class RecordingTarget:
    """Target that only counts finalize calls."""

    def __init__(self):
        self.finalize_calls = 0

    def finalize(self):
        self.finalize_calls += 1


@pytest.fixture
def make_package():
    return build_package


@pytest.fixture
def target():
    return RecordingTarget()
