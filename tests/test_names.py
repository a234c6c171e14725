"""Tests for name decoding and the name table."""

import struct

import pytest

from utx.errors import InvalidHeaderError, NameTooLongError, UnexpectedEOF
from utx.header import PackageHeader
from utx.names import NameEntry, NameTable, read_name, read_name_table
from utx.reader import BinaryReader

OLD = 61
NEW = 69


def header_for(version, count, offset=0):
    return PackageHeader(
        signature=0x9E2A83C1, version=version, license_mode=0, flags=0,
        name_count=count, name_offset=offset, export_count=0, export_offset=0,
        import_count=0, import_offset=0,
    )


# Old style (zero terminated)

def test_old_style_keeps_terminator():
    r = BinaryReader(b"abc\x00unrelated")
    assert read_name(r, OLD) == b"abc\x00"
    assert r.tell() == 4


def test_old_style_too_long():
    r = BinaryReader(b"a" * 256 + b"\x00")
    with pytest.raises(NameTooLongError):
        read_name(r, OLD)


def test_old_style_longest_name_fits():
    r = BinaryReader(b"a" * 255 + b"\x00")
    assert read_name(r, OLD) == b"a" * 255 + b"\x00"


def test_old_style_stops_at_end_of_stream():
    r = BinaryReader(b"ab")
    assert read_name(r, OLD) == b"ab"
    assert r.at_end()


def test_old_style_version_63():
    r = BinaryReader(b"x\x00")
    assert read_name(r, 63) == b"x\x00"


# New style (length prefixed)

def test_new_style_reads_exact_length():
    r = BinaryReader(b"\x03xy\x00rest")
    assert read_name(r, NEW) == b"xy\x00"
    assert r.tell() == 4


def test_new_style_ignores_content():
    r = BinaryReader(b"\x03\x00\x00z")
    assert read_name(r, 64) == b"\x00\x00z"


def test_new_style_truncated():
    r = BinaryReader(b"\x05ab")
    with pytest.raises(UnexpectedEOF):
        read_name(r, NEW)


# NameEntry / NameTable

def test_entry_text_stops_at_terminator():
    assert NameEntry(b"Texture\x00").text == "Texture"
    assert NameEntry(b"abc").text == "abc"
    assert NameEntry(b"a\x00junk").text == "a"


def test_lookup_is_bounds_checked():
    table = NameTable([NameEntry(b"None\x00"), NameEntry(b"Texture\x00")])
    assert table.lookup(1).text == "Texture"
    with pytest.raises(InvalidHeaderError, match="outside name table"):
        table.lookup(2)
    with pytest.raises(InvalidHeaderError):
        table.lookup(-1)


def test_find():
    table = NameTable([NameEntry(b"None\x00"), NameEntry(b"Texture\x00")])
    assert table.find("Texture") == 1
    assert table.find("Palette") == -1


# Whole table

def test_read_table_new_style():
    data = (
        b"\x05None\x00" + struct.pack("<I", 0x00070010)
        + b"\x08Texture\x00" + struct.pack("<I", 0x00070004)
    )
    table = read_name_table(BinaryReader(data), header_for(NEW, 2))
    assert len(table) == 2
    assert table.texts() == ["None", "Texture"]
    assert table[0].flags == 0x00070010
    assert table[1].raw == b"Texture\x00"


def test_read_table_seeks_to_offset():
    data = b"\xff" * 10 + b"Core\x00" + struct.pack("<I", 7)
    table = read_name_table(BinaryReader(data), header_for(OLD, 1, offset=10))
    assert table.texts() == ["Core"]
    assert table[0].flags == 7


def test_read_table_failure_returns_nothing():
    # Two good entries, the third runs off the end
    data = (
        b"\x02a\x00" + struct.pack("<I", 0)
        + b"\x02b\x00" + struct.pack("<I", 0)
        + b"\x09c"
    )
    with pytest.raises(InvalidHeaderError, match="entry 2"):
        read_name_table(BinaryReader(data), header_for(NEW, 3))


def test_read_table_unterminated_old_name():
    data = b"ok\x00" + struct.pack("<I", 0) + b"z" * 300
    with pytest.raises(InvalidHeaderError, match="entry 1") as excinfo:
        read_name_table(BinaryReader(data), header_for(OLD, 2))
    assert isinstance(excinfo.value.__cause__, NameTooLongError)


def test_read_table_missing_flags():
    data = b"\x02a\x00\x01\x00"
    with pytest.raises(InvalidHeaderError):
        read_name_table(BinaryReader(data), header_for(NEW, 1))


def test_empty_table():
    table = read_name_table(BinaryReader(b""), header_for(NEW, 0))
    assert len(table) == 0


def test_indexing_does_not_wrap():
    table = NameTable([NameEntry(b"None\x00"), NameEntry(b"Texture\x00")])
    assert table[1].text == "Texture"
    with pytest.raises(InvalidHeaderError, match="Name index -1"):
        table[-1]


class SizeCountingReader(BinaryReader):
    def __init__(self, source):
        super().__init__(source)
        self.size_calls = 0

    def size(self) -> int:
        self.size_calls += 1
        return super().size()


def test_old_style_measures_stream_once():
    r = SizeCountingReader(b"a" * 200 + b"\x00")
    assert read_name(r, OLD) == b"a" * 200 + b"\x00"
    assert r.size_calls == 1
