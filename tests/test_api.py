# tests/test_api.py
from __future__ import annotations

import io

import pytest

import unibom


def test_public_names_are_exported():
    for name in unibom.__all__:
        assert hasattr(unibom, name), name


def test_version_is_string():
    assert isinstance(unibom.__version__, str)


def test_detect_utf8_example():
    data = bytes([239, 187, 191, 104, 105])
    assert unibom.detect(io.BytesIO(data)) == "UTF-8"
    assert unibom.detect_bytes(data) is unibom.BOMCharset.UTF_8
    with unibom.bom_reader(io.BytesIO(data)) as reader:
        assert reader.read() == "hi"


def test_write_then_read_csv_like_export(tmp_path):
    path = tmp_path / "export.csv"
    with unibom.bom_writer("UTF-8", path) as writer:
        writer.write("abc,def\r\nghi,jkl\r\n")
    assert unibom.has_utf8_bom(path)
    with unibom.bom_reader(path) as reader:
        assert reader.read() == "abc,def\r\nghi,jkl\r\n"


def test_lookup_round_trip_with_all_boms():
    for bom in unibom.all_boms():
        assert unibom.lookup(bom.charset) is bom
        assert unibom.lookup(bom.charset.value) is bom
        assert unibom.match_bom(bom.signature) is bom


def test_unsupported_charset_error_exported():
    with pytest.raises(unibom.UnsupportedCharsetError) as excinfo:
        unibom.bom_writer("bogus-charset", io.BytesIO())
    assert excinfo.value.supported == unibom.supported_charsets()
