from __future__ import annotations

import asyncio

import pytest

from xliff_fixer.utils.file_utils import (
    FileRejectedError,
    check_upload,
    decode_content,
    fixed_file_name,
    human_size,
    load_upload,
    read_file,
    write_fixed,
)


@pytest.mark.parametrize("name", ["a.xlf", "a.xliff", "a.xml", "A.XLIFF"])
def test_allowed_extensions(name):
    check_upload(name, 10)


def test_too_large():
    with pytest.raises(FileRejectedError, match=r"File too large: 6\.00MB\. Max is 5MB\."):
        check_upload("a.xlf", 6 * 1024 * 1024)


def test_limit_is_inclusive():
    check_upload("a.xlf", 5 * 1024 * 1024)


def test_bad_extension():
    with pytest.raises(FileRejectedError, match=r"Invalid file type: \.txt\. Allowed: \.xlf, \.xliff, \.xml"):
        check_upload("notes.txt", 10)


def test_decode_utf8_with_bom():
    assert decode_content("\ufeff<a>é</a>".encode("utf-8")) == "<a>é</a>"


def test_decode_falls_back_to_latin1():
    assert decode_content("<a>é</a>".encode("latin-1")) == "<a>é</a>"


def test_load_upload():
    data = load_upload("x.xlf", b"<a/>")
    assert (data.name, data.content, data.size) == ("x.xlf", "<a/>", 4)


def test_read_file(tmp_path):
    path = tmp_path / "doc.xliff"
    path.write_bytes(b"<a>&</a>")
    data = read_file(path)
    assert data.name == "doc.xliff"
    assert data.content == "<a>&</a>"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "nope.xlf")


def test_write_fixed(tmp_path):
    out = tmp_path / "fixed_doc.xlf"
    asyncio.run(write_fixed("<a>é</a>", out))
    assert out.read_text(encoding="utf-8") == "<a>é</a>"


def test_names_and_sizes():
    assert fixed_file_name("dir/doc.xlf") == "fixed_doc.xlf"
    assert human_size(2048) == "2.0KB"
