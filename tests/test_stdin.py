"""Tests for input validation."""

import io

import pytest

from multiqr.core.errors import InvalidInput
from multiqr.core.stdin import read_content


def test_newlines_are_dropped():
    assert read_content(io.BytesIO(b"HELLO\nWORLD\n")) == b"HELLOWORLD"


def test_printable_ascii_kept():
    data = bytes(range(0x20, 0x7F))
    assert read_content(io.BytesIO(data)) == data


def test_only_newlines_gives_empty_content():
    assert read_content(io.BytesIO(b"\n\n")) == b""


@pytest.mark.parametrize("data", [b"caf\xc3\xa9", b"\x80", b"abc\xff"])
def test_non_ascii_rejected(data):
    with pytest.raises(InvalidInput, match="non ascii"):
        read_content(io.BytesIO(data))


@pytest.mark.parametrize("data", [b"a\tb", b"line\r\n", b"\x00", b"del\x7f"])
def test_control_chars_rejected(data):
    with pytest.raises(InvalidInput, match="control"):
        read_content(io.BytesIO(data))
