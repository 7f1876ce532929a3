import sys
from typing import BinaryIO

from .errors import InvalidInput

NEWLINE = 0x0A


def read_content(stream: BinaryIO) -> bytes:
    """Read stream to the end, dropping newlines.

    Only printable ASCII is accepted: any other byte, carriage returns and
    tabs included, raises InvalidInput.
    """
    result = bytearray()
    for b in stream.read():
        if b == NEWLINE:
            continue
        if b > 0x7F:
            raise InvalidInput('Standard input contains non ascii chars')
        if b < 0x20 or b == 0x7F:
            raise InvalidInput('Standard input contains ascii control chars')
        result.append(b)
    return bytes(result)


def read_stdin() -> bytes:
    return read_content(sys.stdin.buffer)
