import struct
from typing import NamedTuple

import pytest

from sprcracker.kernel.buffer import UnexpectedBufferSize
from sprcracker.kernel.cursor import ByteCursor, NegativeSkipError, read_exact
from sprcracker.kernel.structured import StructuredTuple


class Pair(NamedTuple):
    first: int
    second: int


PAIR = StructuredTuple(('first', 'second'), struct.Struct('<HB'), Pair)


def test_read_exact():
    assert bytes(read_exact(b'abcdef', 2, 3)) == b'cde'


def test_read_exact_short():
    with pytest.raises(UnexpectedBufferSize) as exc:
        read_exact(b'abcdef', 4, 3)
    assert (exc.value.expected, exc.value.given) == (3, 2)


def test_read_advances():
    cursor = ByteCursor(b'\x01\x02\x03\x04')
    assert cursor.read(3) == b'\x01\x02\x03'
    assert cursor.tell() == 3
    assert cursor.remaining == 1


def test_short_read_keeps_position():
    cursor = ByteCursor(b'\x01\x02\x03\x04')
    cursor.read(1)
    with pytest.raises(UnexpectedBufferSize) as exc:
        cursor.read(10)
    assert exc.value.expected == 10
    assert exc.value.given == 3
    assert cursor.tell() == 1


def test_read_returns_copy():
    data = bytearray(b'abc')
    cursor = ByteCursor(data)
    chunk = cursor.read(3)
    assert isinstance(chunk, bytes)
    assert chunk == b'abc'


def test_skip():
    cursor = ByteCursor(bytes(10))
    assert cursor.skip(4) == 4
    assert cursor.skip(0) == 4
    with pytest.raises(UnexpectedBufferSize):
        cursor.skip(7)
    assert cursor.tell() == 4


def test_skip_negative():
    cursor = ByteCursor(bytes(10), offset=5)
    with pytest.raises(NegativeSkipError):
        cursor.skip(-1)


def test_view_is_independent():
    cursor = ByteCursor(b'abcdef')
    cursor.read(4)
    view = cursor.view()
    assert view.tell() == 0
    assert view.read(2) == b'ab'
    assert cursor.tell() == 4
    assert len(view) == len(cursor) == 6


def test_unpack_structured():
    cursor = ByteCursor(b'\x34\x12\x07\xff')
    assert cursor.unpack(PAIR) == Pair(0x1234, 7)
    assert cursor.tell() == PAIR.size == 3


def test_unpack_short():
    cursor = ByteCursor(b'\x34\x12')
    with pytest.raises(UnexpectedBufferSize):
        cursor.unpack(PAIR)
    assert cursor.tell() == 0


def test_offset_out_of_range():
    with pytest.raises(UnexpectedBufferSize):
        ByteCursor(b'abc', offset=4)
