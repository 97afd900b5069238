import struct
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple

from sprcracker.codex.rle import MissingRunLength, decode_zero_rle
from sprcracker.kernel.buffer import UnexpectedBufferSize
from sprcracker.kernel.cursor import ByteCursor
from sprcracker.kernel.structured import StructuredTuple

from .errors import CorruptFrameData, TruncatedFrameData
from .settings import _DecodeSetting


class FrameType(Enum):
    INDEXED = 'indexed'
    DIRECT_COLOR = 'direct color'

    @property
    def bytes_per_pixel(self) -> int:
        return 4 if self is FrameType.DIRECT_COLOR else 1


@dataclass(frozen=True)
class Frame:
    type: FrameType
    width: int
    height: int
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


class FrameHeader(NamedTuple):
    width: int
    height: int


class CompressedFrameHeader(NamedTuple):
    width: int
    height: int
    size: int


FRAME_HEADER = StructuredTuple(('width', 'height'), struct.Struct('<2H'), FrameHeader)
COMPRESSED_FRAME_HEADER = StructuredTuple(
    ('width', 'height', 'size'), struct.Struct('<3H'), CompressedFrameHeader
)


@contextmanager
def truncation_context(index: int, frame_type: FrameType) -> Iterator[None]:
    try:
        yield
    except UnexpectedBufferSize as exc:
        raise TruncatedFrameData(index, frame_type, exc.expected, exc.given) from exc


def decompress(index: int, data: bytes, expected: int) -> bytes:
    try:
        output = decode_zero_rle(data)
    except MissingRunLength as exc:
        raise CorruptFrameData(index, str(exc)) from exc
    if len(output) != expected:
        raise CorruptFrameData(
            index, f'decodes to {len(output)} bytes, expected {expected}'
        )
    return output


def read_indexed_frame(cfg: _DecodeSetting, cursor: ByteCursor, index: int) -> Frame:
    with truncation_context(index, FrameType.INDEXED):
        if cfg.compressed_indexed:
            cheader = cursor.unpack(COMPRESSED_FRAME_HEADER)
            width, height = cheader.width, cheader.height
            data = decompress(index, cursor.read(cheader.size), width * height)
        else:
            width, height = cursor.unpack(FRAME_HEADER)
            data = cursor.read(width * height)
    return Frame(FrameType.INDEXED, width, height, data)


def read_direct_color_frame(
    cfg: _DecodeSetting, cursor: ByteCursor, index: int
) -> Frame:
    with truncation_context(index, FrameType.DIRECT_COLOR):
        width, height = cursor.unpack(FRAME_HEADER)
        data = cursor.read(width * height * FrameType.DIRECT_COLOR.bytes_per_pixel)
    if cfg.legacy_rgba_height:
        height = width
    return Frame(FrameType.DIRECT_COLOR, width, height, data)


def read_indexed_frames(
    cfg: _DecodeSetting, cursor: ByteCursor, count: int
) -> Iterator[Frame]:
    for idx in range(count):
        yield read_indexed_frame(cfg, cursor, idx)


def read_direct_color_frames(
    cfg: _DecodeSetting, cursor: ByteCursor, count: int
) -> Iterator[Frame]:
    for idx in range(count):
        yield read_direct_color_frame(cfg, cursor, idx)
