import struct
from dataclasses import dataclass
from typing import NamedTuple

from sprcracker.kernel.buffer import UnexpectedBufferSize
from sprcracker.kernel.cursor import ByteCursor
from sprcracker.kernel.structured import StructuredTuple

from .errors import InvalidHeader, InvalidSignature, InvalidVersion

HEADER_SIGNATURE = b'SP'


class Version(NamedTuple):
    major: int
    minor: int

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}'


# frame counts for RGBA frames are only stored after this version
RGBA_COUNT_VERSION = Version(1, 1)
MIN_SUPPORTED_VERSION = Version(2, 1)


class _Signature(NamedTuple):
    signature: bytes


class _RawVersion(NamedTuple):
    minor: int
    major: int


class _Count(NamedTuple):
    count: int


SIGNATURE = StructuredTuple(('signature',), struct.Struct('<2s'), _Signature)
VERSION = StructuredTuple(('minor', 'major'), struct.Struct('<2B'), _RawVersion)
FRAME_COUNT = StructuredTuple(('count',), struct.Struct('<H'), _Count)


@dataclass(frozen=True)
class SpriteHeader:
    signature: str
    version: Version
    indexed_frame_count: int
    direct_color_frame_count: int = 0

    @property
    def direct_color_start_index(self) -> int:
        return self.indexed_frame_count

    @property
    def frame_count(self) -> int:
        return self.indexed_frame_count + self.direct_color_frame_count

    @property
    def size(self) -> int:
        counts = 2 if has_direct_color_count(self.version) else 1
        return SIGNATURE.size + VERSION.size + counts * FRAME_COUNT.size


def has_direct_color_count(version: Version) -> bool:
    return version > RGBA_COUNT_VERSION


def is_supported(version: Version) -> bool:
    return version >= MIN_SUPPORTED_VERSION


def read_signature(cursor: ByteCursor) -> str:
    try:
        signature = cursor.unpack(SIGNATURE).signature
    except UnexpectedBufferSize as exc:
        raise InvalidSignature(bytes(exc.buffer)) from exc
    if signature != HEADER_SIGNATURE:
        raise InvalidSignature(signature)
    return signature.decode('ascii')


def read_version(cursor: ByteCursor) -> Version:
    try:
        raw = cursor.unpack(VERSION)
    except UnexpectedBufferSize as exc:
        raise InvalidVersion(f'could not read version: {exc}') from exc
    return Version(major=raw.major, minor=raw.minor)


def read_frame_count(cursor: ByteCursor, name: str) -> int:
    try:
        return cursor.unpack(FRAME_COUNT).count
    except UnexpectedBufferSize as exc:
        raise InvalidHeader(f'could not read {name} frame count: {exc}') from exc


def read_header(cursor: ByteCursor) -> SpriteHeader:
    """Read sprite header from cursor positioned at start of file.

    Direct color frame count is only present on version above 1.1,
    otherwise it is left as zero and nothing is consumed for it.
    """
    signature = read_signature(cursor)
    version = read_version(cursor)
    indexed_frame_count = read_frame_count(cursor, 'indexed')
    direct_color_frame_count = (
        read_frame_count(cursor, 'direct color')
        if has_direct_color_count(version)
        else 0
    )
    return SpriteHeader(
        signature=signature,
        version=version,
        indexed_frame_count=indexed_frame_count,
        direct_color_frame_count=direct_color_frame_count,
    )
