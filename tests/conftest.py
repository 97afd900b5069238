import struct
from typing import Any, Callable, Iterable, Optional

import pytest

PALETTE = bytes(range(256)) * 4


def pack_header(
    minor: int = 1,
    major: int = 2,
    indexed: int = 0,
    direct: int = 0,
    signature: bytes = b'SP',
) -> bytes:
    header = struct.pack('<2s2BH', signature, minor, major, indexed)
    if (major, minor) > (1, 1):
        header += struct.pack('<H', direct)
    return header


def pack_frame(width: int, height: int, data: Optional[bytes] = None, bpp: int = 1) -> bytes:
    if data is None:
        data = bytes(idx % 256 for idx in range(width * height * bpp))
    return struct.pack('<2H', width, height) + data


@pytest.fixture
def palette() -> bytes:
    return PALETTE


@pytest.fixture
def header() -> Callable[..., bytes]:
    return pack_header


@pytest.fixture
def frame() -> Callable[..., bytes]:
    return pack_frame


@pytest.fixture
def sprite() -> Callable[..., bytes]:
    def build(
        indexed: Iterable[bytes] = (),
        direct: Iterable[bytes] = (),
        palette: bytes = PALETTE,
        **header_fields: Any,
    ) -> bytes:
        indexed = list(indexed)
        direct = list(direct)
        header_fields.setdefault('indexed', len(indexed))
        header_fields.setdefault('direct', len(direct))
        return pack_header(**header_fields) + b''.join(indexed + direct) + palette

    return build
