from typing import TypeVar

import deal

from .buffer import BufferLike, UnexpectedBufferSize
from .structured import Structured

T_Struct = TypeVar('T_Struct')


class NegativeSkipError(ValueError):
    def __init__(self, offset: int, size: int) -> None:
        super().__init__(
            f'Expected non-negative skip size, got offset={offset} size={size}',
        )
        self.offset = offset
        self.size = size


class ByteCursor(object):
    """Forward-only read position over an immutable buffer.

    Reads either return exactly the requested amount of bytes or raise
    UnexpectedBufferSize, leaving the position unchanged.
    """

    def __init__(self, buffer: BufferLike, offset: int = 0) -> None:
        if not 0 <= offset <= len(buffer):
            raise UnexpectedBufferSize(offset, len(buffer), buffer)
        self._buffer = memoryview(buffer).toreadonly()
        self._pos = offset

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f'ByteCursor[{self._pos}/{len(self._buffer)}]'

    @property
    def buffer(self) -> memoryview:
        return self._buffer

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._pos

    def tell(self) -> int:
        return self._pos

    def view(self) -> 'ByteCursor':
        """Independent cursor over the same buffer, starting at offset 0."""
        return ByteCursor(self._buffer)

    def skip(self, size: int) -> int:
        if size < 0:
            raise NegativeSkipError(self._pos, size)
        if size > self.remaining:
            raise UnexpectedBufferSize(size, self.remaining, self._buffer)
        self._pos += size
        return self._pos

    def read(self, size: int) -> bytes:
        data = bytes(read_exact(self._buffer, self._pos, size))
        self._pos += size
        return data

    def unpack(self, structured: Structured[T_Struct]) -> T_Struct:
        return structured.unpack(self)


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.pre(lambda _: 0 <= _.offset <= len(_.buffer)),
    deal.ensure(lambda _: len(_.result) == _.size),
    deal.raises(UnexpectedBufferSize),
    deal.reason(UnexpectedBufferSize, lambda _: _.offset + _.size > len(_.buffer)),
    deal.has(),
)
def read_exact(buffer: BufferLike, offset: int, size: int) -> BufferLike:
    """Read exactly size bytes from offset, report available size on shortage."""
    chunk = buffer[offset : offset + size]
    if len(chunk) != size:
        raise UnexpectedBufferSize(size, len(chunk), chunk)
    return chunk
