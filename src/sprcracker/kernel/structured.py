import struct
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, Sequence, TypeVar, cast

from .buffer import BufferLike

T_Struct = TypeVar('T_Struct')


class Readable(Protocol):
    def read(self, size: int) -> BufferLike:
        ...


class Structured(Protocol[T_Struct]):
    @property
    def size(self) -> int:
        ...

    def unpack(self, stream: Readable) -> T_Struct:
        ...

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        ...

    def pack(self, data: T_Struct) -> bytes:
        ...


@dataclass(frozen=True)
class StructuredTuple(Structured, Generic[T_Struct]):
    """Fixed size binary record bound to a named factory

    _fields: names passed to factory, in structure order

    _structure: binary layout of the record

    _factory: callable building the record from keyword arguments
    """

    _fields: Sequence[str]
    _structure: struct.Struct
    _factory: Callable[..., T_Struct]

    @property
    def size(self) -> int:
        return self._structure.size

    def unpack(self, stream: Readable) -> T_Struct:
        return self.unpack_from(stream.read(self._structure.size))

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        factory = cast(Callable[..., T_Struct], self._factory)
        values = self._structure.unpack_from(data, offset)
        return factory(**dict(zip(self._fields, values)))

    def pack(self, data: T_Struct) -> bytes:
        return self._structure.pack(*[getattr(data, field) for field in self._fields])
