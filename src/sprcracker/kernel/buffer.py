from typing import Union

BufferLike = Union[bytes, bytearray, memoryview]


class UnexpectedBufferSize(EOFError):
    def __init__(self, expected: int, given: int, buffer: BufferLike) -> None:
        super().__init__(f'Expected buffer of size {expected} but got size {given}')
        self.expected = expected
        self.given = given
        self.buffer = buffer
