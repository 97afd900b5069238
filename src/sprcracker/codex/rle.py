import io

from sprcracker.kernel.buffer import BufferLike


class MissingRunLength(ValueError):
    def __init__(self, offset: int) -> None:
        super().__init__(f'zero run at offset {offset} is missing its length byte')
        self.offset = offset


def decode_zero_rle(data: BufferLike) -> bytes:
    """Expand zero runs in data.

    Non-zero bytes are copied as is, zero byte is followed by run length.
    Run length of 0 expands to a single zero.
    """
    # decode_zero_rle(b'\x05\x00\x03\x07') --> b'\x05\x00\x00\x00\x07'
    data = bytes(data)
    with io.BytesIO() as out:
        pos = 0
        while pos < len(data):
            code = data[pos]
            if code:
                out.write(data[pos : pos + 1])
                pos += 1
                continue
            if pos + 1 >= len(data):
                raise MissingRunLength(pos)
            out.write(bytes(max(data[pos + 1], 1)))
            pos += 2
        return out.getvalue()
