from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .frame import FrameType
    from .header import Version


class SpriteDecodeError(ValueError):
    pass


class InvalidHeader(SpriteDecodeError):
    pass


class InvalidSignature(InvalidHeader):
    def __init__(self, signature: bytes) -> None:
        super().__init__(f'invalid signature: {signature!r}')
        self.signature = signature


class InvalidVersion(InvalidHeader):
    pass


class UnsupportedVersion(InvalidHeader):
    def __init__(self, version: 'Version', minimum: 'Version') -> None:
        super().__init__(f'unsupported version {version}, expected at least {minimum}')
        self.version = version
        self.minimum = minimum


class TruncatedFrameData(SpriteDecodeError, EOFError):
    def __init__(
        self, index: int, frame_type: 'FrameType', expected: int, available: int
    ) -> None:
        super().__init__(
            f'could not read {frame_type.value} frame {index}: '
            f'expected {expected} bytes but only {available} available'
        )
        self.index = index
        self.frame_type = frame_type
        self.expected = expected
        self.available = available


class CorruptFrameData(SpriteDecodeError):
    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f'corrupt compressed frame {index}: {reason}')
        self.index = index
        self.reason = reason


class PaletteReadError(SpriteDecodeError, EOFError):
    def __init__(self, expected: int, available: int) -> None:
        super().__init__(
            f'could not read palette: expected {expected} bytes '
            f'but file has only {available}'
        )
        self.expected = expected
        self.available = available
