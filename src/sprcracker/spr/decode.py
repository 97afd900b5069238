from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from sprcracker.kernel.buffer import BufferLike
from sprcracker.kernel.cursor import ByteCursor
from sprcracker.utils.fileio import read_file

from .errors import UnsupportedVersion
from .frame import Frame, read_direct_color_frames, read_indexed_frames
from .header import MIN_SUPPORTED_VERSION, SpriteHeader, is_supported, read_header
from .palette import read_palette
from .settings import _DecodeSetting


@dataclass(frozen=True)
class SpriteFile:
    """Decoded sprite container

    header: sprite header

    palette: 256 RGBA colors taken from the end of the file

    frames: indexed frames followed by direct color frames, in file order
    """

    header: SpriteHeader
    palette: bytes = field(repr=False)
    frames: Tuple[Frame, ...]

    @property
    def indexed_frames(self) -> Sequence[Frame]:
        return self.frames[: self.header.direct_color_start_index]

    @property
    def direct_color_frames(self) -> Sequence[Frame]:
        return self.frames[self.header.direct_color_start_index :]


def notify(cfg: _DecodeSetting, frames: Iterable[Frame]) -> None:
    for slot, frame in enumerate(frames):
        cfg.logger.debug(
            f'{frame.type.value} frame {slot}: '
            f'{frame.width}x{frame.height}, {frame.size} bytes'
        )
        if cfg.observer:
            cfg.observer(slot, frame)


def decode(cfg: _DecodeSetting, data: BufferLike) -> SpriteFile:
    """Decode sprite file from given bytes.

    Raises SpriteDecodeError subclass on the first failure,
    partial results are never returned.
    """
    cursor = ByteCursor(data)

    header = read_header(cursor)
    if not is_supported(header.version):
        raise UnsupportedVersion(header.version, MIN_SUPPORTED_VERSION)
    cfg.logger.debug(
        f'sprite v{header.version}: {header.indexed_frame_count} indexed, '
        f'{header.direct_color_frame_count} direct color frames'
    )

    palette = read_palette(cfg, cursor)

    frames = (
        *read_indexed_frames(cfg, cursor, header.indexed_frame_count),
        *read_direct_color_frames(cfg, cursor, header.direct_color_frame_count),
    )
    notify(cfg, frames)

    return SpriteFile(header, palette, frames)


def from_path(cfg: _DecodeSetting, path: str) -> SpriteFile:
    return decode(cfg, read_file(path))
