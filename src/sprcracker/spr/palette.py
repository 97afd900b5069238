from typing import List, Sequence, Tuple

from sprcracker.kernel.buffer import UnexpectedBufferSize
from sprcracker.kernel.cursor import ByteCursor, NegativeSkipError
from sprcracker.utils.funcutils import chunked, flatten

from .errors import PaletteReadError
from .settings import _DecodeSetting

PALETTE_COLORS = 256
PALETTE_SIZE = PALETTE_COLORS * 4

Color = Tuple[int, int, int, int]


def read_palette(cfg: _DecodeSetting, cursor: ByteCursor) -> bytes:
    """Read palette from the last PALETTE_SIZE bytes of the cursor buffer.

    Uses an independent view, position of given cursor is left untouched.
    """
    view = cursor.view()
    try:
        view.skip(len(view) - PALETTE_SIZE - view.tell())
        return view.read(PALETTE_SIZE)
    except (UnexpectedBufferSize, NegativeSkipError) as exc:
        if cfg.strict_palette:
            raise PaletteReadError(PALETTE_SIZE, len(view)) from exc
        cfg.logger.warning(f'could not read palette, using empty palette: {exc}')
        return bytes(PALETTE_SIZE)


def palette_colors(palette: bytes) -> List[Color]:
    # palette_colors(b'\x01\x02\x03\x04...') --> [(1, 2, 3, 4), ...]
    return list(chunked(palette, 4))  # type: ignore


def palette_rgb(palette: bytes) -> Sequence[int]:
    """Flat RGB sequence, as expected by PIL Image.putpalette."""
    return list(flatten(color[:3] for color in palette_colors(palette)))
