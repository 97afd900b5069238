import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .frame import Frame

FrameObserver = Callable[[int, 'Frame'], None]


@dataclass(frozen=True)
class _DecodeSetting(object):
    """Setting for decoding sprite files

    strict_palette: bool (default True) -
        raise PaletteReadError when the palette cannot be read,
        otherwise log warning and use zero-filled palette.

    compressed_indexed: bool (default False) -
        indexed frames carry a compressed size and zero-run RLE payload.

    legacy_rgba_height: bool (default False) -
        store decoded width as height of direct color frames,
        for consumers relying on the old behavior.

    observer: called with (slot, frame) for every decoded frame

    logger: receives decode diagnostics
    """

    strict_palette: bool = True
    compressed_indexed: bool = False
    legacy_rgba_height: bool = False
    observer: Optional[FrameObserver] = None
    logger: logging.Logger = logging.getLogger('sprcracker')
