from typing import Optional, Tuple

import numpy as np
from PIL import Image

from sprcracker.spr.frame import Frame, FrameType
from sprcracker.spr.palette import palette_rgb

MODES = {
    FrameType.INDEXED: 'P',
    FrameType.DIRECT_COLOR: 'RGBA',
}


def frame_pixels(frame: Frame) -> np.ndarray:
    """Frame data as array of rows.

    Row count is derived from the data, declared height may be wrong
    on frames decoded with legacy height.
    """
    bpp = frame.type.bytes_per_pixel
    npp = np.frombuffer(frame.data, dtype=np.uint8)
    shape: Tuple[int, ...] = (-1, frame.width) if bpp == 1 else (-1, frame.width, bpp)
    return npp.reshape(shape)


def convert_to_pil_image(
    frame: Frame, palette: bytes, transparency: Optional[int] = None
) -> Image.Image:
    mode = MODES[frame.type]
    if not frame.size:
        im = Image.new(mode, (frame.width, 0))
    else:
        npp = frame_pixels(frame)
        height, width = npp.shape[:2]
        im = Image.frombytes(mode, (width, height), npp.tobytes())
    if frame.type == FrameType.INDEXED:
        im.putpalette(palette_rgb(palette))
        if transparency is not None:
            im.info['transparency'] = transparency
    return im
