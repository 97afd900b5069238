import logging

import pytest

from sprcracker.kernel.cursor import ByteCursor
from sprcracker.spr.errors import PaletteReadError
from sprcracker.spr.palette import PALETTE_SIZE, palette_colors, palette_rgb, read_palette
from sprcracker.spr.preset import spr


def test_palette_from_tail(palette):
    data = b'\x00' * 100 + palette
    cursor = ByteCursor(data)
    cursor.read(8)
    assert read_palette(spr, cursor) == palette
    assert cursor.tell() == 8


def test_palette_whole_file(palette):
    assert read_palette(spr, ByteCursor(palette)) == palette


def test_palette_too_short():
    with pytest.raises(PaletteReadError) as exc:
        read_palette(spr, ByteCursor(bytes(100)))
    assert exc.value.expected == PALETTE_SIZE
    assert exc.value.available == 100


def test_palette_lenient(caplog):
    cfg = spr(strict_palette=False)
    with caplog.at_level(logging.WARNING, logger='sprcracker'):
        palette = read_palette(cfg, ByteCursor(bytes(range(100))))
    assert palette == bytes(PALETTE_SIZE)
    assert 'could not read palette' in caplog.text


def test_palette_colors(palette):
    colors = palette_colors(palette)
    assert len(colors) == 256
    assert colors[0] == (0, 1, 2, 3)
    assert colors[-1] == (252, 253, 254, 255)


def test_palette_rgb(palette):
    rgb = palette_rgb(palette)
    assert len(rgb) == 256 * 3
    assert list(rgb[:6]) == [0, 1, 2, 4, 5, 6]
