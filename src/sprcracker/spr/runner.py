import glob
import logging
import os
from typing import Iterable, List, Set

import typer

from sprcracker.graphics.image import convert_to_pil_image
from sprcracker.spr.preset import spr
from sprcracker.utils.funcutils import flatten

app = typer.Typer()


def get_files(globs: Iterable[str]) -> Set[str]:
    return set(flatten(glob.iglob(fname) for fname in globs))


@app.command('map')
def map_frames(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    compressed: bool = typer.Option(
        False, '--compressed', help='Indexed frames are RLE compressed'
    ),
) -> None:
    cfg = spr(compressed_indexed=compressed)
    for filename in sorted(get_files(files)):
        basename = os.path.basename(filename)
        print(f'Mapping file: {basename}')
        sprite = cfg.from_path(filename)
        header = sprite.header
        print(
            f'version {header.version}, {header.indexed_frame_count} indexed, '
            f'{header.direct_color_frame_count} direct color'
        )
        for idx, frame in enumerate(sprite.frames):
            print(f'{idx:5d} {frame.type.value:12s} {frame.width}x{frame.height}')


@app.command('decode')
def decode(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    target_dir: str = typer.Option('out', '--target', '-t', help='Target directory'),
    compressed: bool = typer.Option(
        False, '--compressed', help='Indexed frames are RLE compressed'
    ),
    lenient_palette: bool = typer.Option(
        False, '--lenient-palette', help='Use empty palette when missing'
    ),
    transparency: int = typer.Option(
        0, '--transparency', help='Palette index of transparent color'
    ),
) -> None:
    cfg = spr(compressed_indexed=compressed, strict_palette=not lenient_palette)
    for filename in sorted(get_files(files)):
        basename = os.path.basename(filename)
        print(f'Decoding file: {basename}')
        sprite = cfg.from_path(filename)
        output_dir = os.path.join(target_dir, basename)
        os.makedirs(output_dir, exist_ok=True)
        for idx, frame in enumerate(sprite.frames):
            if not frame.size:
                logging.warning(f'skipping empty frame {idx} in {basename}')
                continue
            im = convert_to_pil_image(frame, sprite.palette, transparency=transparency)
            im.save(os.path.join(output_dir, f'FRAME_{idx:05d}.png'))


if __name__ == '__main__':
    app()
