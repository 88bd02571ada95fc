"""
logoicons: Icon Generator for Vector Application Logos
Copyright (C) 2025 Travis L. Seymour, PhD

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

from collections.abc import Callable, Iterator
import contextlib
import io
from pathlib import Path
import shutil

from PIL import Image

from logoicons import log

Rasterizer = Callable[[Path, int], Image.Image]


def render_svg(svg_path: str | Path, size: int) -> Image.Image:
    """
    Rasterize an SVG file to a size x size RGBA image.

    CairoSVG does the rendering at the requested size. If the document's
    aspect ratio keeps it from filling the whole canvas, Pillow resamples the
    result so the returned image is always exactly size x size.
    """
    # cairosvg loads libcairo when imported
    import cairosvg

    png_data = cairosvg.svg2png(url=str(svg_path), output_width=size, output_height=size)
    img = Image.open(io.BytesIO(png_data)).convert("RGBA")

    if img.size != (size, size):
        log.debug(f"    RESAMPLE: {img.width}x{img.height} -> {size}x{size}")
        img = img.resize((size, size), Image.Resampling.LANCZOS)

    return img


def save_png(img: Image.Image, dest_path: str | Path) -> Path:
    dest_path = Path(dest_path)
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(dest_path, "PNG")
    return dest_path


def export_png(svg_path: str | Path, dest_path: str | Path, size: int, rasterizer: Rasterizer = render_svg) -> Path:
    """Rasterize svg_path at size x size and write it to dest_path as a PNG."""
    img = rasterizer(Path(svg_path), size)
    return save_png(img, dest_path)


def get_image_dims(img_file: Path) -> tuple[int, int]:
    with Image.open(img_file) as im:
        return im.size


class ScratchFolderError(OSError):
    """Creating or removing a scratch folder failed."""


@contextlib.contextmanager
def scratch_folder(folder: str | Path) -> Iterator[Path]:
    """
    Create folder (if needed) for the duration of the with block, then
    recursively delete it, whether the block finished or raised.

    Only failures to create or delete the folder itself are raised as
    ScratchFolderError, anything raised inside the block passes through as is.
    """
    folder = Path(folder)
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScratchFolderError(f"Unable to create scratch folder {folder}: {e}") from e
    log.debug(f"scratch folder ready at {folder}")
    try:
        yield folder
    finally:
        if folder.is_dir():
            try:
                shutil.rmtree(folder)
            except OSError as e:
                raise ScratchFolderError(f"Unable to remove scratch folder {folder}: {e}") from e
            log.debug(f"removed scratch folder {folder}")
