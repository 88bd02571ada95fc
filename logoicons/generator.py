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

from collections.abc import Callable, Sequence
from pathlib import Path

from munch import Munch

from logoicons import log
from logoicons.utils import imageutils as iu

# Project-relative locations, resolved against the root passed to default_options()
SOURCE_PATH = Path("resources", "logo.svg")
OUTPUT_PATH = Path("resources", "icon.png")
SCRATCH_PATH = Path("temp-icons")

SIZES = [16, 24, 32, 48, 64, 128, 256]

# electron-builder wants a single 256x256 png
FINAL_SIZE = 256


class IconGenerationError(Exception):
    """Raised when reading, rasterizing or writing an icon fails."""


def default_options(root: str | Path) -> Munch:
    root = Path(root)
    return Munch(
        {
            "source": root / SOURCE_PATH,
            "output": root / OUTPUT_PATH,
            "scratch": root / SCRATCH_PATH,
            "sizes": list(SIZES),
        }
    )


def intermediate_name(size: int) -> str:
    return f"icon-{size}.png"


def check_sizes(sizes: Sequence[int]) -> list[int]:
    checked = []
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise IconGenerationError(f"Icon sizes must be positive integers, got {size!r}")
        if size in checked:
            raise IconGenerationError(f"Icon size {size} is listed more than once")
        checked.append(size)
    return checked


def check_scratch(scratch: Path, source: Path, output: Path) -> None:
    """The scratch folder is deleted at the end of a run, so it must not hold the source or the output."""
    scratch = scratch.resolve()
    for kind, path in (("source", source), ("output", output)):
        if path.resolve().parent.is_relative_to(scratch):
            raise IconGenerationError(f"Scratch folder {scratch} would delete the {kind} image {path}")


def _export(source: Path, dest: Path, size: int, rasterizer: iu.Rasterizer) -> tuple[Path, tuple[int, int]]:
    try:
        png_path = iu.export_png(source, dest, size, rasterizer=rasterizer)
        return png_path, iu.get_image_dims(png_path)
    except Exception as e:
        raise IconGenerationError(f"Unable to create {size}x{size} PNG {dest} from {source}: {e}") from e


def generate_icons(
    options: Munch,
    rasterizer: iu.Rasterizer = iu.render_svg,
    progress_callback: Callable[[int, int, Path], None] | None = None,
) -> Munch:
    """
    Rasterize options.source once per entry in options.sizes into the scratch
    folder, then once more at FINAL_SIZE into options.output.

    Sizes are processed one at a time in list order and the first failure stops
    the run. The scratch folder is removed whether the run succeeds or not.

    Args:
        options: Munch with source, output, scratch and sizes (see default_options)
        rasterizer: callable(svg_path, size) returning a PIL image of size x size
        progress_callback: Optional callback(current, total, path) called after each
                           png is written, while it still exists on disk

    Returns:
        Munch(ok, output, output_size, intermediates), where each intermediate is
        Munch(size, path, dims) with dims read back from the written file.

    Raises:
        IconGenerationError: on a missing source, a bad size list, a scratch folder
                             that holds the source or output, or any failure to
                             create the scratch folder or rasterize or write a png.
    """
    source = Path(options.source)
    output = Path(options.output)
    sizes = check_sizes(options.sizes)

    if not source.is_file():
        raise IconGenerationError(f"Source image not found: {source}")

    check_scratch(Path(options.scratch), source, output)

    total = len(sizes) + 1
    intermediates = []

    try:
        with iu.scratch_folder(options.scratch) as scratch:
            for i, size in enumerate(sizes):
                png_path, dims = _export(source, scratch / intermediate_name(size), size, rasterizer)
                intermediates.append(Munch(size=size, path=png_path, dims=dims))
                log.info(f"Created {size}x{size} PNG")
                if progress_callback:
                    progress_callback(i + 1, total, png_path)

            _, output_size = _export(source, output, FINAL_SIZE, rasterizer)
            log.info(f"Main PNG icon created: {output}")
            if progress_callback:
                progress_callback(total, total, output)
    except iu.ScratchFolderError as e:
        raise IconGenerationError(str(e)) from e

    return Munch(ok=True, output=output, output_size=output_size, intermediates=intermediates)
