from pathlib import Path
import sys

from PIL import Image, ImageDraw
import pytest

from logoicons import log

LOGO_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect width="100" height="100" fill="#1f2937"/>
  <circle cx="50" cy="50" r="30" fill="#38bdf8"/>
</svg>
"""

WIDE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <rect width="200" height="100" fill="#f59e0b"/>
</svg>
"""


def draw_logo(svg_path: Path, size: int) -> Image.Image:
    """Pillow stand-in for the cairo renderer; reads the source so a missing file still fails."""
    svg_path.read_text()
    img = Image.new("RGBA", (size, size), (31, 41, 55, 255))
    draw = ImageDraw.Draw(img)
    draw.ellipse((size // 5, size // 5, size - size // 5, size - size // 5), fill=(56, 189, 248, 255))
    return img


@pytest.fixture(autouse=True)
def reset_log():
    yield
    log.remove()
    log.add(sys.stderr)


@pytest.fixture
def project(tmp_path) -> Path:
    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "logo.svg").write_text(LOGO_SVG)
    return tmp_path


@pytest.fixture
def rasterizer():
    return draw_logo


@pytest.fixture
def cairo():
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
    return cairosvg
