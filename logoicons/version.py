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

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import tomllib

PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def pyproject_version(pyproject_path: Path = PYPROJECT_PATH) -> str:
    """Version from a source checkout, for running without installing."""
    with pyproject_path.open("rb") as f:
        return tomllib.load(f).get("project", {}).get("version", "Unknown")


try:
    __version__ = version("logoicons")
except PackageNotFoundError:
    __version__ = pyproject_version()
