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

from pathlib import Path

import typer

from logoicons import app_long_name, app_short_name, log
from logoicons.generator import IconGenerationError, default_options, generate_icons
from logoicons.utils.logutils import setup_logging
from logoicons.version import __version__

app = typer.Typer(add_completion=False, help=f"{app_long_name} command line interface.")


@app.command()
def run(
    root: Path = typer.Option(
        Path("."),
        "--root",
        "-r",
        file_okay=False,
        help="Project folder containing resources/logo.svg (defaults to the current folder).",
    ),
    debug: bool = typer.Option(False, "--debug/--no-debug", "-d", help="Write extra debugging information to terminal."),
):
    """Render resources/logo.svg into icon PNGs and write resources/icon.png."""
    setup_logging(debug=debug)
    log.debug(f"Running {app_short_name} version {__version__}")

    options = default_options(root.resolve())
    log.debug(f"options: {options.toDict()}")

    try:
        generate_icons(options)
    except IconGenerationError as e:
        log.error(f"Icon generation failed: {e}")
        raise typer.Exit(code=1)

    log.info(f"Done! Use {options.output.name} for electron-builder")


def main():
    app(prog_name=app_short_name)


if __name__ == "__main__":
    main()
