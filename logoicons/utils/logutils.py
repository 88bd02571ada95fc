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

import sys

from logoicons import log


def setup_logging(debug: bool = False) -> None:
    """
    Replace loguru's default sink with a single stderr sink.

    Normal runs only print the message text at INFO level, debug runs add
    timestamps, module and line information and drop down to DEBUG.
    """

    log.remove()  # remove default logger

    if debug:
        log.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{line}</cyan> | {message}",
            colorize=True,
            level="DEBUG",
        )
    else:
        log.add(
            sys.stderr,
            format="<level>{message}</level>",
            colorize=True,
            level="INFO",
        )
