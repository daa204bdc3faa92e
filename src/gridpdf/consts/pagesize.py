#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from enum import Enum

# Margins in millimetres.
DEFAULT_LEFT_MARGIN = 10.0
DEFAULT_TOP_MARGIN = 10.0
DEFAULT_RIGHT_MARGIN = 10.0
DEFAULT_BOTTOM_MARGIN = 20.0025

MIN_LEFT_MARGIN = 0.0
MIN_TOP_MARGIN = 0.0
MIN_RIGHT_MARGIN = 0.0

# Sum of column sizes that spans a full row.
DEFAULT_MAX_GRID_SUM = 12

DEFAULT_FONT_SIZE = 10.0
DEFAULT_FONT_FAMILY = "helvetica"


class PageSize(str, Enum):
    A1 = "a1"
    A2 = "a2"
    A3 = "a3"
    A4 = "a4"
    A5 = "a5"
    A6 = "a6"
    LETTER = "letter"
    LEGAL = "legal"
    TABLOID = "tabloid"


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


_DIMENSIONS_MM: dict[PageSize, tuple[float, float]] = {
    PageSize.A1: (594.0, 841.0),
    PageSize.A2: (419.9, 594.0),
    PageSize.A3: (297.0, 419.9),
    PageSize.A4: (210.0, 297.0),
    PageSize.A5: (148.4, 210.0),
    PageSize.A6: (105.0, 148.5),
    PageSize.LETTER: (215.9, 279.4),
    PageSize.LEGAL: (215.9, 355.6),
    PageSize.TABLOID: (279.4, 431.8),
}


def get_dimensions(size: PageSize) -> tuple[float, float]:
    """Return (width, height) in millimetres for a portrait page."""
    return _DIMENSIONS_MM.get(size, _DIMENSIONS_MM[PageSize.A4])


def parse_page_size(value: object) -> PageSize | None:
    if isinstance(value, PageSize):
        return value
    if not isinstance(value, str):
        return None
    try:
        return PageSize(value.strip().lower())
    except ValueError:
        return None


def parse_orientation(value: object) -> Orientation | None:
    if isinstance(value, Orientation):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Orientation(value.strip().lower())
    except ValueError:
        return None
