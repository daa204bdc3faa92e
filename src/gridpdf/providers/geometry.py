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

import math

from .. import props
from ..core.entity import Cell, Config

# fpdf2 draws Code 39 with wide bars of width w, narrow bars and gaps of w / 3.
# One character is 3 wide + 6 narrow elements plus a narrow gap: 16/3 w.
CODE39_UNITS_PER_CHAR = 16 / 3

# Interleaved 2 of 5: 6 w per digit pair, 4/3 w start and 2 w stop pattern.
I2OF5_UNITS_PER_PAIR = 6.0
I2OF5_GUARD_UNITS = 10 / 3


def fit_rect(cell: Cell, ratio: float, prop: props.Rect | props.Barcode) -> Cell:
    """Place a symbol with height/width ``ratio`` inside ``cell``.

    The symbol takes ``prop.percent`` of the cell width, shrinking to fit the
    cell height unless the rect only references the width.
    """
    scale = prop.percent / 100
    width = cell.width * scale
    height = width * ratio
    reference_width_only = getattr(prop, "just_reference_width", False)
    if not reference_width_only and height > cell.height * scale:
        height = cell.height * scale
        width = height / ratio if ratio > 0 else width

    if prop.center:
        x = cell.x + (cell.width - width) / 2
        y = cell.y + (cell.height - height) / 2
    else:
        x = cell.x + prop.left
        y = cell.y + prop.top
    return Cell(x=x, y=y, width=width, height=height)


def code39_bar_width(char_count: int, width: float) -> float:
    """Wide bar width so ``char_count`` characters span ``width``."""
    if char_count <= 0:
        return 0.0
    return width / (char_count * CODE39_UNITS_PER_CHAR)


def i2of5_bar_width(digit_count: int, width: float) -> float:
    """Wide bar width so ``digit_count`` digits span ``width``."""
    if digit_count <= 0:
        return 0.0
    pairs = math.ceil(digit_count / 2)
    return width / (pairs * I2OF5_UNITS_PER_PAIR + I2OF5_GUARD_UNITS)


def page_number_cell(config: Config) -> Cell:
    """Band inside the top or bottom margin that holds the page number."""
    margins = config.margins
    if config.page_number_place.is_top():
        return Cell(x=margins.left, y=0.0, width=config.usable_width, height=margins.top)
    return Cell(
        x=margins.left,
        y=config.dimensions.height - margins.bottom,
        width=config.usable_width,
        height=margins.bottom,
    )


def line_height(font_size_mm: float, multiplier: float = 1.2) -> float:
    return font_size_mm * multiplier
