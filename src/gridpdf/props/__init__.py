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

from .barcode import (
    MAX_BARCODE_HEIGHT_RATIO,
    MIN_BARCODE_HEIGHT_RATIO,
    Barcode,
    BarcodeType,
    Proportion,
)
from .cell import BorderType, CellStyle
from .color import BLACK, BLUE, GREEN, RED, WHITE, Color, parse_color
from .font import DEFAULT_FONT, Font, FontStyle, parse_font_style
from .rect import MAX_PERCENT, Rect
from .text import Align, Place, Text, parse_place

__all__ = [
    "Align",
    "BLACK",
    "BLUE",
    "Barcode",
    "BarcodeType",
    "BorderType",
    "CellStyle",
    "Color",
    "DEFAULT_FONT",
    "Font",
    "FontStyle",
    "GREEN",
    "MAX_BARCODE_HEIGHT_RATIO",
    "MAX_PERCENT",
    "MIN_BARCODE_HEIGHT_RATIO",
    "Place",
    "Proportion",
    "RED",
    "Rect",
    "Text",
    "WHITE",
    "parse_color",
    "parse_font_style",
    "parse_place",
]
