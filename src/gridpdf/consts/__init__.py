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

from .extension import Extension, parse_extension
from .pagesize import (
    DEFAULT_BOTTOM_MARGIN,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_MAX_GRID_SUM,
    DEFAULT_RIGHT_MARGIN,
    DEFAULT_TOP_MARGIN,
    MIN_LEFT_MARGIN,
    MIN_RIGHT_MARGIN,
    MIN_TOP_MARGIN,
    Orientation,
    PageSize,
    get_dimensions,
    parse_orientation,
    parse_page_size,
)
from .protection import ProtectionType, parse_protection_type

__all__ = [
    "DEFAULT_BOTTOM_MARGIN",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_LEFT_MARGIN",
    "DEFAULT_MAX_GRID_SUM",
    "DEFAULT_RIGHT_MARGIN",
    "DEFAULT_TOP_MARGIN",
    "Extension",
    "MIN_LEFT_MARGIN",
    "MIN_RIGHT_MARGIN",
    "MIN_TOP_MARGIN",
    "Orientation",
    "PageSize",
    "ProtectionType",
    "get_dimensions",
    "parse_extension",
    "parse_orientation",
    "parse_page_size",
    "parse_protection_type",
]
