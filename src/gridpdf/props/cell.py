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

from dataclasses import dataclass
from enum import Enum

from .color import Color


class BorderType(str, Enum):
    NONE = "none"
    FULL = "full"
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class CellStyle:
    border_type: BorderType = BorderType.NONE
    border_color: Color | None = None
    border_thickness: float = 0.0
    background_color: Color | None = None

    def to_map(self) -> dict[str, object]:
        values: dict[str, object] = {}
        if self.border_type != BorderType.NONE:
            values["prop_border_type"] = self.border_type.value
        if self.border_color is not None:
            values["prop_border_color"] = self.border_color.to_string()
        if self.border_thickness:
            values["prop_border_thickness"] = self.border_thickness
        if self.background_color is not None:
            values["prop_background_color"] = self.background_color.to_string()
        return values
