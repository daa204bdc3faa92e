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

from dataclasses import dataclass, replace

MAX_PERCENT = 100.0


@dataclass(frozen=True)
class Rect:
    """Placement of a rectangular leaf (image, QR or matrix code) inside its cell.

    ``percent`` is the share of the cell the symbol may occupy. With ``center``
    the symbol is centred and ``left``/``top`` are ignored. With
    ``just_reference_width`` only the cell width bounds the symbol.
    """

    left: float = 0.0
    top: float = 0.0
    percent: float = MAX_PERCENT
    just_reference_width: bool = False
    center: bool = False

    def make_valid(self) -> "Rect":
        left, top = _valid_offsets(self.left, self.top, center=self.center)
        return replace(self, left=left, top=top, percent=_valid_percent(self.percent))

    def to_map(self) -> dict[str, object]:
        values: dict[str, object] = {}
        if self.left:
            values["prop_left"] = self.left
        if self.top:
            values["prop_top"] = self.top
        if self.percent:
            values["prop_percent"] = self.percent
        if self.just_reference_width:
            values["prop_just_reference_width"] = True
        if self.center:
            values["prop_center"] = True
        return values


def _valid_percent(value: float) -> float:
    if not 0 < value <= MAX_PERCENT:
        return MAX_PERCENT
    return float(value)


def _valid_offsets(left: float, top: float, *, center: bool) -> tuple[float, float]:
    if center:
        return 0.0, 0.0
    return max(0.0, float(left)), max(0.0, float(top))
