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

from dataclasses import dataclass, field, replace
from enum import Enum

from .rect import MAX_PERCENT, _valid_offsets, _valid_percent

# Height/width bounds for a barcode symbol.
MIN_BARCODE_HEIGHT_RATIO = 0.10
MAX_BARCODE_HEIGHT_RATIO = 0.20


class BarcodeType(str, Enum):
    CODE39 = "code39"
    I2OF5 = "i2of5"


@dataclass(frozen=True)
class Proportion:
    width: float = 1.0
    height: float = MAX_BARCODE_HEIGHT_RATIO

    def ratio(self) -> float:
        return self.height / self.width


@dataclass(frozen=True)
class Barcode:
    left: float = 0.0
    top: float = 0.0
    percent: float = MAX_PERCENT
    proportion: Proportion = field(default_factory=Proportion)
    center: bool = False
    type: BarcodeType = BarcodeType.CODE39

    def make_valid(self) -> "Barcode":
        left, top = _valid_offsets(self.left, self.top, center=self.center)
        return replace(
            self,
            left=left,
            top=top,
            percent=_valid_percent(self.percent),
            proportion=_valid_proportion(self.proportion),
            type=_valid_type(self.type),
        )

    def to_map(self) -> dict[str, object]:
        values: dict[str, object] = {}
        if self.left:
            values["prop_left"] = self.left
        if self.top:
            values["prop_top"] = self.top
        if self.percent:
            values["prop_percent"] = self.percent
        if self.proportion.width:
            values["prop_proportion_width"] = self.proportion.width
        if self.proportion.height:
            values["prop_proportion_height"] = self.proportion.height
        if self.center:
            values["prop_center"] = True
        values["prop_type"] = _valid_type(self.type).value
        return values


def _valid_proportion(proportion: Proportion | None) -> Proportion:
    if proportion is None or not (proportion.width > 0 and proportion.height > 0):
        return Proportion()
    ratio = proportion.ratio()
    if ratio < MIN_BARCODE_HEIGHT_RATIO:
        return Proportion(proportion.width, proportion.width * MIN_BARCODE_HEIGHT_RATIO)
    if ratio > MAX_BARCODE_HEIGHT_RATIO:
        return Proportion(proportion.width, proportion.width * MAX_BARCODE_HEIGHT_RATIO)
    return proportion


def _valid_type(value: object) -> BarcodeType:
    if isinstance(value, BarcodeType):
        return value
    if isinstance(value, str):
        try:
            return BarcodeType(value.strip().lower())
        except ValueError:
            pass
    return BarcodeType.CODE39
