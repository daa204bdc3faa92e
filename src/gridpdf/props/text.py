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
from .font import DEFAULT_FONT, Font, FontStyle, parse_font_style


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Place(str, Enum):
    LEFT_TOP = "left_top"
    TOP = "top"
    RIGHT_TOP = "right_top"
    LEFT_BOTTOM = "left_bottom"
    BOTTOM = "bottom"
    RIGHT_BOTTOM = "right_bottom"

    def is_top(self) -> bool:
        return self in (Place.LEFT_TOP, Place.TOP, Place.RIGHT_TOP)

    def align(self) -> Align:
        if self in (Place.LEFT_TOP, Place.LEFT_BOTTOM):
            return Align.LEFT
        if self in (Place.RIGHT_TOP, Place.RIGHT_BOTTOM):
            return Align.RIGHT
        return Align.CENTER


@dataclass(frozen=True)
class Text:
    """Text styling. ``None`` font fields fall back to the document default font."""

    top: float = 0.0
    left: float = 0.0
    right: float = 0.0
    family: str | None = None
    style: FontStyle | None = None
    size: float | None = None
    align: Align = Align.LEFT
    color: Color | None = None

    def make_valid(self, font: Font | None = None) -> "Text":
        font = font or DEFAULT_FONT
        align = self.align if isinstance(self.align, Align) else _parse_align(self.align)
        return Text(
            top=max(0.0, float(self.top)),
            left=max(0.0, float(self.left)),
            right=max(0.0, float(self.right)),
            family=self.family or font.family,
            style=_valid_style(self.style, font),
            size=self.size if self.size and self.size > 0 else font.size,
            align=align,
            color=self.color or font.color,
        )

    def to_map(self) -> dict[str, object]:
        values: dict[str, object] = {}
        if self.top:
            values["prop_top"] = self.top
        if self.left:
            values["prop_left"] = self.left
        if self.right:
            values["prop_right"] = self.right
        if self.family:
            values["prop_font_family"] = self.family
        if self.style:
            values["prop_font_style"] = self.style.value
        if self.size:
            values["prop_font_size"] = self.size
        values["prop_align"] = self.align.value
        if self.color is not None:
            values["prop_color"] = self.color.to_string()
        return values


def _parse_align(value: object) -> Align:
    if isinstance(value, str):
        try:
            return Align(value.strip().lower())
        except ValueError:
            pass
    return Align.LEFT


def parse_place(value: object) -> Place | None:
    if isinstance(value, Place):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Place(value.strip().lower())
    except ValueError:
        return None


def _valid_style(value: object, font: Font) -> FontStyle:
    if value is None:
        return font.style
    parsed = parse_font_style(value)
    return font.style if parsed is None else parsed
