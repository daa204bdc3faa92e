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

from dataclasses import dataclass, field
from enum import Enum

from ..consts import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE
from .color import BLACK, Color


class FontStyle(str, Enum):
    NORMAL = ""
    BOLD = "B"
    ITALIC = "I"
    BOLD_ITALIC = "BI"


@dataclass(frozen=True)
class Font:
    family: str = DEFAULT_FONT_FAMILY
    style: FontStyle = FontStyle.NORMAL
    size: float = DEFAULT_FONT_SIZE
    color: Color = field(default_factory=lambda: BLACK)


DEFAULT_FONT = Font()


def parse_font_style(value: object) -> FontStyle | None:
    if isinstance(value, FontStyle):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().upper()
    if normalized == "IB":
        normalized = "BI"
    by_name = {style.name: style for style in FontStyle}
    if normalized in by_name:
        return by_name[normalized]
    try:
        return FontStyle(normalized)
    except ValueError:
        return None
