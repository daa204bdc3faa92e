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
from datetime import datetime
from pathlib import Path

from ..consts import (
    DEFAULT_BOTTOM_MARGIN,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_MAX_GRID_SUM,
    DEFAULT_RIGHT_MARGIN,
    DEFAULT_TOP_MARGIN,
    Extension,
    PageSize,
    ProtectionType,
    get_dimensions,
)
from ..props import DEFAULT_FONT, Font, FontStyle, Place


@dataclass(frozen=True)
class Cell:
    """Absolute rectangle on the page, in millimetres."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float


@dataclass(frozen=True)
class Margins:
    left: float = DEFAULT_LEFT_MARGIN
    top: float = DEFAULT_TOP_MARGIN
    right: float = DEFAULT_RIGHT_MARGIN
    bottom: float = DEFAULT_BOTTOM_MARGIN


@dataclass(frozen=True)
class Metadata:
    author: str | None = None
    creator: str | None = None
    subject: str | None = None
    title: str | None = None
    creation_date: datetime | None = None


@dataclass(frozen=True)
class Protection:
    """Password protection; ``type`` is the one action readers keep."""

    type: ProtectionType
    user_password: str = ""
    owner_password: str = ""


@dataclass(frozen=True)
class CustomFont:
    """TrueType font file registered under ``family``/``style`` before drawing."""

    family: str
    path: Path
    style: FontStyle = FontStyle.NORMAL


@dataclass(frozen=True)
class BackgroundImage:
    data: bytes
    extension: Extension


def _default_dimensions() -> Dimensions:
    width, height = get_dimensions(PageSize.A4)
    return Dimensions(width, height)


@dataclass(frozen=True)
class Config:
    """Document-wide settings shared read-only by every component of a tree."""

    dimensions: Dimensions = field(default_factory=_default_dimensions)
    margins: Margins = field(default_factory=Margins)
    max_grid_size: int = DEFAULT_MAX_GRID_SUM
    debug: bool = False
    default_font: Font = DEFAULT_FONT
    page_number_pattern: str = ""
    page_number_place: Place = Place.BOTTOM
    compression: bool = False
    metadata: Metadata = field(default_factory=Metadata)
    protection: Protection | None = None
    custom_fonts: tuple[CustomFont, ...] = ()
    background_image: BackgroundImage | None = None

    @property
    def usable_width(self) -> float:
        return self.dimensions.width - self.margins.left - self.margins.right

    @property
    def usable_height(self) -> float:
        return self.dimensions.height - self.margins.top - self.margins.bottom
