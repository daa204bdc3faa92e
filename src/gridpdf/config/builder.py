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

from dataclasses import replace
from datetime import datetime
from pathlib import Path

from ..consts import (
    DEFAULT_MAX_GRID_SUM,
    MIN_LEFT_MARGIN,
    MIN_RIGHT_MARGIN,
    MIN_TOP_MARGIN,
    Extension,
    Orientation,
    PageSize,
    ProtectionType,
    get_dimensions,
    parse_extension,
    parse_orientation,
    parse_page_size,
    parse_protection_type,
)
from ..core.entity import (
    BackgroundImage,
    Config,
    CustomFont,
    Dimensions,
    Margins,
    Metadata,
    Protection,
)
from ..props import DEFAULT_FONT, Font, FontStyle, Place, parse_font_style, parse_place

_PAGE_NUMBER_TOKENS = ("{current}", "{total}")


class ConfigBuilder:
    """Fluent builder for :class:`Config`.

    Out-of-range arguments are ignored and the previous value is kept, so a
    chain of ``with_*`` calls never fails half-way.
    """

    def __init__(self) -> None:
        self._page_size: PageSize | None = None
        self._dimensions: Dimensions | None = None
        self._orientation = Orientation.VERTICAL
        self._margins = Margins()
        self._debug = False
        self._max_grid_size = DEFAULT_MAX_GRID_SUM
        self._default_font = DEFAULT_FONT
        self._page_number_pattern = ""
        self._page_number_place = Place.BOTTOM
        self._compression = False
        self._metadata = Metadata()
        self._protection: Protection | None = None
        self._custom_fonts: tuple[CustomFont, ...] = ()
        self._background_image: BackgroundImage | None = None

    def with_page_size(self, size: PageSize | str | None) -> "ConfigBuilder":
        parsed = parse_page_size(size)
        if parsed is None:
            return self
        self._page_size = parsed
        return self

    def with_dimensions(self, width: float, height: float) -> "ConfigBuilder":
        """Custom page dimensions in millimetres; overrides the page size."""
        if width <= 0 or height <= 0:
            return self
        self._dimensions = Dimensions(float(width), float(height))
        return self

    def with_orientation(self, orientation: Orientation | str) -> "ConfigBuilder":
        parsed = parse_orientation(orientation)
        if parsed is None:
            return self
        self._orientation = parsed
        return self

    def with_margins(self, left: float, top: float, right: float) -> "ConfigBuilder":
        """Left, top and right margins. The bottom margin stays at its default."""
        if left < MIN_LEFT_MARGIN or top < MIN_TOP_MARGIN or right < MIN_RIGHT_MARGIN:
            return self
        self._margins = replace(
            self._margins, left=float(left), top=float(top), right=float(right)
        )
        return self

    def with_debug(self, on: bool) -> "ConfigBuilder":
        """Draw a border around every column."""
        self._debug = bool(on)
        return self

    def with_max_grid_size(self, max_grid_size: int) -> "ConfigBuilder":
        if max_grid_size <= 0:
            return self
        self._max_grid_size = int(max_grid_size)
        return self

    def with_default_font(self, font: Font | None) -> "ConfigBuilder":
        if font is None:
            return self
        current = self._default_font
        self._default_font = Font(
            family=font.family or current.family,
            style=font.style,
            size=font.size if font.size > 0 else current.size,
            color=font.color or current.color,
        )
        return self

    def with_page_number(
        self,
        pattern: str = "{current} / {total}",
        place: Place | str = Place.BOTTOM,
    ) -> "ConfigBuilder":
        if not any(token in pattern for token in _PAGE_NUMBER_TOKENS):
            return self
        parsed = parse_place(place)
        if parsed is None:
            return self
        self._page_number_pattern = pattern
        self._page_number_place = parsed
        return self

    def with_protection(
        self,
        protection_type: ProtectionType | str,
        user_password: str = "",
        owner_password: str = "",
    ) -> "ConfigBuilder":
        """Encrypt the document; readers keep only the ``protection_type`` action.

        An empty owner password is replaced by a random one when the PDF is
        written.
        """
        parsed = parse_protection_type(protection_type)
        if parsed is None:
            return self
        self._protection = Protection(parsed, user_password or "", owner_password or "")
        return self

    def with_custom_fonts(self, fonts: list[CustomFont] | None) -> "ConfigBuilder":
        if not fonts:
            return self
        valid = tuple(
            CustomFont(
                family=font.family.strip(),
                path=Path(font.path),
                style=parse_font_style(font.style) or FontStyle.NORMAL,
            )
            for font in fonts
            if font is not None and font.family and font.family.strip()
        )
        if valid:
            self._custom_fonts = valid
        return self

    def with_background_image(
        self,
        data: bytes | None,
        extension: Extension | str,
    ) -> "ConfigBuilder":
        """Image stretched over every page, drawn before any row."""
        if not data:
            return self
        try:
            parsed = parse_extension(extension)
        except ValueError:
            return self
        self._background_image = BackgroundImage(bytes(data), parsed)
        return self

    def with_compression(self, compression: bool) -> "ConfigBuilder":
        self._compression = bool(compression)
        return self

    def with_author(self, author: str) -> "ConfigBuilder":
        return self._with_metadata(author=author)

    def with_creator(self, creator: str) -> "ConfigBuilder":
        return self._with_metadata(creator=creator)

    def with_subject(self, subject: str) -> "ConfigBuilder":
        return self._with_metadata(subject=subject)

    def with_title(self, title: str) -> "ConfigBuilder":
        return self._with_metadata(title=title)

    def with_creation_date(self, created: datetime | None) -> "ConfigBuilder":
        if created is None:
            return self
        self._metadata = replace(self._metadata, creation_date=created)
        return self

    def build(self) -> Config:
        return Config(
            dimensions=self._get_dimensions(),
            margins=self._margins,
            max_grid_size=self._max_grid_size,
            debug=self._debug,
            default_font=self._default_font,
            page_number_pattern=self._page_number_pattern,
            page_number_place=self._page_number_place,
            compression=self._compression,
            metadata=self._metadata,
            protection=self._protection,
            custom_fonts=self._custom_fonts,
            background_image=self._background_image,
        )

    def _with_metadata(self, **values: str) -> "ConfigBuilder":
        cleaned = {key: value for key, value in values.items() if value}
        if not cleaned:
            return self
        self._metadata = replace(self._metadata, **cleaned)
        return self

    def _get_dimensions(self) -> Dimensions:
        if self._dimensions is not None:
            return self._dimensions

        width, height = get_dimensions(self._page_size or PageSize.A4)
        if self._orientation == Orientation.HORIZONTAL and height > width:
            width, height = height, width
        return Dimensions(width, height)
