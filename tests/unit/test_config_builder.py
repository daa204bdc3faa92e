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

import unittest
from datetime import datetime, timezone
from pathlib import Path

from gridpdf import props
from gridpdf.config import ConfigBuilder
from gridpdf.consts import (
    DEFAULT_BOTTOM_MARGIN,
    DEFAULT_MAX_GRID_SUM,
    Extension,
    Orientation,
    PageSize,
    ProtectionType,
)
from gridpdf.core import BackgroundImage, CustomFont, Dimensions, Margins, Protection
from tests.test_support import make_png


class TestConfigBuilderDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ConfigBuilder().build()
        self.assertEqual(config.dimensions, Dimensions(210.0, 297.0))
        self.assertEqual(config.margins, Margins())
        self.assertEqual(config.max_grid_size, DEFAULT_MAX_GRID_SUM)
        self.assertFalse(config.debug)
        self.assertFalse(config.compression)
        self.assertEqual(config.page_number_pattern, "")
        self.assertEqual(config.default_font, props.DEFAULT_FONT)

    def test_usable_area(self) -> None:
        config = ConfigBuilder().build()
        self.assertAlmostEqual(config.usable_width, 190.0)
        self.assertAlmostEqual(config.usable_height, 297.0 - 10.0 - DEFAULT_BOTTOM_MARGIN)


class TestConfigBuilderPage(unittest.TestCase):
    def test_page_size(self) -> None:
        config = ConfigBuilder().with_page_size(PageSize.LETTER).build()
        self.assertEqual(config.dimensions, Dimensions(215.9, 279.4))

    def test_page_size_from_string(self) -> None:
        config = ConfigBuilder().with_page_size("A5").build()
        self.assertEqual(config.dimensions, Dimensions(148.4, 210.0))

    def test_unknown_page_size_ignored(self) -> None:
        config = ConfigBuilder().with_page_size(PageSize.A3).with_page_size("b7").build()
        self.assertEqual(config.dimensions, Dimensions(297.0, 419.9))

    def test_horizontal_orientation_swaps(self) -> None:
        config = ConfigBuilder().with_orientation(Orientation.HORIZONTAL).build()
        self.assertEqual(config.dimensions, Dimensions(297.0, 210.0))

    def test_custom_dimensions_override_page_size(self) -> None:
        config = (
            ConfigBuilder()
            .with_page_size(PageSize.A3)
            .with_dimensions(100, 150)
            .with_orientation("horizontal")
            .build()
        )
        self.assertEqual(config.dimensions, Dimensions(100.0, 150.0))

    def test_invalid_dimensions_ignored(self) -> None:
        for width, height in ((0, 100), (100, -1)):
            with self.subTest(width=width, height=height):
                config = ConfigBuilder().with_dimensions(width, height).build()
                self.assertEqual(config.dimensions, Dimensions(210.0, 297.0))


class TestConfigBuilderValues(unittest.TestCase):
    def test_margins(self) -> None:
        config = ConfigBuilder().with_margins(5, 6, 7).build()
        self.assertEqual(config.margins, Margins(5.0, 6.0, 7.0, DEFAULT_BOTTOM_MARGIN))

    def test_negative_margins_ignored(self) -> None:
        config = ConfigBuilder().with_margins(5, 6, 7).with_margins(-1, 6, 7).build()
        self.assertEqual(config.margins.left, 5.0)

    def test_max_grid_size(self) -> None:
        self.assertEqual(ConfigBuilder().with_max_grid_size(24).build().max_grid_size, 24)

    def test_non_positive_max_grid_size_ignored(self) -> None:
        for value in (0, -4):
            with self.subTest(value=value):
                config = ConfigBuilder().with_max_grid_size(16).with_max_grid_size(value).build()
                self.assertEqual(config.max_grid_size, 16)

    def test_debug_and_compression(self) -> None:
        config = ConfigBuilder().with_debug(True).with_compression(True).build()
        self.assertTrue(config.debug)
        self.assertTrue(config.compression)

    def test_default_font_merges_missing_fields(self) -> None:
        font = props.Font(family="", style=props.FontStyle.BOLD, size=0, color=props.RED)
        config = ConfigBuilder().with_default_font(font).build()
        self.assertEqual(config.default_font.family, props.DEFAULT_FONT.family)
        self.assertEqual(config.default_font.size, props.DEFAULT_FONT.size)
        self.assertEqual(config.default_font.style, props.FontStyle.BOLD)
        self.assertEqual(config.default_font.color, props.RED)

    def test_default_font_none_ignored(self) -> None:
        config = ConfigBuilder().with_default_font(None).build()
        self.assertEqual(config.default_font, props.DEFAULT_FONT)


class TestConfigBuilderPageNumber(unittest.TestCase):
    def test_default_pattern(self) -> None:
        config = ConfigBuilder().with_page_number().build()
        self.assertEqual(config.page_number_pattern, "{current} / {total}")
        self.assertIs(config.page_number_place, props.Place.BOTTOM)

    def test_custom_pattern_and_place(self) -> None:
        config = ConfigBuilder().with_page_number("Page {current}", "right_top").build()
        self.assertEqual(config.page_number_pattern, "Page {current}")
        self.assertIs(config.page_number_place, props.Place.RIGHT_TOP)

    def test_pattern_without_token_ignored(self) -> None:
        config = ConfigBuilder().with_page_number("Page").build()
        self.assertEqual(config.page_number_pattern, "")

    def test_unknown_place_ignored(self) -> None:
        config = ConfigBuilder().with_page_number("{current}", "middle").build()
        self.assertEqual(config.page_number_pattern, "")


class TestConfigBuilderMetadata(unittest.TestCase):
    def test_metadata_fields(self) -> None:
        created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        config = (
            ConfigBuilder()
            .with_author("Ada")
            .with_creator("gridpdf")
            .with_subject("Labels")
            .with_title("Shipping labels")
            .with_creation_date(created)
            .build()
        )
        metadata = config.metadata
        self.assertEqual(metadata.author, "Ada")
        self.assertEqual(metadata.creator, "gridpdf")
        self.assertEqual(metadata.subject, "Labels")
        self.assertEqual(metadata.title, "Shipping labels")
        self.assertEqual(metadata.creation_date, created)

    def test_empty_metadata_ignored(self) -> None:
        config = ConfigBuilder().with_author("Ada").with_author("").build()
        self.assertEqual(config.metadata.author, "Ada")

    def test_builder_is_reusable(self) -> None:
        builder = ConfigBuilder().with_max_grid_size(10)
        first = builder.build()
        second = builder.with_max_grid_size(20).build()
        self.assertEqual(first.max_grid_size, 10)
        self.assertEqual(second.max_grid_size, 20)



class TestConfigBuilderDocumentExtras(unittest.TestCase):
    def test_protection(self) -> None:
        config = ConfigBuilder().with_protection("print", "user", "owner").build()
        self.assertEqual(config.protection, Protection(ProtectionType.PRINT, "user", "owner"))

    def test_unprotected_by_default(self) -> None:
        self.assertIsNone(ConfigBuilder().build().protection)

    def test_unknown_protection_type_ignored(self) -> None:
        builder = ConfigBuilder().with_protection(ProtectionType.COPY, "u")
        config = builder.with_protection("shred", "x", "y").build()
        self.assertEqual(config.protection, Protection(ProtectionType.COPY, "u", ""))

    def test_custom_fonts_normalized(self) -> None:
        fonts = [
            CustomFont(family=" dejavu ", path="fonts/DejaVuSans-Bold.ttf", style="bold"),
            CustomFont(family="  ", path="blank.ttf"),
        ]
        config = ConfigBuilder().with_custom_fonts(fonts).build()
        self.assertEqual(
            config.custom_fonts,
            (CustomFont("dejavu", Path("fonts/DejaVuSans-Bold.ttf"), props.FontStyle.BOLD),),
        )

    def test_empty_custom_fonts_ignored(self) -> None:
        builder = ConfigBuilder().with_custom_fonts([CustomFont("dejavu", Path("a.ttf"))])
        config = builder.with_custom_fonts(None).with_custom_fonts([]).build()
        self.assertEqual(len(config.custom_fonts), 1)
        self.assertEqual(ConfigBuilder().build().custom_fonts, ())

    def test_background_image(self) -> None:
        data = make_png()
        config = ConfigBuilder().with_background_image(data, "PNG").build()
        self.assertEqual(config.background_image, BackgroundImage(data, Extension.PNG))

    def test_invalid_background_image_ignored(self) -> None:
        builder = ConfigBuilder()
        builder.with_background_image(b"", "png").with_background_image(make_png(), "bmp")
        self.assertIsNone(builder.build().background_image)


if __name__ == "__main__":
    unittest.main()
