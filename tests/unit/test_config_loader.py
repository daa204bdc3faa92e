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

import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from gridpdf import props
from gridpdf.config import config_from_dict, load_config
from gridpdf.consts import Extension, ProtectionType
from gridpdf.core import CustomFont, Dimensions, Margins, Protection
from tests.test_support import make_png


class TestLoadConfig(unittest.TestCase):
    def test_load_config_parses_all_sections(self) -> None:
        toml = """
[page]
size = "letter"
orientation = "horizontal"

[margins]
left = 5
top = 6.5
right = "7"

[grid]
max_size = "24"

[document]
debug = "yes"
compression = true

[font]
family = "courier"
style = "bold"
size = 9
color = "#102030"

[page_number]
pattern = "{current} of {total}"
place = "right_top"

[metadata]
author = "Ada"
title = "Labels"
creation_date = 2024-05-01T10:00:00
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "gridpdf.toml"
            path.write_text(toml, encoding="utf-8")
            config = load_config(path)

        self.assertEqual(config.dimensions, Dimensions(279.4, 215.9))
        self.assertEqual(config.margins, Margins(5.0, 6.5, 7.0))
        self.assertEqual(config.max_grid_size, 24)
        self.assertTrue(config.debug)
        self.assertTrue(config.compression)
        self.assertEqual(
            config.default_font,
            props.Font("courier", props.FontStyle.BOLD, 9.0, props.Color(16, 32, 48)),
        )
        self.assertEqual(config.page_number_pattern, "{current} of {total}")
        self.assertIs(config.page_number_place, props.Place.RIGHT_TOP)
        self.assertEqual(config.metadata.author, "Ada")
        self.assertEqual(config.metadata.title, "Labels")
        self.assertEqual(
            config.metadata.creation_date,
            datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        )

    def test_load_config_with_defaults(self) -> None:
        """An empty file yields the builder defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "gridpdf.toml"
            path.write_text("", encoding="utf-8")
            config = load_config(path)

        self.assertEqual(config.dimensions, Dimensions(210.0, 297.0))
        self.assertEqual(config.max_grid_size, 12)
        self.assertFalse(config.debug)
        self.assertEqual(config.default_font, props.DEFAULT_FONT)
        self.assertEqual(config.page_number_pattern, "")

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(FileNotFoundError):
                load_config(Path(tmpdir) / "missing.toml")


class TestConfigFromDict(unittest.TestCase):
    def test_custom_dimensions(self) -> None:
        config = config_from_dict({"page": {"width": 100, "height": 60.5}})
        self.assertEqual(config.dimensions, Dimensions(100.0, 60.5))

    def test_partial_margins_keep_defaults(self) -> None:
        config = config_from_dict({"margins": {"left": 0}})
        self.assertEqual(config.margins, Margins(0.0, 10.0, 10.0))

    def test_date_only_creation_date(self) -> None:
        config = config_from_dict({"metadata": {"creation_date": "2023-01-02"}})
        self.assertEqual(
            config.metadata.creation_date,
            datetime(2023, 1, 2, tzinfo=timezone.utc),
        )

    def test_invalid_values_name_the_field(self) -> None:
        cases = [
            ({"page": {"size": "b9"}}, "page.size"),
            ({"page": {"orientation": "diagonal"}}, "page.orientation"),
            ({"page": {"width": 100}}, "page.width and page.height"),
            ({"page": {"width": -1, "height": 10}}, "page.width"),
            ({"margins": {"top": -2}}, "margins.top"),
            ({"grid": {"max_size": 0}}, "grid.max_size"),
            ({"grid": {"max_size": 1.5}}, "grid.max_size"),
            ({"grid": {"max_size": True}}, "grid.max_size"),
            ({"document": {"debug": "maybe"}}, "document.debug"),
            ({"document": {"compression": 2}}, "document.compression"),
            ({"font": {"style": "wavy"}}, "font.style"),
            ({"font": {"size": "big"}}, "font.size"),
            ({"font": {"color": [1, 2]}}, "font.color"),
            ({"font": {"family": 12}}, "font.family"),
            ({"page_number": {"pattern": "Page"}}, "page_number.pattern"),
            ({"page_number": {"pattern": "{current}", "place": "middle"}}, "page_number.place"),
            ({"metadata": {"author": 5}}, "metadata.author"),
            ({"metadata": {"creation_date": "yesterday"}}, "metadata.creation_date"),
        ]
        for data, field in cases:
            with self.subTest(field=field, data=data):
                with self.assertRaises(ValueError) as ctx:
                    config_from_dict(data)
                self.assertIn(field, str(ctx.exception))

    def test_non_table_sections_ignored(self) -> None:
        config = config_from_dict({"page": "a3", "grid": 5})
        self.assertEqual(config.dimensions, Dimensions(210.0, 297.0))
        self.assertEqual(config.max_grid_size, 12)



class TestDocumentExtrasFromToml(unittest.TestCase):
    def test_protection_fonts_and_background(self) -> None:
        toml = """
[protection]
type = "copy"
user_password = "reader"
owner_password = "editor"

[[fonts]]
family = "dejavu"
path = "fonts/DejaVuSans.ttf"

[[fonts]]
family = "dejavu"
path = "fonts/DejaVuSans-Bold.ttf"
style = "bold"

[background]
path = "paper.png"
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir)
            (base / "paper.png").write_bytes(make_png())
            path = base / "gridpdf.toml"
            path.write_text(toml, encoding="utf-8")
            config = load_config(path)

        self.assertEqual(config.protection, Protection(ProtectionType.COPY, "reader", "editor"))
        self.assertEqual(
            config.custom_fonts,
            (
                CustomFont("dejavu", base / "fonts/DejaVuSans.ttf", props.FontStyle.NORMAL),
                CustomFont("dejavu", base / "fonts/DejaVuSans-Bold.ttf", props.FontStyle.BOLD),
            ),
        )
        self.assertEqual(config.background_image.extension, Extension.PNG)
        self.assertEqual(config.background_image.data, make_png())

    def test_protection_type_defaults_to_none(self) -> None:
        config = config_from_dict({"protection": {"user_password": "pw"}})
        self.assertEqual(config.protection, Protection(ProtectionType.NONE, "pw", ""))

    def test_absolute_font_path_kept(self) -> None:
        font_path = Path(tempfile.gettempdir()) / "Custom.ttf"
        config = config_from_dict(
            {"fonts": [{"family": "custom", "path": str(font_path)}]},
            base_dir=Path("/elsewhere"),
        )
        self.assertEqual(config.custom_fonts[0].path, font_path)

    def test_invalid_extras_name_the_field(self) -> None:
        cases = [
            ({"protection": {"type": "shred"}}, "protection.type"),
            ({"protection": {"type": "print", "user_password": 5}}, "protection.user_password"),
            ({"fonts": {"family": "dejavu"}}, "fonts must be an array"),
            ({"fonts": ["dejavu"]}, "fonts[0]"),
            ({"fonts": [{"path": "a.ttf"}]}, "fonts[0].family"),
            ({"fonts": [{"family": "dejavu"}]}, "fonts[0].path"),
            ({"fonts": [{"family": "dejavu", "path": "a.ttf", "style": "wavy"}]}, "fonts[0].style"),
            ({"background": {"extension": "png"}}, "background.path"),
            ({"background": {"path": "paper.bmp"}}, "background.extension"),
        ]
        for data, field in cases:
            with self.subTest(field=field):
                with self.assertRaises(ValueError) as ctx:
                    config_from_dict(data)
                self.assertIn(field, str(ctx.exception))

    def test_unreadable_background_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValueError) as ctx:
                config_from_dict({"background": {"path": "missing.png"}}, base_dir=Path(tmpdir))
        self.assertIn("background.path cannot be read", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
