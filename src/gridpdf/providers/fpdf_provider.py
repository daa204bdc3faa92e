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

import io
import secrets
from contextlib import contextmanager
from typing import Iterator

from fpdf import FPDF, XPos, YPos
from fpdf.enums import AccessPermission
from PIL import Image as PILImage

from .. import props
from ..consts import ProtectionType
from ..core.entity import Cell, Config, CustomFont, Metadata, Protection
from .geometry import code39_bar_width, fit_rect, i2of5_bar_width, line_height
from .symbols import SymbolConfig, matrix_png, qr_png

_ALIGN = {
    props.Align.LEFT: "L",
    props.Align.CENTER: "C",
    props.Align.RIGHT: "R",
    props.Align.JUSTIFY: "J",
}

_BORDERS: dict[props.BorderType, int | str] = {
    props.BorderType.NONE: 0,
    props.BorderType.FULL: 1,
    props.BorderType.LEFT: "L",
    props.BorderType.TOP: "T",
    props.BorderType.RIGHT: "R",
    props.BorderType.BOTTOM: "B",
}

_PIL_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "gif": "GIF",
}

_PERMISSIONS = {
    ProtectionType.NONE: AccessPermission(0),
    ProtectionType.PRINT: AccessPermission.PRINT_LOW_RES | AccessPermission.PRINT_HIGH_RES,
    ProtectionType.MODIFY: AccessPermission.MODIFY,
    ProtectionType.COPY: AccessPermission.COPY,
    ProtectionType.ANNOT_FORMS: AccessPermission.ANNOTATION | AccessPermission.FILL_FORMS,
}

_DEFAULT_LINE_WIDTH = 0.2


class FpdfProvider:
    """Provider that draws onto an fpdf2 document.

    Columns are drawn at the cursor, which advances right after each one, so a
    row's columns line up with the cells its layout computed. Leaves draw at
    their absolute cell and leave the cursor where they found it.
    """

    def __init__(self, config: Config, *, symbols: SymbolConfig | None = None) -> None:
        self.config = config
        self.symbols = symbols or SymbolConfig()
        dimensions = config.dimensions
        margins = config.margins

        self.pdf = FPDF(unit="mm", format=(dimensions.width, dimensions.height))
        self.pdf.set_auto_page_break(False)
        self.pdf.set_margins(margins.left, margins.top, margins.right)
        self.pdf.set_compression(config.compression)
        _apply_metadata(self.pdf, config.metadata)
        _apply_protection(self.pdf, config.protection)
        _register_fonts(self.pdf, config.custom_fonts)
        self._apply_font(config.default_font)

    def add_page(self) -> None:
        self.pdf.add_page()
        self._draw_background()
        self._apply_font(self.config.default_font)

    def set_cursor(self, x: float, y: float) -> None:
        self.pdf.set_xy(x, y)

    def create_col(
        self,
        width: float,
        height: float,
        config: Config | None,
        style: props.CellStyle | None,
    ) -> None:
        debug = config is not None and config.debug
        border: int | str = 0
        fill = False
        if style is not None:
            border = _BORDERS[style.border_type]
            if style.border_color is not None:
                self.pdf.set_draw_color(*style.border_color.rgb())
            if style.border_thickness > 0:
                self.pdf.set_line_width(style.border_thickness)
            if style.background_color is not None:
                self.pdf.set_fill_color(*style.background_color.rgb())
                fill = True
        if debug and border == 0:
            border = 1

        # fpdf2 reads a zero width as "up to the right margin".
        if width > 0:
            self.pdf.cell(
                width,
                height,
                "",
                border=border,
                fill=fill,
                new_x=XPos.RIGHT,
                new_y=YPos.TOP,
            )
        self._reset_colors()

    def add_bar_code(self, code: str, cell: Cell, prop: props.Barcode) -> None:
        rect = fit_rect(cell, prop.proportion.ratio(), prop)
        self.pdf.set_fill_color(0, 0, 0)
        if prop.type == props.BarcodeType.I2OF5:
            bar_width = i2of5_bar_width(len(code), rect.width)
            self.pdf.interleaved2of5(code, rect.x, rect.y, bar_width, rect.height)
        else:
            text = code.upper()
            if not (text.startswith("*") and text.endswith("*")):
                text = f"*{text}*"
            bar_width = code39_bar_width(len(text), rect.width)
            self.pdf.code39(text, rect.x, rect.y, bar_width, rect.height)
        self._reset_colors()

    def add_matrix_code(self, code: str, cell: Cell, prop: props.Rect) -> None:
        self._add_symbol(matrix_png(code, config=self.symbols), cell, prop)

    def add_qr_code(self, code: str, cell: Cell, prop: props.Rect) -> None:
        self._add_symbol(qr_png(code, config=self.symbols), cell, prop)

    def add_text(self, text: str, cell: Cell, prop: props.Text) -> None:
        with self._keep_cursor():
            self.pdf.set_font(prop.family, style=prop.style.value, size=prop.size)
            self.pdf.set_text_color(*prop.color.rgb())
            width = max(1.0, cell.width - prop.left - prop.right)
            self.pdf.set_xy(cell.x + prop.left, cell.y + prop.top)
            self.pdf.multi_cell(
                width,
                line_height(self.pdf.font_size),
                text,
                align=_ALIGN[prop.align],
            )
            self._apply_font(self.config.default_font)

    def add_image(self, data: bytes, extension: str, cell: Cell, prop: props.Rect) -> None:
        pil_format = _PIL_FORMATS.get(extension.lower())
        if pil_format is None:
            raise ValueError(f"unsupported image extension: {extension}")
        with PILImage.open(io.BytesIO(data), formats=[pil_format]) as image:
            image_w, image_h = image.size
        rect = fit_rect(cell, image_h / image_w, prop)
        self.pdf.image(io.BytesIO(data), x=rect.x, y=rect.y, w=rect.width, h=rect.height)

    def generate(self) -> bytes:
        return bytes(self.pdf.output())

    def _add_symbol(self, png: bytes, cell: Cell, prop: props.Rect) -> None:
        rect = fit_rect(cell, 1.0, prop)
        self.pdf.image(io.BytesIO(png), x=rect.x, y=rect.y, w=rect.width, h=rect.height)

    def _draw_background(self) -> None:
        background = self.config.background_image
        if background is None:
            return
        dimensions = self.config.dimensions
        self.pdf.image(
            io.BytesIO(background.data), x=0, y=0, w=dimensions.width, h=dimensions.height
        )

    def _apply_font(self, font: props.Font) -> None:
        self.pdf.set_font(font.family, style=font.style.value, size=font.size)
        self.pdf.set_text_color(*font.color.rgb())

    def _reset_colors(self) -> None:
        self.pdf.set_draw_color(0, 0, 0)
        self.pdf.set_fill_color(255, 255, 255)
        self.pdf.set_line_width(_DEFAULT_LINE_WIDTH)

    @contextmanager
    def _keep_cursor(self) -> Iterator[None]:
        x, y = self.pdf.get_x(), self.pdf.get_y()
        try:
            yield
        finally:
            self.pdf.set_xy(x, y)


def _apply_metadata(pdf: FPDF, metadata: Metadata) -> None:
    if metadata.title:
        pdf.set_title(metadata.title)
    if metadata.author:
        pdf.set_author(metadata.author)
    if metadata.subject:
        pdf.set_subject(metadata.subject)
    if metadata.creator:
        pdf.set_creator(metadata.creator)
    if metadata.creation_date is not None:
        pdf.set_creation_date(metadata.creation_date)


def _apply_protection(pdf: FPDF, protection: Protection | None) -> None:
    if protection is None:
        return
    pdf.set_encryption(
        owner_password=protection.owner_password or secrets.token_hex(16),
        user_password=protection.user_password,
        permissions=_PERMISSIONS[protection.type],
    )


def _register_fonts(pdf: FPDF, fonts: tuple[CustomFont, ...]) -> None:
    for font in fonts:
        pdf.add_font(font.family, style=font.style.value, fname=font.path)
