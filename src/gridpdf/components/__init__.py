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

from .code import (
    Barcode,
    MatrixCode,
    QrCode,
    new_bar,
    new_bar_col,
    new_bar_row,
    new_matrix,
    new_matrix_col,
    new_matrix_row,
    new_qr,
    new_qr_col,
    new_qr_row,
)
from .col import Col
from .image import Extension, Image, new_image, new_image_col, new_image_row
from .row import Row
from .text import Text, new_text, new_text_col, new_text_row

__all__ = [
    "Barcode",
    "Col",
    "Extension",
    "Image",
    "MatrixCode",
    "QrCode",
    "Row",
    "Text",
    "new_bar",
    "new_bar_col",
    "new_bar_row",
    "new_image",
    "new_image_col",
    "new_image_row",
    "new_matrix",
    "new_matrix_col",
    "new_matrix_row",
    "new_qr",
    "new_qr_col",
    "new_qr_row",
    "new_text",
    "new_text_col",
    "new_text_row",
]
