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

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .. import props
    from .entity import Cell, Config


class Provider(Protocol):
    """Drawing backend consumed by the layout tree.

    Each leaf variant maps to one ``add_*`` operation. Failures stay inside the
    provider; the tree never inspects or retries them.
    """

    def create_col(
        self,
        width: float,
        height: float,
        config: Config | None,
        style: props.CellStyle | None,
    ) -> None: ...

    def add_bar_code(self, code: str, cell: Cell, prop: props.Barcode) -> None: ...

    def add_matrix_code(self, code: str, cell: Cell, prop: props.Rect) -> None: ...

    def add_qr_code(self, code: str, cell: Cell, prop: props.Rect) -> None: ...

    def add_text(self, text: str, cell: Cell, prop: props.Text) -> None: ...

    def add_image(self, data: bytes, extension: str, cell: Cell, prop: props.Rect) -> None: ...


class PageProvider(Provider, Protocol):
    """Provider that can also lay out pages for a whole document."""

    def add_page(self) -> None: ...

    def set_cursor(self, x: float, y: float) -> None: ...

    def generate(self) -> bytes: ...
