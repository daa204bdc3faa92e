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

from pathlib import Path

from . import props
from .components.col import Col
from .components.row import Row
from .config.builder import ConfigBuilder
from .core.entity import Cell, Config
from .core.provider import PageProvider
from .core.structure import Node
from .providers.fpdf_provider import FpdfProvider
from .providers.geometry import page_number_cell


class Document:
    """Rows stacked top to bottom and split into pages.

    Every row added receives the document config. A row that does not fit in
    what is left of the current page starts the next page.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or ConfigBuilder().build()
        self.rows: list[Row] = []

    def add_rows(self, *rows: Row) -> "Document":
        usable_h = self.config.usable_height
        for row in rows:
            if row.get_height() > usable_h:
                raise ValueError(
                    f"row height {row.get_height():g}mm exceeds usable page height {usable_h:g}mm"
                )
        for row in rows:
            row.set_config(self.config)
            self.rows.append(row)
        return self

    def add_row(self, height: float, *cols: Col) -> Row:
        row = Row(height).add(*cols)
        self.add_rows(row)
        return row

    def pages(self) -> list[list[Row]]:
        usable_h = self.config.usable_height
        pages: list[list[Row]] = [[]]
        used = 0.0
        for row in self.rows:
            height = row.get_height()
            if pages[-1] and used + height > usable_h:
                pages.append([])
                used = 0.0
            pages[-1].append(row)
            used += height
        return pages

    def get_structure(self) -> Node:
        pages = self.pages()
        root = Node(type="document", value=len(pages), details=self._structure_details())
        for index, rows in enumerate(pages, start=1):
            page = Node(type="page", value=index)
            for row in rows:
                page.add(row.get_structure())
            root.add(page)
        return root

    def render(self, provider: PageProvider) -> None:
        margins = self.config.margins
        width = self.config.usable_width
        pages = self.pages()
        for index, rows in enumerate(pages, start=1):
            provider.add_page()
            y = margins.top
            for row in rows:
                height = row.get_height()
                provider.set_cursor(margins.left, y)
                row.render(provider, Cell(x=margins.left, y=y, width=width, height=height))
                y += height
            self._render_page_number(provider, index, len(pages))

    def generate(self) -> bytes:
        provider = FpdfProvider(self.config)
        self.render(provider)
        return provider.generate()

    def save(self, path: str | Path) -> Path:
        output = Path(path)
        output.write_bytes(self.generate())
        return output

    def _render_page_number(self, provider: PageProvider, current: int, total: int) -> None:
        pattern = self.config.page_number_pattern
        if not pattern:
            return
        text = pattern.replace("{current}", str(current)).replace("{total}", str(total))
        prop = props.Text(align=self.config.page_number_place.align()).make_valid(
            self.config.default_font
        )
        provider.add_text(text, page_number_cell(self.config), prop)

    def _structure_details(self) -> dict[str, object]:
        dimensions = self.config.dimensions
        details: dict[str, object] = {
            "page_width": dimensions.width,
            "page_height": dimensions.height,
            "max_grid_size": self.config.max_grid_size,
        }
        if self.config.debug:
            details["debug"] = True
        return details
