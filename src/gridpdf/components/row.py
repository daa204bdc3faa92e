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

from ..core.entity import Cell, Config
from ..core.errors import ConfigNotSetError
from ..core.provider import Provider
from ..core.structure import Node
from .col import Col


class Row:
    """A band of fixed ``height`` split horizontally among its columns.

    Column widths are ``size / max(max_grid_size, sum of sizes)`` of the row
    width. Sizes that overflow the grid are scaled down so the row stays full
    width; sizes that fall short leave the right-hand remainder empty.
    """

    def __init__(self, height: float) -> None:
        self.height = float(height)
        self.cols: list[Col] = []
        self.config: Config | None = None

    def add(self, *cols: Col) -> "Row":
        self.cols.extend(cols)
        return self

    def get_height(self) -> float:
        return self.height

    def col_widths(self, width: float) -> list[float]:
        if self.config is None:
            raise ConfigNotSetError("row")
        sizes = [col.get_size() for col in self.cols]
        total = max(self.config.max_grid_size, sum(sizes))
        if total <= 0:
            return [0.0 for _ in sizes]
        return [width * size / total for size in sizes]

    def render(self, provider: Provider, cell: Cell) -> None:
        x = cell.x
        for col, width in zip(self.cols, self.col_widths(cell.width)):
            col.render(provider, Cell(x=x, y=cell.y, width=width, height=self.height), True)
            x += width

    def get_structure(self) -> Node:
        node = Node(type="row", value=self.height)
        for col in self.cols:
            node.add(col.get_structure())
        return node

    def set_config(self, config: Config) -> None:
        self.config = config
        for col in self.cols:
            col.set_config(config)
