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

from ..core.component import Component
from ..core.entity import Cell, Config
from ..core.errors import ConfigNotSetError
from ..core.provider import Provider
from ..core.structure import Node
from ..props import CellStyle


class Col:
    """A slot of ``size`` grid units inside a row.

    ``Col()`` without a size is an auto-max column: it spans the configured
    ``max_grid_size``, read from the config each time the size is queried.
    """

    def __init__(self, size: int | None = None) -> None:
        self.is_max = size is None
        self.size = 0 if size is None else _valid_size(size)
        self.components: list[Component] = []
        self.config: Config | None = None
        self.style: CellStyle | None = None

    def add(self, *components: Component) -> "Col":
        self.components.extend(components)
        return self

    def with_style(self, style: CellStyle | None) -> "Col":
        self.style = style
        return self

    def get_size(self) -> int:
        if not self.is_max:
            return self.size
        if self.config is None:
            raise ConfigNotSetError("auto-max col")
        return self.config.max_grid_size

    def render(self, provider: Provider, cell: Cell, create_cell: bool = True) -> None:
        if create_cell:
            provider.create_col(cell.width, cell.height, self.config, self.style)

        for component in self.components:
            component.render(provider, cell)

    def get_structure(self) -> Node:
        details = self.style.to_map() if self.style is not None else {}
        if self.is_max:
            details["is_max"] = True

        node = Node(type="col", value=self.size, details=details)
        for component in self.components:
            node.add(component.get_structure())
        return node

    def set_config(self, config: Config) -> None:
        self.config = config
        for component in self.components:
            component.set_config(config)


def _valid_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise ValueError(f"col size must be an integer, got {size!r}")
    if isinstance(size, float) and not size.is_integer():
        raise ValueError(f"col size must be an integer, got {size!r}")
    if size < 0:
        raise ValueError(f"col size must be zero or positive, got {size!r}")
    return int(size)
