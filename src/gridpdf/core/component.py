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
    from .entity import Cell, Config
    from .provider import Provider
    from .structure import Node


class TreeNode(Protocol):
    def get_structure(self) -> Node: ...

    def set_config(self, config: Config) -> None: ...


class Component(TreeNode, Protocol):
    """Anything a column can hold: a leaf drawn straight into the column's cell."""

    def render(self, provider: Provider, cell: Cell) -> None: ...
