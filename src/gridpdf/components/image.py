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

from .. import props
from ..consts.extension import Extension, parse_extension
from ..core.entity import Cell, Config
from ..core.provider import Provider
from ..core.structure import Node
from .col import Col
from .row import Row


class Image:
    def __init__(
        self,
        data: bytes,
        extension: Extension | str,
        prop: props.Rect | None = None,
    ) -> None:
        self.data = bytes(data)
        self.extension = parse_extension(extension)
        self.prop = (prop or props.Rect()).make_valid()
        self.config: Config | None = None

    def render(self, provider: Provider, cell: Cell) -> None:
        provider.add_image(self.data, self.extension.value, cell, self.prop)

    def get_structure(self) -> Node:
        details = self.prop.to_map()
        details["bytes"] = len(self.data)
        return Node(type="image", value=self.extension.value, details=details)

    def set_config(self, config: Config) -> None:
        self.config = config


def new_image(data: bytes, extension: Extension | str, prop: props.Rect | None = None) -> Image:
    return Image(data, extension, prop)


def new_image_col(
    size: int,
    data: bytes,
    extension: Extension | str,
    prop: props.Rect | None = None,
) -> Col:
    return Col(size).add(new_image(data, extension, prop))


def new_image_row(
    height: float,
    data: bytes,
    extension: Extension | str,
    prop: props.Rect | None = None,
) -> Row:
    return Row(height).add(Col().add(new_image(data, extension, prop)))
