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
from ..core.entity import Cell, Config
from ..core.provider import Provider
from ..core.structure import Node
from .col import Col
from .row import Row


class Text:
    """A block of text wrapped to the width of its cell.

    Font fields left unset fall back to ``config.default_font``, read each
    time the props are needed, or to the built-in default font before a
    config arrives.
    """

    def __init__(self, value: str, prop: props.Text | None = None) -> None:
        self.value = value
        self._requested = prop or props.Text()
        self.config: Config | None = None

    @property
    def prop(self) -> props.Text:
        font = self.config.default_font if self.config is not None else None
        return self._requested.make_valid(font)

    def render(self, provider: Provider, cell: Cell) -> None:
        provider.add_text(self.value, cell, self.prop)

    def get_structure(self) -> Node:
        return Node(type="text", value=self.value, details=self.prop.to_map())

    def set_config(self, config: Config) -> None:
        self.config = config


def new_text(value: str, prop: props.Text | None = None) -> Text:
    return Text(value, prop)


def new_text_col(size: int, value: str, prop: props.Text | None = None) -> Col:
    return Col(size).add(new_text(value, prop))


def new_text_row(height: float, value: str, prop: props.Text | None = None) -> Row:
    return Row(height).add(Col().add(new_text(value, prop)))
