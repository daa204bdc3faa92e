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


class Barcode:
    def __init__(self, code: str, prop: props.Barcode | None = None) -> None:
        self.code = code
        self.prop = (prop or props.Barcode()).make_valid()
        self.config: Config | None = None

    def render(self, provider: Provider, cell: Cell) -> None:
        provider.add_bar_code(self.code, cell, self.prop)

    def get_structure(self) -> Node:
        return Node(type="barcode", value=self.code, details=self.prop.to_map())

    def set_config(self, config: Config) -> None:
        self.config = config


class MatrixCode:
    def __init__(self, code: str, prop: props.Rect | None = None) -> None:
        self.code = code
        self.prop = (prop or props.Rect()).make_valid()
        self.config: Config | None = None

    def render(self, provider: Provider, cell: Cell) -> None:
        provider.add_matrix_code(self.code, cell, self.prop)

    def get_structure(self) -> Node:
        return Node(type="matrixcode", value=self.code, details=self.prop.to_map())

    def set_config(self, config: Config) -> None:
        self.config = config


class QrCode:
    def __init__(self, code: str, prop: props.Rect | None = None) -> None:
        self.code = code
        self.prop = (prop or props.Rect()).make_valid()
        self.config: Config | None = None

    def render(self, provider: Provider, cell: Cell) -> None:
        provider.add_qr_code(self.code, cell, self.prop)

    def get_structure(self) -> Node:
        return Node(type="qrcode", value=self.code, details=self.prop.to_map())

    def set_config(self, config: Config) -> None:
        self.config = config


def new_bar(code: str, prop: props.Barcode | None = None) -> Barcode:
    return Barcode(code, prop)


def new_bar_col(size: int, code: str, prop: props.Barcode | None = None) -> Col:
    return Col(size).add(new_bar(code, prop))


def new_bar_row(height: float, code: str, prop: props.Barcode | None = None) -> Row:
    return Row(height).add(Col().add(new_bar(code, prop)))


def new_matrix(code: str, prop: props.Rect | None = None) -> MatrixCode:
    return MatrixCode(code, prop)


def new_matrix_col(size: int, code: str, prop: props.Rect | None = None) -> Col:
    return Col(size).add(new_matrix(code, prop))


def new_matrix_row(height: float, code: str, prop: props.Rect | None = None) -> Row:
    return Row(height).add(Col().add(new_matrix(code, prop)))


def new_qr(code: str, prop: props.Rect | None = None) -> QrCode:
    return QrCode(code, prop)


def new_qr_col(size: int, code: str, prop: props.Rect | None = None) -> Col:
    return Col(size).add(new_qr(code, prop))


def new_qr_row(height: float, code: str, prop: props.Rect | None = None) -> Row:
    return Row(height).add(Col().add(new_qr(code, prop)))
