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
from dataclasses import dataclass
from typing import Any

import segno


@dataclass(frozen=True)
class SymbolConfig:
    error: str = "M"
    scale: int = 10
    border: int = 0
    dark: str | tuple[int, int, int] | None = None
    light: str | tuple[int, int, int] | None = None
    boost_error: bool = True


def make_symbol(
    data: str | bytes,
    *,
    micro: bool | None,
    error: str = "M",
    boost_error: bool = True,
) -> Any:
    """Encode ``data``; ``micro=None`` lets segno pick a Micro QR when it fits."""
    return segno.make(data, error=error, micro=micro, boost_error=boost_error)


def symbol_png(
    data: str | bytes,
    *,
    micro: bool | None,
    config: SymbolConfig | None = None,
) -> bytes:
    config = config or SymbolConfig()
    symbol = make_symbol(data, micro=micro, error=config.error, boost_error=config.boost_error)
    buf = io.BytesIO()
    symbol.save(
        buf,
        kind="png",
        scale=config.scale,
        border=config.border,
        **_segno_color_kwargs(dark=config.dark, light=config.light),
    )
    return buf.getvalue()


def matrix_png(data: str | bytes, *, config: SymbolConfig | None = None) -> bytes:
    return symbol_png(data, micro=None, config=config)


def qr_png(data: str | bytes, *, config: SymbolConfig | None = None) -> bytes:
    return symbol_png(data, micro=False, config=config)


def _segno_color_kwargs(**values: object) -> dict[str, object]:
    style: dict[str, object] = {}
    for key, value in values.items():
        if value is None:
            continue
        style[key] = value.strip() if isinstance(value, str) else value
    return style
