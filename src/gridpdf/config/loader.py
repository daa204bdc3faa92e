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

import tomllib
from datetime import date, datetime, time, timezone
from pathlib import Path

from ..consts import (
    DEFAULT_LEFT_MARGIN,
    DEFAULT_RIGHT_MARGIN,
    DEFAULT_TOP_MARGIN,
    Extension,
    parse_extension,
    parse_orientation,
    parse_page_size,
    parse_protection_type,
)
from ..core.entity import Config, CustomFont
from ..props import (
    DEFAULT_FONT,
    Color,
    Font,
    FontStyle,
    parse_color,
    parse_font_style,
    parse_place,
)
from .builder import ConfigBuilder


def load_config(path: str | Path) -> Config:
    """Build a :class:`Config` from a TOML file.

    Unlike :class:`ConfigBuilder`, malformed values are rejected with a
    ``ValueError`` naming the offending field.
    """
    path = Path(path)
    return config_from_dict(_load_toml(path), base_dir=path.parent)


def config_from_dict(data: dict[str, object], *, base_dir: Path | None = None) -> Config:
    """Build a :class:`Config` from parsed TOML; relative paths resolve against ``base_dir``."""
    builder = ConfigBuilder()
    _apply_page(builder, _get_dict(data, "page"))
    _apply_margins(builder, _get_dict(data, "margins"))

    grid_cfg = _get_dict(data, "grid")
    max_size = _parse_optional_positive_int(grid_cfg.get("max_size"), field="grid.max_size")
    if max_size is not None:
        builder.with_max_grid_size(max_size)

    document_cfg = _get_dict(data, "document")
    builder.with_debug(
        _parse_bool(document_cfg.get("debug"), field="document.debug", default=False)
    )
    builder.with_compression(
        _parse_bool(document_cfg.get("compression"), field="document.compression", default=False)
    )

    font_cfg = _get_dict(data, "font")
    if font_cfg:
        builder.with_default_font(_parse_font(font_cfg))

    page_number_cfg = _get_dict(data, "page_number")
    if page_number_cfg:
        _apply_page_number(builder, page_number_cfg)

    _apply_metadata(builder, _get_dict(data, "metadata"))
    _apply_protection(builder, _get_dict(data, "protection"))
    _apply_fonts(builder, data.get("fonts"), base_dir=base_dir)
    _apply_background(builder, _get_dict(data, "background"), base_dir=base_dir)
    return builder.build()


def _apply_page(builder: ConfigBuilder, cfg: dict[str, object]) -> None:
    size = cfg.get("size")
    if size is not None:
        parsed_size = parse_page_size(size)
        if parsed_size is None:
            raise ValueError(f"page.size is not a known page size: {size!r}")
        builder.with_page_size(parsed_size)

    orientation = cfg.get("orientation")
    if orientation is not None:
        parsed_orientation = parse_orientation(orientation)
        if parsed_orientation is None:
            raise ValueError("page.orientation must be 'vertical' or 'horizontal'")
        builder.with_orientation(parsed_orientation)

    width = _parse_optional_positive_float(cfg.get("width"), field="page.width")
    height = _parse_optional_positive_float(cfg.get("height"), field="page.height")
    if (width is None) != (height is None):
        raise ValueError("page.width and page.height must be set together")
    if width is not None and height is not None:
        builder.with_dimensions(width, height)


def _apply_margins(builder: ConfigBuilder, cfg: dict[str, object]) -> None:
    if not cfg:
        return
    left = _parse_optional_non_negative_float(cfg.get("left"), field="margins.left")
    top = _parse_optional_non_negative_float(cfg.get("top"), field="margins.top")
    right = _parse_optional_non_negative_float(cfg.get("right"), field="margins.right")
    builder.with_margins(
        DEFAULT_LEFT_MARGIN if left is None else left,
        DEFAULT_TOP_MARGIN if top is None else top,
        DEFAULT_RIGHT_MARGIN if right is None else right,
    )


def _parse_font(cfg: dict[str, object]) -> Font:
    family = _parse_optional_str(cfg.get("family"), field="font.family")
    style: FontStyle = DEFAULT_FONT.style
    if cfg.get("style") is not None:
        parsed_style = parse_font_style(cfg.get("style"))
        if parsed_style is None:
            raise ValueError("font.style must be normal, bold, italic or bold_italic")
        style = parsed_style
    size = _parse_optional_positive_float(cfg.get("size"), field="font.size")
    color: Color = DEFAULT_FONT.color
    if cfg.get("color") is not None:
        parsed_color = parse_color(cfg.get("color"))
        if parsed_color is None:
            raise ValueError("font.color must be [r, g, b] or '#rrggbb'")
        color = parsed_color
    return Font(
        family=family or DEFAULT_FONT.family,
        style=style,
        size=DEFAULT_FONT.size if size is None else size,
        color=color,
    )


def _apply_page_number(builder: ConfigBuilder, cfg: dict[str, object]) -> None:
    pattern = _parse_optional_str(cfg.get("pattern"), field="page_number.pattern")
    if pattern is None or ("{current}" not in pattern and "{total}" not in pattern):
        raise ValueError("page_number.pattern must contain {current} or {total}")
    place_value = cfg.get("place", "bottom")
    place = parse_place(place_value)
    if place is None:
        raise ValueError(f"page_number.place is not a known place: {place_value!r}")
    builder.with_page_number(pattern, place)


def _apply_metadata(builder: ConfigBuilder, cfg: dict[str, object]) -> None:
    for key, setter in (
        ("author", builder.with_author),
        ("creator", builder.with_creator),
        ("subject", builder.with_subject),
        ("title", builder.with_title),
    ):
        value = _parse_optional_str(cfg.get(key), field=f"metadata.{key}")
        if value:
            setter(value)
    builder.with_creation_date(
        _parse_optional_datetime(cfg.get("creation_date"), field="metadata.creation_date")
    )


def _apply_protection(builder: ConfigBuilder, cfg: dict[str, object]) -> None:
    if not cfg:
        return
    type_value = cfg.get("type", "none")
    protection_type = parse_protection_type(type_value)
    if protection_type is None:
        raise ValueError(f"protection.type is not a known protection type: {type_value!r}")
    user_password = _parse_optional_str(
        cfg.get("user_password"), field="protection.user_password"
    )
    owner_password = _parse_optional_str(
        cfg.get("owner_password"), field="protection.owner_password"
    )
    builder.with_protection(protection_type, user_password or "", owner_password or "")


def _apply_fonts(builder: ConfigBuilder, value: object, *, base_dir: Path | None) -> None:
    if value is None:
        return
    if not isinstance(value, list):
        raise ValueError("fonts must be an array of tables")
    fonts: list[CustomFont] = []
    for index, entry in enumerate(value):
        field = f"fonts[{index}]"
        if not isinstance(entry, dict):
            raise ValueError(f"{field} must be a table")
        family = _parse_optional_str(entry.get("family"), field=f"{field}.family")
        if family is None:
            raise ValueError(f"{field}.family is required")
        path_value = _parse_optional_str(entry.get("path"), field=f"{field}.path")
        if path_value is None:
            raise ValueError(f"{field}.path is required")
        style = FontStyle.NORMAL
        if entry.get("style") is not None:
            parsed_style = parse_font_style(entry.get("style"))
            if parsed_style is None:
                raise ValueError(f"{field}.style must be normal, bold, italic or bold_italic")
            style = parsed_style
        fonts.append(
            CustomFont(family=family, path=_resolve_path(path_value, base_dir), style=style)
        )
    builder.with_custom_fonts(fonts)


def _apply_background(
    builder: ConfigBuilder,
    cfg: dict[str, object],
    *,
    base_dir: Path | None,
) -> None:
    if not cfg:
        return
    path_value = _parse_optional_str(cfg.get("path"), field="background.path")
    if path_value is None:
        raise ValueError("background.path is required")
    path = _resolve_path(path_value, base_dir)
    extension_value = cfg.get("extension", path.suffix)
    try:
        extension: Extension = parse_extension(str(extension_value))
    except ValueError as exc:
        raise ValueError(f"background.extension is not supported: {extension_value!r}") from exc
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ValueError(f"background.path cannot be read: {path}") from exc
    builder.with_background_image(data, extension)


def _resolve_path(value: str, base_dir: Path | None) -> Path:
    path = Path(value).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_float_strict(value: object, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_optional_positive_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_optional_positive_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    parsed = _parse_float_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive number")
    return parsed


def _parse_optional_non_negative_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    parsed = _parse_float_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be zero or a positive number")
    return parsed


def _parse_optional_datetime(value: object, *, field: str) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return _parse_optional_datetime(datetime.fromisoformat(value.strip()), field=field)
        except ValueError as exc:
            raise ValueError(f"{field} must be an ISO 8601 date or datetime") from exc
    raise ValueError(f"{field} must be an ISO 8601 date or datetime")
