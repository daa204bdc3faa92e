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

from enum import Enum


class ProtectionType(str, Enum):
    """Action a reader may still perform on a password-protected document."""

    NONE = "none"
    PRINT = "print"
    MODIFY = "modify"
    COPY = "copy"
    ANNOT_FORMS = "annot_forms"


def parse_protection_type(value: object) -> ProtectionType | None:
    if isinstance(value, ProtectionType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ProtectionType(value.strip().lower())
    except ValueError:
        return None
