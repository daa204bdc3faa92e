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

from .component import Component, TreeNode
from .entity import (
    BackgroundImage,
    Cell,
    Config,
    CustomFont,
    Dimensions,
    Margins,
    Metadata,
    Protection,
)
from .errors import ConfigNotSetError
from .provider import PageProvider, Provider
from .structure import Node, build_structure_tree, print_structure

__all__ = [
    "BackgroundImage",
    "Cell",
    "Component",
    "Config",
    "ConfigNotSetError",
    "CustomFont",
    "Dimensions",
    "Margins",
    "Metadata",
    "Node",
    "PageProvider",
    "Protection",
    "Provider",
    "TreeNode",
    "build_structure_tree",
    "print_structure",
]
