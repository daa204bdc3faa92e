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

import json
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree


@dataclass
class Node:
    """Backend-independent mirror of one component, for inspection and snapshots.

    Nodes are rebuilt on every ``get_structure()`` call and compare by value, so
    two exports of an unchanged tree are equal.
    """

    type: str
    value: Any = None
    details: dict[str, Any] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    def add(self, *children: "Node") -> "Node":
        self.children.extend(children)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "value": self.value,
            "details": dict(self.details),
            "children": [child.to_dict() for child in self.children],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)


def build_structure_tree(node: Node, *, tree: Tree | None = None) -> Tree:
    label = _node_label(node)
    branch = Tree(label, guide_style="dim") if tree is None else tree.add(label)
    for child in node.children:
        build_structure_tree(child, tree=branch)
    return branch


def print_structure(node: Node, *, console: Console | None = None) -> None:
    (console or Console()).print(build_structure_tree(node))


def _node_label(node: Node) -> str:
    label = f"[bold]{escape(node.type)}[/bold]"
    if node.value is not None:
        label += f" {escape(repr(node.value))}"
    if node.details:
        details = ", ".join(f"{key}={value}" for key, value in sorted(node.details.items()))
        label += f" [dim]({escape(details)})[/dim]"
    return label
