"""Typed dataclasses describing the resolved sidebar navigation tree."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """A navigable leaf entry with its declared and resolved targets."""

    label: str
    target: str
    resolved_target: str
    base_path: str | None = None

    kind: typ.ClassVar[str] = "link"

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {
            "kind": self.kind,
            "label": self.label,
            "target": self.target,
            "resolved_target": self.resolved_target,
        }
        if self.base_path is not None:
            result["base_path"] = self.base_path
        return result


@dc.dataclass(frozen=True, slots=True)
class NavPlaceholder:
    """A "coming soon" entry: a label with no destination and no children."""

    label: str | None = None

    kind: typ.ClassVar[str] = "placeholder"

    @property
    def resolved_target(self) -> None:
        """Placeholders are never navigable."""
        return None

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        return {"kind": self.kind, "label": self.label}


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """A sidebar section holding an ordered, non-empty run of child nodes."""

    children: tuple[NavNode, ...]
    label: str | None = None
    collapsed: bool = False
    base_path: str | None = None
    target: str | None = None
    resolved_target: str | None = None

    kind: typ.ClassVar[str] = "group"

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert to a dictionary for JSON serialization."""
        result: dict[str, typ.Any] = {
            "kind": self.kind,
            "label": self.label,
            "collapsed": self.collapsed,
        }
        if self.base_path is not None:
            result["base_path"] = self.base_path
        if self.target is not None:
            result["target"] = self.target
            result["resolved_target"] = self.resolved_target
        result["children"] = [child.to_dict() for child in self.children]
        return result


NavNode = NavLink | NavGroup | NavPlaceholder


@dc.dataclass(frozen=True, slots=True)
class NavigationTree:
    """The ordered root sequence of sidebar nodes.

    Sibling order is exactly declaration order and drives render order.
    """

    nodes: tuple[NavNode, ...] = ()

    def __iter__(self) -> cabc.Iterator[NavNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def iter_nodes(self) -> cabc.Iterator[NavNode]:
        """Yield every node depth-first, parents before their children."""
        stack: list[NavNode] = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, NavGroup):
                stack.extend(reversed(node.children))

    def links(self) -> list[NavLink | NavGroup]:
        """Return navigable entries (links and landing groups) in render order."""
        return [node for node in self.iter_nodes() if node.resolved_target is not None]

    def placeholders(self) -> list[NavPlaceholder]:
        """Return placeholder entries in render order."""
        return [node for node in self.iter_nodes() if isinstance(node, NavPlaceholder)]

    def to_list(self) -> list[dict[str, typ.Any]]:
        """Convert the tree to JSON-ready dictionaries."""
        return [node.to_dict() for node in self.nodes]


__all__ = [
    "NavGroup",
    "NavLink",
    "NavNode",
    "NavPlaceholder",
    "NavigationTree",
]
