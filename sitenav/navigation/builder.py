"""Build a validated navigation tree from a raw sidebar declaration.

The declaration is the nested list of mappings found under ``sidebar`` in the
site configuration. :func:`build_navigation` walks it depth-first, picks the
node kind for each entry (group, link or placeholder), resolves every target
against the nearest declared base path, and refuses trees whose navigable
entries collide. Nothing is cached between calls.

Examples
--------
>>> from sitenav.navigation import build_navigation
>>> tree = build_navigation(
...     [
...         {
...             "label": "Overview",
...             "base_path": "/overview/",
...             "children": [
...                 {"label": "Getting started", "target": "getting_started"},
...                 {"label": "Home", "target": "https://example.com"},
...             ],
...         }
...     ]
... )
>>> [link.resolved_target for link in tree.links()]
['/overview/getting_started', 'https://example.com']
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import typing as typ
import warnings

from sitenav._constants import (
    EXTERNAL_TARGET_PATTERN,
    NODE_KEY_ALIASES,
    NODE_KEYS,
    SIDEBAR_ROOT,
)
from sitenav.errors import (
    DuplicateTargetError,
    InertBasePathWarning,
    StructuralError,
)

from .models import NavGroup, NavigationTree, NavLink, NavNode, NavPlaceholder


def is_external_target(target: str) -> bool:
    """Return True when ``target`` starts with a URL scheme such as ``https:``."""
    return EXTERNAL_TARGET_PATTERN.match(target) is not None


def resolve_target(target: str, base_path: str | None) -> str:
    """Prefix ``target`` with ``base_path`` unless it is an external URL.

    Resolution is purely lexical: the base path and the target are
    concatenated as written.

    >>> resolve_target("getting_started", "/overview/")
    '/overview/getting_started'
    >>> resolve_target("mailto:docs@example.com", "/overview/")
    'mailto:docs@example.com'
    """
    if base_path is None or is_external_target(target):
        return target
    return f"{base_path}{target}"


def build_navigation(
    declaration: object, *, strict: bool = False, root: str = SIDEBAR_ROOT
) -> NavigationTree:
    """Build an immutable :class:`NavigationTree` from a sidebar declaration.

    Parameters
    ----------
    declaration : object
        Sequence of node mappings, each optionally nesting further nodes
        under ``children``.
    strict : bool, optional
        Raise :class:`StructuralError` for advisory problems (a base path
        declared where nothing can inherit it) instead of warning.
    root : str, optional
        Name used as the prefix of node locations in error messages.

    Returns
    -------
    NavigationTree
        Fully resolved tree with declaration order preserved.

    Raises
    ------
    StructuralError
        If a node or a ``children`` value has the wrong shape, a link lacks a
        label, or a leaf marked ``placeholder: false`` has no target.
    DuplicateTargetError
        If two navigable entries resolve to the same target.
    """
    nodes = _build_children(declaration, location=root, inherited=None, strict=strict)
    tree = NavigationTree(nodes=nodes)
    duplicates = validate_unique_paths(tree)
    if duplicates:
        raise DuplicateTargetError(duplicates)
    return tree


def validate_unique_paths(tree: NavigationTree) -> set[str]:
    """Return the resolved targets shared by more than one entry in ``tree``."""
    counts = collections.Counter(
        node.resolved_target
        for node in tree.iter_nodes()
        if node.resolved_target is not None
    )
    return {target for target, count in counts.items() if count > 1}


def _build_children(
    declaration: object,
    *,
    location: str,
    inherited: str | None,
    strict: bool,
) -> tuple[NavNode, ...]:
    if not _is_node_sequence(declaration):
        msg = f"expected a sequence of navigation nodes, got {type(declaration).__name__}"
        raise StructuralError(msg, location=location)
    declared = typ.cast("cabc.Sequence[object]", declaration)
    return tuple(
        _build_node(
            payload,
            location=f"{location}[{index}]",
            inherited=inherited,
            strict=strict,
        )
        for index, payload in enumerate(declared)
    )


def _build_node(
    payload: object, *, location: str, inherited: str | None, strict: bool
) -> NavNode:
    fields = _normalize_node(payload, location)
    label = _optional_field(fields, "label", str, location)
    target = _optional_field(fields, "target", str, location)
    base_path = _optional_field(fields, "base_path", str, location)
    collapsed = _optional_field(fields, "collapsed", bool, location)
    placeholder = _optional_field(fields, "placeholder", bool, location)
    children = fields.get("children")
    effective_base = base_path if base_path is not None else inherited

    match (children, placeholder, target):
        case (None | [], False, None):
            msg = (
                "leaf entry lacks both 'target' and 'children' "
                "but is declared with 'placeholder: false'"
            )
            raise StructuralError(msg, location=location)
        case (None | [], _, None):
            if base_path:
                _report_inert_base_path(location, strict=strict)
            return NavPlaceholder(label=label)
        case (None | [], True, _):
            msg = "placeholder entries cannot declare a target"
            raise StructuralError(msg, location=location)
        case (None | [], _, str()):
            if not label:
                msg = "link entries require a non-empty 'label'"
                raise StructuralError(msg, location=location)
            return NavLink(
                label=label,
                target=target,
                resolved_target=resolve_target(target, effective_base),
                base_path=base_path,
            )
        case (_, True, _):
            msg = "placeholder entries cannot declare children"
            raise StructuralError(msg, location=location)
        case _:
            nested = _build_children(
                children,
                location=f"{location}.children",
                inherited=effective_base,
                strict=strict,
            )
            return NavGroup(
                children=nested,
                label=label,
                collapsed=bool(collapsed),
                base_path=base_path,
                target=target,
                resolved_target=(
                    resolve_target(target, effective_base)
                    if target is not None
                    else None
                ),
            )


def _normalize_node(payload: object, location: str) -> dict[str, object]:
    """Return the node mapping with aliases folded onto canonical keys."""
    if not isinstance(payload, cabc.Mapping):
        msg = f"expected a navigation node mapping, got {type(payload).__name__}"
        raise StructuralError(msg, location=location)
    fields: dict[str, object] = {}
    for raw_key, value in payload.items():
        key = NODE_KEY_ALIASES.get(raw_key, raw_key)
        if key not in NODE_KEYS:
            msg = f"unknown navigation key '{raw_key}'"
            raise StructuralError(msg, location=location)
        if key in fields:
            msg = f"'{raw_key}' repeats the '{key}' field"
            raise StructuralError(msg, location=location)
        fields[key] = value
    return fields


_T = typ.TypeVar("_T")


def _optional_field(
    fields: cabc.Mapping[str, object],
    key: str,
    expected: type[_T],
    location: str,
) -> _T | None:
    value = fields.get(key)
    if value is None:
        return None
    if not isinstance(value, expected):
        msg = f"'{key}' must be a {expected.__name__}, got {type(value).__name__}"
        raise StructuralError(msg, location=location)
    return value


def _is_node_sequence(value: object) -> bool:
    return isinstance(value, cabc.Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _report_inert_base_path(location: str, *, strict: bool) -> None:
    msg = "'base_path' has no effect on a placeholder entry"
    if strict:
        raise StructuralError(msg, location=location)
    warnings.warn(f"{location}: {msg}", InertBasePathWarning)


__all__ = [
    "build_navigation",
    "is_external_target",
    "resolve_target",
    "validate_unique_paths",
]
