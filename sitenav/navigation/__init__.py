"""Sidebar navigation model and the builder that resolves it.

The builder turns the nested ``sidebar`` declaration of a site configuration
into an immutable :class:`NavigationTree` of groups, links and placeholders,
applying inherited base paths and rejecting ambiguous trees before they reach
the renderer.
"""

from .builder import (
    build_navigation,
    is_external_target,
    resolve_target,
    validate_unique_paths,
)
from .models import NavGroup, NavigationTree, NavLink, NavNode, NavPlaceholder

__all__ = [
    "NavGroup",
    "NavLink",
    "NavNode",
    "NavPlaceholder",
    "NavigationTree",
    "build_navigation",
    "is_external_target",
    "resolve_target",
    "validate_unique_paths",
]
