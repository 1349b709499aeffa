"""Exception and warning types raised while building site configuration."""

from __future__ import annotations

import collections.abc as cabc


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class NavigationError(SiteConfigError):
    """Base class for problems found in a navigation declaration."""

    def __init__(self, message: str, *, location: str | None = None) -> None:
        self.location = location
        if location:
            message = f"{location}: {message}"
        super().__init__(message)


class StructuralError(NavigationError):
    """Raised when a navigation node declaration has a malformed shape."""


class DuplicateTargetError(NavigationError):
    """Raised when two navigable entries resolve to the same target."""

    def __init__(self, duplicates: cabc.Iterable[str]) -> None:
        self.duplicates = tuple(sorted(duplicates))
        listed = ", ".join(repr(target) for target in self.duplicates)
        super().__init__(f"Duplicate navigation targets: {listed}")


class InertBasePathWarning(UserWarning):
    """Advisory warning for a base path with no descendants to inherit it."""


__all__ = [
    "DuplicateTargetError",
    "InertBasePathWarning",
    "NavigationError",
    "SiteConfigError",
    "StructuralError",
]
