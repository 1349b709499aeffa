"""Typed dataclasses describing the site configuration snapshot."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from sitenav._constants import DEFAULT_SEARCH_PROVIDER
from sitenav.errors import SiteConfigError
from sitenav.navigation import NavigationTree


@dc.dataclass(frozen=True, slots=True)
class SiteIdentity:
    """Branding metadata shown in page headers and browser tabs."""

    title: str
    description: str | None = None
    tagline: str | None = None
    favicons: tuple[str, ...] = ()
    logo: str | None = None
    lang: str | None = None


@dc.dataclass(frozen=True, slots=True)
class TopNavLink:
    """Header navigation link."""

    label: str
    target: str


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Social profile link rendered as an icon."""

    platform: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search provider selector passed through to the renderer."""

    provider: str = DEFAULT_SEARCH_PROVIDER
    options: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer copy."""

    message: str | None = None
    copyright: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Immutable configuration snapshot handed to the site renderer."""

    identity: SiteIdentity
    sidebar: NavigationTree = dc.field(default_factory=NavigationTree)
    top_nav: tuple[TopNavLink, ...] = ()
    social_links: tuple[SocialLink, ...] = ()
    search: SearchConfig = dc.field(default_factory=SearchConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    warnings: tuple[str, ...] = ()

    @property
    def search_provider(self) -> str:
        """Return the configured search provider identifier."""
        return self.search.provider

    def to_dict(self) -> dict[str, typ.Any]:
        """Convert the snapshot to JSON-ready dictionaries for the renderer."""
        identity = dc.asdict(self.identity)
        identity["favicons"] = list(self.identity.favicons)
        return {
            "identity": identity,
            "top_nav": [dc.asdict(link) for link in self.top_nav],
            "sidebar": self.sidebar.to_list(),
            "social_links": [dc.asdict(link) for link in self.social_links],
            "search": {
                "provider": self.search.provider,
                "options": dict(self.search.options),
            },
            "footer": dc.asdict(self.footer),
        }


__all__ = [
    "FooterConfig",
    "SearchConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
    "TopNavLink",
]
