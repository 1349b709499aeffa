"""Load and validate the site configuration for a documentation website.

This subpackage parses the project's ``site.yaml`` file, validates the
identity, header links, social links, search selector and footer sections,
builds the sidebar through :mod:`sitenav.navigation`, and produces one
immutable :class:`SiteConfig` snapshot that a static-site renderer consumes.
The primary entry point is :func:`load_site_config`; :func:`build_site_config`
accepts an already parsed mapping.

Examples
--------
>>> from sitenav.config import build_site_config
>>> site = build_site_config(
...     {
...         "identity": {"title": "Plugin Docs"},
...         "sidebar": [
...             {
...                 "label": "Plugins",
...                 "base_path": "/plugins/",
...                 "children": [{"label": "Configuration", "target": "configuration"}],
...             }
...         ],
...     }
... )
>>> site.sidebar.links()[0].resolved_target
'/plugins/configuration'
>>> site.search_provider
'local'
"""

from sitenav.errors import SiteConfigError

from .loader import build_site_config, load_site_config
from .models import (
    FooterConfig,
    SearchConfig,
    SiteConfig,
    SiteIdentity,
    SocialLink,
    TopNavLink,
)

__all__ = [
    "FooterConfig",
    "SearchConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
    "TopNavLink",
    "build_site_config",
    "load_site_config",
]
