"""Load site configuration YAML into an immutable snapshot."""

from __future__ import annotations

import typing as typ
import warnings

from ruamel.yaml import YAML

from sitenav._constants import (
    DEFAULT_SEARCH_PROVIDER,
    ROOT_KEY_ALIASES,
    ROOT_KEYS,
    SIDEBAR_ROOT,
)
from sitenav.errors import InertBasePathWarning, SiteConfigError
from sitenav.navigation import build_navigation

from .helpers import (
    _entries,
    _freeze_mapping,
    _normalize_strings,
    _optional_str,
    _required_str,
    _section,
)
from .models import (
    FooterConfig,
    SearchConfig,
    SiteConfig,
    SiteIdentity,
    SocialLink,
    TopNavLink,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path, *, strict: bool = False) -> SiteConfig:
    """Load the YAML file describing a documentation site's navigation.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``).
    strict : bool, optional
        Treat advisory navigation problems as errors.

    Returns
    -------
    SiteConfig
        Validated snapshot with the resolved sidebar tree and the pass-through
        identity, header links, social links, search and footer settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level YAML structure is not a mapping or any section is
        invalid. Navigation problems raise the more specific
        :class:`~sitenav.errors.StructuralError` or
        :class:`~sitenav.errors.DuplicateTargetError`.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitenav.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.search_provider  # doctest: +SKIP
    'local'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return build_site_config(loaded, strict=strict)


def build_site_config(
    payload: typ.Mapping[str, typ.Any], *, strict: bool = False
) -> SiteConfig:
    """Validate a raw configuration mapping and return the resolved snapshot.

    The camel-case root keys ``topNav``, ``socialLinks`` and ``searchProvider``
    are accepted for ``top_nav``, ``social_links`` and ``search``; any other
    unknown root key is rejected. Advisory warnings raised while building the
    sidebar are recorded on :attr:`SiteConfig.warnings` and re-emitted to the
    caller.
    """
    raw = _normalize_root(payload)
    identity = _build_identity(_section(raw, "identity"))
    top_nav = tuple(
        _build_top_nav_link(entry, index)
        for index, entry in enumerate(_entries(raw, "top_nav"))
    )
    social_links = tuple(
        _build_social_link(entry, index)
        for index, entry in enumerate(_entries(raw, "social_links"))
    )
    search = _build_search_config(raw.get("search"))
    footer = _build_footer_config(_section(raw, "footer"))

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", InertBasePathWarning)
        sidebar = build_navigation(
            raw.get(SIDEBAR_ROOT) or [], strict=strict, root=SIDEBAR_ROOT
        )
    for record in caught:
        warnings.warn_explicit(
            record.message,
            record.category,
            record.filename,
            record.lineno,
        )

    return SiteConfig(
        identity=identity,
        sidebar=sidebar,
        top_nav=top_nav,
        social_links=social_links,
        search=search,
        footer=footer,
        warnings=tuple(
            str(record.message)
            for record in caught
            if issubclass(record.category, InertBasePathWarning)
        ),
    )


def _normalize_root(payload: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Return the root mapping with camel-case aliases folded onto canonical keys."""
    raw: dict[str, typ.Any] = {}
    for raw_key, value in payload.items():
        key = ROOT_KEY_ALIASES.get(raw_key, raw_key)
        if key not in ROOT_KEYS:
            known = ", ".join(sorted(ROOT_KEYS))
            msg = f"Unknown configuration key '{raw_key}'. Known keys: {known}"
            raise SiteConfigError(msg)
        if key in raw:
            msg = f"'{raw_key}' repeats the '{key}' section."
            raise SiteConfigError(msg)
        raw[key] = value
    return raw


def _build_identity(payload: typ.Mapping[str, typ.Any]) -> SiteIdentity:
    """Build the SiteIdentity from the ``identity`` section."""
    return SiteIdentity(
        title=_required_str(payload.get("title"), "identity.title"),
        description=_optional_str(payload.get("description")),
        tagline=_optional_str(payload.get("tagline")),
        favicons=_normalize_strings(payload.get("favicons"), "identity.favicons"),
        logo=_optional_str(payload.get("logo")),
        lang=_optional_str(payload.get("lang")),
    )


def _build_top_nav_link(payload: typ.Mapping[str, typ.Any], index: int) -> TopNavLink:
    """Build a header link; nesting and base paths are sidebar-only features."""
    field = f"top_nav[{index}]"
    for key in ("children", "items", "base_path", "base"):
        if key in payload:
            msg = f"'{field}' cannot declare '{key}'; header links are flat."
            raise SiteConfigError(msg)
    return TopNavLink(
        label=_required_str(payload.get("label", payload.get("text")), f"{field}.label"),
        target=_required_str(
            payload.get("target", payload.get("link")), f"{field}.target"
        ),
    )


def _build_social_link(payload: typ.Mapping[str, typ.Any], index: int) -> SocialLink:
    """Build a social link; the platform token itself is not validated."""
    field = f"social_links[{index}]"
    return SocialLink(
        platform=_required_str(
            payload.get("platform", payload.get("icon")), f"{field}.platform"
        ),
        link=_required_str(payload.get("link"), f"{field}.link"),
    )


def _build_search_config(value: object) -> SearchConfig:
    """Build the SearchConfig from a provider string or a mapping."""
    match value:
        case None:
            return SearchConfig()
        case str():
            return SearchConfig(provider=_required_str(value, "search"))
        case dict():
            options = value.get("options") or {}
            if not isinstance(options, dict):
                msg = "'search.options' must be a mapping."
                raise SiteConfigError(msg)
            provider = value.get("provider", DEFAULT_SEARCH_PROVIDER)
            return SearchConfig(
                provider=_required_str(provider, "search.provider"),
                options=_freeze_mapping(options),
            )
        case _:
            msg = "'search' must be a provider name or a mapping."
            raise SiteConfigError(msg)


def _build_footer_config(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    """Build the FooterConfig from the ``footer`` section."""
    return FooterConfig(
        message=_optional_str(payload.get("message")),
        copyright=_optional_str(payload.get("copyright")),
    )


__all__ = ["build_site_config", "load_site_config"]
