"""Unit tests for loading ``site.yaml`` into a :class:`SiteConfig` snapshot."""

from __future__ import annotations

import json
import typing as typ
from textwrap import dedent

import pytest

from sitenav.config import (
    SearchConfig,
    SiteConfigError,
    SocialLink,
    TopNavLink,
    build_site_config,
    load_site_config,
)
from sitenav.errors import DuplicateTargetError, InertBasePathWarning, StructuralError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_load_site_config_builds_full_snapshot(tmp_path: Path) -> None:
    """Every section of the YAML file should land in the snapshot."""
    config_path = _write_config(
        tmp_path,
        """
        identity:
          title: Plugin Host
          description: Build plugins
          tagline: Extend without forking
          favicons: [/favicon.ico, /favicon.png]
          logo: /logo.svg
        top_nav:
          - label: Guide
            target: /overview/getting_started
          - text: Changelog
            link: https://example.com/releases
        sidebar:
          - label: Overview
            base_path: /overview/
            children:
              - label: Getting started
                target: getting_started
              - label: Roadmap
                placeholder: true
        social_links:
          - platform: github
            link: https://github.com/example/plugin-host
        search:
          provider: algolia
          options:
            app_id: APP
        footer:
          message: MIT Licensed
          copyright: Copyright 2024
        """,
    )

    site = load_site_config(config_path)

    assert site.identity.title == "Plugin Host"
    assert site.identity.favicons == ("/favicon.ico", "/favicon.png"), (
        f"unexpected favicons {site.identity.favicons!r}"
    )
    assert site.top_nav == (
        TopNavLink(label="Guide", target="/overview/getting_started"),
        TopNavLink(label="Changelog", target="https://example.com/releases"),
    )
    assert site.sidebar.links()[0].resolved_target == "/overview/getting_started"
    assert len(site.sidebar.placeholders()) == 1
    assert site.social_links == (
        SocialLink(platform="github", link="https://github.com/example/plugin-host"),
    )
    assert site.search_provider == "algolia"
    assert site.search.options["app_id"] == "APP"
    assert site.footer.copyright == "Copyright 2024"
    assert site.warnings == ()


def test_camel_case_root_keys_are_accepted(tmp_path: Path) -> None:
    """topNav, socialLinks and searchProvider map onto the snapshot sections."""
    config_path = _write_config(
        tmp_path,
        """
        identity:
          title: Plugin Host
        topNav:
          - label: Guide
            target: /overview/getting_started
        sidebar:
          - label: Overview
            basePath: /overview/
            children:
              - label: Getting started
                target: getting_started
        socialLinks:
          - platform: github
            link: https://github.com/example/plugin-host
        searchProvider: algolia
        """,
    )

    site = load_site_config(config_path)

    assert site.top_nav == (
        TopNavLink(label="Guide", target="/overview/getting_started"),
    ), f"expected topNav entries to be kept, got {site.top_nav!r}"
    assert site.social_links == (
        SocialLink(platform="github", link="https://github.com/example/plugin-host"),
    ), f"expected socialLinks entries to be kept, got {site.social_links!r}"
    assert site.search_provider == "algolia", (
        f"expected searchProvider 'algolia', got {site.search_provider!r}"
    )
    assert site.sidebar.links()[0].resolved_target == "/overview/getting_started"


def test_unknown_root_key_is_rejected() -> None:
    """A misspelt section name must not be dropped silently."""
    with pytest.raises(SiteConfigError, match="Unknown configuration key 'sidbar'"):
        build_site_config({"identity": {"title": "Docs"}, "sidbar": []})


def test_root_key_and_alias_together_are_rejected() -> None:
    """Declaring a section under both spellings is ambiguous."""
    with pytest.raises(SiteConfigError, match="repeats the 'top_nav' section"):
        build_site_config(
            {
                "identity": {"title": "Docs"},
                "top_nav": [{"label": "Guide", "target": "/guide"}],
                "topNav": [{"label": "Other", "target": "/other"}],
            }
        )


def test_defaults_apply_for_optional_sections() -> None:
    """Only the site title is mandatory."""
    site = build_site_config({"identity": {"title": "Docs"}})
    assert site.search == SearchConfig(), "expected local search by default"
    assert site.search_provider == "local"
    assert len(site.sidebar) == 0
    assert site.top_nav == ()
    assert site.social_links == ()


def test_search_may_be_a_provider_string() -> None:
    """A bare string selects the provider without options."""
    site = build_site_config({"identity": {"title": "Docs"}, "search": "algolia"})
    assert site.search_provider == "algolia"
    assert dict(site.search.options) == {}


def test_search_options_are_read_only() -> None:
    """Provider options are passed through as an immutable mapping."""
    site = build_site_config(
        {"identity": {"title": "Docs"}, "search": {"options": {"key": "v"}}}
    )
    assert site.search_provider == "local"
    with pytest.raises(TypeError):
        site.search.options["key"] = "changed"  # type: ignore[index]


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing configuration file is reported explicitly."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is not a site configuration."""
    config_path = _write_config(tmp_path, "- one\n- two\n")
    with pytest.raises(SiteConfigError, match="mapping"):
        load_site_config(config_path)


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({}, "identity.title"),
        ({"identity": {"title": "  "}}, "identity.title"),
        ({"identity": "Docs"}, "'identity' section must be a mapping"),
        (
            {"identity": {"title": "Docs"}, "top_nav": [{"label": "Guide"}]},
            r"top_nav\[0\].target",
        ),
        (
            {
                "identity": {"title": "Docs"},
                "top_nav": [{"label": "Guide", "target": "/g", "children": []}],
            },
            "header links are flat",
        ),
        (
            {"identity": {"title": "Docs"}, "social_links": [{"link": "https://x"}]},
            r"social_links\[0\].platform",
        ),
        (
            {"identity": {"title": "Docs"}, "social_links": ["github"]},
            "must be a mapping",
        ),
        ({"identity": {"title": "Docs"}, "search": 3}, "provider name or a mapping"),
    ],
)
def test_invalid_sections_raise(payload: dict[str, typ.Any], fragment: str) -> None:
    """Invalid pass-through sections abort the build."""
    with pytest.raises(SiteConfigError, match=fragment):
        build_site_config(payload)


def test_sidebar_errors_propagate() -> None:
    """Navigation errors are SiteConfigErrors with a more specific type."""
    with pytest.raises(DuplicateTargetError):
        build_site_config(
            {
                "identity": {"title": "Docs"},
                "sidebar": [
                    {"label": "A", "target": "/same"},
                    {"label": "B", "target": "/same"},
                ],
            }
        )
    with pytest.raises(StructuralError):
        build_site_config({"identity": {"title": "Docs"}, "sidebar": {"label": "A"}})


def test_advisory_warnings_are_recorded_and_emitted() -> None:
    """Inert base paths show up on the snapshot and as Python warnings."""
    payload = {
        "identity": {"title": "Docs"},
        "sidebar": [{"label": "Soon", "placeholder": True, "base_path": "/soon/"}],
    }
    with pytest.warns(InertBasePathWarning):
        site = build_site_config(payload)
    assert len(site.warnings) == 1, f"expected one warning, got {site.warnings!r}"
    assert "sidebar[0]" in site.warnings[0]


def test_strict_mode_rejects_advisory_problems() -> None:
    """Strict builds turn advisory warnings into errors."""
    payload = {
        "identity": {"title": "Docs"},
        "sidebar": [{"label": "Soon", "placeholder": True, "base_path": "/soon/"}],
    }
    with pytest.raises(StructuralError):
        build_site_config(payload, strict=True)


def test_snapshot_serialises_to_json() -> None:
    """The renderer-facing dictionary is JSON serialisable and keeps order."""
    site = build_site_config(
        {
            "identity": {"title": "Docs", "favicons": "/favicon.ico"},
            "sidebar": [
                {
                    "label": "Overview",
                    "base_path": "/overview/",
                    "collapsed": True,
                    "children": [
                        {"label": "Zeta", "target": "zeta"},
                        {"label": "Alpha", "target": "alpha"},
                        {"label": "Soon", "placeholder": True},
                    ],
                }
            ],
        }
    )
    payload = json.loads(json.dumps(site.to_dict()))
    group = payload["sidebar"][0]
    assert group["kind"] == "group"
    assert group["collapsed"] is True
    assert [child["label"] for child in group["children"]] == ["Zeta", "Alpha", "Soon"]
    assert group["children"][0]["resolved_target"] == "/overview/zeta"
    assert group["children"][2] == {"kind": "placeholder", "label": "Soon"}
    assert payload["identity"]["favicons"] == ["/favicon.ico"]
    assert payload["search"] == {"provider": "local", "options": {}}
