"""Cyclopts CLI entrypoint for checking and exporting documentation site navigation.

The ``sitenav`` console script defined here loads a ``site.yaml`` file, builds
the sidebar navigation tree, and either reports problems (``sitenav check``),
prints the resolved outline (``sitenav tree``), or writes the configuration
snapshot as JSON for the site renderer (``sitenav export``). Typical usage is
running ``sitenav check --strict`` in CI before the static site is built.

Examples
--------
Validate the default configuration:

>>> from sitenav.cli import main
>>> main()  # doctest: +SKIP

Export the snapshot to a custom location:

>>> from sitenav.cli import app
>>> app(["export", "--output", "dist/site.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import sys
import typing as typ
import warnings
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, SiteConfigError, load_site_config
from .errors import InertBasePathWarning
from .navigation import NavGroup, NavLink, NavNode, NavPlaceholder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .navigation import NavigationTree

DEFAULT_CONFIG = Path("config/site.yaml")
PLACEHOLDER_LABEL = "(coming soon)"

app = App(name="sitenav", config=cyclopts.config.Env("SITENAV_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_or_exit(config: Path, *, strict: bool = False) -> SiteConfig:
    """Load the site config, printing failures to stderr and exiting non-zero."""
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", InertBasePathWarning)
            return load_site_config(config, strict=strict)
    except (FileNotFoundError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate the site configuration and report advisory warnings.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
    strict: typ.Annotated[
        bool, Parameter(help="Treat advisory warnings as errors")
    ] = False,
) -> None:
    """Validate the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``SITENAV_CONFIG``).
    strict : bool, optional
        Fail on advisory problems such as a base path on a placeholder entry.

    Returns
    -------
    None
        Prints each warning and a summary line to stdout.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is missing or invalid.
    """
    site_config = _load_or_exit(config, strict=strict)
    for message in site_config.warnings:
        print(f"warning: {message}")
    links = len(site_config.sidebar.links())
    placeholders = len(site_config.sidebar.placeholders())
    print(f"ok: {links} links, {placeholders} placeholders")


@app.command(help="Print the resolved sidebar outline.")
def tree(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print an indented outline of the sidebar with resolved targets."""
    site_config = _load_or_exit(config)
    for line in outline_lines(site_config.sidebar):
        print(line)


@app.command(help="Write the configuration snapshot as JSON for the site renderer.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the JSON snapshot", env_var="SITENAV_OUTPUT"),
    ] = None,
) -> None:
    """Export the resolved configuration snapshot.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output : Path or None, optional
        Destination file; the JSON is printed to stdout when omitted.
    """
    site_config = _load_or_exit(config)
    payload = json.dumps(site_config.to_dict(), indent=2, ensure_ascii=False)
    if output is None:
        print(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    print(f"wrote {_format_path(output)}")


def outline_lines(sidebar: NavigationTree, indent: str = "  ") -> list[str]:
    """Return one line per sidebar node, indented by depth."""
    return list(_outline(sidebar.nodes, depth=0, indent=indent))


def _outline(
    nodes: cabc.Sequence[NavNode], *, depth: int, indent: str
) -> cabc.Iterator[str]:
    prefix = indent * depth
    for node in nodes:
        match node:
            case NavLink(label=label, resolved_target=resolved):
                yield f"{prefix}{label} -> {resolved}"
            case NavPlaceholder(label=label):
                text = f"{label} {PLACEHOLDER_LABEL}" if label else PLACEHOLDER_LABEL
                yield f"{prefix}{text}"
            case NavGroup():
                heading = node.label or ""
                if node.resolved_target is not None:
                    heading = f"{heading} -> {node.resolved_target}"
                if node.collapsed:
                    heading = f"{heading} [collapsed]"
                yield f"{prefix}{heading.strip()}"
                yield from _outline(node.children, depth=depth + 1, indent=indent)


def main() -> None:
    """Invoke the Cyclopts application that powers the `sitenav` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
