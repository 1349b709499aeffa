"""Utility helpers shared by the sitenav configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import types
import typing as typ

from sitenav.errors import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(value: object | None, field: str) -> str:
    """Return a stripped, non-empty string or raise SiteConfigError."""
    text = _optional_str(value)
    if text is None:
        msg = f"'{field}' must be a non-empty string."
        raise SiteConfigError(msg)
    return text


def _normalize_strings(value: str | list[object] | None, field: str) -> tuple[str, ...]:
    """Normalize a single string or a list into a tuple of non-empty strings."""
    match value:
        case None:
            return ()
        case str():
            text = value.strip()
            return (text,) if text else ()
        case list():
            normalized: list[str] = []
            for segment in value:
                text = str(segment).strip()
                if text:
                    normalized.append(text)
            return tuple(normalized)
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise SiteConfigError(msg)


def _section(
    raw: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty mapping."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"'{key}' section must be a mapping."
        raise SiteConfigError(msg)
    return value


def _entries(raw: typ.Mapping[str, typ.Any], key: str) -> list[typ.Mapping[str, typ.Any]]:
    """Return the list of mappings stored under ``key``."""
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"'{key}' section must be a list."
        raise SiteConfigError(msg)
    for index, entry in enumerate(value):
        if not isinstance(entry, cabc.Mapping):
            msg = f"'{key}[{index}]' must be a mapping."
            raise SiteConfigError(msg)
    return value


def _freeze_mapping(value: typ.Mapping[str, typ.Any]) -> typ.Mapping[str, typ.Any]:
    """Return a read-only copy of ``value``."""
    return types.MappingProxyType(dict(value))


__all__ = [
    "_entries",
    "_freeze_mapping",
    "_normalize_strings",
    "_optional_str",
    "_required_str",
    "_section",
]
