"""Utility helpers shared by the Dev Guide configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(payload: typ.Mapping[str, object], key: str, context: str) -> str:
    """Return ``payload[key]`` as a stripped string or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{context} is missing '{key}'."
        raise SiteConfigError(msg)
    return value


def _mapping(payload: object, context: str) -> dict[str, typ.Any]:
    """Return ``payload`` as a dict, treating ``None`` as empty."""
    match payload:
        case None:
            return {}
        case dict() as data:
            return data
        case _:
            msg = f"{context} configuration must be a mapping."
            raise SiteConfigError(msg)


def _entries(payload: object, context: str) -> list[typ.Any]:
    """Return ``payload`` as a list, treating ``None`` as empty."""
    match payload:
        case None:
            return []
        case list() as items:
            return items
        case _:
            msg = f"{context} must be a list."
            raise SiteConfigError(msg)


def _str_tuple(value: object, *, default: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize a scalar or list into a tuple of non-empty strings."""
    if value is None:
        return default
    if isinstance(value, str):
        return tuple(segment for segment in value.split() if segment)
    if isinstance(value, list):
        return tuple(text for item in value if (text := str(item).strip()))
    msg = f"Expected a string or list of strings, got {type(value).__name__}."
    raise SiteConfigError(msg)


def _flag(value: object, *, default: bool, context: str) -> bool:
    """Return a boolean option, rejecting non-boolean YAML values."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    msg = f"{context} must be true or false."
    raise SiteConfigError(msg)


def _choice(
    value: object, *, choices: tuple[str, ...], default: str, context: str
) -> str:
    """Return ``value`` when it is one of ``choices``; fall back to ``default``."""
    text = _optional_str(value)
    if text is None:
        return default
    if text not in choices:
        allowed = ", ".join(choices)
        msg = f"{context} must be one of: {allowed} (got '{text}')."
        raise SiteConfigError(msg)
    return text


__all__ = [
    "_choice",
    "_entries",
    "_flag",
    "_mapping",
    "_optional_str",
    "_required_str",
    "_str_tuple",
]
