"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ
from urllib.parse import urlsplit

from .._constants import COPYRIGHT_YEAR_FIELD, EXTERNAL_SCHEMES
from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return the stripped string at ``key`` or raise when it is empty."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{context} is missing '{key}'."
        raise SiteConfigError(msg)
    return value


def _choice(
    value: object, allowed: tuple[str, ...], field: str, *, default: str
) -> str:
    """Validate ``value`` against a closed vocabulary, using ``default`` for None."""
    text = default if value is None else str(value).strip()
    if text not in allowed:
        options = ", ".join(allowed)
        msg = f"'{field}' must be one of: {options} (got {text!r})."
        raise SiteConfigError(msg)
    return text


def _optional_bool(value: object | None, field: str) -> bool | None:
    """Return a tri-state boolean, rejecting anything that is not a bool."""
    match value:
        case None:
            return None
        case bool():
            return value
        case _:
            msg = f"'{field}' must be true, false, or omitted."
            raise SiteConfigError(msg)


def _is_internal_route(destination: str) -> bool:
    """Return ``True`` for site-relative routes such as ``/intro``."""
    return destination.startswith("/") and not destination.startswith("//")


def _is_external_url(destination: str) -> bool:
    """Return ``True`` for absolute URLs the generator can link to directly."""
    parts = urlsplit(destination)
    if parts.scheme not in EXTERNAL_SCHEMES:
        return False
    if parts.scheme == "mailto":
        return bool(parts.path)
    return bool(parts.netloc)


def _validate_site_url(url: str) -> str:
    """Ensure the canonical site URL is an absolute http(s) URL."""
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        msg = f"Site 'url' must be an absolute http(s) URL (got {url!r})."
        raise SiteConfigError(msg)
    return url.rstrip("/")


def _validate_base_url(base_url: str) -> str:
    """Ensure the base path is wrapped in slashes, e.g. ``/`` or ``/docs/``."""
    if not (base_url.startswith("/") and base_url.endswith("/")):
        msg = f"Site 'base_url' must start and end with '/' (got {base_url!r})."
        raise SiteConfigError(msg)
    return base_url


def _normalize_locales(
    default_locale: str, locales: object | None
) -> tuple[str, ...]:
    """Return the ordered, de-duplicated locale set containing the default."""
    match locales:
        case None:
            return (default_locale,)
        case list() | tuple() as items:
            normalized: list[str] = []
            for item in items:
                text = _optional_str(item)
                if text and text not in normalized:
                    normalized.append(text)
        case _:
            msg = "'i18n.locales' must be a list of locale codes."
            raise SiteConfigError(msg)
    if default_locale not in normalized:
        msg = (
            f"Default locale '{default_locale}' is not listed in 'i18n.locales'."
        )
        raise SiteConfigError(msg)
    return tuple(normalized)


def _apply_copyright_year(template: str, today: dt.date) -> str:
    """Substitute the build year into a copyright template."""
    if COPYRIGHT_YEAR_FIELD not in template:
        msg = (
            f"Footer 'copyright' must contain the {COPYRIGHT_YEAR_FIELD} "
            "placeholder so the build year is filled in."
        )
        raise SiteConfigError(msg)
    return template.replace(COPYRIGHT_YEAR_FIELD, str(today.year))


__all__ = [
    "_apply_copyright_year",
    "_choice",
    "_is_external_url",
    "_is_internal_route",
    "_normalize_locales",
    "_optional_bool",
    "_optional_str",
    "_require_str",
    "_validate_base_url",
    "_validate_site_url",
]
