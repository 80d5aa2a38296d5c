"""Theme configuration builders: navbar, footer, and code highlighting."""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import typing as typ

from .._constants import FOOTER_STYLES, NAVBAR_POSITIONS, PRISM_THEMES
from .helpers import (
    _apply_copyright_year,
    _choice,
    _is_external_url,
    _is_internal_route,
    _optional_str,
    _require_str,
)
from .models import (
    FooterColumnConfig,
    FooterConfig,
    LinkConfig,
    LogoConfig,
    NavbarConfig,
    NavbarItemConfig,
    PrismConfig,
    SiteConfigError,
    ThemeConfig,
)


def _build_theme_config(
    payload: typ.Mapping[str, typ.Any] | None, *, today: dt.date
) -> ThemeConfig:
    """Build the theme configuration from the provided payload."""
    match payload:
        case None:
            data: typ.Mapping[str, typ.Any] = {}
        case dict():
            data = payload
        case _:
            msg = "Theme configuration must be a mapping."
            raise SiteConfigError(msg)
    return ThemeConfig(
        navbar=_build_navbar_config(data.get("navbar")),
        footer=_build_footer_config(data.get("footer"), today=today),
        prism=_build_prism_config(data.get("prism")),
        image=_optional_str(data.get("image")),
    )


def _resolve_destination(
    entry: typ.Mapping[str, object], context: str
) -> tuple[str | None, str | None]:
    """Return the validated ``(to, href)`` pair for a link entry."""
    to = _optional_str(entry.get("to"))
    href = _optional_str(entry.get("href"))
    if to and href:
        msg = f"{context} must set either 'to' or 'href', not both."
        raise SiteConfigError(msg)
    if to:
        if not _is_internal_route(to):
            msg = f"{context} 'to' must be a site route starting with '/' (got {to!r})."
            raise SiteConfigError(msg)
        return to, None
    if href:
        if not _is_external_url(href):
            msg = f"{context} 'href' must be an absolute URL (got {href!r})."
            raise SiteConfigError(msg)
        return None, href
    msg = f"{context} requires a 'to' route or an 'href' URL."
    raise SiteConfigError(msg)


def _build_link(entry: object, context: str) -> LinkConfig:
    """Build a single link entry, enforcing a label and a destination."""
    match entry:
        case {"label": str() as label, **_rest} if label.strip():
            pass
        case {"label": label} if label is not None and not isinstance(label, str):
            msg = f"{context} 'label' must be a string (got {label!r})."
            raise SiteConfigError(msg)
        case dict():
            msg = f"{context} requires a non-empty 'label'."
            raise SiteConfigError(msg)
        case _:
            msg = f"{context} must be a mapping."
            raise SiteConfigError(msg)
    to, href = _resolve_destination(entry, f"{context} '{label}'")
    return LinkConfig(label=label.strip(), to=to, href=href)


def _build_navbar_config(payload: typ.Mapping[str, typ.Any] | None) -> NavbarConfig:
    """Build the navbar configuration for the site header."""
    match payload:
        case None:
            return NavbarConfig()
        case dict() as data:
            pass
        case _:
            msg = "Navbar configuration must be a mapping."
            raise SiteConfigError(msg)
    return NavbarConfig(
        logo=_build_logo(data.get("logo")),
        items=_build_navbar_items(data.get("items")),
        title=_optional_str(data.get("title")),
    )


def _build_logo(payload: typ.Mapping[str, object] | None) -> LogoConfig | None:
    """Build navbar logo metadata, or ``None`` when no logo is configured."""
    if payload is None:
        return None
    if not isinstance(payload, dict):
        msg = "Navbar logo must be a mapping."
        raise SiteConfigError(msg)
    return LogoConfig(
        alt=_require_str(payload, "alt", "Navbar logo"),
        src=_require_str(payload, "src", "Navbar logo"),
        src_dark=_optional_str(payload.get("src_dark")),
    )


def _build_navbar_items(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[NavbarItemConfig, ...]:
    """Build navbar items in their authored order."""
    match entries:
        case None:
            return ()
        case list() as items:
            pass
        case _:
            msg = "Navbar 'items' must be a list."
            raise SiteConfigError(msg)
    built: list[NavbarItemConfig] = []
    for index, entry in enumerate(items):
        link = _build_link(entry, f"Navbar item #{index + 1}")
        position = _choice(
            entry.get("position"),
            NAVBAR_POSITIONS,
            "navbar.items.position",
            default="left",
        )
        built.append(
            NavbarItemConfig(
                label=link.label, to=link.to, href=link.href, position=position
            )
        )
    return tuple(built)


def _build_footer_config(
    payload: typ.Mapping[str, object] | None, *, today: dt.date
) -> FooterConfig:
    """Build the footer configuration, filling in the copyright year."""
    match payload:
        case None:
            return FooterConfig()
        case dict() as data:
            pass
        case _:
            msg = "Footer configuration must be a mapping."
            raise SiteConfigError(msg)
    style = _choice(
        data.get("style"), FOOTER_STYLES, "footer.style", default="dark"
    )
    template = _optional_str(data.get("copyright"))
    return FooterConfig(
        style=style,
        links=_build_footer_columns(data.get("links")),
        copyright=_apply_copyright_year(template, today) if template else None,
    )


def _build_footer_columns(
    entries: list[typ.Mapping[str, object]] | None,
) -> tuple[FooterColumnConfig, ...]:
    """Build titled footer columns and their links."""
    match entries:
        case None:
            return ()
        case list() as items:
            pass
        case _:
            msg = "Footer 'links' must be a list of columns."
            raise SiteConfigError(msg)
    columns: list[FooterColumnConfig] = []
    for entry in items:
        match entry:
            case {"title": title, **rest} if _optional_str(title):
                pass
            case _:
                msg = "Footer columns require a non-empty 'title'."
                raise SiteConfigError(msg)
        links = rest.get("items") or []
        if not isinstance(links, list):
            msg = f"Footer column '{title}' 'items' must be a list."
            raise SiteConfigError(msg)
        columns.append(
            FooterColumnConfig(
                title=str(title).strip(),
                items=tuple(
                    _build_link(link, f"Footer link in '{title}'") for link in links
                ),
            )
        )
    return tuple(columns)


def _build_prism_config(payload: typ.Mapping[str, object] | None) -> PrismConfig:
    """Build the light/dark syntax-highlighting theme selection."""
    base = PrismConfig()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Prism configuration must be a mapping."
            raise SiteConfigError(msg)
    return PrismConfig(
        theme=_choice(
            data.get("theme"), PRISM_THEMES, "prism.theme", default=base.theme
        ),
        dark_theme=_choice(
            data.get("dark_theme"),
            PRISM_THEMES,
            "prism.dark_theme",
            default=base.dark_theme,
        ),
    )


__all__ = [
    "_build_footer_columns",
    "_build_footer_config",
    "_build_link",
    "_build_logo",
    "_build_navbar_config",
    "_build_navbar_items",
    "_build_prism_config",
    "_build_theme_config",
]
