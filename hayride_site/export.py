"""Convert a :class:`SiteConfig` into the record the site generator reads.

The generator expects camelCase keys, the docs settings nested inside a
``classic`` preset tuple, and theme settings under ``themeConfig``. Unset
optional values are omitted instead of being emitted as ``null`` so the
generator applies its own defaults.

Examples
--------
>>> from pathlib import Path
>>> from hayride_site.config import load_site_config
>>> from hayride_site.export import dump_json, to_generator_mapping
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> to_generator_mapping(site)["baseUrl"]  # doctest: +SKIP
'/'
>>> print(dump_json(site))  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from .config import (
        DocsConfig,
        FooterConfig,
        LinkConfig,
        NavbarConfig,
        SiteConfig,
        ThemeConfig,
    )

PRESET_NAME = "classic"


def to_generator_mapping(site: SiteConfig) -> dict[str, typ.Any]:
    """Return the generator-shaped configuration record for ``site``."""
    deployment = site.deployment
    return _compact(
        {
            "title": site.title,
            "tagline": site.tagline,
            "favicon": site.favicon,
            "url": site.url,
            "baseUrl": site.base_url,
            "projectName": deployment.project_name,
            "organizationName": deployment.organization_name,
            "trailingSlash": deployment.trailing_slash,
            "onBrokenLinks": deployment.on_broken_links,
            "onBrokenMarkdownLinks": deployment.on_broken_markdown_links,
            "i18n": {
                "defaultLocale": site.i18n.default_locale,
                "locales": list(site.i18n.locales),
            },
            "presets": [[PRESET_NAME, _preset_options(site.docs)]],
            "themeConfig": _theme_mapping(site.theme),
        }
    )


def dump_json(site: SiteConfig, *, indent: int = 2) -> str:
    """Serialize the generator record to pretty-printed JSON text."""
    encoded = msgspec_json.encode(to_generator_mapping(site))
    return msgspec_json.format(encoded, indent=indent).decode("utf-8")


def _compact(mapping: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Drop keys whose value is ``None``."""
    return {key: value for key, value in mapping.items() if value is not None}


def _preset_options(docs: DocsConfig) -> dict[str, typ.Any]:
    options: dict[str, typ.Any] = {
        "docs": _compact(
            {
                "path": docs.path,
                "routeBasePath": docs.route_base_path,
                "sidebarPath": docs.sidebar_path,
                "editUrl": docs.edit_url,
            }
        ),
        "blog": {} if docs.blog else False,
    }
    if docs.custom_css:
        options["theme"] = {"customCss": docs.custom_css}
    return options


def _theme_mapping(theme: ThemeConfig) -> dict[str, typ.Any]:
    return _compact(
        {
            "image": theme.image,
            "navbar": _navbar_mapping(theme.navbar),
            "footer": _footer_mapping(theme.footer),
            "prism": {
                "theme": theme.prism.theme,
                "darkTheme": theme.prism.dark_theme,
            },
        }
    )


def _navbar_mapping(navbar: NavbarConfig) -> dict[str, typ.Any]:
    logo = navbar.logo
    return _compact(
        {
            "title": navbar.title,
            "logo": (
                _compact({"alt": logo.alt, "src": logo.src, "srcDark": logo.src_dark})
                if logo
                else None
            ),
            "items": [
                {**_link_mapping(item), "position": item.position}
                for item in navbar.items
            ],
        }
    )


def _footer_mapping(footer: FooterConfig) -> dict[str, typ.Any]:
    return _compact(
        {
            "style": footer.style,
            "links": [
                {
                    "title": column.title,
                    "items": [_link_mapping(link) for link in column.items],
                }
                for column in footer.links
            ],
            "copyright": footer.copyright,
        }
    )


def _link_mapping(link: LinkConfig) -> dict[str, str]:
    if link.href is not None:
        return {"label": link.label, "href": link.href}
    return {"label": link.label, "to": link.destination}


__all__ = ["PRESET_NAME", "dump_json", "to_generator_mapping"]
