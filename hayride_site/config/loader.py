"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import BROKEN_LINK_POLICIES
from .helpers import (
    _choice,
    _normalize_locales,
    _optional_bool,
    _optional_str,
    _require_str,
    _validate_base_url,
    _validate_site_url,
)
from .models import (
    DeploymentConfig,
    DocsConfig,
    I18nConfig,
    SiteConfig,
    SiteConfigError,
)
from .theme import _build_theme_config


def load_site_config(path: Path, *, today: dt.date | None = None) -> SiteConfig:
    """Load the YAML file describing the docs site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``).
    today : datetime.date, optional
        Date used to fill the ``{year}`` placeholder in the footer copyright.
        Defaults to the current local date.

    Returns
    -------
    SiteConfig
        Parsed and validated site configuration ready to hand to the
        generator.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a required field is missing or a value violates the site
        invariants (unknown locale, unresolvable link, unknown policy).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from hayride_site.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.i18n.default_locale  # doctest: +SKIP
    'en'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _section(raw, "site")
    url = _validate_site_url(_require_str(site, "url", "Site configuration"))
    base_url = _validate_base_url(_optional_str(site.get("base_url")) or "/")

    return SiteConfig(
        title=_require_str(site, "title", "Site configuration"),
        url=url,
        base_url=base_url,
        deployment=_build_deployment_config(_section(raw, "deployment")),
        i18n=_build_i18n_config(_section(raw, "i18n")),
        docs=_build_docs_config(_section(raw, "docs")),
        theme=_build_theme_config(raw.get("theme"), today=today or dt.date.today()),
        tagline=_optional_str(site.get("tagline")),
        favicon=_optional_str(site.get("favicon")),
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return a top-level section as a mapping, treating absence as empty."""
    value = raw.get(key)
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"'{key}' section must be a mapping."
            raise SiteConfigError(msg)


def _build_deployment_config(payload: typ.Mapping[str, typ.Any]) -> DeploymentConfig:
    """Build hosting metadata and link-checking policy."""
    base = DeploymentConfig()
    return DeploymentConfig(
        project_name=_optional_str(payload.get("project_name")),
        organization_name=_optional_str(payload.get("organization_name")),
        trailing_slash=_optional_bool(
            payload.get("trailing_slash"), "deployment.trailing_slash"
        ),
        on_broken_links=_choice(
            payload.get("on_broken_links"),
            BROKEN_LINK_POLICIES,
            "deployment.on_broken_links",
            default=base.on_broken_links,
        ),
        on_broken_markdown_links=_choice(
            payload.get("on_broken_markdown_links"),
            BROKEN_LINK_POLICIES,
            "deployment.on_broken_markdown_links",
            default=base.on_broken_markdown_links,
        ),
    )


def _build_i18n_config(payload: typ.Mapping[str, typ.Any]) -> I18nConfig:
    """Build locale settings, requiring the default locale to be supported."""
    default_locale = "en"
    if "default_locale" in payload:
        default_locale = _optional_str(payload["default_locale"]) or ""
        if not default_locale:
            msg = "'i18n.default_locale' must not be empty when set."
            raise SiteConfigError(msg)
    return I18nConfig(
        default_locale=default_locale,
        locales=_normalize_locales(default_locale, payload.get("locales")),
    )


def _build_docs_config(payload: typ.Mapping[str, typ.Any]) -> DocsConfig:
    """Build the docs plugin settings passed to the classic preset."""
    base = DocsConfig()
    route_base_path = _optional_str(payload.get("route_base_path"))
    if route_base_path is not None and not route_base_path.startswith("/"):
        msg = f"'docs.route_base_path' must start with '/' (got {route_base_path!r})."
        raise SiteConfigError(msg)
    blog = payload.get("blog", base.blog)
    if not isinstance(blog, bool):
        msg = "'docs.blog' must be true or false."
        raise SiteConfigError(msg)
    return DocsConfig(
        path=_optional_str(payload.get("path")) or base.path,
        route_base_path=route_base_path or base.route_base_path,
        sidebar_path=_optional_str(payload.get("sidebar_path")) or base.sidebar_path,
        edit_url=_optional_str(payload.get("edit_url")),
        custom_css=_optional_str(payload.get("custom_css")),
        blog=blog,
    )


__all__ = ["load_site_config"]
