"""Load and validate the Hayride docs site configuration.

This subpackage parses the project's ``site.yaml`` file, applies the
generator's defaults, enforces the site invariants (every link resolves, the
default locale is supported, policy names are known), and produces typed
dataclasses rooted at :class:`SiteConfig`. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from hayride_site.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [item.label for item in site.theme.navbar.items]  # doctest: +SKIP
['GitHub']
"""

from .loader import load_site_config
from .models import (
    DeploymentConfig,
    DocsConfig,
    FooterColumnConfig,
    FooterConfig,
    I18nConfig,
    LinkConfig,
    LogoConfig,
    NavbarConfig,
    NavbarItemConfig,
    PrismConfig,
    SiteConfig,
    SiteConfigError,
    ThemeConfig,
)

__all__ = [
    "DeploymentConfig",
    "DocsConfig",
    "FooterColumnConfig",
    "FooterConfig",
    "I18nConfig",
    "LinkConfig",
    "LogoConfig",
    "NavbarConfig",
    "NavbarItemConfig",
    "PrismConfig",
    "SiteConfig",
    "SiteConfigError",
    "ThemeConfig",
    "load_site_config",
]
