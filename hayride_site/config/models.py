"""Typed dataclasses describing the Hayride docs site configuration."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class LinkConfig:
    """A labelled link pointing at an internal route or an external URL."""

    label: str
    to: str | None = None
    href: str | None = None

    @property
    def destination(self) -> str:
        """Return whichever destination is set."""
        return self.to or self.href or ""

    @property
    def external(self) -> bool:
        """Return ``True`` when the link leaves the docs site."""
        return self.href is not None


@dc.dataclass(frozen=True, slots=True)
class NavbarItemConfig(LinkConfig):
    """Navbar entry rendered on the left or right side of the header."""

    position: str = "left"


@dc.dataclass(frozen=True, slots=True)
class LogoConfig:
    """Navbar logo assets for the light and dark colour modes."""

    alt: str
    src: str
    src_dark: str | None = None


@dc.dataclass(frozen=True, slots=True)
class NavbarConfig:
    """Header logo and ordered navbar items."""

    logo: LogoConfig | None = None
    items: tuple[NavbarItemConfig, ...] = ()
    title: str | None = None


@dc.dataclass(frozen=True, slots=True)
class FooterColumnConfig:
    """A titled footer column holding an ordered list of links."""

    title: str
    items: tuple[LinkConfig, ...]


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer columns plus the rendered copyright line."""

    style: str = "dark"
    links: tuple[FooterColumnConfig, ...] = ()
    copyright: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PrismConfig:
    """Syntax-highlighting theme names for light and dark mode."""

    theme: str = "github"
    dark_theme: str = "dracula"


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Theme customisation consumed by the classic preset."""

    navbar: NavbarConfig
    footer: FooterConfig
    prism: PrismConfig
    image: str | None = None


@dc.dataclass(frozen=True, slots=True)
class DocsConfig:
    """Where the docs live and how they are routed."""

    path: str = "./docs"
    route_base_path: str = "/"
    sidebar_path: str = "./sidebars.js"
    edit_url: str | None = None
    custom_css: str | None = None
    blog: bool = False


@dc.dataclass(frozen=True, slots=True)
class I18nConfig:
    """Default locale and the full set of supported locales."""

    default_locale: str = "en"
    locales: tuple[str, ...] = ("en",)


@dc.dataclass(frozen=True, slots=True)
class DeploymentConfig:
    """Hosting metadata and build-time link checking policy."""

    project_name: str | None = None
    organization_name: str | None = None
    trailing_slash: bool | None = None
    on_broken_links: str = "warn"
    on_broken_markdown_links: str = "warn"


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The complete site record handed to the generator at build start."""

    title: str
    url: str
    base_url: str
    deployment: DeploymentConfig
    i18n: I18nConfig
    docs: DocsConfig
    theme: ThemeConfig
    tagline: str | None = None
    favicon: str | None = None

    def iter_links(self) -> cabc.Iterator[LinkConfig]:
        """Yield every navbar item followed by every footer link, in order."""
        yield from self.theme.navbar.items
        for column in self.theme.footer.links:
            yield from column.items


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
]
