"""Unit tests for loading and validating ``site.yaml``.

These tests cover :func:`hayride_site.config.load_site_config` against both
the checked-in ``config/site.yaml`` and small hand-written configurations.
They focus on the site invariants: every link resolves, the default locale is
supported, the copyright carries the build year, and repeated loads agree.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``. No fixtures are required
beyond pytest's built-in ``tmp_path``.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from textwrap import dedent

import pytest

from hayride_site.config import (
    NavbarItemConfig,
    SiteConfigError,
    load_site_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG = REPO_ROOT / "config" / "site.yaml"
BUILD_DAY = dt.date(2031, 5, 17)

MINIMAL_SITE = """
site:
  title: Example Docs
  url: https://docs.example.com
"""


def _write_config(tmp_path: Path, body: str) -> Path:
    """Write ``body`` to a site.yaml under ``tmp_path`` and return its path."""
    path = tmp_path / "site.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def _with_site(extra: str) -> str:
    """Append ``extra`` YAML to the minimal site block."""
    return dedent(MINIMAL_SITE).strip() + "\n" + dedent(extra).strip() + "\n"


def test_repo_config_has_generator_fields() -> None:
    """The checked-in config should define every field the generator needs."""
    site = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    assert site.title == "Hayride Documentation"
    assert site.tagline == "Sandboxing for the rest of us"
    assert site.url == "https://docs.hayride.dev"
    assert site.base_url == "/"
    assert site.favicon == "img/hayride-favicon-512x512.png"
    assert site.deployment.project_name == "hayride-dev.github.io"
    assert site.deployment.organization_name == "hayride-dev"
    assert site.deployment.trailing_slash is False
    assert site.deployment.on_broken_links == "warn"
    assert site.docs.route_base_path == "/"
    assert site.docs.sidebar_path == "./sidebars.js"
    assert site.docs.blog is False
    assert site.theme.navbar.logo is not None
    assert site.theme.navbar.logo.src_dark == "img/hayride-white-orange-logo-chick.png"
    assert site.theme.prism.theme == "github"
    assert site.theme.prism.dark_theme == "dracula"


def test_repo_config_default_locale_is_supported() -> None:
    """The default locale must be a member of the supported locales."""
    site = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    assert site.i18n.default_locale in site.i18n.locales, (
        f"{site.i18n.default_locale!r} missing from {site.i18n.locales!r}"
    )


def test_repo_config_links_have_label_and_destination() -> None:
    """Every navbar and footer link should carry a label and destination."""
    site = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    links = list(site.iter_links())
    assert len(links) == 6, f"Expected 6 links, found {len(links)}"
    for link in links:
        assert link.label, f"Link without a label: {link!r}"
        assert link.destination, f"Link '{link.label}' has no destination"


def test_repo_config_footer_order_is_preserved() -> None:
    """Footer columns and their links keep the authored order."""
    site = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    titles = [column.title for column in site.theme.footer.links]
    assert titles == ["Docs", "Community", "More"]
    community = site.theme.footer.links[1]
    assert [link.label for link in community.items] == ["X", "Slack", "LinkedIn"]


def test_copyright_uses_build_year() -> None:
    """The ``{year}`` placeholder should be replaced by the build year."""
    site = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    assert site.theme.footer.copyright == (
        "Copyright © 2031 Kochava. All rights reserved."
    )


def test_copyright_defaults_to_current_year() -> None:
    """Without an explicit date the current year is used."""
    site = load_site_config(SITE_CONFIG)
    copyright_line = site.theme.footer.copyright or ""
    assert str(dt.date.today().year) in copyright_line


def test_loading_twice_is_idempotent() -> None:
    """Loading the same file twice should produce equal values."""
    first = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    second = load_site_config(SITE_CONFIG, today=BUILD_DAY)
    assert first == second


def test_minimal_config_applies_generator_defaults(tmp_path: Path) -> None:
    """Omitted sections fall back to the generator defaults."""
    site = load_site_config(_write_config(tmp_path, MINIMAL_SITE), today=BUILD_DAY)
    assert site.base_url == "/"
    assert site.deployment.trailing_slash is None
    assert site.deployment.on_broken_links == "warn"
    assert site.deployment.on_broken_markdown_links == "warn"
    assert site.i18n.default_locale == "en"
    assert site.i18n.locales == ("en",)
    assert site.docs.path == "./docs"
    assert site.docs.edit_url is None
    assert site.theme.footer.style == "dark"
    assert site.theme.footer.copyright is None
    assert site.theme.navbar.items == ()


def test_navbar_position_defaults_to_left(tmp_path: Path) -> None:
    """Navbar items without a position are placed on the left."""
    body = _with_site(
        """
        theme:
          navbar:
            items:
              - label: Intro
                to: /intro
        """
    )
    site = load_site_config(_write_config(tmp_path, body))
    assert site.theme.navbar.items == (
        NavbarItemConfig(label="Intro", to="/intro", position="left"),
    )
    assert site.theme.navbar.items[0].external is False


def test_locales_are_deduplicated_in_order(tmp_path: Path) -> None:
    """Repeated locale codes collapse while keeping first-seen order."""
    body = _with_site(
        """
        i18n:
          default_locale: fr
          locales: [en, fr, en, zh-Hans]
        """
    )
    site = load_site_config(_write_config(tmp_path, body))
    assert site.i18n.locales == ("en", "fr", "zh-Hans")


def test_site_url_trailing_slash_is_stripped(tmp_path: Path) -> None:
    """The canonical URL is stored without a trailing slash."""
    body = """
    site:
      title: Example Docs
      url: https://docs.example.com/
    """
    site = load_site_config(_write_config(tmp_path, body))
    assert site.url == "https://docs.example.com"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        (
            """
            site:
              url: https://docs.example.com
            """,
            "missing 'title'",
        ),
        (
            """
            site:
              title: Example Docs
              url: docs.example.com
            """,
            "absolute http",
        ),
        (
            """
            site:
              title: Example Docs
              url: https://docs.example.com
              base_url: docs
            """,
            "start and end with '/'",
        ),
        (
            _with_site(
                """
                i18n:
                  default_locale: fr
                  locales: [en]
                """
            ),
            "Default locale 'fr'",
        ),
        (
            _with_site(
                """
                deployment:
                  on_broken_links: explode
                """
            ),
            "on_broken_links",
        ),
        (
            _with_site(
                """
                deployment:
                  trailing_slash: sometimes
                """
            ),
            "trailing_slash",
        ),
        (
            _with_site(
                """
                theme:
                  navbar:
                    items:
                      - label: GitHub
                        href: https://github.com/hayride-dev
                        position: middle
                """
            ),
            "navbar.items.position",
        ),
        (
            _with_site(
                """
                theme:
                  navbar:
                    items:
                      - label: ""
                        to: /intro
                """
            ),
            "non-empty 'label'",
        ),
        (
            _with_site(
                """
                theme:
                  navbar:
                    items:
                      - label: Nowhere
                """
            ),
            "requires a 'to' route or an 'href' URL",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    links:
                      - title: Docs
                        items:
                          - label: Both
                            to: /intro
                            href: https://example.com
                """
            ),
            "not both",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    links:
                      - title: Docs
                        items:
                          - label: Relative
                            to: intro
                """
            ),
            "starting with '/'",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    links:
                      - title: Docs
                        items:
                          - label: Broken
                            href: github.com/hayride-dev
                """
            ),
            "absolute URL",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    copyright: Copyright 2024 Kochava.
                """
            ),
            "placeholder",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    style: neon
                """
            ),
            "footer.style",
        ),
        (
            _with_site(
                """
                theme:
                  prism:
                    theme: solarized
                """
            ),
            "prism.theme",
        ),
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, body: str, message: str) -> None:
    """Invalid values raise SiteConfigError with a descriptive message."""
    path = _write_config(tmp_path, body)
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(path, today=BUILD_DAY)


def test_mailto_links_are_external(tmp_path: Path) -> None:
    """``mailto:`` destinations count as external URLs."""
    body = _with_site(
        """
        theme:
          footer:
            links:
              - title: Contact
                items:
                  - label: Email
                    href: mailto:hello@hayride.dev
        """
    )
    site = load_site_config(_write_config(tmp_path, body))
    link = site.theme.footer.links[0].items[0]
    assert link.external is True
    assert link.destination == "mailto:hello@hayride.dev"


@pytest.mark.parametrize(
    ("body", "message"),
    [
        (
            _with_site(
                """
                theme:
                  navbar:
                    items:
                      - label: [x]
                        to: /intro
                """
            ),
            "'label' must be a string",
        ),
        (
            _with_site(
                """
                theme:
                  footer:
                    links:
                      - title: Docs
                        items:
                          - label: 42
                            to: /intro
                """
            ),
            "'label' must be a string",
        ),
        (
            _with_site(
                """
                i18n:
                  default_locale: ''
                  locales: [en]
                """
            ),
            "'i18n.default_locale' must not be empty",
        ),
    ],
)
def test_malformed_values_are_rejected(
    tmp_path: Path, body: str, message: str
) -> None:
    """Non-string labels and an explicitly empty default locale are errors."""
    path = _write_config(tmp_path, body)
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(path, today=BUILD_DAY)


def test_null_choices_fall_back_to_defaults(tmp_path: Path) -> None:
    """Keys present without a value use the generator default."""
    body = _with_site(
        """
        deployment:
          on_broken_links:
        theme:
          navbar:
            items:
              - label: Intro
                to: /intro
                position:
          footer:
            style:
          prism:
            dark_theme:
        """
    )
    site = load_site_config(_write_config(tmp_path, body))
    assert site.deployment.on_broken_links == "warn"
    assert site.theme.navbar.items[0].position == "left"
    assert site.theme.footer.style == "dark"
    assert site.theme.prism.dark_theme == "dracula"
