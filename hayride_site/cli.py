"""Cyclopts CLI entrypoint for the Hayride docs site configuration.

The ``site`` console script defined here validates ``config/site.yaml``,
renders it into the generator's ``docusaurus.config.js`` module, and prints
the generator-shaped record as JSON for inspection. Typical usage is running
``site render`` before the generator build, locally or in CI.

Examples
--------
Validate the default configuration:

>>> from hayride_site.cli import app
>>> app(["check"])  # doctest: +SKIP

Render into a custom location:

>>> app(["render", "--output", "build/docusaurus.config.js"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import GENERATOR_CONFIG_FILENAME
from .config import load_site_config
from .export import dump_json
from .render import GeneratorConfigBuilder

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_OUTPUT = Path(GENERATOR_CONFIG_FILENAME)

app = App(name="site", config=cyclopts.config.Env("SITE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Validate the site configuration and print a summary.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITE_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Load ``config`` and report what it defines.

    Raises
    ------
    SiteConfigError
        If the configuration violates any site invariant.
    """
    site = load_site_config(config)
    link_count = sum(1 for _ in site.iter_links())
    locales = ", ".join(site.i18n.locales)
    print(
        f"{_format_path(config)}: {site.title} at {site.url}{site.base_url} "
        f"({link_count} links; locales: {locales})"
    )


@app.command(help="Render the generator config module from the site config.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITE_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the module", env_var="SITE_OUTPUT")
    ] = DEFAULT_OUTPUT,
) -> None:
    """Write ``docusaurus.config.js`` for the external site generator.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML site configuration (overridable via ``SITE_CONFIG``).
    output : Path, optional
        Destination of the rendered module (overridable via ``SITE_OUTPUT``).
    """
    site = load_site_config(config)
    written = GeneratorConfigBuilder(
        site, output=output, source_name=_format_path(config)
    ).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the generator-shaped configuration as JSON.")
def show(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITE_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the resolved configuration record as JSON."""
    print(dump_json(load_site_config(config)))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
