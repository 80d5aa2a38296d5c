"""Render the generator's JavaScript config module from a :class:`SiteConfig`.

The site generator only reads its configuration from a JavaScript module, so
the YAML source of truth is rendered into ``docusaurus.config.js`` through a
Jinja template. Every string value passes through the ``js`` filter, which
JSON-encodes it into a valid JavaScript literal.

Typical usage mirrors the ``site render`` command:

>>> from pathlib import Path
>>> from hayride_site.config import load_site_config
>>> builder = GeneratorConfigBuilder(
...     load_site_config(Path("config/site.yaml")),
...     output=Path("docusaurus.config.js"),
... )  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('docusaurus.config.js')
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ._constants import GENERATOR_CONFIG_FILENAME
from .export import PRESET_NAME

if typ.TYPE_CHECKING:
    from .config import SiteConfig

TEMPLATE_NAME = f"{GENERATOR_CONFIG_FILENAME}.jinja"


def _js_literal(value: object) -> str:
    """Encode ``value`` as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False)


class GeneratorConfigBuilder:
    """Render and write the generator config module."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        output: Path,
        source_name: str = "config/site.yaml",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Validated site configuration produced by
            :func:`hayride_site.config.load_site_config`.
        output : Path
            Destination for the rendered JavaScript module.
        source_name : str, optional
            Name of the YAML source quoted in the generated header comment.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``hayride_site/templates``.
        """
        self.site = site
        self.output = output
        self.source_name = source_name
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["js"] = _js_literal
        self.template = self.env.get_template(TEMPLATE_NAME)

    def render(self) -> str:
        """Return the rendered module text, always newline-terminated."""
        text = self.template.render(
            site=self.site,
            preset_name=PRESET_NAME,
            source_name=self.source_name,
        )
        if not text.endswith("\n"):
            text += "\n"
        return text

    def run(self) -> Path:
        """Render and write the module, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(), encoding="utf-8")
        return self.output


__all__ = ["TEMPLATE_NAME", "GeneratorConfigBuilder"]
