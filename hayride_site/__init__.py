"""Configuration tooling for the Hayride documentation website.

The site itself is built by an external static-site generator. This package
keeps the site's configuration in ``config/site.yaml``, validates it, and
emits the generator's config module through the ``site`` console script.

Exports
-------
- ``app``: Cyclopts application holding the ``check``/``render``/``show``
  subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from hayride_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
