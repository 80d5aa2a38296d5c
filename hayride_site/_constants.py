"""Common literal values used across hayride_site.

These constants keep generator key vocabularies and default filenames in one
place so the loader, exporters, and tests agree on the accepted values.

Examples
--------
>>> from hayride_site import _constants
>>> "warn" in _constants.BROKEN_LINK_POLICIES
True
>>> _constants.COPYRIGHT_YEAR_FIELD
'{year}'
"""

BROKEN_LINK_POLICIES = ("ignore", "log", "warn", "throw")
NAVBAR_POSITIONS = ("left", "right")
FOOTER_STYLES = ("dark", "light")
EXTERNAL_SCHEMES = ("http", "https", "mailto")

# Themes bundled with prism-react-renderer.
PRISM_THEMES = (
    "dracula",
    "duotoneDark",
    "duotoneLight",
    "github",
    "gruvboxMaterialDark",
    "gruvboxMaterialLight",
    "jettwaveDark",
    "jettwaveLight",
    "nightOwl",
    "nightOwlLight",
    "oceanicNext",
    "okaidia",
    "oneDark",
    "oneLight",
    "palenight",
    "shadesOfPurple",
    "synthwave84",
    "ultramin",
    "vsDark",
    "vsLight",
)

COPYRIGHT_YEAR_FIELD = "{year}"
GENERATOR_CONFIG_FILENAME = "docusaurus.config.js"
