"""Common literal values used across devguide_pages.

These constants keep route prefixes, link attributes, and plugin names
centralized so the loader, templates, and tests can import the same values
without drifting. Intended for internal use within the devguide_pages package.

Examples
--------
>>> from devguide_pages import _constants
>>> _constants.EXTERNAL_LINK_REL
'noopener noreferrer'
>>> "/docs/cheatsheets".startswith(_constants.DOCS_ROUTE_BASE_PATH)
True
"""

DOCS_ROUTE_BASE_PATH = "/docs"
EXTERNAL_LINK_TARGET = "_blank"
EXTERNAL_LINK_REL = "noopener noreferrer"
EXTERNAL_BADGE = "↗"
COMING_SOON_MARKER = "(Coming soon)"
SEARCH_PLUGIN_NAME = "@easyops-cn/docusaurus-search-local"
BROKEN_LINK_SEVERITIES = ("throw", "warn", "ignore")
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
