"""Common literal values used across mdbook_api.

These constants keep output filenames, template names, and render-data
sentinels centralized so the engine, templates, theme, and tests can import
the same values without drifting. Intended for internal use within the
mdbook_api package.

Examples
--------
>>> from mdbook_api import _constants
>>> _constants.TOC_LIST_CLASS.format(level=2)
'toc-list-h2'
>>> _constants.INDEX_HTML
'index.html'
"""

INDEX_TEMPLATE = "index.jinja"
INDEX_MD = "index.md"
INDEX_HTML = "index.html"
FAVICON = "favicon.png"
HIGHLIGHT_CSS = "highlight.css"
DEFAULT_THEME_DIR = "theme"
DEFAULT_PYGMENTS_STYLE = "monokai"

NOJEKYLL = ".nojekyll"
NOJEKYLL_CONTENT = (
    b"This file makes sure that Github Pages doesn't process mdBook's output."
)

SPACER = "_spacer_"
TOC_LIST_CLASS = "toc-list-h{level}"
TOC_LINK_CLASS = "toc-h{level} toc-link"
