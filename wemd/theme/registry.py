"""
Built-in themes shipped with the package.

Each theme is the concatenation of the shared base stylesheet, the theme's
own stylesheet and the code highlighting palette, in that order, so theme
rules override the base and the code palette always applies.
"""

import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

CSS_DIR = Path(__file__).resolve().parent / "css"

BASE_STYLESHEET = "basic.css"
CODE_STYLESHEET = "code-github.css"

THEMES = {
    "default": "custom-default.css",
    "academic-paper": "academic-paper.css",
    "morandi-forest": "morandi-forest.css",
}


class ThemeNotFoundError(LookupError):
    """Raised when a theme name is not one of the packaged themes."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown theme '{name}'. Available: {', '.join(list_themes())}")


def list_themes():
    """Names of the packaged themes, sorted."""
    return sorted(THEMES)


@lru_cache(maxsize=None)
def load_theme_css(name):
    """
    Return the composed CSS text for a packaged theme.

    Raises:
        ThemeNotFoundError: if ``name`` is not a packaged theme
    """
    if name not in THEMES:
        raise ThemeNotFoundError(name)

    files = [BASE_STYLESHEET, THEMES[name], CODE_STYLESHEET]
    logger.debug(f"Composing theme '{name}' from {files}")
    return "\n\n".join((CSS_DIR / filename).read_text(encoding="utf-8") for filename in files)
