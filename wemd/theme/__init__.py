"""Theme application: preview wrapping and WeChat export rewriting."""

import logging

from wemd.conf import get_setting
from wemd.markdown.postprocessors import apply_postprocessors

from .inliner import inline_theme_css
from .registry import ThemeNotFoundError, list_themes, load_theme_css

logger = logging.getLogger(__name__)


def apply_theme(html, export_mode=False, theme_css=None):
    """
    Wrap rendered HTML in the themed root container.

    In preview mode that is all that happens; the page's own stylesheet
    themes the container. In export mode the theme CSS is inlined and the
    export postprocessors rewrite the result so it survives a paste into the
    WeChat editor.

    Args:
        html: Output of ``render_markdown``
        export_mode: Produce paste-ready HTML instead of preview HTML
        theme_css: Theme CSS text; used for inlining and variable resolution

    Returns:
        HTML string rooted at ``<div id="wemd">``
    """
    root_id = get_setting("WEMD_ROOT_ID")
    wrapped = f'<div id="{root_id}">{html or ""}</div>'

    if not export_mode:
        return wrapped

    theme_css = theme_css or ""
    if not theme_css.strip():
        logger.info("Exporting without theme CSS; only built-in variable defaults apply")

    context = {
        "export_mode": True,
        "root_id": root_id,
        "theme_css": theme_css,
    }
    inlined = inline_theme_css(wrapped, theme_css)
    return apply_postprocessors(inlined, context)


__all__ = [
    "ThemeNotFoundError",
    "apply_theme",
    "inline_theme_css",
    "list_themes",
    "load_theme_css",
]
