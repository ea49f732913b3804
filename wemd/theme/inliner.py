# wemd/theme/inliner.py

import logging

import css_inline
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def inline_theme_css(html: str, theme_css: str) -> str:
    """
    Move the theme's rules into ``style`` attributes.

    The fragment is placed in a full document with the theme in a ``<style>``
    element, inlined with css_inline, and the body contents are returned
    without the ``<style>`` element.

    Args:
        html: HTML fragment (the themed root container)
        theme_css: CSS text to apply

    Returns:
        Inlined fragment, or ``html`` unchanged if inlining fails
    """
    if not theme_css or not theme_css.strip():
        return html

    document = f"<html><head><style>{theme_css}</style></head><body>{html}</body></html>"
    inliner = css_inline.CSSInliner(
        inline_style_tags=True,
        keep_style_tags=False,
        keep_link_tags=False,
    )

    try:
        inlined = inliner.inline(document)
    except Exception as e:
        logger.warning(f"CSS inlining failed, exporting without theme styles: {e}")
        return html

    soup = BeautifulSoup(inlined, "html.parser")
    if soup.body is None:
        logger.warning("CSS inliner returned a document without a body")
        return html
    return soup.body.decode_contents()
