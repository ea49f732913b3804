# wemd/markdown/postprocessors/checkbox_glyphs.py
"""
Postprocessor that replaces task list checkboxes with text glyphs.

Form controls are stripped by the WeChat editor, so a checked box becomes
``☑`` and an unchecked one ``☐`` by default.
"""

from typing import Tuple

from bs4 import NavigableString

from wemd.conf import get_setting

from .utils import get_shared_soup, soup_to_html


def checkbox_glyphs(html: str, context: dict, glyphs: Tuple[str, str] = ("☑", "☐")) -> str:
    """
    Args:
        html: HTML string to process
        context: Shared rendering context
        glyphs: (checked, unchecked) replacement characters

    Returns:
        HTML without checkbox inputs
    """
    checked_glyph, unchecked_glyph = glyphs
    soup = get_shared_soup(html, context)

    for checkbox in soup.find_all("input", attrs={"type": "checkbox"}):
        glyph = checked_glyph if checkbox.has_attr("checked") else unchecked_glyph
        checkbox.replace_with(NavigableString(glyph))

    return soup_to_html(context, soup)


def checkbox_glyphs_default(html: str, context: dict) -> str:
    return checkbox_glyphs(html, context, glyphs=tuple(get_setting("WEMD_CHECKBOX_GLYPHS")))
