# wemd/markdown/postprocessors/anchor_styles.py
"""
Postprocessor that moves link decoration onto an inner span.

The WeChat editor rewrites the style of pasted ``<a>`` elements, losing the
theme's link colour and underline. This postprocessor:
- Skips anchors inside footnote items (see footnote_anchors)
- Takes colour, font weight, background, padding and margin off the anchor
- Removes border-bottom and text-decoration from the anchor
- Wraps the anchor's contents in a span carrying a solid underline followed
  by the migrated declarations
"""

from bs4 import BeautifulSoup, Tag

from .utils import get_shared_soup, parse_style, property_matches, serialize_style, set_style, soup_to_html

MIGRATED_PROPERTIES = ("color", "font-weight", "background", "padding", "margin")
STRIPPED_PROPERTIES = ("border-bottom", "text-decoration")

FOOTNOTE_ITEM_CLASS = "footnote-item"


def migrate_decoration(soup: BeautifulSoup, element: Tag, underline_style: str) -> Tag:
    """
    Move decoration off ``element`` and onto a new inner span.

    Args:
        soup: Document the element belongs to
        element: Element whose inline style is migrated
        underline_style: ``text-decoration-style`` for the span (solid, dashed)

    Returns:
        The span now wrapping the element's children
    """
    migrated = []
    kept = []
    for prop, value in parse_style(element.get("style")):
        if property_matches(prop, MIGRATED_PROPERTIES):
            migrated.append((prop, value))
        elif not property_matches(prop, STRIPPED_PROPERTIES):
            kept.append((prop, value))
    set_style(element, kept)

    span = soup.new_tag("span")
    span["style"] = serialize_style(
        [("text-decoration", "underline"), ("text-decoration-style", underline_style)] + migrated
    )
    for child in list(element.contents):
        span.append(child.extract())
    element.append(span)
    return span


def anchor_styles(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for anchor in soup.find_all("a"):
        if anchor.find_parent(class_=FOOTNOTE_ITEM_CLASS) is not None:
            continue
        migrate_decoration(soup, anchor, "solid")

    return soup_to_html(context, soup)


def anchor_styles_default(html: str, context: dict) -> str:
    return anchor_styles(html, context)
