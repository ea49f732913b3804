# wemd/markdown/postprocessors/footnote_anchors.py
"""
Postprocessor that neutralises links inside footnote items.

Back-references in the footnote list should read as plain text in the
published article, so their decoration is stripped and replaced with
inheriting values.
"""

from .anchor_styles import FOOTNOTE_ITEM_CLASS
from .utils import get_shared_soup, parse_style, property_matches, set_style, soup_to_html

DECORATIVE_PROPERTIES = ("color", "font-weight", "background", "border", "text-decoration")

NEUTRAL_DECLARATIONS = [
    ("color", "inherit"),
    ("text-decoration", "none"),
    ("border", "none"),
    ("background", "none"),
    ("font-weight", "inherit"),
]


def footnote_anchors(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for item in soup.find_all(class_=FOOTNOTE_ITEM_CLASS):
        for anchor in item.find_all("a"):
            kept = [
                (prop, value)
                for prop, value in parse_style(anchor.get("style"))
                if not property_matches(prop, DECORATIVE_PROPERTIES)
            ]
            set_style(anchor, kept + NEUTRAL_DECLARATIONS)

    return soup_to_html(context, soup)


def footnote_anchors_default(html: str, context: dict) -> str:
    return footnote_anchors(html, context)
