# wemd/markdown/postprocessors/footnote_words.py
"""
Postprocessor that gives footnoted words a dashed underline.

Themes style ``.footnote-word`` like a link; the decoration is migrated onto
an inner span the same way as for anchors, but dashed so readers can tell a
footnoted term from a link.
"""

from .anchor_styles import migrate_decoration
from .utils import get_shared_soup, soup_to_html

FOOTNOTE_WORD_CLASS = "footnote-word"


def footnote_words(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for word in soup.find_all(class_=FOOTNOTE_WORD_CLASS):
        migrate_decoration(soup, word, "dashed")

    return soup_to_html(context, soup)


def footnote_words_default(html: str, context: dict) -> str:
    return footnote_words(html, context)
