# wemd/markdown/postprocessors/code_whitespace.py
"""
Postprocessor that protects indentation inside highlighted code blocks.

This postprocessor:
- Expands tabs to a fixed number of spaces inside ``code.hljs``
- Replaces every space in those text nodes with a non-breaking space
- Leaves markup (highlight spans) untouched; only text nodes are rewritten

The WeChat editor collapses ordinary whitespace on paste even inside
``<pre>``, so this step runs before any other export rewrite.
"""

from bs4 import Comment, NavigableString

from .utils import get_shared_soup, soup_to_html


def _is_hljs(classes) -> bool:
    return bool(classes) and "hljs" in classes


def code_whitespace(html: str, context: dict, tab_width: int = 4) -> str:
    """
    Protect whitespace inside highlighted code.

    Args:
        html: HTML string to process
        context: Shared rendering context
        tab_width: Number of spaces a tab expands to (default: 4)

    Returns:
        HTML with code whitespace converted to non-breaking spaces
    """
    soup = get_shared_soup(html, context)
    tab = " " * tab_width

    for code in soup.find_all("code", class_=_is_hljs):
        for text in code.find_all(string=True):
            if isinstance(text, Comment):
                continue
            protected = str(text).replace("\t", tab).replace(" ", "\xa0")
            if protected != str(text):
                text.replace_with(NavigableString(protected))

    return soup_to_html(context, soup)


def code_whitespace_default(html: str, context: dict) -> str:
    return code_whitespace(html, context, tab_width=4)
