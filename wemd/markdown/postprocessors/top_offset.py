# wemd/markdown/postprocessors/top_offset.py
"""
Postprocessor that rewrites ``top:<N>em`` offsets as transforms.

The WeChat editor drops ``position``/``top`` from pasted styles, which breaks
themes that nudge elements vertically (heading decorations, sup markers).
``transform: translateY(<N>em)`` survives and moves the element by the same
amount.
"""

import re

from .utils import get_shared_soup, soup_to_html

TOP_OFFSET_PATTERN = re.compile(r"(?<![-\w])top\s*:\s*(-?\d*\.?\d+)em", re.IGNORECASE)


def top_offset(html: str, context: dict) -> str:
    soup = get_shared_soup(html, context)

    for tag in soup.find_all(style=TOP_OFFSET_PATTERN):
        tag["style"] = TOP_OFFSET_PATTERN.sub(r"transform: translateY(\1em)", tag["style"])

    return soup_to_html(context, soup)


def top_offset_default(html: str, context: dict) -> str:
    return top_offset(html, context)
